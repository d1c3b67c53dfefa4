import pytest

from app.core.config import MAX_PAGE_SIZE
from app.core.errors import InvalidPaginationError
from app.services.pagination import page_bounds, paginate, require_both


def test_page_bounds():
    assert page_bounds(1, 2) == (0, 2)
    assert page_bounds(3, 10) == (20, 10)


@pytest.mark.parametrize(
    "page,page_size",
    [(0, 2), (1, 0), (1, MAX_PAGE_SIZE + 1), (10 ** 19, 2), (2 ** 62, MAX_PAGE_SIZE)],
)
def test_page_bounds_rejects_out_of_range(page, page_size):
    with pytest.raises(InvalidPaginationError):
        page_bounds(page, page_size)


def test_page_bounds_accepts_max_page_size():
    assert page_bounds(1, MAX_PAGE_SIZE) == (0, MAX_PAGE_SIZE)


def test_paginate_past_the_end_is_empty():
    assert paginate([1, 2, 3], 5, 2) == []


def test_require_both():
    assert require_both(None, None) is False
    assert require_both(1, 2) is True
    with pytest.raises(InvalidPaginationError):
        require_both(1, None)
    with pytest.raises(InvalidPaginationError):
        require_both(None, 2)
