from typing import Optional, Sequence, Tuple, TypeVar

from app.core.config import MAX_PAGE_SIZE
from app.core.errors import InvalidPaginationError

T = TypeVar("T")

# Skip and limit are encoded as BSON int64
MAX_SKIP = 2 ** 63 - 1


def page_bounds(page: int, page_size: int) -> Tuple[int, int]:
    """Return (skip, limit) for a 1-indexed page."""
    if page < 1 or page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise InvalidPaginationError(page, page_size)
    skip = (page - 1) * page_size
    if skip > MAX_SKIP:
        raise InvalidPaginationError(page, page_size)
    return skip, page_size


def require_both(page: Optional[int], page_size: Optional[int]) -> bool:
    """True when paging was requested; one argument without the other is an error."""
    if page is None and page_size is None:
        return False
    if page is None or page_size is None:
        raise InvalidPaginationError(page, page_size)
    return True


def paginate(items: Sequence[T], page: int, page_size: int) -> list:
    skip, limit = page_bounds(page, page_size)
    return list(items[skip:skip + limit])
