"""
Translation of service errors into HTTP responses.
"""

from fastapi import HTTPException, status

from app.core.errors import (
    EmployeeAlreadyExistsError,
    InvalidPaginationError,
    MalformedIdentifierError,
    NotFoundError,
    ServiceError,
)
from app.models.schema import ErrorResponse

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

_STATUS_BY_ERROR = [
    (MalformedIdentifierError, status.HTTP_400_BAD_REQUEST),
    (InvalidPaginationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (EmployeeAlreadyExistsError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: ServiceError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
