from pydantic import BaseModel


class Pageable(BaseModel):
    pageNumber: int  # zero-based
    pageSize: int


class ErrorResponse(BaseModel):
    detail: str
