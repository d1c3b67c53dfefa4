"""
Domain errors raised by the service layer.

Routers translate these into HTTP status codes; anything not listed here
surfaces as a 500.
"""


class ServiceError(Exception):
    """Base class for all service-level failures."""


class MalformedIdentifierError(ServiceError):
    """The supplied id does not match the store's id format."""

    def __init__(self, raw_id):
        self.raw_id = raw_id
        super().__init__(f"Malformed identifier: {raw_id!r}")


class NotFoundError(ServiceError):
    """A well-formed id has no matching record."""

    entity = "Record"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found: {entity_id}")


class EmployeeNotFoundError(NotFoundError):
    entity = "Employee"


class CompanyNotFoundError(NotFoundError):
    entity = "Company"


class InvalidPaginationError(ServiceError):
    """Page number or page size outside the accepted range."""

    def __init__(self, page, page_size):
        self.page = page
        self.page_size = page_size
        super().__init__(
            f"Invalid pagination: page={page}, pageSize={page_size}"
        )


class EmployeeAlreadyExistsError(ServiceError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee already exists: {employee_id}")
