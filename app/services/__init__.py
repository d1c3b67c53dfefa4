from app.services.company_service import CompanyService
from app.services.employee_service import EmployeeService

__all__ = ["CompanyService", "EmployeeService"]
