from fastapi import Depends

from app.deps.db import get_db
from app.repositories.company_repo import CompanyRepository
from app.repositories.employee_repo import EmployeeRepository
from app.services.company_service import CompanyService
from app.services.employee_service import EmployeeService


async def get_employee_service(db=Depends(get_db)) -> EmployeeService:
    """Dependency to get an EmployeeService bound to the request's database."""
    return EmployeeService(EmployeeRepository(db))


async def get_company_service(db=Depends(get_db)) -> CompanyService:
    """Dependency to get a CompanyService bound to the request's database."""
    return CompanyService(CompanyRepository(db), EmployeeRepository(db))
