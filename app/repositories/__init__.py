"""
Repository package initialization.

Repositories own persistence for each resource and reach MongoDB through
the DocumentStore port defined in base_repo.
"""

from app.repositories.company_repo import CompanyRepository
from app.repositories.employee_repo import EmployeeRepository

__all__ = ["CompanyRepository", "EmployeeRepository"]
