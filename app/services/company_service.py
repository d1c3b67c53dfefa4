"""
Company service.

Resolves a company's ``employeesId`` list into full employee records and
checks that every referenced employee exists before a company is written.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Union

from app.core.errors import CompanyNotFoundError, EmployeeNotFoundError
from app.core.ids import parse_object_id, require_object_id
from app.models.company_schema import Company, CompanyPage, CompanyRequest, CompanyResponse
from app.models.employee_schema import Employee
from app.models.schema import Pageable
from app.repositories.company_repo import CompanyRepository
from app.repositories.employee_repo import EmployeeRepository
from app.services.pagination import page_bounds, require_both

logger = logging.getLogger(__name__)


class CompanyService:
    def __init__(
        self,
        company_repository: CompanyRepository,
        employee_repository: EmployeeRepository,
    ):
        self.company_repository = company_repository
        self.employee_repository = employee_repository

    async def get_companies(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Union[List[CompanyResponse], CompanyPage]:
        """
        List companies as response views.

        Without paging arguments the full list is returned; with both of
        them a page envelope is returned. Passing only one is an error.
        """
        if not require_both(page, page_size):
            companies = await self.company_repository.find_all()
            return await self._to_responses(companies)

        skip, limit = page_bounds(page, page_size)
        total = await self.company_repository.count()
        companies = await self.company_repository.find_all(skip=skip, limit=limit)
        return CompanyPage(
            content=await self._to_responses(companies),
            pageable=Pageable(pageNumber=page - 1, pageSize=page_size),
            totalElements=total,
            totalPages=math.ceil(total / page_size),
        )

    async def get_company(self, company_id: str) -> CompanyResponse:
        company = await self._get_existing(company_id)
        return (await self._to_responses([company]))[0]

    async def create_company(self, request: CompanyRequest) -> CompanyResponse:
        employee_ids = await self._validate_employee_ids(request.employeesId)
        company = await self.company_repository.create(
            Company(companyName=request.companyName, employeesId=employee_ids)
        )
        return (await self._to_responses([company]))[0]

    async def update_company(self, company_id: str, request: CompanyRequest) -> CompanyResponse:
        oid = require_object_id(company_id)
        if await self.company_repository.find(oid) is None:
            raise CompanyNotFoundError(company_id)
        employee_ids = await self._validate_employee_ids(request.employeesId)

        updated = await self.company_repository.update(
            oid, Company(companyName=request.companyName, employeesId=employee_ids)
        )
        if updated is None:
            # Removed between the existence check and the write
            raise CompanyNotFoundError(company_id)
        return (await self._to_responses([updated]))[0]

    async def delete_company(self, company_id: str) -> None:
        oid = require_object_id(company_id)
        if not await self.company_repository.delete(oid):
            raise CompanyNotFoundError(company_id)

    async def get_employees_of_company(self, company_id: str) -> List[Employee]:
        company = await self._get_existing(company_id)
        resolved = await self._lookup_employees(company.employeesId)
        return self._resolve(company, resolved)

    async def _get_existing(self, company_id: str) -> Company:
        company = await self.company_repository.find(require_object_id(company_id))
        if company is None:
            raise CompanyNotFoundError(company_id)
        return company

    async def _validate_employee_ids(self, employee_ids: List[str]) -> List[str]:
        """
        Check that every referenced employee exists.

        Returns the ids in canonical (lowercase hex) form, order and
        duplicates kept. Raises EmployeeNotFoundError for the first id with
        no stored employee.
        """
        oids = []
        for raw in employee_ids:
            oid = parse_object_id(raw)
            if oid is None:
                # A malformed id can never reference a stored employee
                logger.warning(f"Rejected malformed employee reference {raw!r}")
                raise EmployeeNotFoundError(raw)
            oids.append(oid)

        found = await self.employee_repository.find_many(oids)
        for raw, oid in zip(employee_ids, oids):
            if str(oid) not in found:
                logger.warning(f"Rejected reference to unknown employee {raw}")
                raise EmployeeNotFoundError(raw)
        return [str(oid) for oid in oids]

    async def _lookup_employees(self, employee_ids: Iterable[str]) -> Dict[str, Employee]:
        oids = [oid for oid in (parse_object_id(raw) for raw in employee_ids) if oid is not None]
        return await self.employee_repository.find_many(oids)

    def _resolve(self, company: Company, employees: Dict[str, Employee]) -> List[Employee]:
        resolved = []
        for employee_id in company.employeesId:
            employee = employees.get(employee_id)
            if employee is None:
                logger.warning(
                    f"Company {company.companyId} references missing employee {employee_id}"
                )
                continue
            resolved.append(employee)
        return resolved

    async def _to_responses(self, companies: List[Company]) -> List[CompanyResponse]:
        """Build response views with a single employee lookup for all companies."""
        employees = await self._lookup_employees(
            employee_id for company in companies for employee_id in company.employeesId
        )
        responses = []
        for company in companies:
            resolved = self._resolve(company, employees)
            responses.append(
                CompanyResponse(
                    companyId=company.companyId,
                    companyName=company.companyName,
                    employeesNumber=len(resolved),
                    employees=resolved,
                )
            )
        return responses
