"""
Employee service.

Wraps EmployeeRepository and adds the in-memory gender filter and
pagination. Unknown ids on update/delete are a no-op here; the router
decides how to report them.
"""

import logging
from typing import List, Optional

from app.core.ids import require_object_id
from app.models.employee_schema import Employee, EmployeeBase, EmployeeCreate
from app.repositories.employee_repo import EmployeeRepository
from app.services.pagination import paginate

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employee_repository: EmployeeRepository):
        self.employee_repository = employee_repository

    async def get_employees(self) -> List[Employee]:
        return await self.employee_repository.find_all()

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        return await self.employee_repository.find(require_object_id(employee_id))

    async def get_employees_by_gender(self, gender: str) -> List[Employee]:
        """Exact, case-sensitive match on gender; order is preserved."""
        employees = await self.employee_repository.find_all()
        return [e for e in employees if e.gender == gender]

    async def get_employees_paginized(self, page: int, page_size: int) -> List[Employee]:
        employees = await self.employee_repository.find_all()
        return paginate(employees, page, page_size)

    async def create_employee(self, employee: EmployeeCreate) -> Employee:
        return await self.employee_repository.create(employee)

    async def update_employee(self, employee_id: str, new_data: EmployeeBase) -> Optional[Employee]:
        updated = await self.employee_repository.update(require_object_id(employee_id), new_data)
        if updated is None:
            logger.debug(f"Update skipped, employee {employee_id} does not exist")
        return updated

    async def delete_employee(self, employee_id: str) -> bool:
        deleted = await self.employee_repository.delete(require_object_id(employee_id))
        if not deleted:
            logger.debug(f"Delete skipped, employee {employee_id} does not exist")
        return deleted
