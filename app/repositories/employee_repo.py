"""
Employee repository.

Handles persistence of employee records in the ``employees`` collection.
"""

import logging
from typing import Dict, Iterable, List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.errors import EmployeeAlreadyExistsError
from app.core.ids import require_object_id
from app.models.employee_schema import Employee, EmployeeBase, EmployeeCreate
from app.repositories.base_repo import BaseRepository

logger = logging.getLogger(__name__)


def _to_document(employee: EmployeeBase) -> dict:
    return {
        "name": employee.name,
        "age": employee.age,
        "gender": employee.gender,
        "salary": employee.salary,
    }


class EmployeeRepository(BaseRepository):
    """Repository for employee records."""

    collection_name = "employees"

    async def create(self, employee: EmployeeCreate) -> Employee:
        """
        Persist a new employee.

        The id is generated by the store unless the caller supplied one.

        Raises:
            MalformedIdentifierError: supplied id is not a valid ObjectId
            EmployeeAlreadyExistsError: supplied id is already taken
        """
        doc = _to_document(employee)
        if employee.id is not None:
            doc["_id"] = require_object_id(employee.id)
        try:
            created = await self.store.create(doc)
        except DuplicateKeyError:
            raise EmployeeAlreadyExistsError(employee.id)
        logger.info(f"Created employee {created['_id']}")
        return Employee.from_document(created)

    async def find(self, oid: ObjectId) -> Optional[Employee]:
        doc = await self.store.find(oid)
        return Employee.from_document(doc) if doc else None

    async def find_all(self) -> List[Employee]:
        return [Employee.from_document(d) for d in await self.store.find_all()]

    async def find_many(self, oids: Iterable[ObjectId]) -> Dict[str, Employee]:
        """Bulk lookup keyed by id string; unknown ids are simply absent."""
        docs = await self.store.find_many(set(oids))
        return {str(d["_id"]): Employee.from_document(d) for d in docs}

    async def update(self, oid: ObjectId, employee: EmployeeBase) -> Optional[Employee]:
        """Replace every field of the employee, keeping its id. None if unknown."""
        doc = _to_document(employee)
        if not await self.store.update(oid, doc):
            return None
        doc["_id"] = oid
        return Employee.from_document(doc)

    async def delete(self, oid: ObjectId) -> bool:
        return await self.store.delete(oid)

    async def delete_all(self) -> int:
        return await self.store.delete_all()
