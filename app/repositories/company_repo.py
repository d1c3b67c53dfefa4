"""
Company repository.

Handles persistence of company records in the ``companies`` collection.
Employees are stored by reference only (``employeesId``).
"""

import logging
from typing import List, Optional

from bson import ObjectId

from app.models.company_schema import Company
from app.repositories.base_repo import BaseRepository

logger = logging.getLogger(__name__)


class CompanyRepository(BaseRepository):
    """Repository for company records."""

    collection_name = "companies"

    async def create(self, company: Company) -> Company:
        created = await self.store.create(company.to_document())
        logger.info(f"Created company {created['_id']} ({company.companyName})")
        return Company.from_document(created)

    async def find(self, oid: ObjectId) -> Optional[Company]:
        doc = await self.store.find(oid)
        return Company.from_document(doc) if doc else None

    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Company]:
        docs = await self.store.find_all(skip=skip, limit=limit)
        return [Company.from_document(d) for d in docs]

    async def count(self) -> int:
        return await self.store.count()

    async def update(self, oid: ObjectId, company: Company) -> Optional[Company]:
        """Replace name and employee list of a company. None if unknown."""
        if not await self.store.update(oid, company.to_document()):
            return None
        return Company(
            companyId=str(oid),
            companyName=company.companyName,
            employeesId=list(company.employeesId),
        )

    async def delete(self, oid: ObjectId) -> bool:
        return await self.store.delete(oid)

    async def delete_all(self) -> int:
        return await self.store.delete_all()
