"""
Base repository and storage port.

Repositories talk to the document store only through the ``DocumentStore``
port. ``MongoDocumentStore`` is the single concrete adapter, wrapping one
motor collection.
"""

import logging
from typing import Iterable, List, Optional, Protocol

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    async def create(self, document: dict) -> dict:
        ...

    async def find(self, oid: ObjectId) -> Optional[dict]:
        ...

    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[dict]:
        ...

    async def find_many(self, oids: Iterable[ObjectId]) -> List[dict]:
        ...

    async def update(self, oid: ObjectId, document: dict) -> bool:
        ...

    async def delete(self, oid: ObjectId) -> bool:
        ...

    async def count(self) -> int:
        ...

    async def delete_all(self) -> int:
        ...


class MongoDocumentStore:
    """DocumentStore backed by a single MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, document: dict) -> dict:
        doc = dict(document)
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.debug(f"Inserted {doc['_id']} into {self.collection.name}")
        return doc

    async def find(self, oid: ObjectId) -> Optional[dict]:
        return await self.collection.find_one({"_id": oid})

    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[dict]:
        # Natural order, i.e. insertion order for these collections
        cursor = self.collection.find()
        if skip:
            cursor = cursor.skip(skip)
        if limit is not None:
            cursor = cursor.limit(limit)
        return await cursor.to_list(length=None)

    async def find_many(self, oids: Iterable[ObjectId]) -> List[dict]:
        oids = list(oids)
        if not oids:
            return []
        return await self.collection.find({"_id": {"$in": oids}}).to_list(length=None)

    async def update(self, oid: ObjectId, document: dict) -> bool:
        doc = {k: v for k, v in document.items() if k != "_id"}
        result = await self.collection.replace_one({"_id": oid}, doc)
        logger.debug(f"Replaced {oid} in {self.collection.name}: matched={result.matched_count}")
        return result.matched_count > 0

    async def delete(self, oid: ObjectId) -> bool:
        result = await self.collection.delete_one({"_id": oid})
        logger.debug(f"Deleted {oid} from {self.collection.name}: deleted={result.deleted_count}")
        return result.deleted_count > 0

    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def delete_all(self) -> int:
        result = await self.collection.delete_many({})
        return result.deleted_count


class BaseRepository:
    """
    Base repository class binding a repository to one collection.

    Subclasses set ``collection_name``.
    """

    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize the repository with a database connection.

        Args:
            db: MongoDB database instance (AsyncIOMotorDatabase)
        """
        self.db = db
        self.store: DocumentStore = MongoDocumentStore(db[self.collection_name])
