"""
Facade over a MongoDB database handle.
Fetches named collections and performs CRUD on them. Driver errors are
propagated unchanged; the only locally raised error is InvalidIdError from get().
"""

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.results import DeleteResult

from ..exceptions import InvalidIdError
from ..utils import is_valid_id, to_object_id, utc_now

logger = logging.getLogger(__name__)


class CollectionDriver:
    """
    CRUD access to the collections of one database handle.

    Usage:
        driver = CollectionDriver(client["mydb"])
        docs = await driver.find_all("projects")
        doc = await driver.get("projects", "507f1f77bcf86cd799439011")
        saved = await driver.save("projects", {"name": "load test"})
    """

    ID_FIELD = "_id"
    CREATED_FIELD = "created_at"
    UPDATED_FIELD = "updated_at"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """Resolve the named collection. Not cached, every call asks the database handle."""
        return self.db.get_collection(collection_name)

    async def find_all(self, collection_name: str) -> List[Dict[str, Any]]:
        """Return every document in the collection, in cursor order"""
        collection = await self.get_collection(collection_name)
        return await collection.find().to_list(length=None)

    async def get(self, collection_name: str, id: str) -> Optional[Dict[str, Any]]:
        """
        Get single document by id.

        Args:
            collection_name: Name of the collection
            id: 24 character hex string

        Returns:
            The document, or None if no document has that id

        Raises:
            InvalidIdError: id is not a 24 character hex string. The database is not touched.
        """
        if not is_valid_id(id):
            logger.debug(f"Rejected id {id!r} for collection {collection_name}")
            raise InvalidIdError(id)

        collection = await self.get_collection(collection_name)
        return await collection.find_one({self.ID_FIELD: to_object_id(id)})

    async def save(self, collection_name: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Stamp the document with created_at and insert it.

        The document is modified in place: it gains created_at and the _id
        assigned by the driver. Insert errors propagate.
        """
        collection = await self.get_collection(collection_name)
        document[self.CREATED_FIELD] = utc_now()
        await collection.insert_one(document)
        return document

    async def update(self, collection_name: str, document: Dict[str, Any], id: str) -> Dict[str, Any]:
        """Set the document id, stamp updated_at and upsert it by id"""
        collection = await self.get_collection(collection_name)
        object_id = to_object_id(id)
        document[self.ID_FIELD] = object_id
        document[self.UPDATED_FIELD] = utc_now()
        await collection.replace_one({self.ID_FIELD: object_id}, document, upsert=True)
        return document

    async def delete(self, collection_name: str, id: str) -> DeleteResult:
        """Remove the document with the given id and return the driver's acknowledgment"""
        collection = await self.get_collection(collection_name)
        return await collection.delete_one({self.ID_FIELD: to_object_id(id)})

    def shutdown(self) -> None:
        """Close the client that owns the database handle"""
        logger.info(f"Closing DB instance for db {getattr(self.db, 'name', self.db)}")
        self.db.client.close()
