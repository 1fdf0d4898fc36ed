"""
Shared pytest fixtures.

Database handles are faked with MagicMock/AsyncMock so no MongoDB server is
needed. Each call to get_collection() hands back a fresh fake collection,
mirroring a driver that resolves the collection on every call.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from collection_driver import CollectionDriver, Config, DatabaseFactory
from collection_driver.logging_config import logger as package_logger


def make_collection(documents=None):
    """Build a fake motor collection holding the given documents."""
    collection = MagicMock(name="collection")

    cursor = MagicMock(name="cursor")
    cursor.to_list = AsyncMock(return_value=list(documents or []))
    collection.find = MagicMock(return_value=cursor)

    async def insert_one(document):
        document.setdefault("_id", ObjectId())
        return MagicMock(inserted_id=document["_id"], acknowledged=True)

    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(side_effect=insert_one)
    collection.replace_one = AsyncMock(return_value=MagicMock(acknowledged=True))
    collection.delete_one = AsyncMock(return_value=MagicMock(acknowledged=True, deleted_count=1))
    return collection


@pytest.fixture
def collection():
    """The fake collection every get_collection() call returns by default."""
    return make_collection()


@pytest.fixture
def mock_db(collection):
    """
    Fake AsyncIOMotorDatabase.

    Usage:
        async def test_get(driver, collection):
            collection.find_one.return_value = {"_id": oid}
    """
    db = MagicMock(name="db")
    db.name = "testdb"
    db.get_collection = MagicMock(return_value=collection)
    db.client = MagicMock(name="client")
    return db


@pytest.fixture
def driver(mock_db):
    return CollectionDriver(mock_db)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Keep the factory, config and logger state from leaking between tests."""
    level = package_logger.level
    yield
    package_logger.setLevel(level)
    DatabaseFactory._instance = None
    DatabaseFactory._core = None
    Config._config = {}
