"""
MongoDB connection management.
Opens the motor client, checks it with a ping and hands out the database handle.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class MongoCore:
    """MongoDB connection and handle management"""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    @property
    def initialized(self) -> bool:
        return self._db is not None

    async def init(self, connection_str: str, database_name: str) -> None:
        """Initialize MongoDB connection"""
        if self._client is not None:
            logger.info("MongoCore: Already initialized")
            return

        client = AsyncIOMotorClient(connection_str)
        try:
            # Test connection
            await client.admin.command('ping')
        except Exception:
            client.close()
            raise

        self._client = client
        self._db = client[database_name]
        logger.info(f"MongoCore: Connected to {database_name}")

    async def close(self) -> None:
        """Close MongoDB connection"""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoCore: Connection closed")

    def get_connection(self) -> AsyncIOMotorDatabase:
        """Get MongoDB database instance"""
        if self._db is None:
            raise RuntimeError("MongoDB not initialized")
        return self._db
