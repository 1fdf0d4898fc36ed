"""
Creates and holds the process-wide CollectionDriver.
"""

import logging
from typing import Optional

from ..config import Config
from .collection_driver import CollectionDriver
from .core import MongoCore

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory for creating and managing the collection driver instance.

    Usage:
        # Initialize
        driver = await DatabaseFactory.initialize(connection_str, db_name)

        # Use the facade
        projects = await driver.find_all("projects")
        project = await driver.get("projects", "507f1f77bcf86cd799439011")

        # Shut down
        await DatabaseFactory.close()
    """

    _instance: Optional[CollectionDriver] = None
    _core: Optional[MongoCore] = None

    @classmethod
    async def initialize(cls, connection_str: str, database_name: str) -> CollectionDriver:
        """
        Connect to MongoDB and wrap the database handle in a CollectionDriver.

        Args:
            connection_str: MongoDB connection string
            database_name: Database name

        Returns:
            CollectionDriver bound to the database
        """
        if cls._instance is not None:
            logger.info("DatabaseFactory: Already initialized")
            return cls._instance

        try:
            core = MongoCore()
            await core.init(connection_str, database_name)
            driver = CollectionDriver(core.get_connection())

            cls._core = core
            cls._instance = driver
            logger.info(f"DatabaseFactory: Initialized database {database_name}")

        except Exception as e:
            logger.error(f"Failed to initialize database: {str(e)}")
            raise

        return driver

    @classmethod
    async def initialize_from_config(cls) -> CollectionDriver:
        """Initialize using db_uri and db_name from Config"""
        connection_str, database_name = Config.get_db_params()
        return await cls.initialize(connection_str, database_name)

    @classmethod
    def get_instance(cls) -> CollectionDriver:
        """Get the current driver instance"""
        if cls._instance is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return cls._instance

    @classmethod
    def set_instance(cls, instance: CollectionDriver) -> None:
        """
        Set the current driver instance (mainly for testing).

        A connection opened by initialize() stays owned by the factory and is
        still closed by close().
        """
        cls._instance = instance
        logger.info("Collection driver instance set")

    @classmethod
    async def close(cls) -> None:
        """Close the database connection and clean up"""
        core, instance = cls._core, cls._instance
        owned_db = core.get_connection() if core is not None and core.initialized else None

        if core is not None:
            await core.close()
        if instance is not None and instance.db is not owned_db:
            instance.shutdown()

        if core is not None or instance is not None:
            cls._instance = None
            cls._core = None
            logger.info("Database instance closed and cleaned up")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if a driver instance has been initialized"""
        return cls._instance is not None
