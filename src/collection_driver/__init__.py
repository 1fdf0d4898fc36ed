"""
Collection driver package.

An asyncio facade over a MongoDB database handle: list, get, save, update
and delete documents in named collections.
"""

__version__ = "0.1.0"

from .config import Config
from .db import CollectionDriver, DatabaseFactory, MongoCore
from .exceptions import InvalidIdError
from .logging_config import set_log_level

__all__ = ["Config", "CollectionDriver", "DatabaseFactory", "MongoCore", "InvalidIdError", "set_log_level"]
