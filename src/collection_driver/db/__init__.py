"""
MongoDB access layer.

Architecture:
- MongoCore: Connection management (init, close, get_connection)
- CollectionDriver: CRUD facade over one database handle
- DatabaseFactory: Process-wide driver instance
"""

from .collection_driver import CollectionDriver
from .core import MongoCore
from .factory import DatabaseFactory

__all__ = ['CollectionDriver', 'MongoCore', 'DatabaseFactory']
