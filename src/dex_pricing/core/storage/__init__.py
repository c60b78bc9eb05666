"""
Record store abstraction for the pricing functions.

Backends:
- InMemoryEntityStore for in-process ingestion and tests
- RedisEntityStore for records shared with an external indexer

Usage:
    from dex_pricing.core.storage import RedisEntityStore

    store = RedisEntityStore(config.database.get_redis_connection_kwargs())
    store.connect()
    pair = store.load_pair(address)
"""

from .base import ConnectionError, DataError, EntityStore, StorageError
from .memory import InMemoryEntityStore
from .redis import RedisEntityStore

__all__ = [
    "EntityStore",
    "StorageError",
    "ConnectionError",
    "DataError",
    "InMemoryEntityStore",
    "RedisEntityStore",
]
