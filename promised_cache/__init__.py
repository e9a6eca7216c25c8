"""
Promised Cache - Disk-backed asynchronous key/value cache

Stores JSON-serializable values under string or structured keys as
gzip-compressed files, with read-time TTL expiry that is consistent
across instances sharing a directory.
"""

__version__ = "1.0.0"

from .cache import DiskCache, create_cache, get_cache
from .errors import (
    CacheError,
    ConfigurationError,
    CorruptEntryError,
    InvalidKeyError,
    PromisedCacheError,
    SerializationError,
    StorageError,
)

__all__ = [
    "DiskCache",
    "create_cache",
    "get_cache",
    "PromisedCacheError",
    "ConfigurationError",
    "CacheError",
    "InvalidKeyError",
    "SerializationError",
    "StorageError",
    "CorruptEntryError",
]
