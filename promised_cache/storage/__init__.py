"""
Promised Cache - Storage Drivers

Byte-level filesystem drivers consumed by the cache engine:
- interface.py: Abstract driver contract
- local.py: Real filesystem (default)
- memory.py: In-process dict, for tests
"""

from .interface import StorageDriver
from .local import LocalStorageDriver
from .memory import MemoryStorageDriver

__all__ = [
    "StorageDriver",
    "LocalStorageDriver",
    "MemoryStorageDriver",
]
