"""
Promised Cache - Cache Interface

Defines the abstract interface that cache implementations must implement.
"""

from abc import ABC, abstractmethod
from typing import Any

from .keys import KeyLike

_MISSING = object()


class CacheInterface(ABC):
    """
    Abstract base class for caches.

    Keys may be plain strings or structured JSON-compatible values.
    A miss (absent or expired) is reported as None, never raised.
    """

    @abstractmethod
    async def get(self, key: KeyLike, default: Any = None) -> Any:
        """
        Retrieve a value from the cache.

        Args:
            key: Cache key
            default: Returned on a miss; pass a sentinel to tell a miss
                apart from a stored None

        Returns:
            Cached value if found and not expired, default otherwise
        """
        pass

    @abstractmethod
    async def set(self, key: KeyLike, value: Any) -> bool:
        """
        Store a value in the cache, overwriting any previous entry.

        Args:
            key: Cache key
            value: JSON-serializable value

        Returns:
            True once the entry is visible to subsequent reads
        """
        pass

    @abstractmethod
    async def delete(self, key: KeyLike) -> bool:
        """
        Delete a key from the cache. Never fails because the key is absent.

        Args:
            key: Cache key to delete

        Returns:
            True if an entry was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, key: KeyLike) -> bool:
        """
        Check if a key exists in the cache.

        Args:
            key: Cache key to check

        Returns:
            True if key exists and is not expired, False otherwise
        """
        pass

    @abstractmethod
    async def clear(self) -> bool:
        """
        Clear all entries from the cache.

        Returns:
            True once no entries remain
        """
        pass

    @abstractmethod
    async def get_stats(self) -> dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics (hits, misses, size, etc.)
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Close the cache and release resources.
        """
        pass

    async def get_many(self, keys: list[str]) -> dict[str, Any]:
        """
        Retrieve multiple values from the cache.

        Calls get() for each key in turn; there is no atomicity across keys.

        Args:
            keys: List of string cache keys

        Returns:
            Dictionary mapping keys to values (missing keys are omitted;
            a stored None is included)
        """
        result = {}
        for key in keys:
            value = await self.get(key, _MISSING)
            if value is not _MISSING:
                result[key] = value
        return result

    async def set_many(self, items: dict[str, Any]) -> int:
        """
        Store multiple values in the cache.

        Calls set() for each item in turn; a failure part-way leaves the
        earlier items written.

        Args:
            items: Dictionary mapping string keys to values

        Returns:
            Number of items stored
        """
        count = 0
        for key, value in items.items():
            if await self.set(key, value):
                count += 1
        return count

    async def delete_many(self, keys: list[str]) -> int:
        """
        Delete multiple keys from the cache.

        Args:
            keys: List of string cache keys to delete

        Returns:
            Number of entries actually deleted
        """
        count = 0
        for key in keys:
            if await self.delete(key):
                count += 1
        return count
