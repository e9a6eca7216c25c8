"""
Promised Cache - Disk Cache

Asynchronous disk-backed cache with lazy TTL expiry.

Every entry is one gzip'd JSON file named after the SHA-256 of its key's
fingerprint. The directory is the only source of truth: nothing about
entries is kept in memory, so any number of instances (in one process or
many) over the same root directory see the same data. Each instance
applies its own TTL at read time; expired files stay on disk until they
are overwritten, deleted, cleared or purged.

Example:
    cache = DiskCache("/tmp/my-cache", ttl_seconds=60)
    await cache.set({"user": 1, "page": 2}, {"items": [1, 2, 3]})
    val = await cache.get({"page": 2, "user": 1})
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..errors import ConfigurationError, CorruptEntryError
from ..storage.interface import StorageDriver
from ..storage.local import LocalStorageDriver
from .codec import decode_envelope, encode_envelope
from .interface import CacheInterface
from .keys import ENTRY_SUFFIX, KeyLike, resolve_path

logger = logging.getLogger(__name__)

_MISSING = object()


class DiskCache(CacheInterface):
    """
    Disk cache engine.

    Notes:
    - Keys are strings or structured values; structured keys are
      canonicalized so field order does not matter.
    - Values must be JSON-serializable.
    - ttl_seconds=None means entries never expire.
    - The root directory is created on first write, not at construction.
    """

    def __init__(
        self,
        root_directory: str | Path,
        ttl_seconds: float | None = None,
        storage: StorageDriver | None = None,
        compression_level: int = 9,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize disk cache.

        Args:
            root_directory: Directory holding the entry files
            ttl_seconds: Max entry age in seconds (None = never expire)
            storage: Filesystem driver (defaults to the local filesystem)
            compression_level: gzip level, 0-9
            clock: Returns the current epoch time in seconds
        """
        if not str(root_directory).strip():
            raise ConfigurationError("root_directory is required", details={"root_directory": str(root_directory)})
        if ttl_seconds is not None and not (math.isfinite(ttl_seconds) and ttl_seconds > 0):
            raise ConfigurationError(
                "ttl_seconds must be a positive finite number or None",
                details={"ttl_seconds": ttl_seconds},
            )
        if not 0 <= compression_level <= 9:
            raise ConfigurationError(
                "compression_level must be between 0 and 9",
                details={"compression_level": compression_level},
            )

        self._root = Path(root_directory)
        self._ttl_seconds = ttl_seconds
        self._storage = storage or LocalStorageDriver()
        self._compression_level = compression_level
        self._clock = clock

        # Stats
        self._hits = 0
        self._misses = 0
        self._expired = 0
        self._sets = 0
        self._deletes = 0

    @property
    def root_directory(self) -> Path:
        return self._root

    @property
    def ttl_seconds(self) -> float | None:
        return self._ttl_seconds

    def __repr__(self) -> str:
        return f"DiskCache(root_directory={str(self._root)!r}, ttl_seconds={self._ttl_seconds!r})"

    def resolve_path(self, key: KeyLike) -> Path:
        """Return the entry file for a key. Does not touch the filesystem."""
        return resolve_path(self._root, key)

    # ------------ Core Interface ------------

    async def get(self, key: KeyLike, default: Any = None) -> Any:
        """Retrieve a value, or default on a miss or expired entry."""
        path = self.resolve_path(key)
        data = await self._storage.read_file(path)
        if data is None:
            self._misses += 1
            logger.debug("Cache miss", extra={"path": str(path)})
            return default

        try:
            envelope = decode_envelope(data, str(path))
        except CorruptEntryError:
            logger.error(
                f"Corrupt cache entry at {path}",
                extra={"path": str(path), "bytes": len(data)},
                exc_info=True,
            )
            raise

        now = self._clock()
        if envelope.is_expired(self._ttl_seconds, now):
            self._misses += 1
            self._expired += 1
            logger.debug(
                "Cache entry expired",
                extra={"path": str(path), "age_seconds": envelope.age(now), "ttl_seconds": self._ttl_seconds},
            )
            return default

        self._hits += 1
        logger.debug("Cache hit", extra={"path": str(path)})
        return envelope.payload

    async def set(self, key: KeyLike, value: Any) -> bool:
        """Store a value, overwriting any existing entry for the key."""
        path = self.resolve_path(key)
        data = encode_envelope(value, self._clock(), self._compression_level)

        await self._storage.ensure_directory(self._root)
        await self._storage.write_file(path, data)

        self._sets += 1
        logger.debug("Cache set", extra={"path": str(path), "bytes": len(data)})
        return True

    async def delete(self, key: KeyLike) -> bool:
        """Delete an entry if present."""
        path = self.resolve_path(key)
        deleted = await self._storage.delete_file(path)
        if deleted:
            self._deletes += 1
        logger.debug("Cache delete", extra={"path": str(path), "deleted": deleted})
        return deleted

    async def exists(self, key: KeyLike) -> bool:
        """True if get() would return a stored value for this key."""
        return await self.get(key, _MISSING) is not _MISSING

    async def clear(self) -> bool:
        """Remove everything under the root directory."""
        removed = await self._storage.remove_directory_contents(self._root)
        self._deletes += removed
        logger.info(f"Cleared {removed} item(s) from cache directory '{self._root}'")
        return True

    async def get_stats(self) -> dict[str, Any]:
        """Return per-instance counters and the current on-disk entry count."""
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0
        entries = await self._storage.list_files(self._root, ENTRY_SUFFIX)

        return {
            "backend": "disk",
            "root_directory": str(self._root),
            "ttl_seconds": self._ttl_seconds,
            "size": len(entries),
            "hits": self._hits,
            "misses": self._misses,
            "expired": self._expired,
            "hit_rate": round(hit_rate, 2),
            "sets": self._sets,
            "deletes": self._deletes,
        }

    async def close(self) -> None:
        """Nothing is held open between calls."""
        logger.debug(f"Disk cache closed for '{self._root}'")

    # ------------ Maintenance ------------

    async def purge_expired(self) -> int:
        """
        Delete entry files older than this instance's TTL.

        Opt-in sweep; get() never deletes. Corrupt files are skipped and
        left in place so the caller can inspect them.

        Not atomic per entry: a set() from another task or process that
        lands between the read and the delete of an expired entry is
        deleted along with it.

        Returns:
            Number of files removed (0 when no TTL is configured)
        """
        if self._ttl_seconds is None:
            return 0

        removed = 0
        now = self._clock()
        for path in await self._storage.list_files(self._root, ENTRY_SUFFIX):
            data = await self._storage.read_file(path)
            if data is None:
                continue
            try:
                envelope = decode_envelope(data, str(path))
            except CorruptEntryError as e:
                logger.warning(
                    f"Skipping corrupt cache entry during purge: {path}",
                    extra={"path": str(path), "error": str(e)},
                )
                continue
            if envelope.is_expired(self._ttl_seconds, now) and await self._storage.delete_file(path):
                removed += 1

        self._deletes += removed
        logger.info(
            f"Purged {removed} expired entr{'y' if removed == 1 else 'ies'} from '{self._root}'",
            extra={"root_directory": str(self._root), "removed": removed},
        )
        return removed