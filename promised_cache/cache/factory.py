"""
Promised Cache - Cache Factory

Creates cache instances from configuration and keeps a registry of named
instances, so that modules asking for the same name share one object.

The registry holds cache objects only; entry data always lives in
storage.

Examples:
    from promised_cache.cache import create_cache, get_cache

    # Uses env-configured settings
    cache = create_cache()

    # Or explicitly supply a CacheConfig (e.g., for tests)
    from promised_cache.config import CacheConfig
    cfg = CacheConfig(root_directory="/tmp/pc", ttl_seconds=600)
    disk_cache = create_cache(cfg, name="test")
"""

from __future__ import annotations

import logging

from ..config import CacheConfig, StorageBackend, get_config
from ..errors import ConfigurationError
from ..storage.interface import StorageDriver
from ..storage.local import LocalStorageDriver
from ..storage.memory import MemoryStorageDriver
from .disk import DiskCache
from .interface import CacheInterface

logger = logging.getLogger(__name__)

# Global cache instances registry
_cache_instances: dict[str, CacheInterface] = {}


def _create_storage(config: CacheConfig) -> StorageDriver:
    """Internal helper to construct the configured storage driver."""
    backend = StorageBackend(config.storage_backend)
    if backend == StorageBackend.LOCAL:
        return LocalStorageDriver()
    if backend == StorageBackend.MEMORY:
        return MemoryStorageDriver()
    raise ConfigurationError(
        f"Unknown storage backend: {config.storage_backend}",
        details={
            "backend": str(config.storage_backend),
            "supported": [b.value for b in StorageBackend],
        },
    )


def create_cache(
    config: CacheConfig | None = None,
    name: str = "default",
) -> CacheInterface:
    """
    Create a cache instance based on configuration.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Cache instance name (for multiple cache instances)

    Returns:
        Configured cache instance

    Raises:
        ConfigurationError: If cache configuration is invalid
    """
    if name in _cache_instances:
        logger.debug("Returning existing cache instance: %s", name)
        return _cache_instances[name]

    if config is None:
        config = get_config().cache

    logger.info(
        "Creating cache instance '%s' at %s",
        name,
        config.root_directory,
        extra={"cache_name": name, "backend": str(config.storage_backend)},
    )

    cache = DiskCache(
        root_directory=config.root_directory,
        ttl_seconds=config.ttl_seconds,
        storage=_create_storage(config),
        compression_level=config.compression_level,
    )
    _cache_instances[name] = cache

    logger.info(
        "Cache instance '%s' created successfully",
        name,
        extra={"cache_name": name, "ttl_seconds": config.ttl_seconds},
    )

    return cache


def get_cache(name: str = "default") -> CacheInterface:
    """
    Get an existing cache instance by name.

    If the instance doesn't exist, it will be created automatically
    using the global configuration.
    """
    if name not in _cache_instances:
        logger.debug("Cache instance '%s' not found, creating new instance", name)
        return create_cache(name=name)

    return _cache_instances[name]


async def close_all_caches() -> None:
    """
    Close all cache instances and empty the registry.

    A failure closing one instance is logged and does not stop the others.
    """
    if not _cache_instances:
        logger.debug("No cache instances to close")
        return

    logger.info("Closing %d cache instance(s)...", len(_cache_instances))

    for name, cache in list(_cache_instances.items()):
        try:
            await cache.close()
            logger.info("Closed cache instance: %s", name)
        except Exception as e:
            logger.error(
                "Error closing cache instance '%s': %s",
                name,
                e,
                extra={"cache_name": name, "error": str(e)},
                exc_info=True,
            )

    _cache_instances.clear()
    logger.info("All cache instances closed")


def reset_cache_factory() -> None:
    """
    Reset the cache factory by clearing all instance references.

    Does NOT call close() on instances - use close_all_caches() for that.
    Intended for tests.
    """
    count = len(_cache_instances)
    _cache_instances.clear()
    logger.debug("Reset cache factory, cleared %d instance reference(s)", count)


def list_cache_instances() -> list[str]:
    """List all registered cache instance names."""
    return list(_cache_instances.keys())
