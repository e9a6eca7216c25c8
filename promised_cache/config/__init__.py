"""
Promised Cache - Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import get_config, load_config, reload_config, reset_config
from .schemas import (
    CacheConfig,
    Environment,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PromisedCacheConfig,
    StorageBackend,
)

__all__ = [
    # Loader functions
    "load_config",
    "get_config",
    "reload_config",
    "reset_config",
    # Main config
    "PromisedCacheConfig",
    # Enums
    "Environment",
    "StorageBackend",
    "LogLevel",
    "LogFormat",
    # Config sections
    "CacheConfig",
    "LoggingConfig",
]
