"""
Promised Cache - Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the process.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import PromisedCacheConfig

logger = logging.getLogger(__name__)

_config_instance: PromisedCacheConfig | None = None


def _optional_float(name: str) -> float | None:
    """Read an optional numeric env var; unset or blank means None."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}",
            details={"env": name, "value": raw},
        ) from e


def _int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}",
            details={"env": name, "value": raw},
        ) from e


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> PromisedCacheConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated PromisedCacheConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    if env_file:
        env_path = Path(env_file)
    else:
        env_path = Path.cwd() / ".env"

    if env_path.exists():
        logger.info(f"Loading environment from {env_path}")
        try:
            load_dotenv(env_path, override=True)
        except Exception as e:
            logger.error(
                f"Failed to load .env file from {env_path}: {e}",
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    config_dict = {
        "environment": os.getenv("ENVIRONMENT", "development"),
        "logging": {
            "level": os.getenv("LOG_LEVEL", "INFO").upper(),
            "format": os.getenv("LOG_FORMAT", "json").lower(),
        },
        "cache": {
            "root_directory": os.getenv("CACHE_ROOT_DIRECTORY", "./data/cache"),
            "ttl_seconds": _optional_float("CACHE_TTL_SECONDS"),
            "storage_backend": os.getenv("CACHE_STORAGE_BACKEND", "local").lower(),
            "compression_level": _int("CACHE_COMPRESSION_LEVEL", "9"),
        },
    }

    try:
        _config_instance = PromisedCacheConfig(**config_dict)  # type: ignore[arg-type]
        logger.info(
            f"Configuration loaded successfully (environment: {_config_instance.environment})",
            extra={
                "environment": _config_instance.environment,
                "root_directory": _config_instance.cache.root_directory,
            },
        )
        return _config_instance
    except ValidationError as e:
        logger.error(
            f"Configuration validation failed: {e}",
            extra={"validation_errors": e.errors(), "config_dict_keys": list(config_dict.keys())},
            exc_info=True,
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables and configuration.",
            details={"validation_errors": e.errors()},
        ) from e


def get_config() -> PromisedCacheConfig:
    """
    Get the current configuration instance.

    Loads from the environment on first access.
    """
    if _config_instance is None:
        return load_config()

    return _config_instance


def reload_config(env_file: str | None = None) -> PromisedCacheConfig:
    """
    Force reload configuration.

    Args:
        env_file: Optional path to .env file

    Returns:
        Reloaded PromisedCacheConfig instance
    """
    return load_config(env_file=env_file, reload=True)


def reset_config() -> None:
    """Drop the loaded configuration so the next access re-reads the environment."""
    global _config_instance
    _config_instance = None
