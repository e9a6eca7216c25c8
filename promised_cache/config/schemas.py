"""
Promised Cache - Configuration Schemas

Defines typed configuration models using Pydantic for validation and type safety.
All configuration is defined here and validated when loaded.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class StorageBackend(str, Enum):
    """Supported storage drivers."""

    LOCAL = "local"
    MEMORY = "memory"  # In-process, for tests


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    TEXT = "text"


class CacheConfig(BaseModel):
    """Cache configuration."""

    root_directory: str = Field(default="./data/cache", min_length=1, description="Directory holding cache entries")
    ttl_seconds: float | None = Field(default=None, gt=0, allow_inf_nan=False, description="Max entry age in seconds (None = never expire)")
    storage_backend: StorageBackend = Field(default=StorageBackend.LOCAL, description="Storage driver to use")
    compression_level: int = Field(default=9, ge=0, le=9, description="gzip compression level")

    @field_validator("root_directory")
    @classmethod
    def validate_root_directory(cls, v: str) -> str:
        """Reject whitespace-only paths."""
        if not v.strip():
            raise ValueError("root_directory must not be blank")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    format: LogFormat = Field(default=LogFormat.JSON, description="Log output format")


class PromisedCacheConfig(BaseModel):
    """Root configuration for Promised Cache."""

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)
