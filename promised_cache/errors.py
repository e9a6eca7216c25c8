"""
Promised Cache - Core Error Types

Defines the exception hierarchy for the cache engine.
All exceptions inherit from PromisedCacheError for consistent error handling.

A cache miss (absent or expired entry) is never an error: operations
return None for it. Everything else is raised through one of the
types below.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Stable error codes attached to every raised error.

    Lets callers branch on a value instead of on exception classes when
    errors cross a process boundary (logs, JSON responses).
    """

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Cache errors
    CACHE_FAILURE = "CACHE_FAILURE"
    INVALID_KEY = "INVALID_KEY"
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    CORRUPT_ENTRY = "CORRUPT_ENTRY"

    # Internal errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class PromisedCacheError(Exception):
    """Base exception for all Promised Cache errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured logs or responses."""
        return {
            "error": self.__class__.__name__,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(PromisedCacheError):
    """Raised when configuration is invalid or missing."""

    code = ErrorCode.CONFIGURATION_ERROR


class CacheError(PromisedCacheError):
    """Base exception for cache-related errors."""

    code = ErrorCode.CACHE_FAILURE


class InvalidKeyError(CacheError):
    """Raised when a key cannot be canonicalized (cycles, unsupported types)."""

    code = ErrorCode.INVALID_KEY


class SerializationError(CacheError):
    """Raised when a value cannot be serialized to the storage format."""

    code = ErrorCode.SERIALIZATION_ERROR


class StorageError(CacheError):
    """Raised when an underlying filesystem operation fails."""

    code = ErrorCode.STORAGE_ERROR

    def __init__(
        self,
        operation: str,
        path: str,
        details: dict[str, Any] | None = None,
    ):
        message = f"Storage operation '{operation}' failed for {path}"
        merged = {"operation": operation, "path": path}
        merged.update(details or {})
        super().__init__(message, merged)
        self.operation = operation
        self.path = path


class CorruptEntryError(CacheError):
    """Raised when an entry exists on disk but cannot be decompressed or parsed."""

    code = ErrorCode.CORRUPT_ENTRY

    def __init__(self, path: str, details: dict[str, Any] | None = None):
        message = f"Corrupt cache entry: {path}"
        merged = {"path": path}
        merged.update(details or {})
        super().__init__(message, merged)
        self.path = path
