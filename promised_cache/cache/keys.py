"""
Promised Cache - Cache Keys

Turns caller keys into stable fingerprints and storage paths.

Keys arrive either as plain strings or as structured JSON-compatible
values (mappings, lists, numbers). At the boundary they are wrapped in a
tagged type, RawKey or StructuredKey, and everything downstream works on
the fingerprint string.

Structured keys are canonicalized by serializing with mapping keys sorted
at every nesting level, so {"a": 1, "b": 2} and {"b": 2, "a": 1} share a
fingerprint. List order is significant. Numbers are compared by value:
1 and 1.0 share a fingerprint, as do 0.0 and -0.0.

The storage path of a key is <root>/<sha256(fingerprint)>.json.gz.
Resolving a path never touches the filesystem.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..errors import InvalidKeyError

ENTRY_SUFFIX = ".json.gz"


@dataclass(frozen=True)
class RawKey:
    """A plain string key, fingerprinted as-is."""

    value: str

    def fingerprint(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class StructuredKey:
    """A structured key; its fingerprint is the canonical JSON encoding."""

    value: Any

    def fingerprint(self) -> str:
        return canonicalize(self.value)


CacheKey = Union[RawKey, StructuredKey]

# Anything callers may pass where a key is expected: str, a tagged key,
# or a JSON-compatible structured value
KeyLike = Any


def _normalize_numbers(value: Any) -> Any:
    """Collapse floats with an integral value to int, recursively."""
    # bool passes through untouched; true and 1 are distinct in JSON
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {_normalize_numbers(k): _normalize_numbers(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_numbers(item) for item in value]
    return value


def canonicalize(value: Any) -> str:
    """
    Serialize a structured value to canonical JSON.

    Mapping keys are sorted at every level and integral floats are
    written as integers, so values that compare equal produce identical
    compact strings.

    Raises:
        InvalidKeyError: On cycles, unsupported types, non-finite floats
            or mappings whose keys cannot be ordered
    """
    try:
        return json.dumps(
            _normalize_numbers(value),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidKeyError(
            f"Key cannot be canonicalized: {e}",
            details={"key_type": type(value).__name__, "error": str(e)},
        ) from e


def to_cache_key(key: KeyLike) -> CacheKey:
    """Wrap a caller-supplied key in its tagged form."""
    if isinstance(key, (RawKey, StructuredKey)):
        return key
    if isinstance(key, str):
        return RawKey(key)
    return StructuredKey(key)


def fingerprint(key: KeyLike) -> str:
    """
    Return the stable fingerprint of a key.

    Strings are returned unchanged; structured values are canonicalized.
    """
    return to_cache_key(key).fingerprint()


def key_digest(key: KeyLike) -> str:
    """SHA-256 hex digest of a key's fingerprint."""
    return hashlib.sha256(fingerprint(key).encode("utf-8")).hexdigest()


def resolve_path(root_directory: str | Path, key: KeyLike) -> Path:
    """
    Map a key to its entry file under a root directory.

    Args:
        root_directory: Cache root
        key: String or structured key

    Returns:
        <root_directory>/<digest>.json.gz
    """
    return Path(root_directory) / f"{key_digest(key)}{ENTRY_SUFFIX}"
