"""
Promised Cache - Entry Codec

Encodes cache entries as gzip-compressed UTF-8 JSON envelopes:

    {"storedAtEpochSeconds": <number>, "payload": <any JSON value>}

and decides whether a decoded envelope has outlived a TTL.
"""

from __future__ import annotations

import gzip
import json
import math
import zlib
from dataclasses import dataclass
from typing import Any

from ..errors import CorruptEntryError, SerializationError

STORED_AT_FIELD = "storedAtEpochSeconds"
PAYLOAD_FIELD = "payload"


@dataclass(frozen=True)
class Envelope:
    """A stored value paired with its write timestamp."""

    stored_at: float
    payload: Any

    def age(self, now: float) -> float:
        return now - self.stored_at

    def is_expired(self, ttl_seconds: float | None, now: float) -> bool:
        """True when a TTL is set and the entry is strictly older than it."""
        if ttl_seconds is None:
            return False
        return self.age(now) > ttl_seconds


def _reject_lossy(value: Any) -> None:
    """
    Refuse values that json would coerce into something unequal.

    Tuples decode as lists and non-string mapping keys decode as strings.
    """
    if isinstance(value, tuple):
        raise SerializationError(
            "Tuples do not survive a JSON round trip; use a list",
            details={"value_type": "tuple"},
        )
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise SerializationError(
                    f"Mapping keys must be strings, got {type(k).__name__}: {k!r}",
                    details={"key_type": type(k).__name__},
                )
            _reject_lossy(v)
    elif isinstance(value, list):
        for item in value:
            _reject_lossy(item)


def encode_envelope(payload: Any, stored_at: float, compression_level: int = 9) -> bytes:
    """
    Serialize and compress an envelope.

    Raises:
        SerializationError: If the payload is not JSON-serializable or
            would not decode to an equal value
    """
    try:
        _reject_lossy(payload)
        document = json.dumps(
            {STORED_AT_FIELD: stored_at, PAYLOAD_FIELD: payload},
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Value is not JSON-serializable: {e}",
            details={"value_type": type(payload).__name__, "error": str(e)},
        ) from e

    # mtime=0 keeps the output a pure function of its input
    return gzip.compress(document.encode("utf-8"), compresslevel=compression_level, mtime=0)


def decode_envelope(data: bytes, path: str = "<memory>") -> Envelope:
    """
    Decompress and parse an envelope.

    Args:
        data: Raw file contents
        path: Source path, used in error details

    Raises:
        CorruptEntryError: If the bytes are not a gzip'd JSON envelope
    """
    try:
        document = json.loads(gzip.decompress(data).decode("utf-8"))
    except (OSError, EOFError, zlib.error, UnicodeDecodeError, ValueError) as e:
        raise CorruptEntryError(path, details={"error": str(e)}) from e

    if not isinstance(document, dict) or STORED_AT_FIELD not in document or PAYLOAD_FIELD not in document:
        raise CorruptEntryError(path, details={"error": "envelope is missing required fields"})

    stored_at = document[STORED_AT_FIELD]
    # bool is an int subclass but never a valid timestamp
    if isinstance(stored_at, bool) or not isinstance(stored_at, (int, float)) or not math.isfinite(stored_at):
        raise CorruptEntryError(path, details={"error": f"invalid {STORED_AT_FIELD}: {stored_at!r}"})

    return Envelope(stored_at=float(stored_at), payload=document[PAYLOAD_FIELD])
