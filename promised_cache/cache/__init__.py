"""
Promised Cache - Cache Module

Disk-backed key/value cache with lazy TTL expiry.

- keys.py: Key canonicalization and storage path resolution
- codec.py: gzip'd JSON envelope encoding and expiry predicate
- disk.py: DiskCache engine
- factory.py: Named instance registry
- interface.py: Abstract cache interface

Usage:
    from promised_cache.cache import DiskCache

    cache = DiskCache("./data/cache", ttl_seconds=3600)
    await cache.set("key", "value")
    value = await cache.get("key")
"""

from .codec import Envelope, decode_envelope, encode_envelope
from .disk import DiskCache
from .factory import (
    close_all_caches,
    create_cache,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from .interface import CacheInterface
from .keys import RawKey, StructuredKey, canonicalize, fingerprint, key_digest, resolve_path

__all__ = [
    # Engine
    "DiskCache",
    "CacheInterface",
    # Factory
    "create_cache",
    "get_cache",
    "close_all_caches",
    "list_cache_instances",
    "reset_cache_factory",
    # Keys
    "RawKey",
    "StructuredKey",
    "canonicalize",
    "fingerprint",
    "key_digest",
    "resolve_path",
    # Codec
    "Envelope",
    "encode_envelope",
    "decode_envelope",
]
