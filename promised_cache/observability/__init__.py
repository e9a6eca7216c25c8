"""
Promised Cache - Observability Module

Logging setup for the package.

Usage:
    from promised_cache.config import get_config
    from promised_cache.observability import setup_logging

    setup_logging(get_config().logging)
"""

from .logging import JSONFormatter, setup_logging

__all__ = [
    "JSONFormatter",
    "setup_logging",
]
