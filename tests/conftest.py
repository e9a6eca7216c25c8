"""
Promised Cache - Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


class FakeClock:
    """Manually advanced epoch clock for deterministic expiry tests."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at a fixed epoch time."""
    return FakeClock()


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Cache root directory that does not exist yet."""
    return tmp_path / "cache"


@pytest.fixture
def mock_env_cache(monkeypatch: pytest.MonkeyPatch, cache_root: Path) -> Path:
    """Point env-driven configuration at a temporary cache root."""
    monkeypatch.setenv("CACHE_ROOT_DIRECTORY", str(cache_root))
    monkeypatch.setenv("CACHE_TTL_SECONDS", "3600")
    monkeypatch.setenv("CACHE_STORAGE_BACKEND", "local")
    monkeypatch.setenv("CACHE_COMPRESSION_LEVEL", "6")
    return cache_root


@pytest.fixture
def sample_cache_data() -> dict[str, Any]:
    """Sample values covering every JSON type."""
    return {
        "simple_string": "hello",
        "simple_int": 42,
        "simple_float": 3.14,
        "simple_bool": True,
        "simple_none": None,
        "unicode": "Grüße, 世界",
        "complex_dict": {
            "nested": {
                "key": "value",
                "number": 123,
                "list": [1, 2, 3],
            }
        },
        "complex_list": [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
        ],
    }


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Reset the cache registry and loaded config after each test."""
    yield
    from promised_cache.cache.factory import reset_cache_factory
    from promised_cache.config import reset_config

    reset_cache_factory()
    reset_config()
