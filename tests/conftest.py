"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database and HTTP fixtures are in tests/integration/conftest.py.
"""

import os

# Environment must be in place before any application import reads settings.
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ["REDIS_URL"] = ""
os.environ["RESEND_API_KEY"] = ""
# Cheap Argon2 parameters keep login tests fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator, Generator

import pytest
from fakeredis import aioredis as fakeredis_aio
from redis.asyncio import Redis

from src.lovgol.core import redis as redis_core
from src.lovgol.core import session_store
from src.lovgol.core.config import get_settings
from src.lovgol.core.health import reset_health_cache
from src.lovgol.core.shutdown import request_tracker

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_process_state() -> Generator[None]:
    """Module-level state (memory sessions, health cache, shutdown flag) is per test."""
    session_store.reset_memory_sessions()
    reset_health_cache()
    request_tracker.reset()
    yield
    session_store.reset_memory_sessions()
    reset_health_cache()
    request_tracker.reset()


# --- Session store backends ---

# Modules that imported get_redis by name.
_REDIS_CONSUMERS = ("src.lovgol.core.session_store", "src.lovgol.core.health")


def _route_get_redis(monkeypatch: pytest.MonkeyPatch, client: Redis | None) -> None:
    async def _get_redis() -> Redis | None:
        return client

    for module in _REDIS_CONSUMERS:
        monkeypatch.setattr(f"{module}.get_redis", _get_redis)


@pytest.fixture
async def fake_redis() -> AsyncGenerator[Redis]:
    """In-memory Redis that speaks the real client protocol."""
    client = fakeredis_aio.FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def mock_redis(fake_redis: Redis, monkeypatch: pytest.MonkeyPatch) -> Redis:
    """Sessions and health checks use fakeredis."""
    redis_core.reset_redis_state()
    _route_get_redis(monkeypatch, fake_redis)
    return fake_redis


@pytest.fixture
def mock_redis_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Redis is down; sessions fall back to process memory."""
    redis_core.reset_redis_state()
    _route_get_redis(monkeypatch, None)
