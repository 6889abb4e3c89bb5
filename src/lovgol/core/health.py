"""Health and metrics endpoints.

``/health`` reports database and session-store reachability. Results are
cached briefly so load balancer probes do not hammer the database.
"""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.lovgol.core.config import get_settings
from src.lovgol.core.db import get_session
from src.lovgol.core.logging import get_logger
from src.lovgol.core.redis import get_redis
from src.lovgol.core.shutdown import request_tracker

logger = get_logger(__name__)

HEALTH_CACHE_TTL = 10  # seconds


class HealthCache:
    def __init__(self, ttl: float = HEALTH_CACHE_TTL) -> None:
        self.ttl = ttl
        self._result: dict[str, Any] | None = None
        self._stored_at = 0.0

    def get(self, now: float) -> dict[str, Any] | None:
        if self._result is None or now - self._stored_at >= self.ttl:
            return None
        return {
            **self._result,
            "cached": True,
            "cache_age_seconds": round(now - self._stored_at, 1),
        }

    def store(self, result: dict[str, Any], now: float) -> None:
        self._result = result
        self._stored_at = now

    def clear(self) -> None:
        self._result = None
        self._stored_at = 0.0


health_cache = HealthCache()


def reset_health_cache() -> None:
    """Reset health cache (for testing)."""
    health_cache.clear()


async def check_database() -> str:
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        return f"unhealthy: {e!s}"
    return "healthy"


async def check_session_store() -> str:
    """Redis status; sessions fall back to memory, so failures only degrade."""
    redis = await get_redis()
    if redis is None:
        return "memory"
    try:
        await redis.ping()  # type: ignore[misc]
    except Exception as e:
        logger.warning("Redis health check failed", error=str(e))
        return f"unhealthy: {e!s}"
    return "healthy"


async def collect_health(now: float) -> dict[str, Any]:
    database = await check_database()
    session_store = await check_session_store()

    overall = "healthy"
    if database != "healthy":
        overall = "unhealthy"
    elif session_store.startswith("unhealthy"):
        overall = "degraded"

    return {
        "status": overall,
        "database": database,
        "session_store": session_store,
        "cached": False,
        "timestamp": now,
    }


def _response(result: dict[str, Any]) -> JSONResponse:
    status_code = 200 if result["status"] == "healthy" else 503
    return JSONResponse(content=result, status_code=status_code)


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", tags=["health"])
    async def health() -> JSONResponse:
        if request_tracker.is_shutting_down:
            return JSONResponse(
                content={
                    "status": "draining",
                    "in_flight_requests": request_tracker.in_flight_count,
                },
                status_code=503,
            )

        now = time.time()
        cached = health_cache.get(now)
        if cached is not None:
            return _response(cached)

        result = await collect_health(now)
        health_cache.store(result, now)
        return _response(result)


def setup_metrics(app: FastAPI) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    settings = get_settings()
    instrumentator = Instrumentator(excluded_handlers=["/health", "/metrics"]).instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics", include_in_schema=False)
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)
    expected_key = settings.metrics_api_key

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(
        app,
        endpoint="/metrics",
        include_in_schema=False,
        dependencies=[Depends(verify_metrics_key)],
    )
