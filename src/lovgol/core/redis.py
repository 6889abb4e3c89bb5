"""Optional Redis connection for the admin session store.

Without ``REDIS_URL``, or when the first ping fails, callers get ``None`` and
sessions live in process memory. A failed connection is not retried until
``close_redis()`` resets the state.
"""

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from src.lovgol.core.config import get_settings
from src.lovgol.core.logging import get_logger

logger = get_logger(__name__)


class _RedisHolder:
    def __init__(self) -> None:
        self.client: Redis | None = None
        self.attempted = False

    async def connect(self) -> Redis | None:
        self.attempted = True
        settings = get_settings()
        if not settings.redis_url:
            logger.info("Redis not configured, using in-memory sessions")
            return None

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=settings.redis_pool_size,
            decode_responses=True,
        )
        client = Redis(connection_pool=pool)
        try:
            await client.ping()  # type: ignore[misc]
        except (RedisError, OSError) as e:
            logger.warning("Redis unavailable, using in-memory sessions", error=str(e))
            await client.aclose(close_connection_pool=True)
            return None

        logger.info("Redis connected")
        self.client = client
        return client

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose(close_connection_pool=True)
            logger.info("Redis connection closed")
        self.forget()

    def forget(self) -> None:
        self.client = None
        self.attempted = False


_holder = _RedisHolder()


async def get_redis() -> Redis | None:
    """Shared client, connected lazily on first use; None when Redis is unavailable."""
    if _holder.client is not None:
        return _holder.client
    if _holder.attempted:
        return None
    return await _holder.connect()


async def close_redis() -> None:
    """Close the pool. Called from the application lifespan on shutdown."""
    await _holder.close()


def reset_redis_state() -> None:
    """Drop the cached client without closing it. For testing only."""
    _holder.forget()
