"""Server-side admin session store with Redis backend and in-memory fallback.

The browser only ever holds the random session id. Storage is keyed by the
SHA256 of that id, so a leaked store dump cannot be replayed as cookies.
"""

import asyncio
import secrets
import time
from uuid import UUID

from src.lovgol.core.logging import get_logger
from src.lovgol.core.redis import get_redis
from src.lovgol.core.security import hash_token

logger = get_logger(__name__)

PREFIX_ADMIN_SESSION = "admin_session"

# In-memory fallback: session hash -> (admin_id, expires_at monotonic)
_memory_sessions: dict[str, tuple[str, float]] = {}
_memory_lock = asyncio.Lock()


def _key(session_hash: str) -> str:
    return f"{PREFIX_ADMIN_SESSION}:{session_hash}"


async def create_admin_session(admin_id: UUID, ttl: int) -> str:
    """Persist a new session for the admin and return the raw session id.

    Args:
        admin_id: The authenticated admin.
        ttl: Session lifetime in seconds.

    Returns:
        The session id to place in the cookie.
    """
    session_id = secrets.token_urlsafe(32)
    session_hash = hash_token(session_id)

    redis = await get_redis()
    if redis:
        await redis.setex(_key(session_hash), ttl, str(admin_id))
    else:
        async with _memory_lock:
            _memory_sessions[session_hash] = (str(admin_id), time.monotonic() + ttl)

    return session_id


async def get_admin_session(session_id: str) -> UUID | None:
    """Resolve a session id to the admin id it belongs to, or None."""
    session_hash = hash_token(session_id)

    redis = await get_redis()
    if redis:
        value = await redis.get(_key(session_hash))
    else:
        async with _memory_lock:
            entry = _memory_sessions.get(session_hash)
            if entry is not None and entry[1] <= time.monotonic():
                del _memory_sessions[session_hash]
                entry = None
        value = entry[0] if entry else None

    if value is None:
        return None

    try:
        return UUID(value)
    except ValueError:
        logger.warning("Discarding corrupt session entry")
        await destroy_admin_session(session_id)
        return None


async def destroy_admin_session(session_id: str) -> None:
    """Remove a session. Unknown ids are ignored."""
    session_hash = hash_token(session_id)

    redis = await get_redis()
    if redis:
        await redis.delete(_key(session_hash))
        return

    async with _memory_lock:
        _memory_sessions.pop(session_hash, None)


def reset_memory_sessions() -> None:
    """Drop all in-memory sessions. For testing only."""
    _memory_sessions.clear()
