"""Unit-of-work sessions on the application engine.

Objects stay loaded after commit (``expire_on_commit=False``) so a route can
serialize what a service just saved without another query.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.lovgol.core.db.engine import get_engine


def _session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Open a session; callers commit. Uncommitted work is discarded on exit."""
    async with _session_factory(engine or get_engine())() as session:
        yield session
