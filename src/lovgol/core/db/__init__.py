"""Database utilities - engine, session, migrations."""

from src.lovgol.core.db.engine import (
    dispose_engine,
    get_engine,
    get_sync_url,
    is_sqlite_url,
)
from src.lovgol.core.db.migrations import run_migrations_async, run_migrations_sync
from src.lovgol.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    "get_sync_url",
    "is_sqlite_url",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
