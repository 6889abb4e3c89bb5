"""Reusable migration runner for the CLI and deployment hooks."""

import asyncio

from alembic import command
from alembic.config import Config


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously.

    Expects to run from the project root, where ``alembic.ini`` lives.
    """
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)


async def run_migrations_async(revision: str = "head") -> None:
    """Run Alembic migrations from async context in a worker thread."""
    await asyncio.to_thread(run_migrations_sync, revision)
