"""
Create an admin account for the back-office.

Run from the project root:
    uv run python -m src.lovgol.scripts.create_admin --username admin
    uv run lovgol-create-admin --username admin --skip-migrations

The password is read from ADMIN_PASSWORD or prompted for interactively.
Exits 0 without changes when the username is already taken.
"""

import argparse
import asyncio
import getpass
import os
import sys

from src.lovgol.core.config import get_settings
from src.lovgol.core.db import dispose_engine, get_session, run_migrations_async
from src.lovgol.core.exceptions import ConflictError
from src.lovgol.core.logging import get_logger, setup_logging
from src.lovgol.repositories import AdminRepository
from src.lovgol.services import AuthService

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a back-office admin account")
    parser.add_argument("--username", default="admin", help="Admin username (default: admin)")
    parser.add_argument(
        "--skip-migrations",
        action="store_true",
        help="Do not run database migrations first",
    )
    return parser.parse_args(argv)


def read_password() -> str:
    password = os.environ.get("ADMIN_PASSWORD")
    if password:
        return password
    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat password: "):
        raise SystemExit("Passwords do not match")
    return password


async def create_admin(username: str, password: str, run_migrations: bool = True) -> bool:
    """Create the admin. Returns False when the username already exists."""
    if run_migrations:
        await run_migrations_async()

    try:
        async with get_session() as session:
            service = AuthService(AdminRepository(session), session)
            try:
                await service.create_admin(username, password)
            except ConflictError:
                logger.info("Admin already exists", username=username)
                return False
    finally:
        await dispose_engine()
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(get_settings().debug)

    password = read_password()
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters", file=sys.stderr)
        return 1

    created = asyncio.run(
        create_admin(args.username, password, run_migrations=not args.skip_migrations)
    )
    outcome = "created" if created else "already exists"
    print(f"Admin '{args.username}' {outcome}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
