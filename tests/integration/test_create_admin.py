"""Tests for the admin bootstrap command."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from src.lovgol.scripts.create_admin import create_admin, main

pytestmark = pytest.mark.integration


@pytest.fixture
def keep_engine():
    """The command disposes the engine on exit, which would drop the in-memory database."""
    with patch("src.lovgol.scripts.create_admin.dispose_engine", new=AsyncMock()) as mock_dispose:
        yield mock_dispose


async def test_created_admin_can_log_in(client: AsyncClient, keep_engine) -> None:
    assert await create_admin("ops", "long-enough-pw", run_migrations=False) is True
    keep_engine.assert_awaited_once()

    response = await client.post(
        "/api/login", json={"username": "ops", "password": "long-enough-pw"}
    )

    assert response.status_code == 200
    assert response.json()["username"] == "ops"


async def test_existing_username_is_reported(engine, keep_engine) -> None:
    assert await create_admin("ops", "long-enough-pw", run_migrations=False) is True
    assert await create_admin("ops", "another-password", run_migrations=False) is False


def test_short_password_is_refused(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("ADMIN_PASSWORD", "short")

    assert main(["--username", "ops", "--skip-migrations"]) == 1
    assert "at least 8 characters" in capsys.readouterr().err
