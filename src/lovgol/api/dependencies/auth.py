"""Admin session dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from src.lovgol.api.dependencies.services import AuthServiceDep
from src.lovgol.core.config import get_settings
from src.lovgol.core.exceptions import UnauthorizedError
from src.lovgol.core.logging import bind_admin_context
from src.lovgol.models import Admin


def get_session_id(request: Request) -> str | None:
    """Raw session id from the admin cookie, if any."""
    return request.cookies.get(get_settings().session_cookie_name)


SessionId = Annotated[str | None, Depends(get_session_id)]


async def get_optional_admin(session_id: SessionId, auth_service: AuthServiceDep) -> Admin | None:
    """Admin behind the session cookie, or None."""
    admin = await auth_service.resolve_session(session_id)
    if admin is not None:
        bind_admin_context(admin.id, admin.username)
    return admin


async def get_current_admin(
    admin: Annotated[Admin | None, Depends(get_optional_admin)],
) -> Admin:
    """Reject the request unless it carries a live admin session.

    Raises:
        UnauthorizedError: No cookie, unknown or expired session, or deleted admin.
    """
    if admin is None:
        raise UnauthorizedError()
    return admin


OptionalAdmin = Annotated[Admin | None, Depends(get_optional_admin)]
CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
