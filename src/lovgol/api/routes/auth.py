"""Admin session endpoints."""

from fastapi import APIRouter, Response, status

from src.lovgol.api.dependencies import AuthServiceDep, OptionalAdmin, SessionId
from src.lovgol.core.config import get_settings
from src.lovgol.core.exceptions import UnauthorizedError
from src.lovgol.schemas.auth import AdminRead, AuthStatus, LoginRequest

router = APIRouter(tags=["auth"])

INCORRECT_CREDENTIALS = "Incorrect credentials"


@router.post(
    "/login",
    response_model=AdminRead,
    summary="Admin login",
    description="Verify admin credentials and open a cookie-backed session.",
    responses={
        200: {"description": "Logged in; session cookie set"},
        401: {"description": "Incorrect credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthServiceDep,
) -> AdminRead:
    result = await auth_service.login(request.username, request.password)
    if result is None:
        raise UnauthorizedError(INCORRECT_CREDENTIALS)

    admin, session_id = result
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.session_cookie_secure or settings.is_production,
        samesite="lax",
        path="/",
    )
    return AdminRead.model_validate(admin)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Admin logout",
    description="Destroy the current session. Succeeds even without one.",
)
async def logout(
    response: Response,
    session_id: SessionId,
    auth_service: AuthServiceDep,
) -> None:
    await auth_service.logout(session_id)
    response.delete_cookie(key=get_settings().session_cookie_name, path="/")


@router.get(
    "/auth/status",
    response_model=AuthStatus,
    summary="Session status",
)
async def auth_status(admin: OptionalAdmin) -> AuthStatus:
    if admin is None:
        return AuthStatus(authenticated=False)
    return AuthStatus(authenticated=True, username=admin.username)
