"""Domain exceptions and handlers that include request_id in responses."""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.lovgol.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    """Malformed or missing input detected after schema parsing."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(AppError):
    """Uniqueness violation, e.g. a duplicate slug."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class InternalError(AppError):
    """Persistence or unexpected failure. The detail is never client-specific."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"


def error_response(status_code: int, detail: Any) -> JSONResponse:
    """Error body shared by every handler: ``{"detail", "request_id"}``."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": correlation_id.get()},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, InternalError):
            # Internal details go to the log only.
            logger.error("Internal error", path=request.url.path, error=exc.detail)
            return error_response(exc.status_code, InternalError.default_detail)
        return error_response(exc.status_code, exc.detail)

    # Covers FastAPI's HTTPException subclass and routing 404/405s.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = error_response(exc.status_code, exc.detail)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", exc_info=exc, path=request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
