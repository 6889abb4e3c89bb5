"""Security headers middleware (Helmet-style)."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Session endpoints and token-gated client pages must never be cached.
NO_STORE_PATHS = frozenset({"/api/login", "/api/logout", "/api/auth/status"})
NO_STORE_PREFIXES = ("/api/client-project/",)

# CSP that lets Swagger UI load from the CDN during development
DEVELOPMENT_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "img-src 'self' data: cdn.jsdelivr.net; "
    "frame-ancestors 'none'"
)

BASE_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-Permitted-Cross-Domain-Policies": "none",
}


def is_no_store_path(path: str) -> bool:
    return path in NO_STORE_PATHS or path.startswith(NO_STORE_PREFIXES)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds a fixed set of security headers to every response.

    Args:
        content_security_policy: CSP value; None selects the development CSP,
            an empty string omits the header.
        extra_headers: Additional or overriding headers.
    """

    def __init__(
        self,
        app: ASGIApp,
        content_security_policy: str | None = None,
        extra_headers: dict[str, str] | None = None,
    ):
        super().__init__(app)
        self.headers = dict(BASE_HEADERS)
        csp = DEVELOPMENT_CSP if content_security_policy is None else content_security_policy
        if csp:
            self.headers["Content-Security-Policy"] = csp
        if extra_headers:
            self.headers.update(extra_headers)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.headers)

        if is_no_store_path(request.url.path):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"

        return response
