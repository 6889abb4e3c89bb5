"""structlog setup and request-scoped log context.

Every log line carries whatever is bound through contextvars: the request id
from the correlation middleware and, on admin routes, the admin identity.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Third-party loggers that are chatty at INFO.
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "alembic.runtime.migration")


def _renderer(debug: bool) -> structlog.typing.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders coloured console lines; otherwise one JSON object per line.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Attach the correlation id, when there is one, to later log calls."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_admin_context(admin_id: UUID, username: str | None = None) -> None:
    """Attach the authenticated admin to later log calls."""
    context = {"admin_id": str(admin_id)}
    if username:
        context["admin_username"] = username
    bind_contextvars(**context)


def clear_request_context() -> None:
    clear_contextvars()
