from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.lovgol.api.middlewares import setup_middlewares
from src.lovgol.api.routes.router import api_router
from src.lovgol.core.config import get_settings
from src.lovgol.core.db import dispose_engine
from src.lovgol.core.exceptions import setup_exception_handlers
from src.lovgol.core.health import setup_health_endpoint, setup_metrics
from src.lovgol.core.logging import get_logger, setup_logging
from src.lovgol.core.redis import close_redis
from src.lovgol.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    grace_period = settings.shutdown_grace_period
    logger.info("Shutdown initiated", in_flight=request_tracker.in_flight_count)
    await request_tracker.start_shutdown()
    if not await request_tracker.wait_for_drain(timeout=grace_period):
        logger.warning(
            "Shutdown grace period expired",
            grace_period=grace_period,
            in_flight=request_tracker.in_flight_count,
        )

    await close_redis()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Admin login and session status"},
    {"name": "projects", "description": "Client project tracking (admin)"},
    {"name": "client", "description": "Token-gated project status for clients"},
    {"name": "service-previews", "description": "Service catalogue"},
    {"name": "blog", "description": "Blog posts and reactions"},
    {"name": "case-studies", "description": "Portfolio case studies"},
    {"name": "submissions", "description": "Contact and inquiry forms"},
    {"name": "health", "description": "Liveness and dependency checks"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Agency website content and client project tracking",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    app.include_router(api_router)
    setup_metrics(app)
    setup_health_endpoint(app)

    return app


app = create_app()
