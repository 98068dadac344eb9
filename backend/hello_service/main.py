"""hello-service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every response carries the CORS allow-all header when "*" is configured
    - Unknown paths and unknown methods both answer 404
    - Startup banner printed to stdout from the lifespan, before serving

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - redirect_slashes disabled: /health/ is an unknown path, not a redirect
    - docs_url, redoc_url and openapi_url disabled: only the three routes answer 200
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hello_service.api.cors import register_cors
from hello_service.api.error_handlers import register_error_handlers
from hello_service.api.routes import health, info, welcome
from hello_service.config import Settings, get_settings
from hello_service.core.banner import startup_banner
from hello_service.core.service_info import SERVICE_NAME, SERVICE_VERSION
from hello_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    for line in startup_banner(settings.host, settings.port):
        print(line, flush=True)
    logger.info(
        f"{SERVICE_NAME} {SERVICE_VERSION} started",
        extra={"host": settings.host, "port": settings.port},
    )
    yield
    logger.info(f"{SERVICE_NAME} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; CORS follows the given (or cached) settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    register_cors(app, settings.cors_origins)
    register_error_handlers(app)

    # Routes — explicit registration, order matches the startup banner
    app.include_router(welcome.router)
    app.include_router(health.router)
    app.include_router(info.router)
    return app


app = create_app()
