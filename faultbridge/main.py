"""
Application entry point.

Creates the FastAPI application and wires together:
- Logging configuration
- The error handler service (runtime hooks + shutdown check)
- Error handlers (uncaught request exceptions)
- Routers

No reporting logic belongs here.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from faultbridge.application.reporting.service import ErrorHandlerService
from faultbridge.core.config import Settings, settings as default_settings
from faultbridge.interfaces.dependencies import build_error_handler_service
from faultbridge.interfaces.health import router as health_router
from faultbridge.shared.errors.handlers import register_error_handlers
from faultbridge.shared.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Install runtime hooks on startup; run the fatal check on shutdown."""
    service: ErrorHandlerService = app.state.error_handler
    service.install()

    yield

    # Uninstalling unregisters atexit, so the check runs exactly once.
    service.handle_shutdown()
    service.uninstall()


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[ErrorHandlerService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Overrides the environment-loaded settings.
        service: Overrides the error handler built from settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings

    # --- Error Handling ---
    app.state.error_handler = service or build_error_handler_service(settings)
    register_error_handlers(app, app.state.error_handler, debug=settings.debug)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
