"""
Dependency injection for error reporting.

Wires the infrastructure adapters into the error handler service via
constructor injection. This is the composition root for reporting.
"""

from typing import Optional

from fastapi import Request

from faultbridge.application.reporting.service import ErrorHandlerService
from faultbridge.core.config import Settings
from faultbridge.domain.reporting.ports import ErrorRenderer, LineLogger
from faultbridge.infrastructure.reporting.line_logger import LoggingLineLogger
from faultbridge.infrastructure.reporting.renderers import ConsoleErrorRenderer
from faultbridge.infrastructure.reporting.runtime_state import SettingsRuntimeState


def build_error_handler_service(
    settings: Settings,
    logger: Optional[LineLogger] = None,
    renderer: Optional[ErrorRenderer] = None,
) -> ErrorHandlerService:
    """Build ErrorHandlerService with its infrastructure dependencies.

    Args:
        settings: Application settings.
        logger: Overrides the stdlib-backed line logger.
        renderer: Overrides the console renderer.
    """
    return ErrorHandlerService(
        state=SettingsRuntimeState(settings),
        logger=logger or LoggingLineLogger(log_path=settings.log_path),
        renderer=renderer or ConsoleErrorRenderer(),
        driver=settings.error_handler_driver,
        ignored_messages=settings.ignored_messages,
    )


def get_error_handler(request: Request) -> ErrorHandlerService:
    """Return the service attached to the running application."""
    return request.app.state.error_handler
