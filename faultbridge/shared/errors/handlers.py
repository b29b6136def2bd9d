"""
Centralized error handlers for FastAPI.

Uncaught request exceptions are reported through the error handler
driver with halting requested: the failure is logged, the fatal
screen is rendered into a request-scoped renderer, and that screen
becomes the 500 response. No stack traces are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from faultbridge.application.reporting.service import ErrorHandlerService
from faultbridge.infrastructure.reporting.renderers import ResponseErrorRenderer
from faultbridge.interfaces.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_500 = 500
INTERNAL_ERROR = "Internal server error"


def _error_response(status_code: int, body: dict | None) -> JSONResponse:
    """Build a consistent JSON error response."""
    payload = ErrorResponse(**(body or {"error": INTERNAL_ERROR}))
    return JSONResponse(
        status_code=status_code, content=payload.model_dump(exclude_none=True)
    )


def register_error_handlers(
    app: FastAPI, service: ErrorHandlerService, debug: bool = False
) -> None:
    """Register the catch-all error handler on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        service: Provides the driver that reports the failure.
        debug: Expose failure details in the response body.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Report the failure and answer with its fatal screen."""
        renderer = ResponseErrorRenderer(debug=debug)
        service.scoped(renderer).exception(exc, halt=True)
        logger.debug("Rendered fatal screen for %s", type(exc).__name__)
        return _error_response(HTTP_500, renderer.fatal)
