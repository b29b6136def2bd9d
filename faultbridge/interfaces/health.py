"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports application version and whether error hooks are installed.
"""

from fastapi import APIRouter, Depends, Request

from faultbridge.application.reporting.service import ErrorHandlerService
from faultbridge.interfaces.dependencies import get_error_handler
from faultbridge.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and error handler state.",
)
def health_check(
    request: Request,
    error_handler: ErrorHandlerService = Depends(get_error_handler),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.state.settings.version,
        error_handler_installed=error_handler.installed,
        error_reporting=error_handler.state.error_reporting(),
    )
