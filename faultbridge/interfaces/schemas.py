"""
Pydantic schemas for API responses.

Define the contract of the health endpoint and of error bodies.
No reporting logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint.

    Attributes:
        status: Always "ok" when the app answers.
        version: Application version.
        error_handler_installed: Whether the runtime hooks are active.
        error_reporting: The active reporting mask.
    """

    status: str
    version: str
    error_handler_installed: bool
    error_reporting: int


class ErrorResponse(BaseModel):
    """Body of a 500 response rendered from the fatal error screen."""

    error: str
    detail: Optional[str] = None
    type: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    documentation_url: Optional[str] = None
