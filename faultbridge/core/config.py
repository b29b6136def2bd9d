"""
Application configuration.

Loads settings from environment variables and .env file.
All error reporting switches are centralized here.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from faultbridge.domain.reporting.entities import ALL_SEVERITIES


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Exposes failure details in responses.
        log_level: Root logging level (DEBUG, INFO, WARNING, ERROR).
        display_errors: Render runtime errors to the console.
        error_reporting: Initial reporting mask. Zero silences display.
        log_threshold: Zero disables the error log for runtime errors.
        log_path: Optional file the error log is appended to.
        error_handler_driver: Name of the registered driver to use.
        ignored_messages: Extra exact-match messages never reported.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "faultbridge"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    display_errors: bool = False
    error_reporting: int = Field(default=ALL_SEVERITIES, ge=0)
    log_threshold: int = Field(default=1, ge=0)
    log_path: Optional[str] = None
    error_handler_driver: str = "default"
    ignored_messages: list[str] = Field(default_factory=list)


settings = Settings()
