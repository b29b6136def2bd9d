"""
Logging configuration for the application.

One format for the whole service, error log lines included.
Logging must not change program behavior, so handler failures are
not re-raised into the code that was reporting.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_LOG_NAME = "faultbridge.errors"


def configure_logging(level: str = "INFO", error_level: str = "ERROR") -> None:
    """Configure process-wide logging.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR).
        error_level: Level of the error log, independent of the root level.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.raiseExceptions = False

    logging.getLogger(ERROR_LOG_NAME).setLevel(
        getattr(logging, error_level.upper(), logging.ERROR)
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
