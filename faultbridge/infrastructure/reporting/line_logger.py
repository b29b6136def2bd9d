"""
Adapter: Error log backed by the standard logging module.

Implements LineLogger. Every line goes to the ``faultbridge.errors``
logger; when a log path is configured the lines are also appended to
that file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from faultbridge.domain.reporting.ports import LineLogger
from faultbridge.shared.logging import ERROR_LOG_NAME, LOG_DATE_FORMAT, LOG_FORMAT


class LoggingLineLogger(LineLogger):
    """Writes error lines through a stdlib logger.

    Args:
        log_path: Optional file to append error lines to.
        level: Level every line is logged at.
        name: Name of the logger to write to.
    """

    def __init__(
        self,
        log_path: Optional[Union[str, Path]] = None,
        level: int = logging.ERROR,
        name: str = ERROR_LOG_NAME,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._level = level
        self._file_handler: Optional[logging.FileHandler] = None
        if log_path is not None:
            self._attach_file(Path(log_path))

    def _attach_file(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler) and Path(
                handler.baseFilename
            ) == path.resolve():
                self._file_handler = handler
                return
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler

    def line(self, text: str) -> None:
        """Append one line to the error log."""
        self._logger.log(self._level, text)

    def close(self) -> None:
        """Detach and close the file handler, if any."""
        if self._file_handler is None:
            return
        self._logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None
