"""
Adapter: Runtime error state backed by application settings.

Implements RuntimeState. Display flag and log threshold come from
settings; the reporting mask starts from settings and can be changed
at runtime; the last error is kept in memory.
"""

import threading
from typing import Optional

from faultbridge.core.config import Settings
from faultbridge.domain.reporting.entities import LastError
from faultbridge.domain.reporting.ports import RuntimeState


class SettingsRuntimeState(RuntimeState):
    """RuntimeState over a Settings instance."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._error_reporting = settings.error_reporting
        self._last_error: Optional[LastError] = None
        self._lock = threading.Lock()

    def display_errors(self) -> bool:
        return self._settings.display_errors

    def error_reporting(self) -> int:
        return self._error_reporting

    def log_threshold(self) -> int:
        return self._settings.log_threshold

    def last_error(self) -> Optional[LastError]:
        return self._last_error

    def record_error(self, error: LastError) -> None:
        with self._lock:
            self._last_error = error

    def set_error_reporting(self, mask: int) -> int:
        with self._lock:
            previous = self._error_reporting
            self._error_reporting = mask
        return previous
