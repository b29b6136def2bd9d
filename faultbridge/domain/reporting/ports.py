"""
Port interfaces (ABCs) for the reporting bounded context.

Ports define the contracts the error handler needs from the host
framework. Infrastructure adapters implement these interfaces.
The driver never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from faultbridge.domain.reporting.entities import (
    ErrorReport,
    FatalErrorDetails,
    LastError,
)


class LineLogger(ABC):
    """Port for appending a line to the error log."""

    @abstractmethod
    def line(self, text: str) -> None:
        """Append one line to the log."""
        raise NotImplementedError


class ErrorRenderer(ABC):
    """Port for showing diagnostics to the user."""

    @abstractmethod
    def render_error_view(
        self, view: str, report: ErrorReport, flush_buffer: bool = True
    ) -> None:
        """Render a non-fatal runtime error.

        Args:
            view: Name of the error view to render.
            report: The runtime error being shown.
            flush_buffer: Flush pending output once the view is written.
        """
        raise NotImplementedError

    @abstractmethod
    def show_fatal_error_screen(
        self, subject: str, message: str, details: FatalErrorDetails
    ) -> None:
        """Render the terminal diagnostic screen.

        Args:
            subject: Short headline for the screen.
            message: One-line description of the failure.
            details: Structured fields of the failure.
        """
        raise NotImplementedError


class RuntimeState(ABC):
    """Port for introspecting the host runtime's error configuration."""

    @abstractmethod
    def display_errors(self) -> bool:
        """Whether runtime errors should be rendered."""
        raise NotImplementedError

    @abstractmethod
    def error_reporting(self) -> int:
        """The active reporting mask. Zero means reporting is silenced."""
        raise NotImplementedError

    @abstractmethod
    def log_threshold(self) -> int:
        """The configured log threshold. Zero disables error logging."""
        raise NotImplementedError

    @abstractmethod
    def last_error(self) -> Optional[LastError]:
        """The most recent runtime error, or None."""
        raise NotImplementedError

    @abstractmethod
    def record_error(self, error: LastError) -> None:
        """Remember a runtime error as the most recent one."""
        raise NotImplementedError

    @abstractmethod
    def set_error_reporting(self, mask: int) -> int:
        """Replace the reporting mask and return the previous one."""
        raise NotImplementedError


class ErrorHandlerDriver(ABC):
    """Strategy seam for the policy applied to runtime failures.

    Implementations must not raise on their own account; failures of
    the injected collaborators are left to propagate.

    Args:
        logger: Receives one line per logged failure.
        renderer: Shows runtime error views and the fatal screen.
        state: Display flag, reporting mask, log threshold, last error.
        ignored_messages: Exact-match messages never reported.
    """

    def __init__(
        self,
        logger: LineLogger,
        renderer: ErrorRenderer,
        state: RuntimeState,
        ignored_messages: Optional[Iterable[str]] = None,
    ) -> None:
        self._logger = logger
        self._renderer = renderer
        self._state = state
        self._ignored = frozenset(ignored_messages or ())

    @property
    def ignored_messages(self) -> frozenset[str]:
        return self._ignored

    @abstractmethod
    def init(self) -> None:
        """Called once when the driver is installed on the runtime."""
        raise NotImplementedError

    @abstractmethod
    def error(self, code: int, message: str, file: str, line: int) -> None:
        """Report a runtime error or warning."""
        raise NotImplementedError

    @abstractmethod
    def exception(self, exc: BaseException, halt: bool = True) -> None:
        """Report an uncaught exception."""
        raise NotImplementedError

    @abstractmethod
    def fatal(self) -> None:
        """Report a fatal runtime error captured before shutdown."""
        raise NotImplementedError
