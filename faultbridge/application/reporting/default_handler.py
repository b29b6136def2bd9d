"""
Default error handler driver.

Filters known-benign diagnostics, classifies runtime errors by
severity, and delegates display to the renderer and persistence to
the line logger. Holds no state of its own.
"""

import logging
import traceback
from typing import Iterable, Optional

from faultbridge.domain.reporting.entities import (
    ErrorReport,
    FatalErrorDetails,
    Severity,
    severity_label,
)
from faultbridge.domain.reporting.errors import DocumentedError
from faultbridge.domain.reporting.ports import (
    ErrorHandlerDriver,
    ErrorRenderer,
    LineLogger,
    RuntimeState,
)

logger = logging.getLogger(__name__)

ERROR_VIEW = "runtime"
FATAL_SUBJECT = "Fatal Error"
UNKNOWN_FILE = "unknown"

# Emitted by the interpreter and third-party libraries; nothing to fix on our side.
DEFAULT_IGNORED_MESSAGES: frozenset[str] = frozenset(
    {
        "datetime.datetime.utcnow() is deprecated and scheduled for removal in a "
        "future version. Use timezone-aware objects to represent datetimes in "
        "UTC: datetime.datetime.now(datetime.UTC).",
        "'asyncio.iscoroutinefunction' is deprecated and slated for removal in "
        "Python 3.16; use inspect.iscoroutinefunction() instead",
    }
)


def _qualified_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _exception_code(exc: BaseException) -> int:
    for attr in ("code", "errno"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0


def _exception_origin(exc: BaseException) -> tuple[str, int]:
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return UNKNOWN_FILE, 0
    innermost = frames[-1]
    return innermost.filename, innermost.lineno or 0


class DefaultHandler(ErrorHandlerDriver):
    """Filter, classify, delegate.

    Args:
        logger: Receives one line per logged failure.
        renderer: Shows runtime error views and the fatal screen.
        state: Display flag, reporting mask, log threshold, last error.
        ignored_messages: Extra exact-match messages never reported.
    """

    def __init__(
        self,
        logger: LineLogger,
        renderer: ErrorRenderer,
        state: RuntimeState,
        ignored_messages: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(
            logger,
            renderer,
            state,
            DEFAULT_IGNORED_MESSAGES | frozenset(ignored_messages or ()),
        )

    def init(self) -> None:
        logger.debug("Default error handler initialised")

    def error(self, code: int, message: str, file: str, line: int) -> None:
        """Report a runtime error or warning.

        STRICT notices and ignored messages are dropped. The report is
        rendered only when errors are displayed and the reporting mask is
        non-zero, and logged whenever the log threshold is non-zero.

        Args:
            code: Severity code of the error.
            message: The error message.
            file: File where the error occurred.
            line: Line number where the error occurred.
        """
        # Don't clog the logs up with strict notices
        if code == Severity.STRICT:
            return

        if message in self._ignored:
            return

        report = ErrorReport(
            code=code,
            message=message,
            file=file,
            line=line,
            severity=severity_label(code),
        )

        if self._state.display_errors() and self._state.error_reporting() != 0:
            self._renderer.render_error_view(ERROR_VIEW, report, True)

        if self._state.log_threshold() != 0:
            self._logger.line(report.summary())

    def exception(self, exc: BaseException, halt: bool = True) -> None:
        """Report an uncaught exception.

        Always logged. The fatal screen is shown only when halting.

        Args:
            exc: The uncaught exception.
            halt: Show the fatal screen; the caller stops normal flow.
        """
        file, line = _exception_origin(exc)
        details = FatalErrorDetails(
            type=_qualified_name(exc),
            code=_exception_code(exc),
            message=str(exc),
            file=file,
            line=line,
            url=exc.get_documentation_url() if isinstance(exc, DocumentedError) else None,
        )

        message = (
            f"Uncaught {details.type} Exception: code {details.code}; "
            f"file: {details.file}, line {details.line}"
        )
        self._logger.line(message)

        if halt:
            self._renderer.show_fatal_error_screen(details.message, message, details)

    def fatal(self) -> None:
        """Show the fatal screen if the last runtime error was fatal."""
        last = self._state.last_error()
        if last is None or last.kind != Severity.ERROR:
            return

        self._renderer.show_fatal_error_screen(
            FATAL_SUBJECT,
            f"{last.message} in {last.file} on line {last.line}",
            FatalErrorDetails(
                type=FATAL_SUBJECT,
                code=last.kind,
                message=last.message,
                file=last.file,
                line=last.line,
            ),
        )
