"""
Adapters: Error renderers.

Implement ErrorRenderer for the two places a failure can surface:
- ConsoleErrorRenderer writes plain text to a stream (stderr by default)
  for process-level hooks.
- ResponseErrorRenderer keeps the fatal screen of one HTTP request as
  a JSON-ready body.
"""

import sys
from typing import Any, Optional, TextIO

from faultbridge.domain.reporting.entities import ErrorReport, FatalErrorDetails
from faultbridge.domain.reporting.ports import ErrorRenderer

RULE = "-" * 60


class ConsoleErrorRenderer(ErrorRenderer):
    """Plain-text renderer.

    Args:
        stream: Where to write. Resolved to ``sys.stderr`` at call time
            when omitted, so redirected stderr is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def render_error_view(
        self, view: str, report: ErrorReport, flush_buffer: bool = True
    ) -> None:
        out = self.stream
        out.write(
            f"A {report.severity} was encountered ({view})\n"
            f"Severity:    {report.severity}\n"
            f"Message:     {report.message}\n"
            f"Filename:    {report.file}\n"
            f"Line Number: {report.line}\n"
        )
        if flush_buffer:
            out.flush()

    def show_fatal_error_screen(
        self, subject: str, message: str, details: FatalErrorDetails
    ) -> None:
        lines = [
            RULE,
            subject,
            RULE,
            message,
            "",
            f"Type: {details.type}",
            f"Code: {details.code}",
            f"File: {details.file}",
            f"Line: {details.line}",
        ]
        if details.url:
            lines.append(f"Documentation: {details.url}")
        lines.append(RULE)

        out = self.stream
        out.write("\n".join(lines) + "\n")
        out.flush()


class ResponseErrorRenderer(ErrorRenderer):
    """Request-scoped renderer producing a JSON error response.

    Internals (message, type, location) are only exposed in debug mode.

    Args:
        debug: Include failure details in the response body.
    """

    def __init__(self, debug: bool = False) -> None:
        self._debug = debug
        self.fatal: Optional[dict[str, Any]] = None

    def render_error_view(
        self, view: str, report: ErrorReport, flush_buffer: bool = True
    ) -> None:
        """Runtime error views go to the process renderer, not the response."""

    def show_fatal_error_screen(
        self, subject: str, message: str, details: FatalErrorDetails
    ) -> None:
        body: dict[str, Any] = {"error": subject if self._debug else "Internal server error"}
        if self._debug:
            body.update(
                detail=message,
                type=details.type,
                file=details.file,
                line=details.line,
            )
        if details.url:
            body["documentation_url"] = details.url
        self.fatal = body
