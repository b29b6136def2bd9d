"""
Tests for the DefaultHandler driver.

Collaborators are mocks; each test flips one runtime switch and checks
which of render / log / fatal screen happened.
"""

from faultbridge.application.reporting.default_handler import (
    DEFAULT_IGNORED_MESSAGES,
    ERROR_VIEW,
    DefaultHandler,
)
from faultbridge.domain.reporting.entities import (
    ErrorReport,
    FatalErrorDetails,
    LastError,
    Severity,
)
from faultbridge.domain.reporting.errors import DocumentedError


class TeapotError(DocumentedError):
    documentation_url = "https://docs.example.com/errors/teapot"


def _raised(exc: BaseException) -> BaseException:
    """Return exc with a real traceback attached."""
    try:
        raise exc
    except BaseException as caught:
        return caught


class TestRuntimeError:
    """Tests for DefaultHandler.error."""

    def test_renders_and_logs(self, handler, renderer, line_logger) -> None:
        """A reportable error is rendered with its label and logged once."""
        handler.error(Severity.WARNING, "disk almost full", "/srv/app.py", 40)

        renderer.render_error_view.assert_called_once_with(
            ERROR_VIEW,
            ErrorReport(
                code=Severity.WARNING,
                message="disk almost full",
                file="/srv/app.py",
                line=40,
                severity="Warning",
            ),
            True,
        )
        line_logger.line.assert_called_once_with("disk almost full (/srv/app.py:40)")

    def test_unknown_code_is_labelled_unknown(self, handler, renderer) -> None:
        handler.error(12345, "odd", "f.py", 1)
        report = renderer.render_error_view.call_args.args[1]
        assert report.severity == "Unknown"

    def test_ignored_message_is_silent(self, handler, renderer, line_logger) -> None:
        """Benign messages produce neither render nor log."""
        for message in DEFAULT_IGNORED_MESSAGES:
            handler.error(Severity.DEPRECATED, message, "lib.py", 3)

        renderer.render_error_view.assert_not_called()
        line_logger.line.assert_not_called()

    def test_ignored_match_is_exact(self, handler, line_logger) -> None:
        """A message merely containing a benign string is still reported."""
        message = next(iter(DEFAULT_IGNORED_MESSAGES)) + " (again)"
        handler.error(Severity.DEPRECATED, message, "lib.py", 3)
        line_logger.line.assert_called_once()

    def test_extra_ignored_messages(self, line_logger, renderer, state) -> None:
        handler = DefaultHandler(line_logger, renderer, state, ["noisy"])
        handler.error(Severity.NOTICE, "noisy", "a.py", 1)

        renderer.render_error_view.assert_not_called()
        line_logger.line.assert_not_called()
        assert DEFAULT_IGNORED_MESSAGES <= handler.ignored_messages

    def test_strict_is_silent(self, handler, renderer, line_logger) -> None:
        """The non-actionable notice level is never rendered or logged."""
        handler.error(Severity.STRICT, "should be static", "a.py", 9)

        renderer.render_error_view.assert_not_called()
        line_logger.line.assert_not_called()

    def test_display_disabled_skips_render(self, handler, renderer, line_logger, state) -> None:
        state.display = False
        for code in (Severity.ERROR, Severity.WARNING, Severity.NOTICE):
            handler.error(code, "m", "f.py", 1)

        renderer.render_error_view.assert_not_called()
        assert line_logger.line.call_count == 3

    def test_zero_mask_skips_render(self, handler, renderer, line_logger, state) -> None:
        state.mask = 0
        handler.error(Severity.WARNING, "m", "f.py", 1)

        renderer.render_error_view.assert_not_called()
        line_logger.line.assert_called_once()

    def test_zero_threshold_skips_log(self, handler, renderer, line_logger, state) -> None:
        state.threshold = 0
        handler.error(Severity.WARNING, "m", "f.py", 1)

        renderer.render_error_view.assert_called_once()
        line_logger.line.assert_not_called()


class TestUncaughtException:
    """Tests for DefaultHandler.exception."""

    def test_always_logs(self, handler, line_logger, renderer) -> None:
        exc = _raised(ValueError("bad input"))
        handler.exception(exc, halt=False)

        line_logger.line.assert_called_once()
        text = line_logger.line.call_args.args[0]
        assert text.startswith("Uncaught ValueError Exception: code 0; file: ")
        assert text.endswith(f"{__file__}, line {exc.__traceback__.tb_lineno}")
        renderer.show_fatal_error_screen.assert_not_called()

    def test_halt_shows_fatal_screen(self, handler, line_logger, renderer) -> None:
        exc = _raised(KeyError("user_id"))
        handler.exception(exc, halt=True)

        renderer.show_fatal_error_screen.assert_called_once()
        subject, message, details = renderer.show_fatal_error_screen.call_args.args
        assert subject == str(exc)
        assert message == line_logger.line.call_args.args[0]
        assert details.type == "KeyError"
        assert details.file == __file__
        assert details.line > 0
        assert details.url is None

    def test_halt_is_default(self, handler, renderer) -> None:
        handler.exception(_raised(RuntimeError("x")))
        renderer.show_fatal_error_screen.assert_called_once()

    def test_documented_error_fields(self, handler, renderer) -> None:
        handler.exception(_raised(TeapotError("short and stout", code=418)))

        details = renderer.show_fatal_error_screen.call_args.args[2]
        assert details.code == 418
        assert details.type.endswith("TeapotError")
        assert details.url == "https://docs.example.com/errors/teapot"

    def test_errno_used_as_code(self, handler, renderer) -> None:
        handler.exception(_raised(FileNotFoundError(2, "No such file")))
        assert renderer.show_fatal_error_screen.call_args.args[2].code == 2

    def test_without_traceback(self, handler, line_logger) -> None:
        handler.exception(ValueError("never raised"), halt=False)
        assert line_logger.line.call_args.args[0] == (
            "Uncaught ValueError Exception: code 0; file: unknown, line 0"
        )

    def test_logs_even_when_threshold_zero(self, handler, line_logger, state) -> None:
        state.threshold = 0
        handler.exception(_raised(ValueError()), halt=False)
        line_logger.line.assert_called_once()


class TestFatalOnShutdown:
    """Tests for DefaultHandler.fatal."""

    def test_fatal_last_error_shows_screen_once(self, handler, renderer, state) -> None:
        state.last = LastError(
            kind=Severity.ERROR, message="out of memory", file="/srv/worker.py", line=88
        )
        handler.fatal()

        renderer.show_fatal_error_screen.assert_called_once_with(
            "Fatal Error",
            "out of memory in /srv/worker.py on line 88",
            FatalErrorDetails(
                type="Fatal Error",
                code=Severity.ERROR,
                message="out of memory",
                file="/srv/worker.py",
                line=88,
            ),
        )

    def test_no_last_error(self, handler, renderer) -> None:
        handler.fatal()
        renderer.show_fatal_error_screen.assert_not_called()

    def test_non_fatal_kind(self, handler, renderer, state) -> None:
        state.last = LastError(kind=Severity.USER_ERROR, message="m", file="f", line=1)
        handler.fatal()
        renderer.show_fatal_error_screen.assert_not_called()

    def test_does_not_log(self, handler, line_logger, state) -> None:
        state.last = LastError(kind=Severity.ERROR, message="m", file="f", line=1)
        handler.fatal()
        line_logger.line.assert_not_called()
