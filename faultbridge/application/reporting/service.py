"""
Error handler service.

Owns the reporting collaborators, builds the configured driver, and
installs it on the interpreter hooks:

- warnings.showwarning  -> driver.error
- sys.excepthook        -> driver.exception (halting)
- threading.excepthook  -> driver.exception (not halting)
- atexit                -> driver.fatal

Failures raised while a hook is already reporting are passed to the
interpreter's original hook instead of recursing.
"""

import atexit
import logging
import sys
import threading
import warnings
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from faultbridge.application.reporting.default_handler import DefaultHandler
from faultbridge.domain.reporting.entities import (
    SEVERITY_LABELS,
    LastError,
    Severity,
    severity_for_warning,
)
from faultbridge.domain.reporting.errors import UnknownDriverError
from faultbridge.domain.reporting.ports import (
    ErrorHandlerDriver,
    ErrorRenderer,
    LineLogger,
    RuntimeState,
)

logger = logging.getLogger(__name__)

_ORIGINAL_SHOWWARNING = warnings.showwarning


class ErrorHandlerService:
    """Wires an error handler driver to the host runtime.

    Args:
        state: Runtime error configuration and last error.
        logger: Line logger handed to the driver.
        renderer: Renderer handed to the driver.
        driver: Registered driver name.
        ignored_messages: Extra exact-match messages never reported.

    Raises:
        UnknownDriverError: If ``driver`` is not registered.
    """

    LEVELS = SEVERITY_LABELS
    DRIVERS: dict[str, type[ErrorHandlerDriver]] = {"default": DefaultHandler}

    def __init__(
        self,
        state: RuntimeState,
        logger: LineLogger,
        renderer: ErrorRenderer,
        driver: str = "default",
        ignored_messages: Optional[Iterable[str]] = None,
    ) -> None:
        if driver not in self.DRIVERS:
            raise UnknownDriverError(driver)

        self._state = state
        self._logger = logger
        self._renderer = renderer
        self._driver_cls = self.DRIVERS[driver]
        self._ignored = tuple(ignored_messages or ())
        self._driver = self.scoped(renderer)

        self._installed = False
        self._previous_showwarning = None
        self._previous_excepthook = None
        self._previous_threading_excepthook = None
        self._local = threading.local()

    @property
    def driver(self) -> ErrorHandlerDriver:
        return self._driver

    @property
    def state(self) -> RuntimeState:
        return self._state

    @property
    def installed(self) -> bool:
        return self._installed

    def scoped(self, renderer: ErrorRenderer) -> ErrorHandlerDriver:
        """Build a driver sharing this service's state and logger.

        Args:
            renderer: The renderer the new driver should use.

        Returns:
            A driver of the configured class.
        """
        return self._driver_cls(self._logger, renderer, self._state, self._ignored)

    # ------------------------------------------------------------------
    # Installation
    # ------------------------------------------------------------------

    def install(self) -> None:
        """Install the driver on the interpreter hooks. Idempotent."""
        if self._installed:
            return

        self._driver.init()

        self._previous_showwarning = warnings.showwarning
        self._previous_excepthook = sys.excepthook
        self._previous_threading_excepthook = threading.excepthook

        warnings.showwarning = self.handle_warning
        sys.excepthook = self.handle_exception
        threading.excepthook = self.handle_thread_exception
        atexit.register(self.handle_shutdown)

        self._installed = True
        logger.info("Error handler installed (driver=%s)", self._driver_cls.__name__)

    def uninstall(self) -> None:
        """Restore the hooks that were active before install()."""
        if not self._installed:
            return

        atexit.unregister(self.handle_shutdown)
        warnings.showwarning = self._previous_showwarning
        sys.excepthook = self._previous_excepthook
        threading.excepthook = self._previous_threading_excepthook

        self._previous_showwarning = None
        self._previous_excepthook = None
        self._previous_threading_excepthook = None
        self._installed = False
        logger.info("Error handler uninstalled")

    @contextmanager
    def _reporting(self, hook: str) -> Iterator[bool]:
        # Per thread, so concurrent worker failures are not mistaken for re-entry.
        active = getattr(self._local, "hooks", None)
        if active is None:
            active = self._local.hooks = set()
        if hook in active:
            yield False
            return
        active.add(hook)
        try:
            yield True
        finally:
            active.discard(hook)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def handle_warning(
        self, message, category, filename, lineno, file=None, line=None
    ) -> None:
        """``warnings.showwarning`` replacement."""
        with self._reporting("warning") as first:
            if not first:
                fallback = self._previous_showwarning or _ORIGINAL_SHOWWARNING
                fallback(message, category, filename, lineno, file, line)
                return
            code = severity_for_warning(category)
            self._report(code, str(message), filename, lineno)

    def trigger_error(
        self,
        message: str,
        code: int = Severity.USER_NOTICE,
        file: Optional[str] = None,
        line: Optional[int] = None,
        stacklevel: int = 1,
    ) -> None:
        """Report an application-raised runtime error.

        Args:
            message: The error message.
            code: Severity code. ``Severity.ERROR`` is not rendered now; it
                is kept as the last error and reported by the shutdown check.
            file: Source file. Defaults to the caller's file.
            line: Source line. Defaults to the caller's line.
            stacklevel: Which caller frame supplies the default location.
        """
        if file is None or line is None:
            frame = sys._getframe(stacklevel)
            file = frame.f_code.co_filename if file is None else file
            line = frame.f_lineno if line is None else line
        self._report(code, message, file, line)

    def _report(self, code: int, message: str, file: str, line: int) -> None:
        # A fatal last error stays recorded until the shutdown check reads it.
        last = self._state.last_error()
        if code == Severity.ERROR or last is None or last.kind != Severity.ERROR:
            self._state.record_error(
                LastError(kind=code, message=message, file=file, line=line)
            )

        if code == Severity.ERROR:
            logger.warning(
                "Fatal error recorded for shutdown: %s (%s:%s)", message, file, line
            )
            return
        self._driver.error(code, message, file, line)

    def handle_exception(self, exc_type, exc, tb) -> None:
        """``sys.excepthook`` replacement. The interpreter exits afterwards."""
        if issubclass(exc_type, (KeyboardInterrupt, SystemExit)):
            sys.__excepthook__(exc_type, exc, tb)
            return

        with self._reporting("exception") as first:
            if not first:
                sys.__excepthook__(exc_type, exc, tb)
                return
            if exc.__traceback__ is None and tb is not None:
                exc = exc.with_traceback(tb)
            self._driver.exception(exc, halt=True)

    def handle_thread_exception(self, args) -> None:
        """``threading.excepthook`` replacement. Never halts the process."""
        if args.exc_type is SystemExit:
            return

        with self._reporting("thread") as first:
            if not first:
                threading.__excepthook__(args)
                return
            exc = args.exc_value
            if exc is None:
                exc = args.exc_type()
            if exc.__traceback__ is None and args.exc_traceback is not None:
                exc = exc.with_traceback(args.exc_traceback)
            self._driver.exception(exc, halt=False)

    def handle_shutdown(self) -> None:
        """Shutdown check for a fatal last error."""
        self._driver.fatal()

    @contextmanager
    def silence(self) -> Iterator[None]:
        """Zero the reporting mask for the body of the block.

        Errors are still logged; they are just not rendered.
        """
        previous = self._state.set_error_reporting(0)
        try:
            yield
        finally:
            self._state.set_error_reporting(previous)
