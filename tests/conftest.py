"""
Shared test fixtures.

Collaborators are mocks constrained to their port, and runtime state
is an in-memory fake whose switches each test can flip.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from faultbridge.application.reporting.default_handler import DefaultHandler
from faultbridge.application.reporting.service import ErrorHandlerService
from faultbridge.domain.reporting.entities import ALL_SEVERITIES, LastError
from faultbridge.domain.reporting.ports import ErrorRenderer, LineLogger, RuntimeState


class FakeRuntimeState(RuntimeState):
    """RuntimeState with plain attributes."""

    def __init__(self) -> None:
        self.display = True
        self.mask = ALL_SEVERITIES
        self.threshold = 1
        self.last: Optional[LastError] = None

    def display_errors(self) -> bool:
        return self.display

    def error_reporting(self) -> int:
        return self.mask

    def log_threshold(self) -> int:
        return self.threshold

    def last_error(self) -> Optional[LastError]:
        return self.last

    def record_error(self, error: LastError) -> None:
        self.last = error

    def set_error_reporting(self, mask: int) -> int:
        previous, self.mask = self.mask, mask
        return previous


@pytest.fixture
def line_logger() -> MagicMock:
    return MagicMock(spec=LineLogger)


@pytest.fixture
def renderer() -> MagicMock:
    return MagicMock(spec=ErrorRenderer)


@pytest.fixture
def state() -> FakeRuntimeState:
    return FakeRuntimeState()


@pytest.fixture
def handler(line_logger, renderer, state) -> DefaultHandler:
    return DefaultHandler(line_logger, renderer, state)


@pytest.fixture
def service(line_logger, renderer, state):
    """An ErrorHandlerService that is always uninstalled afterwards."""
    svc = ErrorHandlerService(state=state, logger=line_logger, renderer=renderer)
    yield svc
    svc.uninstall()
