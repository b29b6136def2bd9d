"""
Domain entities for the reporting bounded context.

Severity codes are bit flags so that a reporting mask can be expressed
as their union. Report values are transient: built per notification,
handed once to a renderer or logger, then discarded.
No framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

UNKNOWN_SEVERITY = "Unknown"


class Severity(IntEnum):
    """Runtime error severity codes."""

    ERROR = 1
    WARNING = 2
    PARSE = 4
    NOTICE = 8
    CORE_ERROR = 16
    CORE_WARNING = 32
    COMPILE_ERROR = 64
    COMPILE_WARNING = 128
    USER_ERROR = 256
    USER_WARNING = 512
    USER_NOTICE = 1024
    STRICT = 2048
    RECOVERABLE_ERROR = 4096
    DEPRECATED = 8192
    USER_DEPRECATED = 16384


ALL_SEVERITIES = sum(Severity)

SEVERITY_LABELS: dict[int, str] = {
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
    Severity.PARSE: "Parsing Error",
    Severity.NOTICE: "Notice",
    Severity.CORE_ERROR: "Core Error",
    Severity.CORE_WARNING: "Core Warning",
    Severity.COMPILE_ERROR: "Compile Error",
    Severity.COMPILE_WARNING: "Compile Warning",
    Severity.USER_ERROR: "User Error",
    Severity.USER_WARNING: "User Warning",
    Severity.USER_NOTICE: "User Notice",
    Severity.STRICT: "Runtime Notice",
    Severity.RECOVERABLE_ERROR: "Recoverable Error",
    Severity.DEPRECATED: "Deprecated",
    Severity.USER_DEPRECATED: "User Deprecated",
}

# Looked up along the category MRO, so subclasses inherit their parent's code.
WARNING_SEVERITIES: dict[type[Warning], Severity] = {
    DeprecationWarning: Severity.DEPRECATED,
    PendingDeprecationWarning: Severity.STRICT,
    FutureWarning: Severity.USER_DEPRECATED,
    ImportWarning: Severity.STRICT,
    SyntaxWarning: Severity.COMPILE_WARNING,
    ResourceWarning: Severity.NOTICE,
    BytesWarning: Severity.NOTICE,
    UserWarning: Severity.USER_WARNING,
    RuntimeWarning: Severity.WARNING,
    Warning: Severity.WARNING,
}


def severity_label(code: int) -> str:
    """Return the human-readable label for a severity code."""
    return SEVERITY_LABELS.get(code, UNKNOWN_SEVERITY)


def severity_for_warning(category: type[Warning]) -> Severity:
    """Map a Python warning category onto a severity code.

    Args:
        category: The warning class passed to ``warnings.showwarning``.

    Returns:
        The severity of the closest mapped ancestor, WARNING otherwise.
    """
    for cls in getattr(category, "__mro__", ()):
        if cls in WARNING_SEVERITIES:
            return WARNING_SEVERITIES[cls]
    return Severity.WARNING


@dataclass(frozen=True)
class ErrorReport:
    """A single runtime error, as shown in the error view."""

    code: int
    message: str
    file: str
    line: int
    severity: str = UNKNOWN_SEVERITY

    def summary(self) -> str:
        """One-line form written to the error log."""
        return f"{self.message} ({self.file}:{self.line})"


@dataclass(frozen=True)
class FatalErrorDetails:
    """Details shown on the fatal error screen."""

    type: str
    code: int
    message: str
    file: str
    line: int
    url: Optional[str] = None


@dataclass(frozen=True)
class LastError:
    """The most recent runtime error captured by the host runtime."""

    kind: int
    message: str
    file: str
    line: int
