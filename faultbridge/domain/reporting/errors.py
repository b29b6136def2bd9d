"""
Domain-specific errors for the reporting bounded context.

Application code may raise DocumentedError subclasses so that the
fatal error screen can point at a documentation page.
No framework imports allowed.
"""

from typing import Optional


class DocumentedError(Exception):
    """Base error carrying a numeric code and a documentation link."""

    documentation_url: Optional[str] = None

    def __init__(self, message: str = "", code: int = 0) -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def get_documentation_url(self) -> Optional[str]:
        """Return the documentation page for this error, if any."""
        return self.documentation_url


class UnknownDriverError(DocumentedError):
    """Raised when the configured error handler driver is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown error handler driver: {name}")
        self.name = name
