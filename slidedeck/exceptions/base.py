"""Base exception classes for slidedeck.

Every domain exception carries a machine-readable ``code``, a human-readable
``message`` and optional ``details``. Messages are written so an agent reading
them can correct its next call.
"""

from typing import Any, Dict, Optional


class SlideDeckError(Exception):
    """Base class for all slidedeck domain errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(SlideDeckError):
    """Input or state failed a business rule."""


class ResourceNotFoundError(SlideDeckError):
    """A referenced document, slide or file does not exist."""


class RenderError(SlideDeckError):
    """The rendering library rejected an operation or failed to write a file."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="RENDER_FAILED", message=message, details=details)


class ConfigurationError(SlideDeckError):
    """The process cannot start with the current configuration."""


class PortUnavailableError(ConfigurationError):
    """No free port was found for the file server."""

    def __init__(self, host: str, base: int, maximum: int) -> None:
        super().__init__(
            code="PORT_UNAVAILABLE",
            message=f"No free port available on {host} between {base} and {maximum}",
            details={"host": host, "base": base, "maximum": maximum},
        )
        self.host = host
        self.base = base
        self.maximum = maximum
