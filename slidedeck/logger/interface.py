"""Logger interface.

Every component takes a ``Logger`` so tests and embedders can swap in their
own implementation. Messages are short sentences; context goes in keyword
arguments rather than being formatted into the message.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger contract used throughout slidedeck."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an informational message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical failure."""
