"""Console logger writing structured lines to stderr.

stdout carries the MCP stdio stream, so nothing here may ever write to it.
"""

import logging
import sys
from typing import Any, Optional

from .interface import Logger

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _render(message: str, kwargs: dict) -> str:
    if not kwargs:
        return message
    context = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
    return f"{message} | {context}"


class ConsoleLogger(Logger):
    """Logger backed by the standard ``logging`` module.

    Args:
        name: Name of the underlying ``logging.Logger``
        level: Minimum level to emit
        stream: Output stream (defaults to stderr)
    """

    def __init__(
        self,
        name: str = "slidedeck",
        level: int = logging.INFO,
        stream: Optional[Any] = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(_render(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(_render(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(_render(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(_render(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(_render(message, kwargs))
