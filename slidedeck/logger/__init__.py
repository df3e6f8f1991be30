"""
Logger module for slidedeck

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from slidedeck.logger import Logger, ConsoleLogger

    # Use the shared console logger
    from slidedeck.logger import session_logger
    session_logger.info("Application started", port=8000)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .console_logger import ConsoleLogger
from .interface import Logger

# Shared logger instance for modules that just need basic console logging
session_logger: ConsoleLogger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "session_logger",
]
