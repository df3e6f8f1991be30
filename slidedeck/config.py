"""Runtime configuration for slidedeck.

Values come from environment variables (see ``slidedeck.config_docs``) with a
test-mode override so each test can point the output directory at a
temporary location.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from slidedeck.config_docs import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIRNAME,
    DEFAULT_PORT_BASE,
    DEFAULT_PORT_MAX,
)


class Config:
    """Environment-backed configuration with a test-mode override."""

    _test_output_dir: Optional[Path] = None

    @classmethod
    def set_test_mode(cls, output_dir: Path) -> None:
        cls._test_output_dir = Path(output_dir)
        os.environ["SLIDEDECK_TEST_MODE"] = "1"

    @classmethod
    def clear_test_mode(cls) -> None:
        cls._test_output_dir = None
        os.environ.pop("SLIDEDECK_TEST_MODE", None)

    @classmethod
    def is_test_mode(cls) -> bool:
        return cls._test_output_dir is not None

    @classmethod
    def set_output_dir(cls, output_dir: Path) -> None:
        os.environ["SLIDEDECK_OUTPUT_DIR"] = str(output_dir)

    @classmethod
    def set_host(cls, host: str) -> None:
        os.environ["SLIDEDECK_HOST"] = host

    @classmethod
    def set_log_level(cls, level: str) -> None:
        os.environ["SLIDEDECK_LOG_LEVEL"] = level.upper()

    @classmethod
    def get_output_dir(cls) -> Path:
        """Directory finished presentations are written to and served from."""
        if cls._test_output_dir is not None:
            return cls._test_output_dir
        configured = os.environ.get("SLIDEDECK_OUTPUT_DIR")
        if configured:
            return Path(configured)
        return Path(tempfile.gettempdir()) / DEFAULT_OUTPUT_DIRNAME

    @classmethod
    def get_host(cls) -> str:
        return os.environ.get("SLIDEDECK_HOST", DEFAULT_HOST)

    @classmethod
    def get_port_base(cls) -> int:
        return int(os.environ.get("SLIDEDECK_PORT_BASE", DEFAULT_PORT_BASE))

    @classmethod
    def get_port_max(cls) -> int:
        return int(os.environ.get("SLIDEDECK_PORT_MAX", DEFAULT_PORT_MAX))

    @classmethod
    def get_log_level(cls) -> str:
        return os.environ.get("SLIDEDECK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    @classmethod
    def get_log_level_value(cls) -> int:
        return logging.getLevelName(cls.get_log_level())
