"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a temporary output directory wired
into Config, a debug logger, and fresh renderer / registry / server
components per test.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from slidedeck.config import Config
from slidedeck.logger import ConsoleLogger
from slidedeck.mcp_server.components import ServerComponents, initialize_components
from slidedeck.rendering import DeckRenderer
from slidedeck.sessions import SessionRegistry


TEST_HOST = "localhost"
TEST_PORT = 8765


@pytest.fixture(autouse=True)
def test_data_dir(tmp_path):
    """
    Automatically provide a temporary output directory for each test

    This fixture:
    - Creates a unique temporary directory for each test
    - Configures slidedeck.config to use this directory
    - Clears test mode after the test completes
    """
    test_dir = tmp_path / "slidedeck_test_output"
    test_dir.mkdir(parents=True, exist_ok=True)

    Config.set_test_mode(test_dir)

    yield test_dir

    Config.clear_test_mode()


@pytest.fixture
def logger():
    """Console logger at DEBUG so failures come with context on stderr."""
    return ConsoleLogger(name="slidedeck.test", level=logging.DEBUG)


@pytest.fixture
def renderer(logger):
    return DeckRenderer(logger=logger)


@pytest.fixture
def registry(renderer, logger):
    """A fresh SessionRegistry backed by the real python-pptx renderer."""
    return SessionRegistry(renderer=renderer, logger=logger)


@pytest.fixture
def components(test_data_dir, logger) -> ServerComponents:
    """Server components writing into the per-test output directory."""
    return initialize_components(
        output_dir=test_data_dir, host=TEST_HOST, port=TEST_PORT, logger=logger
    )
