"""Tests for file server port discovery."""

import socket

import pytest

from slidedeck.artifacts import find_free_port, is_port_free
from slidedeck.exceptions import ConfigurationError, PortUnavailableError

HOST = "127.0.0.1"


@pytest.fixture
def occupied_port():
    """A port held by a listening socket for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind((HOST, 0))
    sock.listen(1)
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()


class TestFindFreePort:
    def test_occupied_port_is_not_free(self, occupied_port):
        assert is_port_free(HOST, occupied_port) is False

    def test_skips_occupied_port(self, occupied_port):
        port = find_free_port(HOST, base=occupied_port, maximum=min(occupied_port + 50, 65535))

        assert port > occupied_port

    def test_no_free_port_raises(self, occupied_port):
        with pytest.raises(PortUnavailableError) as exc_info:
            find_free_port(HOST, base=occupied_port, maximum=occupied_port)

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.code == "PORT_UNAVAILABLE"
        assert str(occupied_port) in str(exc_info.value)

    def test_returns_base_when_free(self):
        probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        probe.bind((HOST, 0))
        port = probe.getsockname()[1]
        probe.close()

        assert find_free_port(HOST, base=port, maximum=port) == port
