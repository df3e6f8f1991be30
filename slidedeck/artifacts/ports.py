"""Free-port discovery for the file server."""

import socket

from slidedeck.config_docs import DEFAULT_PORT_BASE, DEFAULT_PORT_MAX
from slidedeck.exceptions import PortUnavailableError


def is_port_free(host: str, port: int) -> bool:
    """Return True if ``port`` can be bound on ``host`` right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def find_free_port(
    host: str, base: int = DEFAULT_PORT_BASE, maximum: int = DEFAULT_PORT_MAX
) -> int:
    """
    Probe ports sequentially from ``base`` to ``maximum`` inclusive.

    Returns:
        The first port that could be bound

    Raises:
        PortUnavailableError: If every port in the range is taken
    """
    for port in range(base, maximum + 1):
        if is_port_free(host, port):
            return port
    raise PortUnavailableError(host, base, maximum)
