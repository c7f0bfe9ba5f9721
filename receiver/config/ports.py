"""Port probing utilities for the Half-Wit receiver.

Finds available TCP and UDP ports for the sender listener and the presence
broadcast, with optional fallback to the following ports.
"""

import socket

from .config import PREFERRED_DISCOVERY_PORT, RECEIVER_HOST


def _try_bind(kind, host, port):
    test_socket = socket.socket(socket.AF_INET, kind)
    try:
        if kind == socket.SOCK_DGRAM:
            # Share the port with senders listening for the broadcast
            test_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if hasattr(socket, 'SO_REUSEPORT'):
                test_socket.setsockopt(
                    socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        test_socket.bind((host, port))
        return True
    except OSError:
        return False
    finally:
        test_socket.close()


def find_available_port(start_port, max_attempts=50, allow_fallback=True, host=RECEIVER_HOST):
    """Find an available TCP port for the sender listener.

    Args:
        start_port: Port number to start search from
        max_attempts: Maximum number of ports to try
        allow_fallback: If True, search multiple ports; if False, try only start_port
        host: Interface to bind

    Returns:
        Available port number, or None if no port found
    """
    attempts = max_attempts if allow_fallback else 1
    for port in range(start_port, start_port + attempts):
        if _try_bind(socket.SOCK_STREAM, host, port):
            return port
    return None


def find_available_discovery_port(start_port=PREFERRED_DISCOVERY_PORT, max_attempts=50, allow_fallback=True):
    """Find an available UDP port for presence broadcasts.

    Args:
        start_port: Port number to start search from
        max_attempts: Maximum number of ports to try
        allow_fallback: If True, search multiple ports; if False, try only start_port

    Returns:
        Available port number, or None if no port found
    """
    attempts = max_attempts if allow_fallback else 1
    for port in range(start_port, start_port + attempts):
        if _try_bind(socket.SOCK_DGRAM, "", port):
            return port
    return None
