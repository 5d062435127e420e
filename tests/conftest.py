"""Shared pytest fixtures for the mlog test suite."""

import socket

import pytest

from mlog.registry import LoggerRegistry


@pytest.fixture()
def udp_receiver():
    """Loopback UDP socket standing in for a syslog server. Yields (sock, host, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5.0)
    host, port = sock.getsockname()
    try:
        yield sock, host, port
    finally:
        sock.close()


@pytest.fixture()
def registry():
    reg = LoggerRegistry()
    try:
        yield reg
    finally:
        reg.close()
