"""Shared fixtures for ceiling light tests."""

import logging
import socket

import pytest

from ceiling_light.config import ConnectionSettings

from .mock_bulb import MockBulb


@pytest.fixture
def fast_settings():
    return ConnectionSettings(
        connect_attempts=3, connect_timeout=0.3, io_timeout=0.2, settle_delay=0
    )


@pytest.fixture
def mock_bulb():
    with MockBulb() as bulb:
        yield bulb


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; undo it after each test"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
