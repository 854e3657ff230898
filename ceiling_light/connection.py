"""
TCP connection setup for the bulb
The bulb may refuse connections for a while after power-on or after a
previous session closed, so dialing is retried a bounded number of times.
"""

import logging
import socket
import time

from .config import ConnectionSettings

log = logging.getLogger(__name__)


def resolve_address(host: str, port: int):
    """Resolve host:port, keeping only the first stream address"""
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except UnicodeError as e:
        # Host name not encodable, e.g. a label over 63 characters
        raise socket.gaierror(f"unable to resolve hostname {host}") from e
    if not infos:
        raise socket.gaierror(f"unable to resolve hostname {host}")
    family, socktype, proto, _, sockaddr = infos[0]
    return family, socktype, proto, sockaddr


def connect_with_retries(
    host: str, port: int, max_attempts: int, timeout: float
) -> socket.socket:
    """Dial up to max_attempts times, raising the last attempt's error"""
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    family, socktype, proto, sockaddr = resolve_address(host, port)

    for attempt in range(max_attempts):
        sock = socket.socket(family, socktype, proto)
        sock.settimeout(timeout)
        try:
            sock.connect(sockaddr)
            return sock
        except OSError as e:
            sock.close()
            log.debug(
                "Failed to connect to %s:%d (attempt %d/%d): %s",
                host, port, attempt + 1, max_attempts, e,
            )
            if attempt == max_attempts - 1:
                raise


def open_connection(
    host: str, port: int, settings: ConnectionSettings
) -> socket.socket:
    """Connect to the bulb and apply the session read/write timeout"""
    log.debug("Connecting to %s:%d...", host, port)
    start = time.monotonic()
    sock = connect_with_retries(
        host, port, settings.connect_attempts, settings.connect_timeout
    )
    log.debug("Connected in %.3fs", time.monotonic() - start)

    # Applies to both send and recv
    sock.settimeout(settings.io_timeout)
    return sock
