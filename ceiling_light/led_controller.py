"""
Command session for the ceiling light
Frames JSON requests over one TCP connection and reads one response line each
"""

import logging
import socket
import time
from typing import List, Optional

from .config import ConnectionSettings
from .connection import open_connection
from .errors import ProtocolError
from .protocol import DURATION_MS, EFFECT, Param, build_request, encode_request
from .value_parsers import Mode

log = logging.getLogger(__name__)

RECV_SIZE = 4096


class LEDController:
    """
    Owns the connection to one bulb and its request id counter.
    Requests are strictly sequential: each send waits for its response line.
    """

    def __init__(self, sock: socket.socket):
        self._sock = sock
        self._buffer = bytearray()
        self.next_id = 1

    @classmethod
    def connect(
        cls, host: str, port: int, settings: Optional[ConnectionSettings] = None
    ) -> "LEDController":
        return cls(open_connection(host, port, settings or ConnectionSettings()))

    def close(self):
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def send_command(self, method: str, params: List[Param]) -> str:
        """Send one request and return the device's response line"""
        request = build_request(self.next_id, method, params)
        self.next_id += 1
        payload = encode_request(request)
        log.debug("Sending: %s", payload.rstrip().decode("utf-8"))

        start = time.monotonic()
        self._write(payload)
        try:
            raw = self._read_line()
        except socket.timeout:
            # Device stalled on this request; one re-send with the same id
            log.debug("Re-sending: %s", payload.rstrip().decode("utf-8"))
            self._write(payload)
            raw = self._read_line()

        try:
            response = raw.decode("utf-8").rstrip()
        except UnicodeDecodeError as e:
            raise ProtocolError(f"response is not valid UTF-8: {e}") from e

        log.debug("Received (after %.3fs): %s", time.monotonic() - start, response)
        return response

    def _write(self, payload: bytes):
        self._sock.sendall(payload)

    def _read_line(self) -> bytes:
        """Read up to and including the next LF, keeping any bytes past it"""
        while True:
            end = self._buffer.find(b"\n")
            if end >= 0:
                line = bytes(self._buffer[: end + 1])
                del self._buffer[: end + 1]
                return line

            chunk = self._sock.recv(RECV_SIZE)
            if not chunk:
                if self._buffer:
                    line = bytes(self._buffer)
                    self._buffer.clear()
                    return line
                raise ProtocolError("connection closed by device before a response")
            self._buffer.extend(chunk)

    # Main light

    def set_power(self, on: bool, mode: Optional[Mode] = None) -> str:
        params: List[Param] = ["on" if on else "off", EFFECT, DURATION_MS]
        if mode is not None:
            params.append(int(mode))
        return self.send_command("set_power", params)

    def set_bright(self, brightness: int) -> str:
        return self.send_command("set_bright", [brightness, EFFECT, DURATION_MS])

    # Ambient (background) light

    def bg_set_power(self, on: bool) -> str:
        return self.send_command(
            "bg_set_power", ["on" if on else "off", EFFECT, DURATION_MS]
        )

    def bg_set_hsv(self, hue: int, saturation: int) -> str:
        return self.send_command(
            "bg_set_hsv", [hue, saturation, EFFECT, DURATION_MS]
        )

    def bg_set_bright(self, brightness: int) -> str:
        return self.send_command("bg_set_bright", [brightness, EFFECT, DURATION_MS])
