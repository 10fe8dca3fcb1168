"""
TCP Transport Implementation for the InfluxDB client.

Write-only transport for servers accepting newline terminated line protocol
on a TCP listener.
"""

import logging
import socket

from .base import Transport
from ..exceptions import TransportError
from ..types import ErrorCode

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8089
CONNECT_TIMEOUT = 10.0


class TCPTransport(Transport):
    """
    Stream socket transport.

    The connection is opened at construction. A failed write marks the
    transport as disconnected; call ``reconnect()`` to open a new socket.
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT):
        """
        Connect to the TCP listener.

        Args:
            host: Server host name or address
            port: Server port

        Raises:
            TransportError: If the connection cannot be established
        """
        self.host = host
        self.port = port
        self._socket: socket.socket | None = None
        self.reconnect()

    def is_connected(self) -> bool:
        """Check if the socket is open."""
        return self._socket is not None

    def reconnect(self) -> None:
        """Close any existing socket and connect again."""
        self.close()
        try:
            self._socket = socket.create_connection((self.host, self.port), timeout=CONNECT_TIMEOUT)
        except OSError as e:
            raise TransportError(
                f"Request error: ({int(ErrorCode.CONNECTION_FAILURE)}) {e}",
                code=int(ErrorCode.CONNECTION_FAILURE),
            ) from e
        logger.debug(f"Connected to tcp://{self.host}:{self.port}")

    def send(self, lineprotocol: str) -> None:
        """
        Write the payload followed by a newline.

        Raises:
            TransportError: If not connected or the write fails
        """
        if self._socket is None:
            raise TransportError(
                f"Request error: ({int(ErrorCode.CONNECTION_FAILURE)}) Not connected",
                code=int(ErrorCode.CONNECTION_FAILURE),
            )

        try:
            self._socket.sendall((lineprotocol + "\n").encode("utf-8"))
        except OSError as e:
            logger.warning(f"Lost connection to tcp://{self.host}:{self.port}: {e}")
            self.close()
            raise TransportError(
                f"Request error: ({int(ErrorCode.NETWORK_SEND_FAILURE)}) {e}",
                code=int(ErrorCode.NETWORK_SEND_FAILURE),
            ) from e

    def close(self) -> None:
        """Close the socket."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None
