"""
UDP Transport Implementation for the InfluxDB client.

Fire-and-forget writes to the InfluxDB UDP listener, one datagram per send.
"""

import logging
import socket

from .base import Transport
from ..exceptions import TransportError
from ..types import ErrorCode

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8089


class UDPTransport(Transport):
    """Datagram transport; delivery is not acknowledged by the server."""

    def __init__(self, host: str, port: int = DEFAULT_PORT):
        """
        Resolve the target and open the datagram socket.

        Raises:
            TransportError: If the host cannot be resolved
        """
        self.host = host
        self.port = port
        try:
            family, kind, proto, _, address = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)[0]
        except OSError as e:
            raise TransportError(
                f"Request error: ({int(ErrorCode.HOST_RESOLUTION_FAILURE)}) {e}",
                code=int(ErrorCode.HOST_RESOLUTION_FAILURE),
            ) from e
        self._address = address
        self._socket = socket.socket(family, kind, proto)

    def send(self, lineprotocol: str) -> None:
        """
        Send the payload as a single datagram.

        Raises:
            TransportError: If the datagram cannot be sent
        """
        try:
            self._socket.sendto(lineprotocol.encode("utf-8"), self._address)
        except OSError as e:
            raise TransportError(
                f"Request error: ({int(ErrorCode.NETWORK_SEND_FAILURE)}) {e}",
                code=int(ErrorCode.NETWORK_SEND_FAILURE),
            ) from e
        logger.debug(f"Sent {len(lineprotocol)} bytes to udp://{self.host}:{self.port}")

    def close(self) -> None:
        """Close the socket."""
        self._socket.close()
