"""
Unix Domain Socket Transport Implementation for the InfluxDB client.

Writes line protocol as datagrams to a local socket path.
"""

import logging
import socket

from .base import Transport
from ..exceptions import TransportError
from ..types import ErrorCode

logger = logging.getLogger(__name__)


class UnixSocketTransport(Transport):
    """Datagram transport over an AF_UNIX socket."""

    def __init__(self, path: str):
        """
        Open the datagram socket.

        Args:
            path: Filesystem path of the server socket
        """
        self.path = path
        self._socket = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)

    def send(self, lineprotocol: str) -> None:
        """
        Send the payload as a single datagram.

        Raises:
            TransportError: If nothing listens on the path or the send fails
        """
        try:
            self._socket.sendto(lineprotocol.encode("utf-8"), self.path)
        except OSError as e:
            raise TransportError(
                f"Request error: ({int(ErrorCode.NETWORK_SEND_FAILURE)}) {e}",
                code=int(ErrorCode.NETWORK_SEND_FAILURE),
            ) from e
        logger.debug(f"Sent {len(lineprotocol)} bytes to unix://{self.path}")

    def close(self) -> None:
        """Close the socket."""
        self._socket.close()
