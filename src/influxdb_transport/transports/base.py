"""
Base Transport Interface for the InfluxDB client.

Defines the operations every wire transport exposes. Only ``send`` is
mandatory; the remaining operations fail with UnsupportedOperationError
unless a transport overrides them.
"""

from abc import ABC, abstractmethod
from typing import Any, Self

from ..exceptions import UnsupportedOperationError
from ..types import Proxy


class Transport(ABC):
    """
    Abstract base class for InfluxDB transports.

    All transport implementations (HTTP, TCP, UDP, Unix socket) must inherit
    from this class. Instances own their underlying socket or session and are
    not safe for concurrent use.
    """

    @abstractmethod
    def send(self, lineprotocol: str) -> None:
        """
        Send a line protocol payload.

        Args:
            lineprotocol: One or more newline separated line protocol records
        """
        ...

    def query(self, query: str) -> str:
        """Run a query and return the raw response body."""
        raise UnsupportedOperationError("Queries are not supported by the selected transport")

    def execute(self, cmd: str) -> str:
        """Run a management command and return the raw response body."""
        raise UnsupportedOperationError("Execution is not supported by the selected transport")

    def create_database(self) -> None:
        """Create the database named in the connection URL."""
        raise UnsupportedOperationError("Creation of database is not supported by the selected transport")

    def set_proxy(self, proxy: Proxy) -> None:
        raise UnsupportedOperationError("Proxy is not supported by the selected transport")

    def set_basic_authentication(self, user: str, password: str) -> None:
        raise UnsupportedOperationError("Basic authentication is not supported by the selected transport")

    def set_api_token(self, token: str) -> None:
        raise UnsupportedOperationError("API token is not supported by the selected transport")

    def close(self) -> None:
        """Release the underlying socket or session."""
        pass

    # Context manager support

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
