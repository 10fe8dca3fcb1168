"""
InfluxDB client facade.

Thin wrapper handing queries and line protocol to a transport. Building line
protocol from points and batching writes are left to the caller.
"""

from typing import Any, Self

from .transports.base import Transport


class InfluxDB:
    """
    User-facing client bound to a single transport.

    Example:
        >>> from influxdb_transport import get
        >>> with get("http://localhost:8086?db=mydb") as db:
        ...     db.write("cpu,host=a value=1", "cpu,host=b value=2")
        ...     print(db.query("SELECT * FROM cpu"))
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def query(self, query: str) -> str:
        """Run a query and return the raw response body."""
        return self._transport.query(query)

    def execute(self, cmd: str) -> str:
        """Run a management statement and return the raw response body."""
        return self._transport.execute(cmd)

    def write(self, *lines: str) -> None:
        """
        Send line protocol records in one request.

        Args:
            *lines: Line protocol records, joined with newlines
        """
        if not lines:
            return
        self._transport.send("\n".join(lines))

    def create_database_if_not_exists(self) -> None:
        """Create the database named in the URL; the server ignores existing ones."""
        self._transport.create_database()

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
