"""
InfluxDB Transport Module.

Provides HTTP, TCP, UDP and Unix domain socket transport implementations.
"""

from .base import Transport
from .http import HTTPTransport
from .tcp import TCPTransport
from .udp import UDPTransport
from .unix import UnixSocketTransport

__all__ = [
    "HTTPTransport",
    "TCPTransport",
    "Transport",
    "UDPTransport",
    "UnixSocketTransport",
]
