"""
InfluxDB Transport - a client library for writing to and querying InfluxDB.

A single connection URL selects the wire transport and the addressing scheme:

- HTTP/HTTPS (query, write, execute, create database)
- TCP, UDP and Unix domain sockets (write only)
- Endpoint v1 (database + retention policy) or v2 (organization + bucket)
"""

from .client import InfluxDB
from .exceptions import (
    BucketNotSupportedInV1Error,
    BucketRequiredInV2Error,
    ConfigurationError,
    DatabaseNotSupportedInV2Error,
    EndpointVersionNotImplementedError,
    InfluxDBError,
    MalformedURLError,
    NoDatabaseSpecifiedError,
    OrganizationRequiredInV2Error,
    RetentionPolicyNotSupportedInV2Error,
    TransportError,
    UnsupportedBackendError,
    UnsupportedOperationError,
)
from .factory import get, get_transport, get_with_options, get_with_proxy
from .transports import (
    HTTPTransport,
    TCPTransport,
    Transport,
    UDPTransport,
    UnixSocketTransport,
)
from .types import (
    ConnectionURL,
    EndpointVersion,
    ErrorCode,
    Options,
    Proxy,
    ProxyAuthentication,
)
from .url import parse_connection_url, parse_parameter, parse_url

__version__ = "0.1.0"
__all__ = [
    # Factory
    "get",
    "get_transport",
    "get_with_options",
    "get_with_proxy",
    "InfluxDB",
    # Transports
    "Transport",
    "HTTPTransport",
    "TCPTransport",
    "UDPTransport",
    "UnixSocketTransport",
    # Types
    "ConnectionURL",
    "EndpointVersion",
    "ErrorCode",
    "Options",
    "Proxy",
    "ProxyAuthentication",
    # URL parsing
    "parse_connection_url",
    "parse_parameter",
    "parse_url",
    # Exceptions
    "InfluxDBError",
    "MalformedURLError",
    "UnsupportedBackendError",
    "ConfigurationError",
    "NoDatabaseSpecifiedError",
    "BucketNotSupportedInV1Error",
    "DatabaseNotSupportedInV2Error",
    "RetentionPolicyNotSupportedInV2Error",
    "BucketRequiredInV2Error",
    "OrganizationRequiredInV2Error",
    "UnsupportedOperationError",
    "EndpointVersionNotImplementedError",
    "TransportError",
]
