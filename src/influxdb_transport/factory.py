"""
Transport factory.

Resolves a connection URL to a transport by its scheme:

- ``http://`` / ``https://`` -> HTTPTransport
- ``tcp://host:port`` -> TCPTransport
- ``udp://host:port`` -> UDPTransport
- ``unix:///path/to/socket`` -> UnixSocketTransport
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from .client import InfluxDB
from .exceptions import InfluxDBError, UnsupportedBackendError
from .transports.base import Transport
from .transports.http import HTTPTransport
from .transports.tcp import DEFAULT_PORT as TCP_DEFAULT_PORT
from .transports.tcp import TCPTransport
from .transports.udp import DEFAULT_PORT as UDP_DEFAULT_PORT
from .transports.udp import UDPTransport
from .transports.unix import UnixSocketTransport
from .types import ConnectionURL, EndpointVersion, Options, Proxy
from .url import parse_connection_url

logger = logging.getLogger(__name__)

TransportBuilder = Callable[[ConnectionURL, EndpointVersion], Transport]


def _with_http_transport(uri: ConnectionURL, version: EndpointVersion) -> Transport:
    transport = HTTPTransport(uri.url, version)
    if uri.user:
        transport.set_basic_authentication(uri.user, uri.password)
    return transport


def _with_tcp_transport(uri: ConnectionURL, version: EndpointVersion) -> Transport:
    return TCPTransport(uri.host, uri.port or TCP_DEFAULT_PORT)


def _with_udp_transport(uri: ConnectionURL, version: EndpointVersion) -> Transport:
    return UDPTransport(uri.host, uri.port or UDP_DEFAULT_PORT)


def _with_unix_socket_transport(uri: ConnectionURL, version: EndpointVersion) -> Transport:
    return UnixSocketTransport(uri.path)


BACKENDS: Mapping[str, TransportBuilder] = MappingProxyType(
    {
        "udp": _with_udp_transport,
        "tcp": _with_tcp_transport,
        "http": _with_http_transport,
        "https": _with_http_transport,
        "unix": _with_unix_socket_transport,
    }
)


def get_transport(url: str, version: EndpointVersion | str = EndpointVersion.V1) -> Transport:
    """
    Build the transport matching the URL scheme.

    Args:
        url: Connection URL
        version: Endpoint version, only meaningful for http(s)

    Returns:
        The constructed transport; http(s) URLs with a user have basic
        authentication configured

    Raises:
        MalformedURLError: If the URL has no scheme
        UnsupportedBackendError: If the scheme is not one of udp, tcp, http, https, unix
        ConfigurationError: If the HTTP addressing parameters do not fit the version
    """
    uri = parse_connection_url(url)

    builder = BACKENDS.get(uri.protocol)
    if builder is None:
        raise UnsupportedBackendError(uri.protocol)

    version = EndpointVersion(version)
    transport = builder(uri, version)
    logger.info(f"Created {type(transport).__name__} for {uri.protocol} (endpoint {version})")
    return transport


def get(url: str, version: EndpointVersion | str = EndpointVersion.V1) -> InfluxDB:
    """Create a client for the URL."""
    return InfluxDB(get_transport(url, version))


def get_with_proxy(url: str, proxy: Proxy) -> InfluxDB:
    """Create a v1 client whose requests go through a proxy."""
    transport = get_transport(url, EndpointVersion.V1)
    try:
        transport.set_proxy(proxy)
    except InfluxDBError:
        transport.close()
        raise
    return InfluxDB(transport)


def get_with_options(url: str, options: Options | None = None) -> InfluxDB:
    """
    Create a client configured from Options.

    The endpoint version falls back to v1 when not given. Proxy and API token
    are applied only when present; the transport is closed if either fails.
    """
    options = options or Options()
    transport = get_transport(url, options.endpoint_version or EndpointVersion.V1)
    try:
        if options.proxy is not None:
            transport.set_proxy(options.proxy)
        if options.api_token is not None:
            transport.set_api_token(options.api_token)
    except InfluxDBError:
        transport.close()
        raise
    return InfluxDB(transport)
