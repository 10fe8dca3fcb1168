"""
Type definitions for the InfluxDB transport layer.

Provides the parsed connection URL, endpoint versions, channel error codes
and the validated proxy/options models passed to the factory.
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EndpointVersion(StrEnum):
    """Addressing scheme of the target server generation."""

    V1 = "v1"
    V2 = "v2"


class ErrorCode(IntEnum):
    """Numeric code reported for failures that happen before any HTTP status."""

    CONNECTION_FAILURE = 1
    EMPTY_RESPONSE = 2
    HOST_RESOLUTION_FAILURE = 3
    INTERNAL_ERROR = 4
    INVALID_URL_FORMAT = 5
    NETWORK_RECEIVE_ERROR = 6
    NETWORK_SEND_FAILURE = 7
    OPERATION_TIMEDOUT = 8
    PROXY_RESOLUTION_FAILURE = 9
    SSL_CONNECT_ERROR = 10
    UNSUPPORTED_PROTOCOL = 15
    TOO_MANY_REDIRECTS = 17
    UNKNOWN_ERROR = 1000


@dataclass(frozen=True)
class ConnectionURL:
    """
    Decomposed connection string.

    Attributes:
        url: The raw URL as supplied by the caller
        protocol: Scheme, e.g. "http" or "udp"
        user: User from the userinfo part, empty when absent
        password: Password from the userinfo part, empty when absent
        host: Host name or address, brackets stripped for IPv6 literals
        port: Port number, 0 when absent
        path: Path including the leading "/", empty when absent
        search: Query string without the leading "?"
    """

    url: str
    protocol: str
    user: str = ""
    password: str = ""
    host: str = ""
    port: int = 0
    path: str = ""
    search: str = ""


class ProxyAuthentication(BaseModel):
    """Credentials presented to the proxy itself."""

    model_config = ConfigDict(frozen=True)

    user: str
    password: str


class Proxy(BaseModel):
    """
    Forward proxy applied to both the http and https routes of a session.

    A bare ``host:port`` address is taken as an http proxy.

    Example:
        >>> Proxy(proxy="http://proxy.local:3128",
        ...       authentication=ProxyAuthentication(user="u", password="p"))
    """

    model_config = ConfigDict(frozen=True)

    proxy: str = Field(min_length=1)
    authentication: ProxyAuthentication | None = None

    @field_validator("proxy")
    @classmethod
    def default_scheme(cls, value: str) -> str:
        if "://" not in value:
            return f"http://{value}"
        return value


class Options(BaseModel):
    """Optional settings applied by ``get_with_options``."""

    model_config = ConfigDict(frozen=True)

    endpoint_version: EndpointVersion | None = None
    proxy: Proxy | None = None
    api_token: str | None = None
