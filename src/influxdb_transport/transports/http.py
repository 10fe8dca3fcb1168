"""
HTTP Transport Implementation for the InfluxDB client.

Talks to the ``/query`` and ``/write`` endpoints of InfluxDB 1.x (database
and retention policy addressing) and the compatibility endpoints of 2.x
(organization and bucket addressing) over one blocking httpx session.
"""

import logging
import ssl

import httpx

from .base import Transport
from ..exceptions import (
    BucketNotSupportedInV1Error,
    BucketRequiredInV2Error,
    ConfigurationError,
    DatabaseNotSupportedInV2Error,
    EndpointVersionNotImplementedError,
    NoDatabaseSpecifiedError,
    OrganizationRequiredInV2Error,
    RetentionPolicyNotSupportedInV2Error,
    TransportError,
    UnsupportedOperationError,
)
from ..types import EndpointVersion, ErrorCode, Proxy
from ..url import parse_parameter, parse_url

logger = logging.getLogger(__name__)

# Fixed for every session; not user configurable.
DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=10.0)

# Most specific classes first; the first isinstance() match decides.
_ERROR_CODES: tuple[tuple[type[Exception], ErrorCode], ...] = (
    (httpx.InvalidURL, ErrorCode.INVALID_URL_FORMAT),
    (httpx.TimeoutException, ErrorCode.OPERATION_TIMEDOUT),
    (httpx.ProxyError, ErrorCode.PROXY_RESOLUTION_FAILURE),
    (httpx.UnsupportedProtocol, ErrorCode.UNSUPPORTED_PROTOCOL),
    (httpx.ConnectError, ErrorCode.CONNECTION_FAILURE),
    (httpx.ReadError, ErrorCode.NETWORK_RECEIVE_ERROR),
    (httpx.WriteError, ErrorCode.NETWORK_SEND_FAILURE),
    (httpx.RemoteProtocolError, ErrorCode.EMPTY_RESPONSE),
    (httpx.LocalProtocolError, ErrorCode.INTERNAL_ERROR),
    (httpx.TooManyRedirects, ErrorCode.TOO_MANY_REDIRECTS),
)

Parameters = list[tuple[str, str]]


def _caused_by_ssl(error: BaseException) -> bool:
    cause = error.__cause__ or error.__context__
    while cause is not None:
        if isinstance(cause, ssl.SSLError):
            return True
        cause = cause.__cause__ or cause.__context__
    return False


def error_code_for(error: httpx.RequestError | httpx.InvalidURL) -> ErrorCode:
    """Map an httpx request exception to its channel error code."""
    # httpx reports failed TLS handshakes as plain connect errors.
    if isinstance(error, httpx.ConnectError) and _caused_by_ssl(error):
        return ErrorCode.SSL_CONNECT_ERROR
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return ErrorCode.UNKNOWN_ERROR


def request_error(error: httpx.RequestError | httpx.InvalidURL) -> TransportError:
    """
    Translate a failure that happened before any HTTP status was received.

    The message of the underlying exception is used as is, even when empty.
    """
    code = error_code_for(error)
    return TransportError(f"Request error: ({int(code)}) {error}", code=int(code))


def check_response(response: httpx.Response) -> None:
    """
    Raise TransportError for any status outside the 2xx range.

    Raises:
        TransportError: Carrying the status code and reason phrase
    """
    if not response.is_success:
        raise TransportError(
            f"Request failed: ({response.status_code}) {response.reason_phrase}",
            code=response.status_code,
            status_code=response.status_code,
        )


def _proxy_route(proxy: Proxy) -> httpx.HTTPTransport:
    credentials = proxy.authentication
    return httpx.HTTPTransport(
        proxy=httpx.Proxy(
            proxy.proxy,
            auth=(credentials.user, credentials.password) if credentials else None,
        )
    )


class HTTPTransport(Transport):
    """
    HTTP-based transport to InfluxDB.

    The connection URL carries the addressing parameters:

    - v1: ``http://host:8086?db=<database>[&rp=<retention policy>]``
    - v2: ``http://host:8086?org=<organization>&bucket=<bucket>``

    Parameters belonging to the other endpoint version are rejected at
    construction instead of being ignored.
    """

    def __init__(
        self,
        url: str,
        version: EndpointVersion | str = EndpointVersion.V1,
        *,
        http_transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize and validate the HTTP transport.

        Args:
            url: Connection URL including the addressing query parameters
            version: Endpoint version selecting validation and request parameters
            http_transport: Optional httpx transport used for direct routes,
                mainly to plug in ``httpx.MockTransport``

        Raises:
            ConfigurationError: If the URL parameters do not fit the version
        """
        self._endpoint_url = parse_url(url)
        self._version = EndpointVersion(version)

        self._database_name = parse_parameter(url, "db")
        self._retention_policy_name = parse_parameter(url, "rp")
        self._bucket_name = parse_parameter(url, "bucket")
        self._organization = parse_parameter(url, "org")
        self._validate()

        self._http_transport = http_transport
        self._auth: httpx.BasicAuth | None = None
        self._headers: dict[str, str] = {}
        self._proxy: Proxy | None = None
        self._client = self._build_client(None)

    def _validate(self) -> None:
        if self._version == EndpointVersion.V1:
            if self._database_name is None:
                raise NoDatabaseSpecifiedError()
            if self._bucket_name is not None:
                raise BucketNotSupportedInV1Error()
        else:
            if self._database_name is not None:
                raise DatabaseNotSupportedInV2Error()
            if self._retention_policy_name is not None:
                raise RetentionPolicyNotSupportedInV2Error()
            if self._bucket_name is None:
                raise BucketRequiredInV2Error()
            if self._organization is None:
                raise OrganizationRequiredInV2Error()

    def _build_client(self, proxy: Proxy | None) -> httpx.Client:
        """Create the session, routing both schemes through the proxy if one is given."""
        mounts: dict[str, httpx.BaseTransport] | None = None
        if proxy is not None:
            mounts = {"http://": _proxy_route(proxy), "https://": _proxy_route(proxy)}

        return httpx.Client(
            auth=self._auth,
            timeout=DEFAULT_TIMEOUT,
            transport=self._http_transport,
            mounts=mounts,
        )

    # Endpoint configuration

    @property
    def endpoint_url(self) -> str:
        """Base URL without the query string."""
        return self._endpoint_url

    @property
    def version(self) -> EndpointVersion:
        return self._version

    @property
    def database_name(self) -> str | None:
        return self._database_name

    @property
    def retention_policy_name(self) -> str | None:
        return self._retention_policy_name

    @property
    def bucket_name(self) -> str | None:
        return self._bucket_name

    @property
    def organization(self) -> str | None:
        return self._organization

    @property
    def proxy(self) -> Proxy | None:
        return self._proxy

    @property
    def headers(self) -> dict[str, str]:
        """Headers added to every request (currently only the API token)."""
        return dict(self._headers)

    def parameters(self) -> Parameters:
        """
        Build the addressing parameters for the configured endpoint version.

        Returns:
            Ordered (key, value) pairs: db[/rp] for v1, org/bucket for v2

        Raises:
            ConfigurationError: If a required addressing parameter is missing
            EndpointVersionNotImplementedError: For any other version
        """
        if self._version == EndpointVersion.V1:
            if self._database_name is None:
                raise NoDatabaseSpecifiedError()
            parameters = [("db", self._database_name)]
            if self._retention_policy_name is not None:
                parameters.append(("rp", self._retention_policy_name))
            return parameters

        if self._version == EndpointVersion.V2:
            if self._organization is None:
                raise OrganizationRequiredInV2Error()
            if self._bucket_name is None:
                raise BucketRequiredInV2Error()
            return [("org", self._organization), ("bucket", self._bucket_name)]

        raise EndpointVersionNotImplementedError()

    # Request plumbing

    def _request(
        self,
        method: str,
        path: str,
        params: Parameters,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """
        Issue one request against the endpoint and translate failures.

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        # The endpoint may embed credentials; only the path is logged.
        logger.debug(f"{method} {path} (endpoint {self._version})")

        try:
            response = self._client.request(
                method,
                self._endpoint_url + path,
                params=params,
                headers=headers if headers is not None else self._headers,
                content=content,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise request_error(e) from e

        check_response(response)
        return response

    # Operations

    def query(self, query: str) -> str:
        """
        Run a query through GET /query.

        Args:
            query: InfluxQL query, sent as the "q" parameter

        Returns:
            The response body verbatim
        """
        parameters = self.parameters()
        parameters.append(("q", query))
        return self._request("GET", "/query", parameters).text

    def execute(self, cmd: str) -> str:
        """Run a management statement through GET /query and return the body."""
        parameters = self.parameters()
        parameters.append(("q", cmd))
        return self._request("GET", "/query", parameters).text

    def send(self, lineprotocol: str) -> None:
        """
        Write line protocol through POST /write.

        Args:
            lineprotocol: Raw payload, sent unmodified as the request body
        """
        headers = {**self._headers, "Content-Type": "application/json"}
        self._request(
            "POST",
            "/write",
            self.parameters(),
            headers=headers,
            content=lineprotocol.encode("utf-8"),
        )

    def create_database(self) -> None:
        """
        Create the database named by the "db" parameter (v1 only).

        Raises:
            UnsupportedOperationError: If the endpoint version is not v1
        """
        if self._version != EndpointVersion.V1:
            raise UnsupportedOperationError("Database only supported for endpoint v1")

        logger.info(f"Creating database {self._database_name}")
        self._request("POST", "/query", [("q", f"CREATE DATABASE {self._database_name}")])

    def set_basic_authentication(self, user: str, password: str) -> None:
        """Use basic authentication for every subsequent request."""
        self._auth = httpx.BasicAuth(user, password)
        self._client.auth = self._auth

    def set_api_token(self, token: str) -> None:
        """Send "Authorization: Token <token>" with every subsequent request."""
        self._headers["Authorization"] = f"Token {token}"

    def set_proxy(self, proxy: Proxy) -> None:
        """
        Route http and https requests through a proxy.

        The session is rebuilt because httpx fixes routes at client creation;
        authentication and headers carry over. On failure the current session
        and proxy stay in place.

        Raises:
            ConfigurationError: If httpx rejects the proxy URL
        """
        try:
            client = self._build_client(proxy)
        except (ValueError, httpx.InvalidURL) as e:
            raise ConfigurationError(f"Invalid proxy URL: {e}") from e

        previous = self._client
        self._client = client
        self._proxy = proxy
        previous.close()
        logger.debug("Proxy configured for http and https routes")

    def close(self) -> None:
        """Close the HTTP session."""
        self._client.close()
