"""
InfluxDB transport exceptions.

Custom exception hierarchy for URL resolution, endpoint validation and
request failures.
"""


class InfluxDBError(Exception):
    """Base exception for all influxdb_transport errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class MalformedURLError(InfluxDBError):
    """Raised when no scheme can be found in a connection URL."""

    def __init__(self, message: str = "Ill-formed URI"):
        super().__init__(message)


class UnsupportedBackendError(InfluxDBError):
    """Raised when the URL scheme does not map to any transport."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"Unrecognized backend {scheme}")


class ConfigurationError(InfluxDBError):
    """Raised when URL parameters do not match the endpoint version."""

    default_message = "Invalid endpoint configuration"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NoDatabaseSpecifiedError(ConfigurationError):
    default_message = "No Database specified in URL"


class BucketNotSupportedInV1Error(ConfigurationError):
    default_message = "Bucket provided in URL but not supported for endpoint v1"


class DatabaseNotSupportedInV2Error(ConfigurationError):
    default_message = "Database provided in URL but not supported for endpoint v2"


class RetentionPolicyNotSupportedInV2Error(ConfigurationError):
    default_message = "Retention policy provided in URL but not supported for endpoint v2"


class BucketRequiredInV2Error(ConfigurationError):
    default_message = "Bucket is required as URL parameter for endpoint version v2"


class OrganizationRequiredInV2Error(ConfigurationError):
    default_message = "Organization is required as URL parameter for endpoint version v2"


class UnsupportedOperationError(InfluxDBError):
    """Raised when a transport or endpoint version cannot perform an operation."""

    pass


class EndpointVersionNotImplementedError(InfluxDBError, NotImplementedError):
    """Raised when request shaping meets an endpoint version it does not know."""

    def __init__(self, message: str = "Not implemented for current endpoint version"):
        super().__init__(message)


class TransportError(InfluxDBError):
    """
    Raised when a request fails on the wire or with a non-success status.

    Attributes:
        code: Channel error code, or the HTTP status for status failures
        status_code: HTTP status, only set when a response was received
    """

    def __init__(self, message: str, code: int | None = None, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, code)
