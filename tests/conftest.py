"""
Pytest configuration for influxdb_transport tests.

HTTP transports are wired to an httpx MockTransport that records every
request, so no InfluxDB server is needed.
"""

from collections.abc import Callable

import httpx
import pytest

from influxdb_transport.transports.http import HTTPTransport
from influxdb_transport.types import EndpointVersion

V1_URL = "http://localhost:8086?db=mydb"
V2_URL = "http://localhost:8086?bucket=b1&org=org1"


class RequestRecorder:
    """MockTransport handler answering every request with a fixed response."""

    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder(text='{"results":[]}')


@pytest.fixture
def make_transport(recorder: RequestRecorder) -> Callable[..., HTTPTransport]:
    """Build HTTP transports whose requests land in ``recorder``."""
    created: list[HTTPTransport] = []

    def factory(url: str, version: EndpointVersion | str = EndpointVersion.V1) -> HTTPTransport:
        transport = HTTPTransport(url, version, http_transport=httpx.MockTransport(recorder))
        created.append(transport)
        return transport

    yield factory

    for transport in created:
        transport.close()
