"""Tests for the proxy and options models."""

import pydantic
import pytest

from influxdb_transport.types import EndpointVersion, ErrorCode, Options, Proxy, ProxyAuthentication


class TestProxy:
    def test_bare_host_port_gets_http_scheme(self) -> None:
        assert Proxy(proxy="proxy.local:3128").proxy == "http://proxy.local:3128"

    @pytest.mark.parametrize("url", ["http://proxy.local:3128", "https://proxy.local", "socks5://proxy.local:1080"])
    def test_explicit_scheme_kept(self, url: str) -> None:
        assert Proxy(proxy=url).proxy == url

    def test_empty_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Proxy(proxy="")

    def test_frozen(self) -> None:
        proxy = Proxy(proxy="proxy.local:3128", authentication=ProxyAuthentication(user="u", password="p"))
        with pytest.raises(pydantic.ValidationError):
            proxy.proxy = "other:1"  # type: ignore[misc]


class TestOptions:
    def test_defaults(self) -> None:
        options = Options()
        assert options.endpoint_version is None
        assert options.proxy is None
        assert options.api_token is None

    def test_version_from_string(self) -> None:
        assert Options(endpoint_version="v2").endpoint_version == EndpointVersion.V2


class TestErrorCode:
    def test_no_success_member(self) -> None:
        """Codes only describe failures."""
        assert all(code != 0 for code in ErrorCode)
