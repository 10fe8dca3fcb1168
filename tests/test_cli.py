"""
Unit tests for CLI commands.

Uses Click's CliRunner for testing CLI commands without a server.
"""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from influxdb_transport.cli.commands import build_options, cli
from influxdb_transport.exceptions import TransportError
from influxdb_transport.types import EndpointVersion, Options, Proxy, ProxyAuthentication

from conftest import V1_URL, V2_URL

CLEAN_ENV = {
    "INFLUXDB_URL": None,
    "INFLUXDB_ENDPOINT_VERSION": None,
    "INFLUXDB_TOKEN": None,
    "INFLUXDB_PROXY": None,
    "INFLUXDB_PROXY_USER": None,
    "INFLUXDB_PROXY_PASSWORD": None,
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env=CLEAN_ENV)


@pytest.fixture
def db() -> Generator[MagicMock, None, None]:
    """Patch the factory so commands receive a mock client."""
    client = MagicMock()
    client.__enter__.return_value = client
    with patch("influxdb_transport.cli.commands.get_with_options", return_value=client) as factory:
        client.factory = factory
        yield client


class TestCliBasics:
    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "InfluxDB query and write tool" in result.output

    def test_subcommand_help_without_url(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["query", "--help"])
        assert result.exit_code == 0
        assert "Run a query" in result.output

    def test_missing_url(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["query", "SELECT 1"])
        assert result.exit_code == 2
        assert "No URL given" in result.output

    def test_invalid_endpoint_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--url", V1_URL, "-e", "v3", "query", "SELECT 1"])
        assert result.exit_code != 0


class TestCommands:
    def test_query(self, runner: CliRunner, db: MagicMock) -> None:
        db.query.return_value = '{"results":[{"statement_id":0}]}'

        result = runner.invoke(cli, ["--url", V1_URL, "query", "SELECT 1"])

        assert result.exit_code == 0
        assert '{"results":[{"statement_id":0}]}' in result.output
        db.query.assert_called_once_with("SELECT 1")
        db.factory.assert_called_once_with(V1_URL, Options(endpoint_version=EndpointVersion.V1))

    def test_execute(self, runner: CliRunner, db: MagicMock) -> None:
        db.execute.return_value = "ok"

        result = runner.invoke(cli, ["--url", V1_URL, "execute", "DROP MEASUREMENT cpu"])

        assert result.exit_code == 0
        db.execute.assert_called_once_with("DROP MEASUREMENT cpu")

    def test_write_from_stdin(self, runner: CliRunner, db: MagicMock) -> None:
        result = runner.invoke(cli, ["--url", V1_URL, "write"], input="cpu value=1\n\ncpu value=2\n")

        assert result.exit_code == 0
        assert "Wrote 2 line(s)." in result.output
        db.write.assert_called_once_with("cpu value=1", "cpu value=2")

    def test_write_from_file(self, runner: CliRunner, db: MagicMock, tmp_path) -> None:
        source = tmp_path / "points.lp"
        source.write_text("cpu value=1\n")

        result = runner.invoke(cli, ["--url", V1_URL, "write", str(source)])

        assert result.exit_code == 0
        db.write.assert_called_once_with("cpu value=1")

    def test_write_nothing(self, runner: CliRunner, db: MagicMock) -> None:
        result = runner.invoke(cli, ["--url", V1_URL, "write"], input="\n")

        assert result.exit_code == 0
        assert "Nothing to write." in result.output
        db.factory.assert_not_called()

    def test_create_database(self, runner: CliRunner, db: MagicMock) -> None:
        result = runner.invoke(cli, ["--url", V1_URL, "create-database"])

        assert result.exit_code == 0
        db.create_database_if_not_exists.assert_called_once_with()

    def test_failure_exits_with_error(self, runner: CliRunner, db: MagicMock) -> None:
        db.query.side_effect = TransportError("Request failed: (500) Internal Server Error", 500, 500)

        result = runner.invoke(cli, ["--url", V1_URL, "query", "SELECT 1"])

        assert result.exit_code == 1
        assert "Error: Request failed: (500) Internal Server Error" in result.output

    def test_configuration_error_from_real_factory(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--url", "http://localhost:8086?bucket=b1", "query", "SELECT 1"])

        assert result.exit_code == 1
        assert "No Database specified in URL" in result.output

    def test_settings_from_environment(self, runner: CliRunner, db: MagicMock) -> None:
        result = runner.invoke(
            cli,
            ["query", "SELECT 1"],
            env={
                "INFLUXDB_URL": V2_URL,
                "INFLUXDB_ENDPOINT_VERSION": "v2",
                "INFLUXDB_TOKEN": "tok",
            },
        )

        assert result.exit_code == 0
        db.factory.assert_called_once_with(
            V2_URL,
            Options(endpoint_version=EndpointVersion.V2, api_token="tok"),
        )


class TestBuildOptions:
    def test_without_proxy(self) -> None:
        options = build_options("v1", None, None, "ignored", None)
        assert options == Options(endpoint_version=EndpointVersion.V1)

    def test_proxy_with_credentials(self) -> None:
        options = build_options("v2", "tok", "http://proxy:3128", "pu", "pp")

        assert options.proxy == Proxy(
            proxy="http://proxy:3128",
            authentication=ProxyAuthentication(user="pu", password="pp"),
        )
        assert options.api_token == "tok"

    def test_proxy_without_credentials(self) -> None:
        options = build_options("v1", "", "http://proxy:3128", None, None)

        assert options.proxy == Proxy(proxy="http://proxy:3128")
        assert options.api_token is None
