"""
CLI commands for the InfluxDB transport.

Uses click for command-line argument parsing. Connection settings can come
from options or from INFLUXDB_* environment variables.
"""

import logging
import sys
from collections.abc import Callable
from typing import IO

import click

from ..client import InfluxDB
from ..exceptions import InfluxDBError
from ..factory import get_with_options
from ..types import EndpointVersion, Options, Proxy, ProxyAuthentication


def build_options(
    endpoint_version: str,
    token: str | None,
    proxy: str | None,
    proxy_user: str | None,
    proxy_password: str | None,
) -> Options:
    """Assemble factory Options from the command-line settings."""
    proxy_config = None
    if proxy:
        authentication = None
        if proxy_user:
            authentication = ProxyAuthentication(user=proxy_user, password=proxy_password or "")
        proxy_config = Proxy(proxy=proxy, authentication=authentication)

    return Options(
        endpoint_version=EndpointVersion(endpoint_version),
        proxy=proxy_config,
        api_token=token or None,
    )


def run_with_client(ctx: click.Context, action: Callable[[InfluxDB], None]) -> None:
    """Open a client from the group settings, run the action and report failures."""
    url = ctx.obj["url"]
    if not url:
        raise click.UsageError("No URL given. Use --url or set INFLUXDB_URL.")

    try:
        with get_with_options(url, ctx.obj["options"]) as db:
            action(db)
    except InfluxDBError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--url",
    "-u",
    envvar="INFLUXDB_URL",
    help="Connection URL, e.g. http://localhost:8086?db=mydb",
)
@click.option(
    "--endpoint-version",
    "-e",
    envvar="INFLUXDB_ENDPOINT_VERSION",
    type=click.Choice([v.value for v in EndpointVersion]),
    default=EndpointVersion.V1.value,
    show_default=True,
    help="Endpoint version (v1: db/rp, v2: org/bucket)",
)
@click.option("--token", envvar="INFLUXDB_TOKEN", help="API token")
@click.option("--proxy", envvar="INFLUXDB_PROXY", help="Proxy URL for http and https")
@click.option("--proxy-user", envvar="INFLUXDB_PROXY_USER", help="Proxy user")
@click.option("--proxy-password", envvar="INFLUXDB_PROXY_PASSWORD", help="Proxy password")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    url: str | None,
    endpoint_version: str,
    token: str | None,
    proxy: str | None,
    proxy_user: str | None,
    proxy_password: str | None,
    verbose: bool,
) -> None:
    """InfluxDB query and write tool."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["url"] = url
    ctx.obj["options"] = build_options(endpoint_version, token, proxy, proxy_user, proxy_password)


@cli.command()
@click.argument("q")
@click.pass_context
def query(ctx: click.Context, q: str) -> None:
    """Run a query and print the raw response."""
    run_with_client(ctx, lambda db: click.echo(db.query(q)))


@cli.command()
@click.argument("cmd")
@click.pass_context
def execute(ctx: click.Context, cmd: str) -> None:
    """Run a management statement and print the raw response."""
    run_with_client(ctx, lambda db: click.echo(db.execute(cmd)))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def write(ctx: click.Context, source: IO[str]) -> None:
    """Write line protocol from SOURCE (a file, or stdin when omitted)."""
    lines = [line for line in source.read().splitlines() if line.strip()]
    if not lines:
        click.echo("Nothing to write.")
        return

    def send(db: InfluxDB) -> None:
        db.write(*lines)
        click.echo(f"Wrote {len(lines)} line(s).")

    run_with_client(ctx, send)


@cli.command("create-database")
@click.pass_context
def create_database(ctx: click.Context) -> None:
    """Create the database named by the db parameter (v1 only)."""

    def create(db: InfluxDB) -> None:
        db.create_database_if_not_exists()
        click.echo("Database created.")

    run_with_client(ctx, create)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
