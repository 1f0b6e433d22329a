"""hostutils host and URL commands.

Results go to **stdout**, one item per line, so the commands compose with
shell pipelines; log output goes to stderr through the root handlers.

Each command is timed by the `Tracer` the ``hostutils`` group stores in the
Click context object.

Failure modes
- A URL without a scheme, or one the parser rejects → ``ClickException``
  (exit code 1) naming the offending input.
"""

from __future__ import annotations

import logging

import click

from hostutils.errors import InvalidURLError
from hostutils.tracing import Tracer
from hostutils.utils.suffix import cleanup_host, find_common_suffix
from hostutils.utils.urls import parse_url

logger = logging.getLogger(__name__)

URL_FIELDS = ("scheme", "netloc", "hostname", "port", "path", "query", "fragment")


@click.command("common-suffix")
@click.argument("hosts", nargs=-1, required=True)
@click.pass_obj
def common_suffix(tracer: Tracer, hosts: tuple[str, ...]) -> None:
    """Print the longest suffix shared by all HOSTS."""
    with tracer.traced():
        suffix = find_common_suffix(hosts)
        logger.debug("Common suffix of %d hosts: %r", len(hosts), suffix)
        click.echo(suffix)


@click.command("strip-suffix")
@click.option(
    "--suffix",
    "-s",
    default=None,
    help="Suffix to strip. Defaults to the longest suffix shared by all HOSTS.",
)
@click.argument("hosts", nargs=-1, required=True)
@click.pass_obj
def strip_suffix(tracer: Tracer, suffix: str | None, hosts: tuple[str, ...]) -> None:
    """Print each of HOSTS with a suffix removed, one per line."""
    with tracer.traced():
        if suffix is None:
            suffix = find_common_suffix(hosts)
            logger.debug("Using common suffix %r", suffix)
        for host in hosts:
            click.echo(cleanup_host(host, suffix))


@click.command("parse-url")
@click.argument("url")
@click.pass_obj
def parse_url_cmd(tracer: Tracer, url: str) -> None:
    """Parse URL and print its components as ``key: value`` lines."""
    with tracer.traced():
        try:
            parsed = parse_url(url)
            # .port raises ValueError for out-of-range ports
            values = {field: getattr(parsed, field) for field in URL_FIELDS}
        except InvalidURLError as e:
            raise click.ClickException(str(e)) from e
        except ValueError as e:
            raise click.ClickException(f"cannot parse URL <{url}>: {e}") from e
        for field, value in values.items():
            click.echo(f"{field}: {'' if value is None else value}")
