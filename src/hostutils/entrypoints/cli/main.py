"""hostutils CLI entry point.

Defines the top-level ``hostutils`` command (via Click-Extra), configures
logging, and registers the host/URL subcommands.

Currently available commands
- ``hostutils common-suffix``: longest suffix shared by a set of host names.
- ``hostutils strip-suffix``: host names with a (common) suffix removed.
- ``hostutils parse-url``: scheme-checked URL parsing.

Notes
- The CLI version is sourced from `hostutils.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Every subcommand runs inside a scope of the group's `Tracer`; slow runs are
  logged at INFO (visible with ``-v``) and always appended to the slow-call
  log (``--slow-log-path``) unless ``--no-slow-log`` is given.

Examples
    $ hostutils common-suffix node1.example.com node2.example.com
    $ hostutils -v strip-suffix node1.example.com node2.example.com
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from hostutils import __version__
from hostutils.logging import (
    SLOW_CALL_LOG_NAME,
    config_console_handler,
    config_slow_call_log,
    log_startup,
)
from hostutils.tracing import Tracer

from .commands import common_suffix, parse_url_cmd, strip_suffix
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """hostutils command-line interface.

    Small helpers for cluster host names and URLs: find the domain tail a set of
    node names share, strip it for compact display, and parse URLs that must
    carry a scheme.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--slow-log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File that slow-call lines are appended to, whatever the console verbosity.",
    default=Path(user_log_dir("hostutils", appauthor=False)) / SLOW_CALL_LOG_NAME,
    envvar="HOSTUTILS_SLOW_LOG",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--slow-log/--no-slow-log",
    "slow_log",
    is_flag=True,
    help="Append slow-call lines to --slow-log-path. Use --no-slow-log to disable.",
    default=True,
    envvar="HOSTUTILS_SLOW_LOG_ENABLED",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and slow-call log. Repeatable (e.g. -L hostutils.tracing=WARNING) "
        "or via HOSTUTILS_LOGGER_LEVEL (comma/space list)."
    ),
    envvar="HOSTUTILS_LOGGER_LEVEL",
    show_envvar=True,
)
@clickx.pass_context
def hostutils(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    slow_log_path: Path,
    slow_log: bool,
    logger_levels: dict[str, int],
) -> None:
    """hostutils command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) slow-call log
    if slow_log:
        handlers.append(config_slow_call_log(slow_log_path))

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) one tracer for the whole run; a bad threshold is reported here, once
    tracer = Tracer()
    ctx.obj = tracer

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        slow_call_log=slow_log_path if slow_log else None,
        trace_threshold=tracer.threshold,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


hostutils.add_command(common_suffix)
hostutils.add_command(strip_suffix)
hostutils.add_command(parse_url_cmd)
