"""Logging setup for the hostutils CLI.

Two destinations are configured:

- the console, through Rich, filtered by the -v/-q verbosity;
- the slow-call log, a plain text file that receives only the
  ``"<name>() took <seconds> seconds"`` lines emitted by `hostutils.tracing`,
  whatever the console verbosity. It is appended to, so it accumulates a
  history of slow commands across runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from hostutils.tracing import SLOW_CALL_FORMAT

# pylint: disable=too-few-public-methods

SLOW_CALL_LOG_NAME = "slow-calls.log"
SLOW_CALL_LOG_FORMAT = "%(asctime)s %(process)d %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def is_slow_call(record: logging.LogRecord) -> bool:
    """True if *record* is a slow-call line written by a tracer."""
    return record.msg == SLOW_CALL_FORMAT


class SlowCallFilter(logging.Filter):
    """Let through only slow-call records.

    Records are matched on their unformatted message, so the filter works for
    any logger a `Tracer` was given.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return is_slow_call(record)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show timestamps, logger names and source paths.
        color: Enable color output when True.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


class _SlowCallFileHandler(logging.FileHandler):
    """Delayed FileHandler that creates the parent directory on first write."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, mode="a", encoding="utf-8", delay=True)

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def config_slow_call_log(path: Path) -> logging.FileHandler:
    """Return a handler appending slow-call lines to *path*.

    The file and its parent directory are only created once a slow call is
    actually logged, so fast runs leave nothing behind.
    """
    handler = _SlowCallFileHandler(path)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(SLOW_CALL_LOG_FORMAT))
    handler.addFilter(SlowCallFilter())
    return handler


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    slow_call_log: Path | None,
    trace_threshold: float,
    logger_levels: dict[str, int],
) -> None:
    """Log the effective logging and tracing setup at DEBUG."""
    logger.debug(
        "hostutils %s: console=%s, trace threshold=%ss, slow-call log=%s",
        app_version,
        logging.getLevelName(level),
        trace_threshold,
        slow_call_log or "OFF",
    )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
