"""Helpers for parsing logger-level CLI options.

Options take the form NAME=LEVEL, either repeated or as one comma/space
separated string (as read from an environment variable). Values are
normalized into individual items and converted to numeric logging levels.
"""

import logging
import re

import click

def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the option value into non-empty items.

    Args:
        value (str | list[str] | tuple[str, ...]): The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    values = value if isinstance(value, (tuple, list)) else [value]
    items: list[str] = []
    for v in values:
        items.extend([s for s in re.split(r"[,\s]+", v) if s])
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Later pairs override earlier ones for the same logger name.

    Args:
        ctx (click.Context): Click context (unused).
        param (click.Parameter | None): Click parameter (unused).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
