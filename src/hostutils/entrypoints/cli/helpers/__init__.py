"""Helpers for the hostutils CLI."""

from .log_level_parser import parse_log_level

__all__ = ["parse_log_level"]
