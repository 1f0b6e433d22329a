"""Entrypoints for hostutils.

Expose the helpers to the outside world as CLI commands. Parse and validate
inputs, call into `hostutils.utils` and `hostutils.tracing`, and present results.
"""
