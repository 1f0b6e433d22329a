"""Command-line interface for hostutils."""
