"""CLI commands for ohlcview."""

from ohlcview.cli.main import cli, main

__all__ = ["cli", "main"]
