"""Command-line interface for textshape.

This module provides the CLI using Typer with rich output.
"""

from textshape.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
