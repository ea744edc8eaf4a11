"""Command-line interface for textmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font metrics and text measurement tables
- Combined or per-glyph mesh builds with OBJ export
- Quiet output mode
- Detailed error reporting
"""

from textmesh.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
