"""Command-line interface for outliner.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Cleanup mode selection
- Per-stage point counts in verbose or dry-run mode
- Verbose/quiet output modes
- Detailed error reporting
"""

from outliner.cli.app import cli, main

__all__ = ["cli", "main"]
