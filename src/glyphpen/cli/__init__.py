"""Command-line interface for glyphpen.

This module provides the CLI using Typer with rich output.

Key features:
- Signed area per glyph, components included
- Listing of the primitive segments a glyph decomposes into
- Strict or lenient handling of missing components
"""

from glyphpen.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
