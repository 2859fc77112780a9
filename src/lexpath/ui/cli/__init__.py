"""Command line interface package."""

from lexpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
