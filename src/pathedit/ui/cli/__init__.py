"""Command line interface package."""

from pathedit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
