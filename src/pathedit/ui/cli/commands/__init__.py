"""Command execution package for CLI."""

from pathedit.ui.cli.commands.analyze import AnalyzeCommand
from pathedit.ui.cli.commands.edit import EditCommand
from pathedit.ui.cli.commands.executor import CommandExecutor

__all__ = ["AnalyzeCommand", "CommandExecutor", "EditCommand"]
