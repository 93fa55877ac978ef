"""Command line argument handling package."""

from pathedit.ui.cli.args.parser import ArgumentParser
from pathedit.ui.cli.args.options import AnalyzeArgs, CLIArgs, EditArgs

__all__ = ["ArgumentParser", "AnalyzeArgs", "CLIArgs", "EditArgs"]
