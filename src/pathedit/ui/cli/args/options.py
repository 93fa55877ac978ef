"""Command line argument options."""

from dataclasses import dataclass, field
from typing import Literal, final


@final
@dataclass(slots=True)
class EditArgs:
    """Arguments for the ``print``, ``new``, ``add`` and ``append`` subcommands."""

    command: Literal["print", "new", "add", "append"]
    env_var: str
    directories: list[str] = field(default_factory=list)
    filter: bool = False
    normalize: bool = False
    pretty: bool = False
    verbose: bool = False
    quiet: bool = False


@final
@dataclass(slots=True)
class AnalyzeArgs:
    """Arguments for the ``analyze`` subcommand."""

    command: Literal["analyze"]
    env_var: str
    shadows: bool = False
    verbose: bool = False
    quiet: bool = False


CLIArgs = EditArgs | AnalyzeArgs
