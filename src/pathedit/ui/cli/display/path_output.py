"""src/pathedit/ui/cli/display/path_output.py
What: Render an edited path as one line or one directory per line.
Why: Output is consumed by shells, so it is written verbatim without styling.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from pathedit.features.pathlist import format_path


@final
class PathDisplay:
    """Writes edited paths to standard output."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize path display.

        Args:
            console: Console to write to; defaults to standard output.
        """
        self.console = console or Console(highlight=False, emoji=False, markup=False)

    def show_path(self, directories: Sequence[str], *, one_per_line: bool = False) -> None:
        """Display directories joined by colons or one per line.

        Args:
            directories: Entries to display, in order.
            one_per_line: Whether to print each entry on its own line.
        """
        # Entries may hold tabs or control characters; bypass rich rendering.
        if one_per_line:
            for directory in directories:
                self._write_line(directory)
            return

        self._write_line(format_path(directories))

    def _write_line(self, line: str) -> None:
        _ = self.console.file.write(f"{line}\n")
        self.console.file.flush()
