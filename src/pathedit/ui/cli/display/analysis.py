"""src/pathedit/ui/cli/display/analysis.py
What: Render the sections of a path analysis report.
Why: Keep the labelled, indented report layout in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from rich.console import Console

from pathedit.features.pathlist import AnalysisReport, ShadowedDirectory

INDENT: Final[str] = "    "
EMPTY_SECTION: Final[str] = "None"


@final
class AnalysisDisplay:
    """Writes analysis reports to standard output."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize analysis display.

        Args:
            console: Console to write to; defaults to standard output.
        """
        self.console = console or Console(highlight=False, emoji=False, markup=False)

    def show_report(self, report: AnalysisReport) -> None:
        """Display the invalid, duplicate and optional shadow sections."""

        self._show_section("Invalid Directories", report.invalid_directories)
        self._write_line("")
        self._show_section("Duplicate Directories", report.duplicate_directories)

        if report.shadowed_entries is not None:
            self._write_line("")
            self._show_shadows(report.shadowed_entries)

    def _show_section(self, title: str, entries: Sequence[str]) -> None:
        self.console.out(f"{title}:", style="bold")
        if not entries:
            self._write_line(f"{INDENT}{EMPTY_SECTION}")
            return
        for entry in entries:
            self._write_line(f"{INDENT}{entry}")

    def _show_shadows(self, entries: Sequence[ShadowedDirectory]) -> None:
        self.console.out("Shadowed Files:", style="bold")
        if not entries:
            self._write_line(f"{INDENT}{EMPTY_SECTION}")
            return
        for entry in entries:
            self._write_line(f"{INDENT}{entry.directory}")
            for shadow in entry.shadows:
                self._write_line(
                    f"{INDENT}{INDENT}{shadow.filename} (shadows {shadow.covered_directory})"
                )

    def _write_line(self, line: str) -> None:
        # Entries are written verbatim; only section headers go through rich.
        _ = self.console.file.write(f"{line}\n")
        self.console.file.flush()
