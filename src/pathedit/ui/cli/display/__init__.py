"""Display management for CLI interface."""

from pathedit.ui.cli.display.analysis import AnalysisDisplay
from pathedit.ui.cli.display.path_output import PathDisplay

__all__ = ["AnalysisDisplay", "PathDisplay"]
