"""src/pathedit/ui/cli/commands/analyze.py
What: Run the analyze command and display its report.
Why: Keep report rendering separate from path editing commands.
"""

import sys
from collections.abc import Mapping
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from pathedit.application.services import PathEditRequest, PathEditService
from pathedit.features.pathlist import PathOperation
from pathedit.ui.cli.args.options import AnalyzeArgs
from pathedit.ui.cli.commands.executor import CommandExecutor
from pathedit.ui.cli.display.analysis import AnalysisDisplay


@final
class AnalyzeCommand(CommandExecutor):
    """Command that reports invalid, duplicate and shadowing entries."""

    args: AnalyzeArgs
    display: AnalysisDisplay

    def __init__(
        self,
        args: AnalyzeArgs,
        *,
        service: PathEditService | None = None,
        environ: Mapping[str, str] | None = None,
        display: AnalysisDisplay | None = None,
    ) -> None:
        super().__init__(args, service=service, environ=environ)
        self.args = args
        self.display = display or AnalysisDisplay()

    @override
    def execute(self) -> int:
        request = PathEditRequest(
            operation=PathOperation.ANALYZE,
            source=self.read_source(),
            shadows=self.args.shadows,
        )
        result = self.service.run(request)
        assert result.report is not None
        self.display.show_report(result.report)
        return 0
