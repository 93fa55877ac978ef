"""src/pathedit/ui/cli/commands/edit.py
What: Run the print/new/add/append commands and display the resulting path.
Why: Translate parsed options into a service request and keep output concerns local.
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
from pathedit.ui.cli.args.options import EditArgs
from pathedit.ui.cli.commands.executor import CommandExecutor
from pathedit.ui.cli.display.path_output import PathDisplay


@final
class EditCommand(CommandExecutor):
    """Command that edits the path and prints the result."""

    args: EditArgs
    display: PathDisplay

    def __init__(
        self,
        args: EditArgs,
        *,
        service: PathEditService | None = None,
        environ: Mapping[str, str] | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        super().__init__(args, service=service, environ=environ)
        self.args = args
        self.display = display or PathDisplay()

    @override
    def execute(self) -> int:
        request = PathEditRequest(
            operation=PathOperation.from_user_input(self.args.command),
            source=self.read_source(),
            directories=tuple(self.args.directories),
            filter=self.args.filter,
            normalize=self.args.normalize,
            pretty=self.args.pretty,
        )
        result = self.service.run(request)
        self.display.show_path(result.directories, one_per_line=result.one_per_line)
        return 0
