"""src/pathedit/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse environment access and service construction across commands.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

from pathedit.application.services import PathEditService
from pathedit.platform.logging import logger
from pathedit.ui.cli.args.options import CLIArgs


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    service: PathEditService
    environ: Mapping[str, str]

    def __init__(
        self,
        args: CLIArgs,
        *,
        service: PathEditService | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Service running the path operation.
            environ: Environment to read the path variable from; defaults to ``os.environ``.
        """
        self.args = args
        self.service = service or PathEditService()
        self.environ = environ if environ is not None else os.environ

    def read_source(self) -> str:
        """Return the raw value of the configured environment variable.

        An unset variable reads as an empty path.
        """
        value = self.environ.get(self.args.env_var)
        if value is None:
            logger.debug("Environment variable %s is not set; using empty path", self.args.env_var)
            return ""
        return value

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
