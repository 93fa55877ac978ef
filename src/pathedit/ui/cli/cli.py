"""Command line interface for pathedit."""

import sys
from collections.abc import Sequence
from typing import final

from pathedit.config import ConfigError
from pathedit.features.pathlist import PathProbeError
from pathedit.platform.logging import logger
from pathedit.ui.cli.args import ArgumentParser
from pathedit.ui.cli.args.options import AnalyzeArgs, CLIArgs
from pathedit.ui.cli.commands import AnalyzeCommand, CommandExecutor, EditCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments and exit on failure.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                AnalyzeCommand(args) if isinstance(args, AnalyzeArgs) else EditCommand(args)
            )
            exit_code = command.execute()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (ConfigError, PathProbeError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
