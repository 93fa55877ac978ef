"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import final

from pathedit.config import Config
from pathedit.platform.logging import logger, setup_logger
from pathedit.ui.cli.args.options import AnalyzeArgs, CLIArgs, EditArgs

_EDIT_COMMANDS: dict[str, str] = {
    "new": "Build a new path from directories",
    "add": "Add directories to the front of the path",
    "append": "Add directories to the back of the path",
}


def _package_version() -> str:
    try:
        return version("pathedit")
    except PackageNotFoundError:
        return "unknown"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathedit",
            description="Edit, filter, and print PATH-like environment variables.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {_package_version()}",
        )
        _ = parser.add_argument(
            "-e",
            "--env",
            dest="env_var",
            type=str,
            metavar="NAME",
            help="Name of path environment variable (default: PATH or configured env_var)",
        )
        _ = parser.add_argument(
            "-f",
            "--filter",
            action="store_true",
            help="Filter non-directories from path",
        )
        _ = parser.add_argument(
            "-n",
            "--normalize",
            action="store_true",
            help="Normalize directory names in path",
        )
        _ = parser.add_argument(
            "-p",
            "--pretty",
            action="store_true",
            help="Print path one directory per line",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug diagnostics on stderr",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

        _ = subparsers.add_parser(
            "print",
            help="Print the current path one directory per line",
        )

        for name, help_text in _EDIT_COMMANDS.items():
            edit_parser = subparsers.add_parser(name, help=help_text)
            _ = edit_parser.add_argument(
                "directories",
                nargs="*",
                metavar="DIRECTORY",
                help="Directory or colon-delimited list of directories",
            )

        analyze_parser = subparsers.add_parser(
            "analyze",
            help="Analyze the current path",
        )
        _ = analyze_parser.add_argument(
            "-s",
            "--shadows",
            action="store_true",
            default=None,
            help="Also report files shadowed by earlier directories",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigError: If the configuration file cannot be used.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        env_var: str = parsed_args.env_var or configuration.env_var
        command: str = parsed_args.command or "print"

        if command == "analyze":
            shadows = parsed_args.shadows
            return AnalyzeArgs(
                command="analyze",
                env_var=env_var,
                shadows=configuration.analyze_shadows if shadows is None else shadows,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command in {"print", "new", "add", "append"}:
            return EditArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                env_var=env_var,
                directories=list(getattr(parsed_args, "directories", [])),
                filter=parsed_args.filter,
                normalize=parsed_args.normalize,
                pretty=parsed_args.pretty,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
