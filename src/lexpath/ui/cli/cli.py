"""Command line interface for lexpath."""

import sys
from typing import final

from lexpath.features.path import PathError
from lexpath.platform.logging import logger
from lexpath.ui.cli.args import ArgumentParser
from lexpath.ui.cli.args.options import CLIArgs, CompareArgs, InspectArgs, JoinArgs
from lexpath.ui.cli.commands import CompareCommand, InspectCommand, JoinCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InspectArgs):
                _ = InspectCommand(args).execute()
                return

            if isinstance(args, JoinArgs):
                _ = JoinCommand(args).execute()
                return

            if isinstance(args, CompareArgs):
                _ = CompareCommand(args).execute()
                return

            logger.error("Unsupported command: %s", args.command)
            sys.exit(2)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PathError as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
