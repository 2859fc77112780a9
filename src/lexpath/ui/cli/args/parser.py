"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from lexpath.config import settings
from lexpath.features.path import available_grammars
from lexpath.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lexpath.ui.cli.args.options import CLIArgs, CompareArgs, InspectArgs, JoinArgs


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
            prog="lexpath",
            description="lexpath - inspect, join and compare paths under POSIX or Windows rules.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show the decomposition and elements of a path",
        )
        _ = inspect_parser.add_argument("path", type=str, help="Path to inspect", metavar="PATH")
        ArgumentParser._configure_common(inspect_parser)

        join_parser = subparsers.add_parser(
            "join",
            help="Append segments to a base path",
        )
        _ = join_parser.add_argument("base", type=str, help="Starting path", metavar="BASE")
        _ = join_parser.add_argument(
            "segments",
            type=str,
            nargs="+",
            help="Segments appended in order",
            metavar="SEGMENT",
        )
        ArgumentParser._configure_common(join_parser)

        compare_parser = subparsers.add_parser(
            "compare",
            help="Order two paths element by element",
        )
        _ = compare_parser.add_argument("left", type=str, metavar="LEFT")
        _ = compare_parser.add_argument("right", type=str, metavar="RIGHT")
        ArgumentParser._configure_common(compare_parser)

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "--grammar",
            type=str,
            choices=available_grammars(),
            help=f"Path grammar (default: {settings.DEFAULT_GRAMMAR_NAME})",
        )
        _ = parser.add_argument(
            "--encoding",
            type=str,
            help=f"Encoding of the default codec (default: {settings.DEFAULT_ENCODING})",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all logging except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=Path,
            nargs="?",
            const=DEFAULT_LOG_FILE,
            metavar="PATH",
            help=f"Also write a debug log (bare flag: {DEFAULT_LOG_FILE})",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = settings.CONSOLE_LOG_LEVEL

        log_file: Path | None = parsed_args.log_file or settings.LOG_FILE
        _ = setup_logger(log_file=log_file, console_level=log_level)

        command: str = parsed_args.command
        common = {
            "grammar": parsed_args.grammar,
            "encoding": parsed_args.encoding,
            "verbose": is_verbose,
            "quiet": is_quiet,
        }

        if command == "inspect":
            return InspectArgs(command="inspect", path=parsed_args.path, **common)

        if command == "join":
            return JoinArgs(
                command="join",
                base=parsed_args.base,
                segments=list(parsed_args.segments),
                **common,
            )

        if command == "compare":
            return CompareArgs(
                command="compare",
                left=parsed_args.left,
                right=parsed_args.right,
                **common,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
