"""Command execution package for CLI."""

from lexpath.ui.cli.commands.compare import CompareCommand
from lexpath.ui.cli.commands.executor import CommandExecutor
from lexpath.ui.cli.commands.inspect_path import InspectCommand
from lexpath.ui.cli.commands.join import JoinCommand

__all__ = ["CommandExecutor", "CompareCommand", "InspectCommand", "JoinCommand"]
