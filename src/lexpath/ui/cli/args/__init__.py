"""Command line argument handling package."""

from lexpath.ui.cli.args.options import CLIArgs, CompareArgs, InspectArgs, JoinArgs
from lexpath.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "CompareArgs", "InspectArgs", "JoinArgs"]
