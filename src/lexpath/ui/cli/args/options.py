"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    path: str
    grammar: str | None
    encoding: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    base: str
    segments: list[str]
    grammar: str | None
    encoding: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CompareArgs:
    """Command line arguments for the ``compare`` subcommand."""

    command: Literal["compare"]
    left: str
    right: str
    grammar: str | None
    encoding: str | None
    verbose: bool
    quiet: bool


CLIArgs = InspectArgs | JoinArgs | CompareArgs

__all__ = ["CLIArgs", "CompareArgs", "InspectArgs", "JoinArgs"]
