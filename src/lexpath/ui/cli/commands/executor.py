"""src/lexpath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Resolve grammar and codec once so subcommands only build and show paths.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from lexpath.features.path import PathCodec, PathGrammar, PathValue, get_grammar, imbue
from lexpath.ui.cli.args.options import CLIArgs
from lexpath.ui.cli.display import PathDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT
    grammar: PathGrammar
    display: PathDisplay

    def __init__(self, args: ArgsT, display: PathDisplay | None = None) -> None:
        """Initialize command executor.

        Installs the requested codec process-wide before any path is built.

        Args:
            args: Command line arguments.
            display: Output renderer; a stdout display when ``None``.
        """
        self.args = args
        self.grammar = get_grammar(args.grammar)
        if args.encoding:
            _ = imbue(PathCodec(args.encoding))
        self.display = display or PathDisplay()

    def make_path(self, source: str) -> PathValue:
        return PathValue(source, grammar=self.grammar)

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command and render its result."""
        pass
