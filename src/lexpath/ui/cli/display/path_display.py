"""src/lexpath/ui/cli/display/path_display.py
What: Render path decompositions, join results and comparisons in the console.
Why: Keep console output formatting consistent across the subcommands.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from lexpath.features.path import PathValue

_ORDER_SYMBOLS: dict[int, str] = {-1: "<", 0: "==", 1: ">"}


def _describe(value: PathValue) -> Text:
    return Text(repr(value.string())) if value else Text("-", style="dim")


@final
class PathDisplay:
    """Handles path output in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the display.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_inspection(self, path: PathValue) -> None:
        """Print the decomposition table and element list of ``path``."""
        table = Table(title=Text(f"{path.string()!r} ({path.grammar.name})"))
        table.add_column("Part", style="bold")
        table.add_column("Value")

        table.add_row("root name", _describe(path.root_name()))
        table.add_row("root directory", _describe(path.root_directory()))
        table.add_row("relative path", _describe(path.relative_path()))
        table.add_row("parent path", _describe(path.parent_path()))
        table.add_row("filename", _describe(path.filename()))
        table.add_row("stem", _describe(path.stem()))
        table.add_row("extension", _describe(path.extension()))
        table.add_row("generic", Text(repr(path.generic_string())))
        table.add_row("absolute", "yes" if path.is_absolute() else "no")
        self.console.print(table)

        elements = [element.string() for element in path]
        self.console.print(f"[bold]Elements ({len(elements)}):[/bold]")
        for index, element in enumerate(elements):
            self.console.print(f"  {index}: {element!r}", markup=False)

    def show_join(self, result: PathValue) -> None:
        """Print the native and generic forms of a joined path."""
        self.console.print(f"native:  {result.string()}", markup=False)
        self.console.print(f"generic: {result.generic_string()}", markup=False)

    def show_comparison(self, left: PathValue, right: PathValue, order: int) -> None:
        """Print ``left <op> right`` for a comparison result."""
        self.console.print(
            f"{left.string()!r} {_ORDER_SYMBOLS[order]} {right.string()!r}",
            markup=False,
        )
