"""Compare command: order two paths."""

from typing import final, override

from lexpath.ui.cli.args.options import CompareArgs
from lexpath.ui.cli.commands.executor import CommandExecutor


@final
class CompareCommand(CommandExecutor[CompareArgs, int]):
    """Compare two paths element by element and print the ordering."""

    @override
    def execute(self) -> int:
        left = self.make_path(self.args.left)
        right = self.make_path(self.args.right)
        order = left.compare(right)
        self.display.show_comparison(left, right, order)
        return order
