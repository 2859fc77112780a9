"""Join command: append segments to a base path."""

from typing import final, override

from lexpath.features.path import PathValue
from lexpath.platform.logging import logger
from lexpath.ui.cli.args.options import JoinArgs
from lexpath.ui.cli.commands.executor import CommandExecutor


@final
class JoinCommand(CommandExecutor[JoinArgs, PathValue]):
    """Append each segment in order and print the result."""

    @override
    def execute(self) -> PathValue:
        result = self.make_path(self.args.base)
        for segment in self.args.segments:
            _ = result.append(segment)
            logger.debug("After %r: %r", segment, result)
        self.display.show_join(result)
        return result
