"""Inspect command: show how a path decomposes."""

from typing import final, override

from lexpath.features.path import PathValue
from lexpath.platform.logging import logger
from lexpath.ui.cli.args.options import InspectArgs
from lexpath.ui.cli.commands.executor import CommandExecutor


@final
class InspectCommand(CommandExecutor[InspectArgs, PathValue]):
    """Decompose one path and print every part."""

    @override
    def execute(self) -> PathValue:
        path = self.make_path(self.args.path)
        logger.debug("Inspecting %r", path)
        self.display.show_inspection(path)
        return path
