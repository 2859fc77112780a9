"""Display management for CLI interface."""

from lexpath.ui.cli.display.path_display import PathDisplay

__all__ = ["PathDisplay"]
