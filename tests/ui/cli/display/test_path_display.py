"""Tests for path display functionality."""

from io import StringIO

import pytest
from rich.console import Console

from lexpath.features.path import POSIX_GRAMMAR, WINDOWS_GRAMMAR, PathValue
from lexpath.ui.cli.display import PathDisplay


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def display(buffer: StringIO) -> PathDisplay:
    """Create a display writing into an in-memory console."""
    return PathDisplay(console=Console(file=buffer, width=200, color_system=None))


def test_show_inspection(display: PathDisplay, buffer: StringIO) -> None:
    display.show_inspection(PathValue("C:/dir\\f.txt", grammar=WINDOWS_GRAMMAR))

    output = buffer.getvalue()
    assert "windows" in output
    assert "'.txt'" in output
    assert "Elements (4):" in output
    assert "3: 'f.txt'" in output
    assert "yes" in output


def test_show_inspection_marks_missing_parts(display: PathDisplay, buffer: StringIO) -> None:
    display.show_inspection(PathValue(b"name", grammar=POSIX_GRAMMAR))

    output = buffer.getvalue()
    assert "root name" in output
    assert "-" in output
    assert "no" in output


def test_show_join(display: PathDisplay, buffer: StringIO) -> None:
    display.show_join(PathValue("a\\b/c", grammar=WINDOWS_GRAMMAR))

    lines = buffer.getvalue().splitlines()
    assert lines == ["native:  a\\b/c", "generic: a/b/c"]


def test_show_join_keeps_brackets(display: PathDisplay, buffer: StringIO) -> None:
    display.show_join(PathValue(b"[bold]x", grammar=POSIX_GRAMMAR))

    assert "native:  [bold]x" in buffer.getvalue()


@pytest.mark.parametrize(("order", "symbol"), [(-1, "<"), (0, "=="), (1, ">")])
def test_show_comparison(display: PathDisplay, buffer: StringIO, order: int, symbol: str) -> None:
    left = PathValue(b"a", grammar=POSIX_GRAMMAR)
    right = PathValue(b"b", grammar=POSIX_GRAMMAR)

    display.show_comparison(left, right, order)

    assert buffer.getvalue().strip() == f"'a' {symbol} 'b'"
