"""Tests for CLI functionality."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from lexpath.features.path import POSIX_GRAMMAR, WINDOWS_GRAMMAR, PathValue
from lexpath.ui.cli import CommandProcessor, main


@pytest.fixture
def mock_display(mocker: MockerFixture) -> MagicMock:
    """Replace the console display used by every command.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock display instance.
    """
    display_class = mocker.patch("lexpath.ui.cli.commands.executor.PathDisplay")
    return display_class.return_value


def test_join_command(mock_display: MagicMock) -> None:
    """Segments are appended in order under the requested grammar."""
    CommandProcessor.process_command(["join", "a", "b", "c", "--grammar", "posix"])

    mock_display.show_join.assert_called_once()
    (result,) = mock_display.show_join.call_args.args
    assert result == PathValue(b"a/b/c", grammar=POSIX_GRAMMAR)


def test_join_command_windows(mock_display: MagicMock) -> None:
    CommandProcessor.process_command(["join", "C:", "dir", "D:\\x", "--grammar", "windows"])

    (result,) = mock_display.show_join.call_args.args
    assert result.native() == "D:\\x"
    assert result.grammar is WINDOWS_GRAMMAR


def test_inspect_command(mock_display: MagicMock) -> None:
    CommandProcessor.process_command(["inspect", "/usr/lib/x.so", "--grammar", "posix"])

    (path,) = mock_display.show_inspection.call_args.args
    assert path.filename().native() == b"x.so"


def test_compare_command(mock_display: MagicMock) -> None:
    CommandProcessor.process_command(["compare", "a/b", "a.b", "--grammar", "posix"])

    left, right, order = mock_display.show_comparison.call_args.args
    assert (left.native(), right.native(), order) == (b"a/b", b"a.b", -1)


def test_unknown_encoding_exits_with_error(mock_display: MagicMock) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["inspect", "a", "--encoding", "no-such-codec"])
    assert excinfo.value.code == 1
    mock_display.show_inspection.assert_not_called()


def test_conversion_failure_exits_with_error(mock_display: MagicMock) -> None:
    _ = mock_display
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(
            ["inspect", "caf\u00e9", "--grammar", "posix", "--encoding", "ascii"]
        )
    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    command = mocker.patch("lexpath.ui.cli.cli.InspectCommand")
    command.return_value.execute.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["inspect", "a"])
    assert excinfo.value.code == 130


def test_unknown_grammar_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["inspect", "a", "--grammar", "vms"])
    assert excinfo.value.code == 2


def test_main_returns_zero(mocker: MockerFixture, mock_display: MagicMock) -> None:
    _ = mocker.patch("sys.argv", ["lexpath", "join", "x", "y", "--grammar", "windows"])

    assert main() == 0
    (result,) = mock_display.show_join.call_args.args
    assert result.native() == "x\\y"


def test_unrecognised_args_exit_with_usage_error(mocker: MockerFixture) -> None:
    bogus = mocker.MagicMock()
    bogus.command = "frobnicate"
    _ = mocker.patch("lexpath.ui.cli.cli.ArgumentParser.process_args", return_value=bogus)
    compare = mocker.patch("lexpath.ui.cli.cli.CompareCommand")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["compare", "a", "b"])
    assert excinfo.value.code == 2
    compare.assert_not_called()
