"""
Summary: Forward and backward element traversal, including the cursor object.
Why: Element kinds are derived from offsets alone, so each boundary needs coverage.
"""

from __future__ import annotations

from itertools import product

import pytest

from lexpath.features.path import (
    POSIX_GRAMMAR,
    WINDOWS_GRAMMAR,
    InvalidIteratorUseError,
    PathGrammar,
    PathIterator,
    PathValue,
)
from lexpath.features.path.domain.element_iterator import (
    element_at,
    iter_elements,
    iter_elements_reversed,
    next_offset,
    previous_offset,
)

POSIX_ELEMENTS: list[tuple[bytes, list[bytes]]] = [
    (b"", []),
    (b"/", [b"/"]),
    (b"a", [b"a"]),
    (b"a/", [b"a", b"."]),
    (b"a/b/", [b"a", b"b", b"."]),
    (b"a//b", [b"a", b"b"]),
    (b"/a/b", [b"/", b"a", b"b"]),
    (b"//net/a", [b"/", b"net", b"a"]),
    (b"../x", [b"..", b"x"]),
]

WINDOWS_ELEMENTS: list[tuple[str, list[str]]] = [
    ("C:", ["C:"]),
    ("C:/a", ["C:", "\\", "a"]),
    ("C:a\\b", ["C:", "a", "b"]),
    ("/a", ["\\", "a"]),
    ("\\\\server\\share\\a", ["\\\\server\\share", "\\", "a"]),
    ("a\\b/", ["a", "b", "."]),
]


@pytest.mark.parametrize(("seq", "expected"), POSIX_ELEMENTS)
def test_posix_forward_and_backward(seq: bytes, expected: list[bytes]) -> None:
    assert list(iter_elements(seq, POSIX_GRAMMAR)) == expected
    assert list(iter_elements_reversed(seq, POSIX_GRAMMAR)) == expected[::-1]


@pytest.mark.parametrize(("seq", "expected"), WINDOWS_ELEMENTS)
def test_windows_forward_and_backward(seq: str, expected: list[str]) -> None:
    assert list(iter_elements(seq, WINDOWS_GRAMMAR)) == expected
    assert list(iter_elements_reversed(seq, WINDOWS_GRAMMAR)) == expected[::-1]


def test_offsets_of_trailing_separator_path() -> None:
    """The implicit dot sits on the last separator, the end on ``len``."""
    seq = b"a/b/"
    positions = [0]
    while positions[-1] < len(seq):
        positions.append(next_offset(seq, POSIX_GRAMMAR, positions[-1]))
    assert positions == [0, 2, 3, 4]
    assert element_at(seq, POSIX_GRAMMAR, 3) == b"."
    assert element_at(seq, POSIX_GRAMMAR, 4) == b""


def test_offsets_walk_back_symmetrically() -> None:
    seq = "C:/a"
    assert previous_offset(seq, WINDOWS_GRAMMAR, 4) == 3
    assert previous_offset(seq, WINDOWS_GRAMMAR, 3) == 2
    assert previous_offset(seq, WINDOWS_GRAMMAR, 2) == 0


def test_next_offset_past_end_raises() -> None:
    with pytest.raises(InvalidIteratorUseError):
        _ = next_offset(b"a", POSIX_GRAMMAR, 1)


def test_previous_offset_before_begin_raises() -> None:
    with pytest.raises(InvalidIteratorUseError):
        _ = previous_offset(b"a", POSIX_GRAMMAR, 0)


class TestPathIterator:
    """Cursor semantics on top of the offset scans."""

    def test_begin_equals_end_for_empty_path(self) -> None:
        path = PathValue(b"", grammar=POSIX_GRAMMAR)
        assert path.begin() == path.end()
        assert path.begin().at_end

    def test_forward_walk_yields_owned_values(self) -> None:
        path = PathValue(b"/usr/lib", grammar=POSIX_GRAMMAR)
        elements = [element.native() for element in path.begin()]
        assert elements == [b"/", b"usr", b"lib"]
        assert all(isinstance(element, PathValue) for element in path)

    def test_increment_then_decrement_round_trips(self) -> None:
        path = PathValue("C:\\dir\\file", grammar=WINDOWS_GRAMMAR)
        cursor = path.begin()
        _ = cursor.increment().increment()
        assert cursor.element.native() == "dir"
        _ = cursor.decrement()
        assert cursor.element.native() == "\\"
        assert cursor.position == 2

    def test_decrement_from_end_reaches_last_element(self) -> None:
        path = PathValue(b"a/b/", grammar=POSIX_GRAMMAR)
        cursor = path.end().decrement()
        assert cursor.element.native() == b"."
        assert cursor.position == 3

    def test_dereferencing_end_raises(self) -> None:
        path = PathValue(b"a", grammar=POSIX_GRAMMAR)
        with pytest.raises(InvalidIteratorUseError):
            _ = path.end().element

    def test_increment_past_end_raises(self) -> None:
        path = PathValue(b"a", grammar=POSIX_GRAMMAR)
        with pytest.raises(InvalidIteratorUseError):
            _ = path.end().increment()

    def test_decrement_before_begin_raises(self) -> None:
        path = PathValue(b"a", grammar=POSIX_GRAMMAR)
        with pytest.raises(InvalidIteratorUseError):
            _ = path.begin().decrement()

    def test_copy_is_independent(self) -> None:
        path = PathValue(b"a/b", grammar=POSIX_GRAMMAR)
        first = path.begin()
        second = first.copy()
        _ = second.increment()
        assert first.position == 0
        assert second.element.native() == b"b"
        assert first != second

    def test_cursors_over_different_paths_differ(self) -> None:
        left = PathValue(b"a", grammar=POSIX_GRAMMAR)
        right = PathValue(b"a", grammar=POSIX_GRAMMAR)
        assert left.begin() != right.begin()
        assert PathIterator.begin(left) == left.begin()

    def test_reversed_builtin(self) -> None:
        path = PathValue("\\\\srv\\share\\x", grammar=WINDOWS_GRAMMAR)
        assert [element.native() for element in reversed(path)] == [
            "x",
            "\\",
            "\\\\srv\\share",
        ]


@pytest.mark.parametrize(
    ("grammar", "alphabet", "max_length"),
    [(POSIX_GRAMMAR, "a/.", 6), (WINDOWS_GRAMMAR, "a/\\:C.x", 5)],
    ids=["posix", "windows"],
)
def test_backward_walk_mirrors_forward_walk(grammar: PathGrammar, alphabet: str, max_length: int) -> None:
    """Every short path yields the same elements in both directions."""
    for length in range(max_length + 1):
        for units in product(alphabet, repeat=length):
            seq = grammar.encode_constant("".join(units))
            forward = list(iter_elements(seq, grammar))
            assert list(iter_elements_reversed(seq, grammar)) == forward[::-1], seq
