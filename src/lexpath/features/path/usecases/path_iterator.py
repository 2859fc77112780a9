"""
Summary: Bidirectional element cursor over a borrowed path value.
Why: Expose begin/end/increment/decrement traversal on top of the pure scans.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import final

from lexpath.features.path.domain import comparator
from lexpath.features.path.domain.element_iterator import (
    element_at,
    next_offset,
    previous_offset,
)
from lexpath.features.path.domain.errors import InvalidIteratorUseError
from lexpath.features.path.usecases.path_value import PathValue


@final
class PathIterator:
    """Cursor holding a borrowed path, an offset and the current element.

    The offset is where the current element starts in the path's native
    sequence (for the implicit trailing ``"."`` it is the final separator);
    ``len(native)`` is the end position. The element is materialized as an
    owned ``PathValue`` on every move. Mutating the borrowed path
    invalidates the cursor.
    """

    __slots__ = ("_path", "_pos", "_element")

    _path: PathValue
    _pos: int
    _element: PathValue

    def __init__(self, path: PathValue, pos: int) -> None:
        self._path = path
        self._pos = pos
        self._element = self._materialize()

    @classmethod
    def begin(cls, path: PathValue) -> PathIterator:
        return cls(path, 0)

    @classmethod
    def end(cls, path: PathValue) -> PathIterator:
        return cls(path, len(path.native()))

    def _materialize(self) -> PathValue:
        units = element_at(self._path.native(), self._path.grammar, self._pos)
        return self._path._derive(units)  # pyright: ignore[reportPrivateUsage]

    @property
    def path(self) -> PathValue:
        return self._path

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._path.native())

    @property
    def element(self) -> PathValue:
        """Return the current element.

        Raises:
            InvalidIteratorUseError: If the cursor is at the end position.
        """
        if self.at_end:
            raise InvalidIteratorUseError("cannot dereference the end of a path")
        return self._element

    def increment(self) -> PathIterator:
        self._pos = next_offset(self._path.native(), self._path.grammar, self._pos)
        self._element = self._materialize()
        return self

    def decrement(self) -> PathIterator:
        self._pos = previous_offset(self._path.native(), self._path.grammar, self._pos)
        self._element = self._materialize()
        return self

    def copy(self) -> PathIterator:
        clone = PathIterator.__new__(PathIterator)
        clone._path = self._path
        clone._pos = self._pos
        clone._element = self._element
        return clone

    def __iter__(self) -> Iterator[PathValue]:
        return self

    def __next__(self) -> PathValue:
        if self.at_end:
            raise StopIteration
        current = self._element
        _ = self.increment()
        return current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathIterator):
            return NotImplemented
        return self._path is other._path and self._pos == other._pos

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return f"PathIterator({self._path!r}, pos={self._pos})"


def _walk(first: PathIterator, last: PathIterator) -> Iterator[PathValue]:
    cursor = first.copy()
    while cursor != last:
        yield cursor.element
        _ = cursor.increment()


def lexicographical_compare(
    first1: PathIterator,
    last1: PathIterator,
    first2: PathIterator,
    last2: PathIterator,
) -> bool:
    """Return whether ``[first1, last1)`` sorts before ``[first2, last2)``.

    Elements compare in generic form; both ranges must come from paths of
    the same grammar.
    """
    grammar = first1.path.grammar
    result = comparator.compare_elements(
        (element.native() for element in _walk(first1, last1)),
        (element.native() for element in _walk(first2, last2)),
        grammar,
    )
    return result < 0


__all__ = ["PathIterator", "lexicographical_compare"]
