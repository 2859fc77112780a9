"""
Summary: The encoded path value with decomposition, append and comparison APIs.
Why: Offer one mutable value type whose queries always recompute from raw units.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, final

from lexpath.features.path.domain import comparator, decomposer
from lexpath.features.path.domain.decomposer import Decomposition
from lexpath.features.path.domain.element_iterator import (
    iter_elements,
    iter_elements_reversed,
)
from lexpath.features.path.domain.encoding import (
    PathCodec,
    SourceKind,
    TaggedSource,
    convert_source,
    get_codec,
    units_from_range,
)
from lexpath.features.path.domain.errors import EncodingConversionError
from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar, get_grammar
from lexpath.features.path.usecases import append as append_engine

if TYPE_CHECKING:
    from lexpath.features.path.usecases.path_iterator import PathIterator


@final
class PathValue:
    """A path stored as native code units and read under one grammar.

    The value owns its native sequence (``bytes`` for the POSIX grammar,
    ``str`` for the Windows grammar) and nothing else: decomposition
    accessors, iteration, comparison and hashing recompute from that
    sequence on every call.

    Append (``/``, ``/=``, ``append``) joins with grammar-aware separator
    handling, while concatenation (``+``, ``+=``, ``concat``) appends raw
    units. Mutating a value invalidates its iterators, and a value used as a
    dictionary key must not be mutated.

    Comparisons accept ``str``, ``bytes`` and path-like operands, read
    under this value's grammar. The hash agrees with equality between
    ``PathValue`` objects only.

    Args:
        source: Anything ``classify_source`` accepts, or another
            ``PathValue``. ``None`` builds an empty path.
        grammar: Grammar instance or name. Defaults to the source path's
            grammar, else the configured default.
        codec: Conversion object for foreign sources; defaults to the
            process-wide codec.
    """

    __slots__ = ("_native", "_grammar")

    _native: NativeSeq
    _grammar: PathGrammar

    def __init__(
        self,
        source: object = None,
        *,
        grammar: PathGrammar | str | None = None,
        codec: PathCodec | None = None,
    ) -> None:
        if grammar is None and isinstance(source, PathValue):
            self._grammar = source._grammar
        else:
            self._grammar = get_grammar(grammar)
        self._native = self._convert(source, codec)

    @classmethod
    def from_range(
        cls,
        units: Iterable[object],
        *,
        grammar: PathGrammar | str | None = None,
        codec: PathCodec | None = None,
    ) -> PathValue:
        """Build a path from an iterable of code units (ints or characters)."""
        resolved = get_grammar(grammar)
        tagged = TaggedSource(SourceKind.UNIT_RANGE, units_from_range(units))
        native = tagged.units
        if not tagged.is_native(resolved):
            native = (codec or get_codec()).to_native(tagged.units, resolved)
        return cls._from_native(native, resolved)

    @classmethod
    def _from_native(cls, native: NativeSeq, grammar: PathGrammar) -> PathValue:
        value = cls.__new__(cls)
        value._native = native
        value._grammar = grammar
        return value

    def _derive(self, native: NativeSeq) -> PathValue:
        return PathValue._from_native(native, self._grammar)

    def _convert(self, source: object, codec: PathCodec | None) -> NativeSeq:
        if source is None:
            return self._grammar.empty
        if isinstance(source, PathValue):
            if isinstance(source._native, self._grammar.native_type):
                return source._native
            return (codec or get_codec()).to_native(source._native, self._grammar)
        return convert_source(source, self._grammar, codec)

    # Native and encoded observers ---------------------------------------------

    @property
    def grammar(self) -> PathGrammar:
        return self._grammar

    def native(self) -> NativeSeq:
        """Return the stored native sequence; never converts."""
        return self._native

    def __fspath__(self) -> NativeSeq:
        return self._native

    def string(self, codec: PathCodec | None = None) -> str:
        """Return the path as ``str``, decoding native bytes if needed.

        Raises:
            EncodingConversionError: If the native bytes are not decodable.
        """
        return (codec or get_codec()).to_text(self._native)

    def to_bytes(self, codec: PathCodec | None = None) -> bytes:
        """Return the path as ``bytes``, encoding native text if needed.

        Raises:
            EncodingConversionError: If a character has no encoding.
        """
        return (codec or get_codec()).to_bytes(self._native)

    def generic_string(self, codec: PathCodec | None = None) -> str:
        """Return the path as ``str`` with every separator written as ``/``."""
        return (codec or get_codec()).to_text(self._grammar.to_generic(self._native))

    def __str__(self) -> str:
        return self.string()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return f"PathValue({self._native!r}, grammar={self._grammar.name!r})"

    def __len__(self) -> int:
        return len(self._native)

    def __bool__(self) -> bool:
        return bool(self._native)

    def empty(self) -> bool:
        return not self._native

    # Decomposition --------------------------------------------------------------

    def decompose(self) -> Decomposition:
        return decomposer.decompose(self._native, self._grammar)

    def root_name(self) -> PathValue:
        return self._derive(decomposer.root_name(self._native, self._grammar))

    def root_directory(self) -> PathValue:
        return self._derive(decomposer.root_directory(self._native, self._grammar))

    def root_path(self) -> PathValue:
        return self._derive(decomposer.root_path(self._native, self._grammar))

    def relative_path(self) -> PathValue:
        return self._derive(decomposer.relative_path(self._native, self._grammar))

    def parent_path(self) -> PathValue:
        return self._derive(decomposer.parent_path(self._native, self._grammar))

    def filename(self) -> PathValue:
        return self._derive(decomposer.filename(self._native, self._grammar))

    def stem(self) -> PathValue:
        return self._derive(decomposer.stem(self._native, self._grammar))

    def extension(self) -> PathValue:
        return self._derive(decomposer.extension(self._native, self._grammar))

    def has_root_name(self) -> bool:
        return bool(self.decompose().root_name)

    def has_root_directory(self) -> bool:
        return bool(self.decompose().root_directory)

    def has_root_path(self) -> bool:
        return self.has_root_name() or self.has_root_directory()

    def has_relative_path(self) -> bool:
        return bool(self.decompose().relative_path)

    def has_parent_path(self) -> bool:
        return decomposer.parent_path_end(self._native, self._grammar) > 0

    def has_filename(self) -> bool:
        return bool(decomposer.filename(self._native, self._grammar))

    def has_stem(self) -> bool:
        return bool(decomposer.stem(self._native, self._grammar))

    def has_extension(self) -> bool:
        return bool(decomposer.extension(self._native, self._grammar))

    def is_absolute(self) -> bool:
        return decomposer.is_absolute(self._native, self._grammar)

    def is_relative(self) -> bool:
        return not self.is_absolute()

    # Modifiers ------------------------------------------------------------------

    def assign(self, source: object, codec: PathCodec | None = None) -> PathValue:
        """Replace the stored sequence with ``source``."""
        self._native = self._convert(source, codec)
        return self

    def append(self, *segments: object, codec: PathCodec | None = None) -> PathValue:
        """Join each segment in turn, in place."""
        for segment in segments:
            self._native = append_engine.append(
                self._native, self._convert(segment, codec), self._grammar
            )
        return self

    def concat(self, source: object, codec: PathCodec | None = None) -> PathValue:
        """Append ``source`` without any separator handling, in place."""
        self._native = append_engine.concat(self._native, self._convert(source, codec))
        return self

    def clear(self) -> PathValue:
        self._native = self._grammar.empty
        return self

    def remove_filename(self) -> PathValue:
        self._native = append_engine.remove_filename(self._native, self._grammar)
        return self

    def replace_extension(self, new_extension: object = None, codec: PathCodec | None = None) -> PathValue:
        self._native = append_engine.replace_extension(
            self._native, self._convert(new_extension, codec), self._grammar
        )
        return self

    def make_preferred(self) -> PathValue:
        self._native = append_engine.make_preferred(self._native, self._grammar)
        return self

    def swap(self, other: PathValue) -> None:
        self._native, other._native = other._native, self._native
        self._grammar, other._grammar = other._grammar, self._grammar

    def joinpath(self, *segments: object) -> PathValue:
        return PathValue(self).append(*segments)

    def __truediv__(self, other: object) -> PathValue:
        return PathValue(self).append(other)

    def __rtruediv__(self, other: object) -> PathValue:
        return PathValue(other, grammar=self._grammar).append(self)

    def __itruediv__(self, other: object) -> PathValue:
        return self.append(other)

    def __add__(self, other: object) -> PathValue:
        return PathValue(self).concat(other)

    def __radd__(self, other: object) -> PathValue:
        return PathValue(other, grammar=self._grammar).concat(self)

    def __iadd__(self, other: object) -> PathValue:
        return self.concat(other)

    # Iteration ------------------------------------------------------------------

    def begin(self) -> PathIterator:
        from lexpath.features.path.usecases.path_iterator import PathIterator

        return PathIterator.begin(self)

    def end(self) -> PathIterator:
        from lexpath.features.path.usecases.path_iterator import PathIterator

        return PathIterator.end(self)

    def __iter__(self) -> Iterator[PathValue]:
        for element in iter_elements(self._native, self._grammar):
            yield self._derive(element)

    def __reversed__(self) -> Iterator[PathValue]:
        for element in iter_elements_reversed(self._native, self._grammar):
            yield self._derive(element)

    # Comparison -----------------------------------------------------------------

    def compare(self, other: object) -> int:
        """Compare with ``other`` element by element in generic form.

        ``other`` may be any construction source; it is read under this
        path's grammar.

        Returns:
            int: -1, 0 or 1.
        """
        if not isinstance(other, PathValue) or other._grammar != self._grammar:
            other = PathValue(other, grammar=self._grammar)
        return comparator.compare(self._native, other._native, self._grammar)

    def _ordered_against(self, other: object) -> PathValue | None:
        """Return ``other`` as a path of this grammar, or ``None`` if unordered.

        ``str``, ``bytes`` and path-like operands are converted under this
        path's grammar; a ``PathValue`` of another grammar is unordered.
        """
        if isinstance(other, PathValue):
            return other if other._grammar == self._grammar else None
        if isinstance(other, (str, bytes, bytearray, os.PathLike)):
            return PathValue(other, grammar=self._grammar)
        return None

    def __eq__(self, other: object) -> bool:
        try:
            peer = self._ordered_against(other)
        except EncodingConversionError:
            # not representable under this grammar, so never equal
            return False
        if peer is None:
            return NotImplemented
        return comparator.compare(self._native, peer._native, self._grammar) == 0

    def __lt__(self, other: object) -> bool:
        peer = self._ordered_against(other)
        if peer is None:
            return NotImplemented
        return comparator.compare(self._native, peer._native, self._grammar) < 0

    def __le__(self, other: object) -> bool:
        peer = self._ordered_against(other)
        if peer is None:
            return NotImplemented
        return comparator.compare(self._native, peer._native, self._grammar) <= 0

    def __gt__(self, other: object) -> bool:
        peer = self._ordered_against(other)
        if peer is None:
            return NotImplemented
        return comparator.compare(self._native, peer._native, self._grammar) > 0

    def __ge__(self, other: object) -> bool:
        peer = self._ordered_against(other)
        if peer is None:
            return NotImplemented
        return comparator.compare(self._native, peer._native, self._grammar) >= 0

    def __hash__(self) -> int:
        return comparator.path_hash(self._native, self._grammar)


def dot_path(grammar: PathGrammar | str | None = None) -> PathValue:
    """Return a fresh ``"."`` path."""
    resolved = get_grammar(grammar)
    return PathValue._from_native(resolved.dot, resolved)  # pyright: ignore[reportPrivateUsage]


def dot_dot_path(grammar: PathGrammar | str | None = None) -> PathValue:
    """Return a fresh ``".."`` path."""
    resolved = get_grammar(grammar)
    return PathValue._from_native(resolved.dot_dot, resolved)  # pyright: ignore[reportPrivateUsage]


__all__ = ["PathValue", "dot_dot_path", "dot_path"]
