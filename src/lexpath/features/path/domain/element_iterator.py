"""
Summary: Pure forward/backward element scans over a native path sequence.
Why: Let cursors carry only an offset and recompute each element on demand.
"""

from __future__ import annotations

from collections.abc import Iterator

from lexpath.features.path.domain.decomposer import ends_in_non_root_separator
from lexpath.features.path.domain.errors import InvalidIteratorUseError
from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar
from lexpath.platform.logging import logger


def element_at(seq: NativeSeq, grammar: PathGrammar, pos: int) -> NativeSeq:
    """Return the element starting at cursor offset ``pos``.

    The element kind follows from the offset alone: offsets inside the root
    name yield the root name, the root name's end yields the root directory
    (as one preferred separator) when present, a trailing separator offset
    yields the implicit ``"."`` and anything else yields a name run.
    ``len(seq)`` is the end position and yields an empty element.
    """
    if pos >= len(seq):
        return grammar.empty

    name_end = grammar.root_name_end(seq)
    if pos < name_end:
        return seq[:name_end]

    directory_end = grammar.skip_separators(seq, name_end)
    if pos == name_end and directory_end > name_end:
        return grammar.preferred

    if grammar.is_separator_at(seq, pos):
        return grammar.dot
    return seq[pos : grammar.skip_name(seq, pos)]


def next_offset(seq: NativeSeq, grammar: PathGrammar, pos: int) -> int:
    """Return the offset of the element following the one at ``pos``.

    Raises:
        InvalidIteratorUseError: If ``pos`` is already the end position.
    """
    size = len(seq)
    if pos >= size:
        logger.debug("Increment past end of %r", seq)
        raise InvalidIteratorUseError("cannot increment past the end of a path")

    name_end = grammar.root_name_end(seq)
    if pos < name_end:
        return name_end

    directory_end = grammar.skip_separators(seq, name_end)
    if pos == name_end and directory_end > name_end:
        return directory_end

    if grammar.is_separator_at(seq, pos):
        # implicit "." is always the last element
        return size

    run_end = grammar.skip_name(seq, pos)
    following = grammar.skip_separators(seq, run_end)
    if following < size:
        return following
    if run_end < size:
        return size - 1
    return size


def previous_offset(seq: NativeSeq, grammar: PathGrammar, pos: int) -> int:
    """Return the offset of the element preceding the one at ``pos``.

    Raises:
        InvalidIteratorUseError: If ``pos`` is the begin position.
    """
    if pos <= 0:
        logger.debug("Decrement before begin of %r", seq)
        raise InvalidIteratorUseError("cannot decrement before the beginning of a path")

    size = len(seq)
    if pos >= size and ends_in_non_root_separator(seq, grammar):
        return size - 1

    name_end = grammar.root_name_end(seq)
    directory_end = grammar.skip_separators(seq, name_end)

    run_end = grammar.rskip_separators(seq, min(pos, size), directory_end)
    if run_end > directory_end:
        return grammar.rskip_name(seq, run_end, directory_end)

    if pos > name_end and directory_end > name_end:
        return name_end
    return 0


def iter_elements(seq: NativeSeq, grammar: PathGrammar) -> Iterator[NativeSeq]:
    """Yield the elements of ``seq`` from first to last."""
    pos = 0
    size = len(seq)
    while pos < size:
        yield element_at(seq, grammar, pos)
        pos = next_offset(seq, grammar, pos)


def iter_elements_reversed(seq: NativeSeq, grammar: PathGrammar) -> Iterator[NativeSeq]:
    """Yield the elements of ``seq`` from last to first."""
    pos = len(seq)
    while pos > 0:
        pos = previous_offset(seq, grammar, pos)
        yield element_at(seq, grammar, pos)


__all__ = [
    "element_at",
    "iter_elements",
    "iter_elements_reversed",
    "next_offset",
    "previous_offset",
]
