"""
Summary: Append (join) and concatenation rules applied to native sequences.
Why: Keep separator insertion and collapsing independent of the value object.
"""

from __future__ import annotations

from lexpath.features.path.domain.decomposer import (
    extension,
    is_absolute,
    parent_path_end,
)
from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar


def concat(seq: NativeSeq, segment: NativeSeq) -> NativeSeq:
    """Raw append: no separator handling."""
    return seq + segment  # pyright: ignore[reportOperatorIssue]


def _needs_separator(seq: NativeSeq, segment: NativeSeq, grammar: PathGrammar) -> bool:
    if not seq or grammar.ends_with_separator(seq) or grammar.is_separator_at(segment, 0):
        return False
    # "C:" joined with "a" stays drive-relative
    return not (
        grammar.drive_root_names
        and grammar.root_name_end(seq) == len(seq)
        and seq.endswith(grammar.colon)  # pyright: ignore[reportArgumentType]
    )


def _collapse_join(seq: NativeSeq, join: int, grammar: PathGrammar) -> NativeSeq:
    """Collapse the separator run around offset ``join`` to its first unit.

    A run of exactly two separators at the very start survives when the
    grammar keeps network prefixes; three or more always collapse.
    """
    start = grammar.rskip_separators(seq, join)
    end = grammar.skip_separators(seq, join)
    if end - start < 2:
        return seq
    if start == 0 and end == 2 and grammar.keeps_network_prefix:
        return seq
    return seq[: start + 1] + seq[end:]  # pyright: ignore[reportOperatorIssue]


def append(seq: NativeSeq, segment: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    """Join ``segment`` onto ``seq`` following the grammar's rules.

    * An empty segment changes nothing.
    * An absolute segment replaces the whole sequence.
    * A segment with a root name but no root directory replaces the sequence
      unless both share that root name, in which case only its relative part
      is joined.
    * Otherwise one preferred separator is inserted unless either side
      already supplies one (or ``seq`` is a bare drive), and the separator
      run at the join is collapsed.
    """
    if not segment:
        return seq
    if is_absolute(segment, grammar):
        return segment

    segment_root_end = grammar.root_name_end(segment)
    if segment_root_end:
        if seq[: grammar.root_name_end(seq)] != segment[:segment_root_end]:
            return segment
        segment = segment[segment_root_end:]
        if not segment:
            return seq

    if not seq:
        return segment

    join = len(seq)
    if _needs_separator(seq, segment, grammar):
        seq = seq + grammar.preferred  # pyright: ignore[reportOperatorIssue]
    return _collapse_join(seq + segment, join, grammar)  # pyright: ignore[reportOperatorIssue]


def remove_filename(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    """Drop the final element, leaving the parent path."""
    return seq[: parent_path_end(seq, grammar)]


def replace_extension(seq: NativeSeq, new_extension: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    """Swap the extension of the filename for ``new_extension``.

    An empty ``new_extension`` only removes the current one; a missing
    leading dot is added.
    """
    current = extension(seq, grammar)
    if current:
        seq = seq[: len(seq) - len(current)]
    if new_extension:
        if not new_extension.startswith(grammar.dot):  # pyright: ignore[reportArgumentType]
            seq = seq + grammar.dot  # pyright: ignore[reportOperatorIssue]
        seq = seq + new_extension  # pyright: ignore[reportOperatorIssue]
    return seq


def make_preferred(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    return grammar.to_preferred(seq)


__all__ = ["append", "concat", "make_preferred", "remove_filename", "replace_extension"]
