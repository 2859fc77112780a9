"""
Summary: Component-wise lexicographic ordering and hashing of native paths.
Why: Order paths by elements so separator spelling never changes the result.
"""

from __future__ import annotations

from collections.abc import Iterable

from lexpath.features.path.domain.element_iterator import iter_elements
from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar


def _sign(left: NativeSeq, right: NativeSeq) -> int:
    return (left > right) - (left < right)  # pyright: ignore[reportOperatorIssue]


def compare_elements(
    left: Iterable[NativeSeq],
    right: Iterable[NativeSeq],
    grammar: PathGrammar,
) -> int:
    """Compare two element streams in generic form.

    Elements are compared with their separators normalized to ``/``; the
    first unequal pair decides, and the stream exhausted first sorts first.

    Returns:
        int: Negative, zero or positive like ``cmp``.
    """
    left_iter = iter(left)
    right_iter = iter(right)
    sentinel = object()
    while True:
        left_element = next(left_iter, sentinel)
        right_element = next(right_iter, sentinel)
        if left_element is sentinel:
            return 0 if right_element is sentinel else -1
        if right_element is sentinel:
            return 1
        result = _sign(
            grammar.to_generic(left_element),  # pyright: ignore[reportArgumentType]
            grammar.to_generic(right_element),  # pyright: ignore[reportArgumentType]
        )
        if result:
            return result


def compare(left: NativeSeq, right: NativeSeq, grammar: PathGrammar) -> int:
    """Compare two native sequences read under the same grammar."""
    return compare_elements(iter_elements(left, grammar), iter_elements(right, grammar), grammar)


def generic_elements(seq: NativeSeq, grammar: PathGrammar) -> tuple[NativeSeq, ...]:
    return tuple(grammar.to_generic(element) for element in iter_elements(seq, grammar))


def path_hash(seq: NativeSeq, grammar: PathGrammar) -> int:
    """Hash ``seq`` consistently with ``compare``.

    The hash covers the element sequence with separators normalized, so
    paths that compare equal (``a//b`` and ``a/b``) hash equal.
    """
    return hash((grammar.name, generic_elements(seq, grammar)))


__all__ = ["compare", "compare_elements", "generic_elements", "path_hash"]
