"""
Summary: Pure decomposition of a native path sequence into its lexical parts.
Why: Recompute every boundary from raw data so path values never cache structure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar


@final
@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range of a native sequence."""

    start: int
    end: int

    def __bool__(self) -> bool:
        return self.end > self.start

    def __len__(self) -> int:
        return self.end - self.start

    def take(self, seq: NativeSeq) -> NativeSeq:
        """Return the units of ``seq`` covered by this span."""
        return seq[self.start : self.end]


@final
@dataclass(frozen=True, slots=True)
class Decomposition:
    """Root name, root directory and relative path spans of one sequence."""

    root_name: Span
    root_directory: Span
    relative_path: Span


def root_name_end(seq: NativeSeq, grammar: PathGrammar) -> int:
    return grammar.root_name_end(seq)


def root_directory_end(seq: NativeSeq, grammar: PathGrammar) -> int:
    """Return the offset one past the root directory run (the root boundary)."""
    return grammar.skip_separators(seq, grammar.root_name_end(seq))


def decompose(seq: NativeSeq, grammar: PathGrammar) -> Decomposition:
    """Split ``seq`` into root name, root directory and relative path spans."""
    name_end = grammar.root_name_end(seq)
    directory_end = grammar.skip_separators(seq, name_end)
    return Decomposition(
        root_name=Span(0, name_end),
        root_directory=Span(name_end, directory_end),
        relative_path=Span(directory_end, len(seq)),
    )


def root_name(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    return seq[: grammar.root_name_end(seq)]


def root_directory(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    """Return the root directory normalized to one preferred separator."""
    if decompose(seq, grammar).root_directory:
        return grammar.preferred
    return grammar.empty


def root_path(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    return root_name(seq, grammar) + root_directory(seq, grammar)  # pyright: ignore[reportOperatorIssue]


def relative_path(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    return seq[root_directory_end(seq, grammar) :]


def ends_in_non_root_separator(seq: NativeSeq, grammar: PathGrammar) -> bool:
    """Return whether ``seq`` ends in a separator that is not its root directory."""
    return len(seq) > root_directory_end(seq, grammar) and grammar.ends_with_separator(seq)


def filename_start(seq: NativeSeq, grammar: PathGrammar) -> int:
    """Return where the final non-separator run starts.

    Equals ``len(seq)`` when the path has no such run at its end, which is the
    case for empty paths, bare roots and paths ending in a separator.
    """
    boundary = root_directory_end(seq, grammar)
    return grammar.rskip_name(seq, len(seq), boundary)


def filename(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    """Return the filename element.

    Empty for an empty path or one ending at its root boundary, ``"."`` when
    the path ends in a non-root separator, else the units after the last
    separator.
    """
    if ends_in_non_root_separator(seq, grammar):
        return grammar.dot
    return seq[filename_start(seq, grammar) :]


def parent_path_end(seq: NativeSeq, grammar: PathGrammar) -> int:
    """Return the length of the parent path prefix of ``seq``.

    The final element and the separators leading up to it are removed. When
    only the root remains it is kept whole, and a root directory standing
    alone yields its root name.
    """
    decomposition = decompose(seq, grammar)
    boundary = decomposition.relative_path.start
    if not decomposition.relative_path:
        return decomposition.root_name.end if decomposition.root_directory else 0

    if grammar.ends_with_separator(seq):
        end = len(seq)
    else:
        end = grammar.rskip_name(seq, len(seq), boundary)
    return grammar.rskip_separators(seq, end, boundary)


def parent_path(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    return seq[: parent_path_end(seq, grammar)]


def _is_all_dots(name: NativeSeq, grammar: PathGrammar) -> bool:
    return bool(name) and not name.replace(grammar.dot, grammar.empty)  # pyright: ignore[reportArgumentType]


def extension_start(name: NativeSeq, grammar: PathGrammar) -> int:
    """Return where the extension of filename ``name`` starts (``len(name)`` if none).

    The split point is the last dot that is neither the first unit nor part of
    an all-dots name, so ``"."``, ``".."`` and ``".hidden"`` have no extension.
    """
    if _is_all_dots(name, grammar):
        return len(name)
    pos = name.rfind(grammar.dot)  # pyright: ignore[reportArgumentType]
    return pos if pos > 0 else len(name)


def stem(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    name = filename(seq, grammar)
    return name[: extension_start(name, grammar)]


def extension(seq: NativeSeq, grammar: PathGrammar) -> NativeSeq:
    name = filename(seq, grammar)
    return name[extension_start(name, grammar) :]


def is_absolute(seq: NativeSeq, grammar: PathGrammar) -> bool:
    """Return whether ``seq`` is absolute under ``grammar``.

    POSIX needs only a root directory. Windows needs both a root name and a
    root directory, so ``"C:a"`` and ``"\\\\a"`` are relative there.
    """
    decomposition = decompose(seq, grammar)
    if grammar.absolute_requires_root_name and not decomposition.root_name:
        return False
    return bool(decomposition.root_directory)


__all__ = [
    "Decomposition",
    "Span",
    "decompose",
    "ends_in_non_root_separator",
    "extension",
    "extension_start",
    "filename",
    "filename_start",
    "is_absolute",
    "parent_path",
    "parent_path_end",
    "relative_path",
    "root_directory",
    "root_directory_end",
    "root_name",
    "root_name_end",
    "root_path",
    "stem",
]
