"""
Summary: Grammar parameter sets for POSIX and Windows path conventions.
Why: Keep every platform-dependent rule behind one value so scans stay generic.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Final, final

from lexpath.config import settings
from lexpath.features.path.domain.errors import UnknownGrammarError

NativeSeq = str | bytes
"""A native path sequence: ``bytes`` under POSIX, ``str`` under Windows."""


@final
@dataclass(frozen=True)
class PathGrammar:
    """Parameters of one native path convention.

    Every constant is exposed in the grammar's native type so that scans can
    compare single-unit slices (``seq[i:i + 1]``) for both ``bytes`` and
    ``str`` sequences without branching on the type.

    Attributes:
        name: Registry name of the grammar.
        native_type: ``bytes`` for 8-bit code units, ``str`` for wide units.
        separators: Every character accepted as a separator.
        preferred_separator: Separator inserted by append operations.
        drive_root_names: Whether ``X:`` prefixes form a root name.
        network_root_names: Whether ``\\\\server\\share`` prefixes form a root name.
        absolute_requires_root_name: Whether absoluteness needs a root name
            in addition to a root directory.
        keeps_network_prefix: Whether exactly two leading separators survive
            separator collapsing during append.
    """

    GENERIC_SEPARATOR: ClassVar[str] = "/"

    name: str
    native_type: type[str] | type[bytes]
    separators: str
    preferred_separator: str
    drive_root_names: bool = False
    network_root_names: bool = False
    absolute_requires_root_name: bool = False
    keeps_network_prefix: bool = True

    def encode_constant(self, text: str) -> NativeSeq:
        """Express an ASCII constant in the grammar's native type."""
        if self.native_type is bytes:
            return text.encode("ascii")
        return text

    @cached_property
    def empty(self) -> NativeSeq:
        return self.native_type()

    @cached_property
    def dot(self) -> NativeSeq:
        return self.encode_constant(".")

    @cached_property
    def dot_dot(self) -> NativeSeq:
        return self.encode_constant("..")

    @cached_property
    def colon(self) -> NativeSeq:
        return self.encode_constant(":")

    @cached_property
    def preferred(self) -> NativeSeq:
        return self.encode_constant(self.preferred_separator)

    @cached_property
    def generic(self) -> NativeSeq:
        return self.encode_constant(self.GENERIC_SEPARATOR)

    @cached_property
    def separator_units(self) -> frozenset[NativeSeq]:
        return frozenset(self.encode_constant(c) for c in self.separators)

    # Single-unit predicates -------------------------------------------------

    def is_separator_at(self, seq: NativeSeq, index: int) -> bool:
        """Return whether ``seq[index]`` is a separator (``False`` out of range)."""
        return 0 <= index < len(seq) and seq[index : index + 1] in self.separator_units

    def ends_with_separator(self, seq: NativeSeq) -> bool:
        return self.is_separator_at(seq, len(seq) - 1)

    # Scan primitives --------------------------------------------------------

    def skip_separators(self, seq: NativeSeq, pos: int) -> int:
        """Return the first offset at or after ``pos`` that is not a separator."""
        end = len(seq)
        while pos < end and self.is_separator_at(seq, pos):
            pos += 1
        return pos

    def skip_name(self, seq: NativeSeq, pos: int) -> int:
        """Return the first offset at or after ``pos`` that is a separator."""
        end = len(seq)
        while pos < end and not self.is_separator_at(seq, pos):
            pos += 1
        return pos

    def rskip_separators(self, seq: NativeSeq, pos: int, floor: int = 0) -> int:
        """Walk back from ``pos`` over separators, stopping at ``floor``."""
        while pos > floor and self.is_separator_at(seq, pos - 1):
            pos -= 1
        return pos

    def rskip_name(self, seq: NativeSeq, pos: int, floor: int = 0) -> int:
        """Walk back from ``pos`` over non-separators, stopping at ``floor``."""
        while pos > floor and not self.is_separator_at(seq, pos - 1):
            pos -= 1
        return pos

    # Root name recognition --------------------------------------------------

    def root_name_end(self, seq: NativeSeq) -> int:
        """Return the offset one past the root name, or 0 when there is none.

        Recognises ``X:`` drive prefixes and ``\\\\server[\\share]`` network
        prefixes when the grammar enables them. A bare pair of separators is
        itself a network root name.
        """
        size = len(seq)
        if (
            self.drive_root_names
            and size >= 2
            and seq[1:2] == self.colon
            and seq[0:1].isascii()
            and seq[0:1].isalpha()
        ):
            return 2

        if (
            self.network_root_names
            and size >= 2
            and self.is_separator_at(seq, 0)
            and self.is_separator_at(seq, 1)
            and not self.is_separator_at(seq, 2)
        ):
            end = self.skip_name(seq, 2)
            if end + 1 < size and not self.is_separator_at(seq, end + 1):
                end = self.skip_name(seq, end + 1)
            return end

        return 0

    # Separator rewriting ----------------------------------------------------

    def replace_separators(self, seq: NativeSeq, replacement: NativeSeq) -> NativeSeq:
        """Return ``seq`` with every separator replaced by ``replacement``."""
        for unit in self.separator_units:
            if unit != replacement:
                seq = seq.replace(unit, replacement)  # pyright: ignore[reportArgumentType]
        return seq

    def to_generic(self, seq: NativeSeq) -> NativeSeq:
        return self.replace_separators(seq, self.generic)

    def to_preferred(self, seq: NativeSeq) -> NativeSeq:
        return self.replace_separators(seq, self.preferred)


POSIX_GRAMMAR: Final[PathGrammar] = PathGrammar(
    name="posix",
    native_type=bytes,
    separators="/",
    preferred_separator="/",
)

WINDOWS_GRAMMAR: Final[PathGrammar] = PathGrammar(
    name="windows",
    native_type=str,
    separators="/\\",
    preferred_separator="\\",
    drive_root_names=True,
    network_root_names=True,
    absolute_requires_root_name=True,
)

NATIVE_GRAMMAR: Final[PathGrammar] = WINDOWS_GRAMMAR if os.name == "nt" else POSIX_GRAMMAR


_GRAMMARS: dict[str, PathGrammar] = {
    POSIX_GRAMMAR.name: POSIX_GRAMMAR,
    WINDOWS_GRAMMAR.name: WINDOWS_GRAMMAR,
}


def register_grammar(grammar: PathGrammar) -> None:
    """Register a grammar so it can be resolved by name.

    Args:
        grammar: Grammar to register under ``grammar.name``.
    """
    _GRAMMARS[grammar.name.lower()] = grammar


def get_grammar(grammar: PathGrammar | str | None = None) -> PathGrammar:
    """Resolve a grammar from an instance, a registered name or the default.

    Args:
        grammar: Grammar instance, name (``"posix"``, ``"windows"``,
            ``"native"``) or ``None`` for the configured default.

    Returns:
        PathGrammar: Resolved grammar.

    Raises:
        UnknownGrammarError: If the name is not registered.
    """
    if isinstance(grammar, PathGrammar):
        return grammar

    name = (grammar if grammar is not None else settings.DEFAULT_GRAMMAR_NAME).lower()
    if name == "native":
        return NATIVE_GRAMMAR
    resolved = _GRAMMARS.get(name)
    if resolved is None:
        raise UnknownGrammarError(name)
    return resolved


def available_grammars() -> tuple[str, ...]:
    """Return every name accepted by ``get_grammar``."""
    return ("native", *sorted(_GRAMMARS))


__all__ = [
    "NativeSeq",
    "PathGrammar",
    "POSIX_GRAMMAR",
    "WINDOWS_GRAMMAR",
    "NATIVE_GRAMMAR",
    "available_grammars",
    "get_grammar",
    "register_grammar",
]
