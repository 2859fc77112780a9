"""
Summary: Error taxonomy raised by the path grammar, codec and iterator.
Why: Give callers one base class while keeping builtin-compatible subclasses.
"""

from __future__ import annotations

from typing import final


class PathError(Exception):
    """Base class for every error raised by lexpath."""


@final
class EncodingConversionError(PathError, ValueError):
    """Raised when a sequence cannot be represented in the target encoding.

    Attributes:
        source: The full sequence that was being converted.
        start: Offset of the first unit that failed to convert.
        end: Offset one past the last unit that failed to convert.
        encoding: Name of the codec encoding in use.
        reason: Codec-provided description of the failure.
    """

    def __init__(
        self,
        source: str | bytes,
        start: int,
        end: int,
        encoding: str,
        reason: str,
    ) -> None:
        super().__init__(
            f"cannot convert {source!r} with {encoding}: {reason} at [{start}, {end})"
        )
        self.source: str | bytes = source
        self.start: int = start
        self.end: int = end
        self.encoding: str = encoding
        self.reason: str = reason

    @property
    def failing_range(self) -> str | bytes:
        """Return the offending sub-sequence of ``source``."""
        return self.source[self.start : self.end]


@final
class InvalidIteratorUseError(PathError, IndexError):
    """Raised when an element iterator is moved or read outside its range."""


@final
class UnknownGrammarError(PathError, ValueError):
    """Raised when a grammar name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown path grammar: {name}")
        self.name: str = name


@final
class UnknownEncodingError(PathError, LookupError):
    """Raised when a codec is requested for an encoding Python does not know."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown encoding: {encoding}")
        self.encoding: str = encoding


@final
class UnsupportedSourceError(PathError, TypeError):
    """Raised when a value cannot be used to construct a path."""

    def __init__(self, source: object) -> None:
        super().__init__(f"Cannot build a path from {type(source).__name__}")
        self.source: object = source


__all__ = [
    "PathError",
    "EncodingConversionError",
    "InvalidIteratorUseError",
    "UnknownGrammarError",
    "UnknownEncodingError",
    "UnsupportedSourceError",
]
