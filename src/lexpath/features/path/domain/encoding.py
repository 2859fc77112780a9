"""
Summary: Conversion boundary between native path units and foreign encodings.
Why: Route every str/bytes crossing through one strict, injectable codec.
"""

from __future__ import annotations

import codecs
import ctypes
import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, final

from lexpath.config import settings
from lexpath.features.path.domain.errors import (
    EncodingConversionError,
    UnknownEncodingError,
    UnsupportedSourceError,
)
from lexpath.features.path.domain.grammar import NativeSeq, PathGrammar
from lexpath.platform.logging import logger


@final
@dataclass(frozen=True, slots=True)
class PathCodec:
    """Strict conversion object between ``str`` and ``bytes`` path units.

    Conversions never substitute or drop characters: any unit that cannot be
    represented raises ``EncodingConversionError`` with the failing range.
    """

    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            _ = codecs.lookup(self.encoding)
        except LookupError as exc:
            raise UnknownEncodingError(self.encoding) from exc

    def encode(self, text: str) -> bytes:
        """Encode wide units into bytes.

        Raises:
            EncodingConversionError: If a character has no representation.
        """
        try:
            return text.encode(self.encoding, errors="strict")
        except UnicodeEncodeError as exc:
            logger.debug("Encoding %r with %s failed: %s", text, self.encoding, exc.reason)
            raise EncodingConversionError(
                text, exc.start, exc.end, self.encoding, exc.reason
            ) from exc

    def decode(self, data: bytes) -> str:
        """Decode bytes into wide units.

        Raises:
            EncodingConversionError: If a byte sequence is invalid.
        """
        try:
            return data.decode(self.encoding, errors="strict")
        except UnicodeDecodeError as exc:
            logger.debug("Decoding %r with %s failed: %s", data, self.encoding, exc.reason)
            raise EncodingConversionError(
                data, exc.start, exc.end, self.encoding, exc.reason
            ) from exc

    def to_native(self, units: str | bytes, grammar: PathGrammar) -> NativeSeq:
        """Convert ``units`` to ``grammar``'s native type (no-op when already native)."""
        if isinstance(units, grammar.native_type):
            return units
        if isinstance(units, str):
            return self.encode(units)
        return self.decode(units)

    def to_text(self, seq: NativeSeq) -> str:
        return seq if isinstance(seq, str) else self.decode(seq)

    def to_bytes(self, seq: NativeSeq) -> bytes:
        return seq if isinstance(seq, bytes) else self.encode(seq)


@final
class DefaultCodecPolicy:
    """Process-wide default codec.

    Lifecycle: installed explicitly through ``install`` (``imbue``) or, on the
    first ``current`` call, from the configured default encoding. An installed
    codec persists until the next install and is never restored automatically.
    Reads and installs are not synchronized.
    """

    _installed: ClassVar[PathCodec | None] = None

    @classmethod
    def current(cls) -> PathCodec:
        if cls._installed is None:
            cls._installed = PathCodec(settings.DEFAULT_ENCODING)
            logger.debug("Installed default path codec %s", cls._installed.encoding)
        return cls._installed

    @classmethod
    def install(cls, codec: PathCodec) -> PathCodec:
        previous = cls.current()
        cls._installed = codec
        logger.info("Path codec set to %s (was %s)", codec.encoding, previous.encoding)
        return previous


def imbue(codec: PathCodec) -> PathCodec:
    """Install ``codec`` as the process-wide default and return the previous one."""
    return DefaultCodecPolicy.install(codec)


def get_codec() -> PathCodec:
    """Return the process-wide default codec, installing it on first use."""
    return DefaultCodecPolicy.current()


# Construction sources ---------------------------------------------------------


class SourceKind(Enum):
    """Closed set of values a path can be built from."""

    BYTE_POINTER = "byte-pointer"
    WIDE_POINTER = "wide-pointer"
    BYTE_SEQUENCE = "byte-sequence"
    WIDE_SEQUENCE = "wide-sequence"
    UNIT_RANGE = "unit-range"


@final
@dataclass(frozen=True, slots=True)
class TaggedSource:
    """A construction source reduced to its kind and its code units."""

    kind: SourceKind
    units: str | bytes

    def is_native(self, grammar: PathGrammar) -> bool:
        return isinstance(self.units, grammar.native_type)


def units_from_range(source: Iterable[object]) -> str | bytes:
    items = list(source)
    if all(isinstance(item, int) for item in items):
        try:
            return bytes(items)  # pyright: ignore[reportArgumentType]
        except ValueError as exc:
            raise UnsupportedSourceError(source) from exc
    if all(isinstance(item, str) and len(item) == 1 for item in items):
        return "".join(items)  # pyright: ignore[reportArgumentType]
    if all(isinstance(item, bytes) and len(item) == 1 for item in items):
        return b"".join(items)  # pyright: ignore[reportArgumentType]
    raise UnsupportedSourceError(source)


def classify_source(source: object) -> TaggedSource:
    """Reduce ``source`` to a ``TaggedSource``.

    Pointer sources stop at their first NUL; sequences and ranges keep
    embedded NUL units.

    Raises:
        UnsupportedSourceError: If ``source`` matches no known variant.
    """
    if isinstance(source, str):
        return TaggedSource(SourceKind.WIDE_SEQUENCE, source)
    if isinstance(source, (bytes, bytearray, memoryview)):
        return TaggedSource(SourceKind.BYTE_SEQUENCE, bytes(source))
    if isinstance(source, ctypes.c_char_p):
        return TaggedSource(SourceKind.BYTE_POINTER, source.value or b"")
    if isinstance(source, ctypes.c_wchar_p):
        return TaggedSource(SourceKind.WIDE_POINTER, source.value or "")
    if isinstance(source, ctypes.Array):
        element_type = getattr(source, "_type_", None)
        if element_type is ctypes.c_char:
            return TaggedSource(SourceKind.BYTE_POINTER, source.value)
        if element_type is ctypes.c_wchar:
            return TaggedSource(SourceKind.WIDE_POINTER, source.value)
        raise UnsupportedSourceError(source)
    if isinstance(source, os.PathLike):
        return classify_source(os.fspath(source))  # pyright: ignore[reportUnknownArgumentType]
    if isinstance(source, Iterable):
        return TaggedSource(SourceKind.UNIT_RANGE, units_from_range(source))  # pyright: ignore[reportUnknownArgumentType]
    raise UnsupportedSourceError(source)


def convert_source(
    source: object,
    grammar: PathGrammar,
    codec: PathCodec | None = None,
) -> NativeSeq:
    """Convert any supported source into ``grammar``'s native units.

    Native sources are copied without touching a codec. Foreign sources go
    through ``codec``, or the process-wide default when it is ``None``.
    """
    tagged = classify_source(source)
    if tagged.is_native(grammar):
        return tagged.units
    return (codec or get_codec()).to_native(tagged.units, grammar)


__all__ = [
    "DefaultCodecPolicy",
    "PathCodec",
    "SourceKind",
    "TaggedSource",
    "classify_source",
    "convert_source",
    "get_codec",
    "imbue",
    "units_from_range",
]
