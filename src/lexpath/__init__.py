"""Lexical path grammar for POSIX and Windows paths.

Decompose, join, iterate and order path strings under either native
convention without touching the filesystem.
"""

from lexpath.features.path import (
    NATIVE_GRAMMAR,
    POSIX_GRAMMAR,
    WINDOWS_GRAMMAR,
    EncodingConversionError,
    InvalidIteratorUseError,
    PathCodec,
    PathError,
    PathGrammar,
    PathIterator,
    PathValue,
    UnknownEncodingError,
    UnknownGrammarError,
    UnsupportedSourceError,
    available_grammars,
    dot_dot_path,
    dot_path,
    get_codec,
    get_grammar,
    imbue,
    lexicographical_compare,
    register_grammar,
)

__version__ = "0.1.0"

__all__ = [
    "EncodingConversionError",
    "InvalidIteratorUseError",
    "NATIVE_GRAMMAR",
    "POSIX_GRAMMAR",
    "PathCodec",
    "PathError",
    "PathGrammar",
    "PathIterator",
    "PathValue",
    "UnknownEncodingError",
    "UnknownGrammarError",
    "UnsupportedSourceError",
    "WINDOWS_GRAMMAR",
    "available_grammars",
    "dot_dot_path",
    "dot_path",
    "get_codec",
    "get_grammar",
    "imbue",
    "lexicographical_compare",
    "register_grammar",
]
