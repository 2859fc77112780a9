"""
Summary: Export the path feature's domain and use case symbols.
Why: Provide a stable import surface for the CLI, the package facade and tests.
"""

from .domain import (
    NATIVE_GRAMMAR,
    POSIX_GRAMMAR,
    WINDOWS_GRAMMAR,
    EncodingConversionError,
    InvalidIteratorUseError,
    PathCodec,
    PathError,
    PathGrammar,
    UnknownEncodingError,
    UnknownGrammarError,
    UnsupportedSourceError,
    available_grammars,
    get_codec,
    get_grammar,
    imbue,
    register_grammar,
)
from .usecases import (
    PathIterator,
    PathValue,
    dot_dot_path,
    dot_path,
    lexicographical_compare,
)

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
