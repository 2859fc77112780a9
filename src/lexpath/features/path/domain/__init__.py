"""
Summary: Pure grammar, decomposition, scanning, comparison and codec functions.
Why: Give the path value layer side-effect free building blocks.
"""

from .encoding import PathCodec, get_codec, imbue
from .errors import (
    EncodingConversionError,
    InvalidIteratorUseError,
    PathError,
    UnknownEncodingError,
    UnknownGrammarError,
    UnsupportedSourceError,
)
from .grammar import (
    NATIVE_GRAMMAR,
    POSIX_GRAMMAR,
    WINDOWS_GRAMMAR,
    PathGrammar,
    available_grammars,
    get_grammar,
    register_grammar,
)

__all__ = [
    "EncodingConversionError",
    "InvalidIteratorUseError",
    "NATIVE_GRAMMAR",
    "POSIX_GRAMMAR",
    "PathCodec",
    "PathError",
    "PathGrammar",
    "UnknownEncodingError",
    "UnknownGrammarError",
    "UnsupportedSourceError",
    "WINDOWS_GRAMMAR",
    "available_grammars",
    "get_codec",
    "get_grammar",
    "imbue",
    "register_grammar",
]
