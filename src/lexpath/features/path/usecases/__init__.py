"""
Summary: Path value, cursor and append engine built on the domain scans.
Why: Keep mutation and object APIs apart from the pure grammar functions.
"""

from .path_iterator import PathIterator, lexicographical_compare
from .path_value import PathValue, dot_dot_path, dot_path

__all__ = [
    "PathIterator",
    "PathValue",
    "dot_dot_path",
    "dot_path",
    "lexicographical_compare",
]
