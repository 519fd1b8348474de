"""Bracket classification and mirroring from Unicode bidi bracket data."""

from .brackets import (
    BracketClass,
    bracket_class,
    is_close_bracket,
    is_open_bracket,
    mirror_bracket,
    to_close_bracket,
    to_open_bracket,
)
from .table import (
    BRACKET_PAIRS,
    CLOSE_TO_OPEN,
    OPEN_TO_CLOSE,
    UNICODE_VERSION,
    BracketPair,
    BracketTableError,
    verify_bijection,
)
from .text import is_balanced, mirror_text

__all__ = [
    "UNICODE_VERSION",
    "BracketPair",
    "BracketTableError",
    "BRACKET_PAIRS",
    "OPEN_TO_CLOSE",
    "CLOSE_TO_OPEN",
    "verify_bijection",
    "BracketClass",
    "is_open_bracket",
    "is_close_bracket",
    "to_close_bracket",
    "to_open_bracket",
    "mirror_bracket",
    "bracket_class",
    "mirror_text",
    "is_balanced",
]
