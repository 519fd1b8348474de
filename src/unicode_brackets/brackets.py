"""Per-character bracket classification and mirroring."""

from __future__ import annotations

from enum import Enum

from .table import CLOSE_TO_OPEN, OPEN_TO_CLOSE


class BracketClass(Enum):
    """Role of a character in the bracket table."""

    OPENING = "opening"
    CLOSING = "closing"
    NEITHER = "neither"


def _check_char(c: str) -> None:
    if not isinstance(c, str):
        raise TypeError(f"Expected a single-character str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"Expected a single character, got {len(c)} characters: {c!r}")


def to_close_bracket(c: str) -> str:
    """Convert an opening bracket to its closing counterpart.

    Parameters
    ----------
    c:
        A single character.

    Returns
    -------
    str
        The paired closing bracket, or ``c`` itself when ``c`` is not an
        opening bracket (closing brackets included).
    """
    _check_char(c)
    return OPEN_TO_CLOSE.get(c, c)


def to_open_bracket(c: str) -> str:
    """Convert a closing bracket to its opening counterpart.

    Returns ``c`` unchanged when it is not a closing bracket.
    """
    _check_char(c)
    return CLOSE_TO_OPEN.get(c, c)


def is_open_bracket(c: str) -> bool:
    """Return True if ``c`` opens a bracket pair."""
    return to_close_bracket(c) != c


def is_close_bracket(c: str) -> bool:
    """Return True if ``c`` closes a bracket pair."""
    return to_open_bracket(c) != c


def mirror_bracket(c: str) -> str:
    """Swap a bracket for its counterpart in the other direction.

    This is the glyph substitution applied to brackets inside right-to-left
    runs. Non-bracket characters are returned unchanged, and applying the
    function twice always gives back the original character.
    """
    closed = to_close_bracket(c)
    if closed != c:
        return closed
    return to_open_bracket(c)


def bracket_class(c: str) -> BracketClass:
    """Classify ``c`` as an opening bracket, a closing bracket or neither."""
    if is_open_bracket(c):
        return BracketClass.OPENING
    if is_close_bracket(c):
        return BracketClass.CLOSING
    return BracketClass.NEITHER


__all__ = [
    "BracketClass",
    "to_close_bracket",
    "to_open_bracket",
    "is_open_bracket",
    "is_close_bracket",
    "mirror_bracket",
    "bracket_class",
]
