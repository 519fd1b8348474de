"""String-level bracket utilities."""

from __future__ import annotations

from .table import BRACKET_PAIRS, CLOSE_TO_OPEN, OPEN_TO_CLOSE

# str.translate table swapping every bracket with its counterpart.
_MIRROR_TRANSLATION = {
    **{ord(pair.open): pair.close for pair in BRACKET_PAIRS},
    **{ord(pair.close): pair.open for pair in BRACKET_PAIRS},
}


def mirror_text(text: str) -> str:
    """Mirror every bracket in ``text``, leaving other characters untouched.

    Parameters
    ----------
    text:
        Input string, typically a right-to-left run.

    Returns
    -------
    str
        ``text`` with each opening bracket replaced by its closing
        counterpart and vice versa.
    """
    return text.translate(_MIRROR_TRANSLATION)


def is_balanced(text: str) -> bool:
    """Check whether the brackets in ``text`` are balanced.

    Every closing bracket must close the most recent unclosed opening bracket
    of the same pair, and no opening bracket may remain unclosed. Characters
    that are not brackets are ignored.

    Parameters
    ----------
    text:
        Input string.

    Returns
    -------
    bool
        True if balanced, False otherwise.
    """
    expected: list[str] = []
    for ch in text:
        closing = OPEN_TO_CLOSE.get(ch)
        if closing is not None:
            expected.append(closing)
        elif ch in CLOSE_TO_OPEN:
            if not expected or expected.pop() != ch:
                return False
    return not expected


__all__ = ["mirror_text", "is_balanced"]
