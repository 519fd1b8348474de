"""Bidi bracket pairing table (Unicode ``BidiBrackets.txt``).

The table is the single source of truth for every lookup in this package.
Only the open -> close pairs are stored; the reverse map and the
open/close classification are both derived from them, so the transforms and
the predicates cannot drift apart when the data is updated for a new Unicode
release.

To regenerate ``BRACKET_PAIRS`` from a newer UCD file, run::

    python -m unicode_brackets.ucd --ucd BidiBrackets.txt

and bump ``UNICODE_VERSION`` accordingly.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

# Unicode release the table below is taken from (major, minor, patch).
UNICODE_VERSION: Tuple[int, int, int] = (9, 0, 0)


class BracketTableError(ValueError):
    """Raised when a bracket table violates the open/close bijection."""


@dataclass(frozen=True)
class BracketPair:
    """A single opening/closing bracket pair.

    ``name`` is the Unicode name of the opening character and is kept for
    readability only; lookups never consult it.
    """

    open: str
    close: str
    name: str = ""

    @property
    def open_codepoint(self) -> int:
        return ord(self.open)

    @property
    def close_codepoint(self) -> int:
        return ord(self.close)


# =============================================================================
# Frozen pair table (Unicode 9.0.0), ordered by opening code point.
# SINGLE SOURCE OF TRUTH - regenerate with unicode_brackets.ucd, DO NOT EDIT BY HAND
# =============================================================================

BRACKET_PAIRS: Tuple[BracketPair, ...] = (
    BracketPair("\u0028", "\u0029", "LEFT PARENTHESIS"),
    BracketPair("\u005B", "\u005D", "LEFT SQUARE BRACKET"),
    BracketPair("\u007B", "\u007D", "LEFT CURLY BRACKET"),
    BracketPair("\u0F3A", "\u0F3B", "TIBETAN MARK GUG RTAGS GYON"),
    BracketPair("\u0F3C", "\u0F3D", "TIBETAN MARK ANG KHANG GYON"),
    BracketPair("\u169B", "\u169C", "OGHAM FEATHER MARK"),
    BracketPair("\u2045", "\u2046", "LEFT SQUARE BRACKET WITH QUILL"),
    BracketPair("\u207D", "\u207E", "SUPERSCRIPT LEFT PARENTHESIS"),
    BracketPair("\u208D", "\u208E", "SUBSCRIPT LEFT PARENTHESIS"),
    BracketPair("\u2308", "\u2309", "LEFT CEILING"),
    BracketPair("\u230A", "\u230B", "LEFT FLOOR"),
    BracketPair("\u2329", "\u232A", "LEFT-POINTING ANGLE BRACKET"),
    BracketPair("\u2768", "\u2769", "MEDIUM LEFT PARENTHESIS ORNAMENT"),
    BracketPair("\u276A", "\u276B", "MEDIUM FLATTENED LEFT PARENTHESIS ORNAMENT"),
    BracketPair("\u276C", "\u276D", "MEDIUM LEFT-POINTING ANGLE BRACKET ORNAMENT"),
    BracketPair("\u276E", "\u276F", "HEAVY LEFT-POINTING ANGLE QUOTATION MARK ORNAMENT"),
    BracketPair("\u2770", "\u2771", "HEAVY LEFT-POINTING ANGLE BRACKET ORNAMENT"),
    BracketPair("\u2772", "\u2773", "LIGHT LEFT TORTOISE SHELL BRACKET ORNAMENT"),
    BracketPair("\u2774", "\u2775", "MEDIUM LEFT CURLY BRACKET ORNAMENT"),
    BracketPair("\u27C5", "\u27C6", "LEFT S-SHAPED BAG DELIMITER"),
    BracketPair("\u27E6", "\u27E7", "MATHEMATICAL LEFT WHITE SQUARE BRACKET"),
    BracketPair("\u27E8", "\u27E9", "MATHEMATICAL LEFT ANGLE BRACKET"),
    BracketPair("\u27EA", "\u27EB", "MATHEMATICAL LEFT DOUBLE ANGLE BRACKET"),
    BracketPair("\u27EC", "\u27ED", "MATHEMATICAL LEFT WHITE TORTOISE SHELL BRACKET"),
    BracketPair("\u27EE", "\u27EF", "MATHEMATICAL LEFT FLATTENED PARENTHESIS"),
    BracketPair("\u2983", "\u2984", "LEFT WHITE CURLY BRACKET"),
    BracketPair("\u2985", "\u2986", "LEFT WHITE PARENTHESIS"),
    BracketPair("\u2987", "\u2988", "Z NOTATION LEFT IMAGE BRACKET"),
    BracketPair("\u2989", "\u298A", "Z NOTATION LEFT BINDING BRACKET"),
    BracketPair("\u298B", "\u298C", "LEFT SQUARE BRACKET WITH UNDERBAR"),
    BracketPair("\u298D", "\u2990", "LEFT SQUARE BRACKET WITH TICK IN TOP CORNER"),
    BracketPair("\u298F", "\u298E", "LEFT SQUARE BRACKET WITH TICK IN BOTTOM CORNER"),
    BracketPair("\u2991", "\u2992", "LEFT ANGLE BRACKET WITH DOT"),
    BracketPair("\u2993", "\u2994", "LEFT ARC LESS-THAN BRACKET"),
    BracketPair("\u2995", "\u2996", "DOUBLE LEFT ARC GREATER-THAN BRACKET"),
    BracketPair("\u2997", "\u2998", "LEFT BLACK TORTOISE SHELL BRACKET"),
    BracketPair("\u29D8", "\u29D9", "LEFT WIGGLY FENCE"),
    BracketPair("\u29DA", "\u29DB", "LEFT DOUBLE WIGGLY FENCE"),
    BracketPair("\u29FC", "\u29FD", "LEFT-POINTING CURVED ANGLE BRACKET"),
    BracketPair("\u2E22", "\u2E23", "TOP LEFT HALF BRACKET"),
    BracketPair("\u2E24", "\u2E25", "BOTTOM LEFT HALF BRACKET"),
    BracketPair("\u2E26", "\u2E27", "LEFT SIDEWAYS U BRACKET"),
    BracketPair("\u2E28", "\u2E29", "LEFT DOUBLE PARENTHESIS"),
    BracketPair("\u3008", "\u3009", "LEFT ANGLE BRACKET"),
    BracketPair("\u300A", "\u300B", "LEFT DOUBLE ANGLE BRACKET"),
    BracketPair("\u300C", "\u300D", "LEFT CORNER BRACKET"),
    BracketPair("\u300E", "\u300F", "LEFT WHITE CORNER BRACKET"),
    BracketPair("\u3010", "\u3011", "LEFT BLACK LENTICULAR BRACKET"),
    BracketPair("\u3014", "\u3015", "LEFT TORTOISE SHELL BRACKET"),
    BracketPair("\u3016", "\u3017", "LEFT WHITE LENTICULAR BRACKET"),
    BracketPair("\u3018", "\u3019", "LEFT WHITE TORTOISE SHELL BRACKET"),
    BracketPair("\u301A", "\u301B", "LEFT WHITE SQUARE BRACKET"),
    BracketPair("\uFE59", "\uFE5A", "SMALL LEFT PARENTHESIS"),
    BracketPair("\uFE5B", "\uFE5C", "SMALL LEFT CURLY BRACKET"),
    BracketPair("\uFE5D", "\uFE5E", "SMALL LEFT TORTOISE SHELL BRACKET"),
    BracketPair("\uFF08", "\uFF09", "FULLWIDTH LEFT PARENTHESIS"),
    BracketPair("\uFF3B", "\uFF3D", "FULLWIDTH LEFT SQUARE BRACKET"),
    BracketPair("\uFF5B", "\uFF5D", "FULLWIDTH LEFT CURLY BRACKET"),
    BracketPair("\uFF5F", "\uFF60", "FULLWIDTH LEFT WHITE PARENTHESIS"),
    BracketPair("\uFF62", "\uFF63", "HALFWIDTH LEFT CORNER BRACKET"),
)


def verify_bijection(pairs: Sequence[BracketPair]) -> None:
    """Check that ``pairs`` form a strict open/close bijection.

    Parameters
    ----------
    pairs:
        Candidate table.

    Raises
    ------
    BracketTableError
        If a pair maps a character to itself, an open or close character is
        listed twice, or a character is used both as an open and a close.
    """
    opens: set[str] = set()
    closes: set[str] = set()
    for pair in pairs:
        if len(pair.open) != 1 or len(pair.close) != 1:
            raise BracketTableError(f"Pair members must be single characters: {pair!r}")
        if pair.open == pair.close:
            raise BracketTableError(f"Pair maps U+{pair.open_codepoint:04X} to itself")
        if pair.open in opens:
            raise BracketTableError(f"Duplicate open bracket U+{pair.open_codepoint:04X}")
        if pair.close in closes:
            raise BracketTableError(f"Duplicate close bracket U+{pair.close_codepoint:04X}")
        opens.add(pair.open)
        closes.add(pair.close)

    both = opens & closes
    if both:
        listed = ", ".join(f"U+{ord(c):04X}" for c in sorted(both))
        raise BracketTableError(f"Characters used as both open and close: {listed}")


def build_maps(
    pairs: Iterable[BracketPair],
) -> tuple[Mapping[str, str], Mapping[str, str]]:
    """Return read-only ``(open_to_close, close_to_open)`` views of ``pairs``."""
    pairs = tuple(pairs)
    verify_bijection(pairs)
    open_to_close = {pair.open: pair.close for pair in pairs}
    close_to_open = {pair.close: pair.open for pair in pairs}
    return MappingProxyType(open_to_close), MappingProxyType(close_to_open)


OPEN_TO_CLOSE, CLOSE_TO_OPEN = build_maps(BRACKET_PAIRS)


__all__ = [
    "UNICODE_VERSION",
    "BracketTableError",
    "BracketPair",
    "BRACKET_PAIRS",
    "OPEN_TO_CLOSE",
    "CLOSE_TO_OPEN",
    "verify_bijection",
    "build_maps",
]
