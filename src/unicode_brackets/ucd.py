"""Regenerate the bracket table from a UCD ``BidiBrackets.txt`` file.

Usage::

    python -m unicode_brackets.ucd --ucd BidiBrackets.txt --out pairs.py

The output is the ``BRACKET_PAIRS`` literal to paste into
``unicode_brackets/table.py``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

from .table import BracketPair, verify_bijection

BRACKET_TYPE_OPEN = "o"
BRACKET_TYPE_CLOSE = "c"


def _parse_codepoint(field: str, lineno: int) -> str:
    try:
        value = int(field, 16)
    except ValueError:
        raise ValueError(f"line {lineno}: invalid code point {field!r}") from None
    if not 0 <= value <= 0x10FFFF:
        raise ValueError(f"line {lineno}: code point {field!r} out of range")
    return chr(value)


def parse_bidi_brackets(lines: Iterable[str]) -> List[BracketPair]:
    """Parse ``BidiBrackets.txt`` content into bracket pairs.

    Parameters
    ----------
    lines:
        Lines of the UCD file. ``#`` comments and blank lines are skipped.

    Returns
    -------
    list[BracketPair]
        One pair per ``o`` row, ordered by opening code point. The name is
        taken from the trailing comment of the ``o`` row.

    Raises
    ------
    ValueError
        If a row is malformed, or an ``o`` row has no ``c`` row pointing back
        at it (and vice versa).
    """
    opens: dict[str, tuple[str, str]] = {}
    closes: dict[str, str] = {}

    for lineno, raw in enumerate(lines, start=1):
        data, _, comment = raw.partition("#")
        data = data.strip()
        if not data:
            continue
        fields = [f.strip() for f in data.split(";")]
        if len(fields) != 3:
            raise ValueError(f"line {lineno}: expected 3 fields, got {len(fields)}")
        char = _parse_codepoint(fields[0], lineno)
        paired = _parse_codepoint(fields[1], lineno)
        kind = fields[2]
        if kind == BRACKET_TYPE_OPEN:
            opens[char] = (paired, comment.strip())
        elif kind == BRACKET_TYPE_CLOSE:
            closes[char] = paired
        else:
            raise ValueError(f"line {lineno}: unknown bracket type {kind!r}")

    pairs: list[BracketPair] = []
    for open_char, (close_char, name) in opens.items():
        if closes.get(close_char) != open_char:
            raise ValueError(
                f"U+{ord(open_char):04X} pairs with U+{ord(close_char):04X}, "
                "which has no matching closing row"
            )
        pairs.append(BracketPair(open_char, close_char, name))

    unmatched = set(closes) - {pair.close for pair in pairs}
    if unmatched:
        listed = ", ".join(f"U+{ord(c):04X}" for c in sorted(unmatched))
        raise ValueError(f"Closing rows without an opening row: {listed}")

    pairs.sort(key=lambda pair: pair.open_codepoint)
    verify_bijection(pairs)
    return pairs


def _escape(codepoint: int) -> str:
    if codepoint > 0xFFFF:
        return f"\\U{codepoint:08X}"
    return f"\\u{codepoint:04X}"


def render_table(pairs: Sequence[BracketPair]) -> str:
    """Render ``pairs`` as the Python source of the ``BRACKET_PAIRS`` literal."""
    rows = ["BRACKET_PAIRS: Tuple[BracketPair, ...] = ("]
    for pair in pairs:
        rows.append(
            f'    BracketPair("{_escape(pair.open_codepoint)}", '
            f'"{_escape(pair.close_codepoint)}", "{pair.name}"),'
        )
    rows.append(")")
    return "\n".join(rows) + "\n"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render the bracket table from a UCD BidiBrackets.txt file."
    )
    parser.add_argument("--ucd", type=Path, required=True, help="Path to BidiBrackets.txt")
    parser.add_argument(
        "--out", type=Path, default=None, help="Output file (defaults to stdout)"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    with args.ucd.open("r", encoding="utf-8") as f:
        pairs = parse_bidi_brackets(f)
    source = render_table(pairs)
    if args.out is None:
        sys.stdout.write(source)
        return
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(source, encoding="utf-8")
    print(f"Wrote {len(pairs)} bracket pairs to {args.out}")


if __name__ == "__main__":
    main()
