"""Tests for the BidiBrackets.txt parser and table renderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from unicode_brackets import ucd
from unicode_brackets.table import BRACKET_PAIRS, BracketPair


def test_bundled_data_matches_table(ucd_path: Path) -> None:
    pairs = ucd.parse_bidi_brackets(ucd_path.read_text(encoding="utf-8").splitlines())
    assert pairs == list(BRACKET_PAIRS)


def test_parse_skips_comments_and_blanks():
    lines = [
        "# header",
        "",
        "0028; 0029; o # LEFT PARENTHESIS",
        "   ",
        "0029; 0028; c # RIGHT PARENTHESIS",
    ]
    assert ucd.parse_bidi_brackets(lines) == [BracketPair("(", ")", "LEFT PARENTHESIS")]


def test_parse_sorts_by_open_codepoint():
    lines = [
        "005D; 005B; c # RIGHT SQUARE BRACKET",
        "005B; 005D; o # LEFT SQUARE BRACKET",
        "0029; 0028; c # RIGHT PARENTHESIS",
        "0028; 0029; o # LEFT PARENTHESIS",
    ]
    assert [pair.open for pair in ucd.parse_bidi_brackets(lines)] == ["(", "["]


@pytest.mark.parametrize(
    "lines, message",
    [
        (["0028; 0029 # missing type"], "expected 3 fields"),
        (["00ZZ; 0029; o"], "invalid code point"),
        (["110000; 0029; o"], "out of range"),
        (["0028; 0029; x"], "unknown bracket type"),
        (["0028; 0029; o"], "no matching closing row"),
        (["0028; 0029; o", "0029; 005B; c"], "no matching closing row"),
        (["0029; 0028; c"], "without an opening row"),
    ],
)
def test_parse_rejects_malformed(lines, message):
    with pytest.raises(ValueError, match=message):
        ucd.parse_bidi_brackets(lines)


def test_render_table_matches_source_layout():
    source = ucd.render_table([BracketPair("(", ")", "LEFT PARENTHESIS")])
    assert source == (
        "BRACKET_PAIRS: Tuple[BracketPair, ...] = (\n"
        '    BracketPair("\\u0028", "\\u0029", "LEFT PARENTHESIS"),\n'
        ")\n"
    )


def test_render_table_escapes_supplementary_planes():
    source = ucd.render_table([BracketPair("\U0001F000", "\U0001F001", "TEST")])
    assert '"\\U0001F000"' in source


def test_rendered_rows_appear_in_table_module():
    table_source = (Path(ucd.__file__).parent / "table.py").read_text(encoding="utf-8")
    for row in ucd.render_table(BRACKET_PAIRS).splitlines():
        assert row in table_source


def test_main_writes_output(tmp_path: Path, ucd_path: Path, capsys) -> None:
    out = tmp_path / "gen" / "pairs.py"
    ucd.main(["--ucd", str(ucd_path), "--out", str(out)])
    assert out.read_text(encoding="utf-8") == ucd.render_table(BRACKET_PAIRS)
    assert "Wrote 60 bracket pairs" in capsys.readouterr().out


def test_main_prints_to_stdout(ucd_path: Path, capsys) -> None:
    ucd.main(["--ucd", str(ucd_path)])
    captured = capsys.readouterr().out
    assert captured.startswith("BRACKET_PAIRS: Tuple[BracketPair, ...] = (")
