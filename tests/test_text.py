"""Tests for string-level bracket helpers."""

from __future__ import annotations

from unicode_brackets import BRACKET_PAIRS, is_balanced, mirror_bracket, mirror_text


class TestMirrorText:
    """Tests for mirror_text."""

    def test_empty(self):
        assert mirror_text("") == ""

    def test_swaps_brackets_only(self):
        assert mirror_text("f(x[0]) = {y}") == "f)x]0[( = }y{"

    def test_unicode_brackets(self):
        assert mirror_text("「quote」") == "」quote「"

    def test_matches_per_character_mirror(self):
        text = "".join(pair.open + "-" + pair.close for pair in BRACKET_PAIRS)
        assert mirror_text(text) == "".join(mirror_bracket(ch) for ch in text)

    def test_involution(self):
        text = "a(b[c]d)e⦑f⦒"
        assert mirror_text(mirror_text(text)) == text


class TestIsBalanced:
    """Tests for is_balanced."""

    def test_empty_is_balanced(self):
        assert is_balanced("") is True

    def test_no_brackets_is_balanced(self):
        assert is_balanced("hello world") is True

    def test_simple_balanced(self):
        assert is_balanced("()") is True

    def test_nested_mixed_balanced(self):
        assert is_balanced("{[()]}") is True

    def test_sequential_balanced(self):
        assert is_balanced("()[]{}") is True

    def test_non_ascii_balanced(self):
        assert is_balanced("【a「b」c】") is True

    def test_crossed_tick_brackets(self):
        assert is_balanced("⦍⦐") is True
        assert is_balanced("⦍⦎") is False

    def test_single_open_unbalanced(self):
        assert is_balanced("(") is False

    def test_single_close_unbalanced(self):
        assert is_balanced(")") is False

    def test_wrong_order_unbalanced(self):
        assert is_balanced(")(") is False

    def test_interleaved_unbalanced(self):
        assert is_balanced("([)]") is False

    def test_mismatched_kind_unbalanced(self):
        assert is_balanced("(]") is False
