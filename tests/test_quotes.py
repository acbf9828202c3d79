"""Tests for quote-range scanning."""

from costumeswitch.detection.quotes import (
    get_quote_ranges,
    is_index_inside_quotes,
    is_likely_apostrophe,
)
from costumeswitch.language.profile import LanguageProfile, QuotePair
from costumeswitch.models import QuoteRange


class TestGetQuoteRanges:
    """Tests for balanced quote detection."""

    def test_empty_text(self):
        """Test empty text has no ranges."""
        assert get_quote_ranges("") == []

    def test_straight_double_quotes(self):
        """Test a single straight-quoted span."""
        assert get_quote_ranges('"Hello," she said.') == [QuoteRange(0, 7)]

    def test_apostrophes_are_not_quotes(self):
        """Test possessive and contraction apostrophes produce no range."""
        assert get_quote_ranges("It's Bob's dog") == []

    def test_contraction_inside_quotes(self):
        """Test an apostrophe inside a quoted span does not break it."""
        text = '"Don\'t go," he said.'
        assert get_quote_ranges(text) == [QuoteRange(0, text.index(",") + 1)]

    def test_single_quoted_span(self):
        """Test single quotes used as quotation marks."""
        text = "'Hello,' she said."
        assert get_quote_ranges(text) == [QuoteRange(0, 7)]

    def test_nested_smart_quotes(self):
        """Test nested asymmetric quotes yield two ranges."""
        text = "“She said ‘hi’ loudly”"
        ranges = get_quote_ranges(text)

        assert len(ranges) == 2
        outer, inner = ranges
        assert outer == QuoteRange(0, len(text) - 1)
        assert inner == QuoteRange(text.index("‘"), text.index("’"))
        assert outer.start < inner.start < inner.end < outer.end

    def test_cjk_brackets(self):
        """Test corner-bracket quotes."""
        assert get_quote_ranges("「こんにちは」") == [QuoteRange(0, 6)]

    def test_shared_closing_glyph(self):
        """Test „ and “ both close with ”."""
        text = "„Hallo” und “hi”"
        ranges = get_quote_ranges(text)
        assert ranges == [
            QuoteRange(0, text.index("”")),
            QuoteRange(text.index("“"), len(text) - 1),
        ]

    def test_closer_skips_unrelated_open(self):
        """Test a closer matches below an intermediate open context."""
        text = "“a «b” c»"
        assert get_quote_ranges(text) == [QuoteRange(0, 5), QuoteRange(3, 8)]

    def test_unmatched_open_ignored(self):
        """Test an unterminated quote produces no range."""
        assert get_quote_ranges('He said "hello') == []

    def test_stray_closer_ignored(self):
        """Test a closer with no opener is ordinary text."""
        assert get_quote_ranges("well” then") == []

    def test_sorted_with_unique_starts(self):
        """Test ranges come back sorted by start with distinct starts."""
        text = '"One," he said. “Two ‘three’ four,” she said. 「five」'
        ranges = get_quote_ranges(text)
        starts = [r.start for r in ranges]

        assert starts == sorted(starts)
        assert len(set(starts)) == len(starts)
        assert len(ranges) == 4

    def test_repeatable(self):
        """Test scanning twice gives the same result."""
        text = "“A ‘b’ c” and \"d\""
        assert get_quote_ranges(text) == get_quote_ranges(text)

    def test_custom_profile(self):
        """Test quote styles come from the language profile."""
        profile = LanguageProfile(
            code="xx",
            name="Test",
            quote_pairs=(QuotePair("<<", ">>"), QuotePair("|", "|", symmetric=True)),
        )
        assert get_quote_ranges('|hi| "no"', profile=profile) == [QuoteRange(0, 3)]


class TestIsIndexInsideQuotes:
    """Tests for the strict interior test."""

    def test_boundaries_are_outside(self):
        """Test the quote glyphs themselves are not inside."""
        ranges = [QuoteRange(0, 7)]
        assert not is_index_inside_quotes(0, ranges)
        assert not is_index_inside_quotes(7, ranges)

    def test_interior(self):
        """Test characters between the glyphs are inside."""
        ranges = [QuoteRange(0, 7)]
        assert is_index_inside_quotes(1, ranges)
        assert is_index_inside_quotes(6, ranges)

    def test_outside(self):
        """Test positions after the range."""
        assert not is_index_inside_quotes(10, [QuoteRange(0, 7)])

    def test_no_ranges(self):
        """Test nothing is inside when there are no ranges."""
        assert not is_index_inside_quotes(3, [])


class TestIsLikelyApostrophe:
    """Tests for apostrophe disambiguation."""

    def test_between_letters(self):
        assert is_likely_apostrophe("Bob's", 3)

    def test_at_word_start(self):
        assert not is_likely_apostrophe("'Hello'", 0)

    def test_at_word_end(self):
        assert not is_likely_apostrophe("dogs' bowls", 4)
