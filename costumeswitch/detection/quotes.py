"""
Quote-range scanning for CostumeSwitch.

Finds balanced quoted spans with a single left-to-right pass over the text,
keeping a stack of open quote contexts:

1. Symmetric glyphs (" ＂ ') toggle: close if the innermost open context
   is the same glyph, otherwise open a new context.
2. An apostrophe flanked by word characters (Bob's, it's) is text, not a
   quote.
3. Asymmetric closers (” 」 ’ ...) close the nearest open context, searching
   down the stack, whose declared closer is the current glyph. Opens above
   it stay open.
4. Contexts still open at end of text produce no range.

Quote glyphs come from a LanguageProfile. Default is English.
"""

import re
from typing import Iterable, Optional

from costumeswitch.language.profile import LanguageProfile, get_profile
from costumeswitch.models import QuoteRange

# Letters, digits and combining marks (word characters without underscore)
WORD_CHAR_PATTERN = re.compile(r"[^\W_]")


def _is_word_char(ch: str) -> bool:
    return bool(ch) and bool(WORD_CHAR_PATTERN.match(ch))


def is_likely_apostrophe(text: str, index: int) -> bool:
    """True when the glyph at index sits between two word characters."""
    if index <= 0 or index >= len(text) - 1:
        return False
    return _is_word_char(text[index - 1]) and _is_word_char(text[index + 1])


def get_quote_ranges(
    text: str,
    *,
    profile: Optional[LanguageProfile] = None,
) -> list[QuoteRange]:
    """
    Find all balanced quoted spans in text.

    Args:
        text: Text to scan
        profile: Language profile supplying quote styles (defaults to English)

    Returns:
        QuoteRanges sorted by start offset; nested spans are kept
    """
    if not text:
        return []

    if profile is None:
        profile = get_profile("en")

    openers = profile.openers()
    closers = profile.closers()

    ranges: list[QuoteRange] = []
    # Stack entries: (open glyph, close glyph, index, symmetric)
    stack: list[tuple[str, str, int, bool]] = []

    for i, ch in enumerate(text):
        pair = openers.get(ch)
        if pair is not None:
            if pair.symmetric:
                if pair.apostrophe_sensitive and is_likely_apostrophe(text, i):
                    continue
                if stack and stack[-1][3] and stack[-1][0] == ch:
                    _, _, start, _ = stack.pop()
                    ranges.append(QuoteRange(start, i))
                else:
                    stack.append((ch, pair.close, i, True))
                continue
            stack.append((ch, pair.close, i, False))
            continue

        candidates = closers.get(ch)
        if candidates is not None:
            for j in range(len(stack) - 1, -1, -1):
                open_glyph, close_glyph, start, symmetric = stack[j]
                if not symmetric and close_glyph == ch and open_glyph in candidates:
                    del stack[j]
                    ranges.append(QuoteRange(start, i))
                    break

    ranges.sort(key=lambda r: r.start)
    return ranges


def is_index_inside_quotes(index: int, quote_ranges: Iterable[QuoteRange]) -> bool:
    """True if index falls strictly between the glyphs of any range."""
    return any(r.contains(index) for r in quote_ranges)
