"""
LanguageProfile: bundles the static tables the detector consults.

Each profile provides:
- Quote-pair styles for the quote-range scanner
- Honorific suffixes for the name-tail grammar
- Default pronoun vocabulary for action continuation
- Honorific suffixes stripped from bare-name captures
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuotePair:
    """
    One quote style.

    Symmetric styles use the same glyph to open and close. Apostrophe-
    sensitive styles are not treated as quotes when flanked by word
    characters on both sides (``Bob's``).
    """
    open: str
    close: str
    symmetric: bool = False
    apostrophe_sensitive: bool = False


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable set of language-specific tables."""

    code: str
    name: str

    quote_pairs: tuple[QuotePair, ...] = ()
    honorifics: tuple[str, ...] = ()
    default_pronouns: tuple[str, ...] = ("he", "she", "they")
    stripped_name_suffixes: tuple[str, ...] = ()

    def openers(self) -> dict[str, QuotePair]:
        """Opening glyph -> pair."""
        return {pair.open: pair for pair in self.quote_pairs}

    def closers(self) -> dict[str, tuple[str, ...]]:
        """Closing glyph -> opening glyphs that it may close (asymmetric only)."""
        result: dict[str, list[str]] = {}
        for pair in self.quote_pairs:
            if pair.symmetric:
                continue
            result.setdefault(pair.close, []).append(pair.open)
        return {close: tuple(opens) for close, opens in result.items()}


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_PROFILES: dict[str, LanguageProfile] = {}


def register_profile(profile: LanguageProfile) -> None:
    _PROFILES[profile.code] = profile


def get_profile(code: str = "en") -> LanguageProfile:
    """Look up a language profile by ISO code. Defaults to English."""
    if code not in _PROFILES:
        # Lazy import to populate registry
        import costumeswitch.language.en  # noqa: F401
    if code not in _PROFILES:
        raise ValueError(
            f"Unsupported language: {code!r}. "
            f"Available: {', '.join(sorted(_PROFILES)) or 'none'}"
        )
    return _PROFILES[code]


def available_profiles() -> list[str]:
    """Return codes of all registered language profiles."""
    if not _PROFILES:
        import costumeswitch.language.en  # noqa: F401
    return sorted(_PROFILES.keys())
