"""
Detection collection for CostumeSwitch.

Runs a CompiledMatcherSet over a text and emits tagged MatchRecords.

Quote policy per role:
- speaker: never inside quotes, except right after an opening quote glyph
- pronoun: never inside quotes
- vocative: always allowed inside quotes (direct address lives in dialogue)
- attribution, action: inside quotes only with scan_dialogue_actions
- possessive, name: inside quotes only with scan_quoted_names

The veto matcher is not applied here; callers decide what a veto means.
"""

import logging
import re
from typing import Iterable, Optional

from costumeswitch.detection.quotes import get_quote_ranges, is_index_inside_quotes
from costumeswitch.language.profile import LanguageProfile, get_profile
from costumeswitch.models import (
    CompiledMatcherSet,
    MatchKind,
    MatchRecord,
    Profile,
    QuoteRange,
    finite_number,
)

logger = logging.getLogger("costumeswitch.collector")


def find_matches(
    text: str,
    regex: Optional[re.Pattern],
    quote_ranges: Iterable[QuoteRange],
    search_inside_quotes: bool = False,
    allow_after_opener: bool = False,
) -> list[re.Match]:
    """
    All matches of regex in text, in order.

    Matches starting strictly inside a quote range are dropped unless
    search_inside_quotes is set. With allow_after_opener, a match that
    starts right after a range's opening glyph is kept.
    """
    if regex is None or not text:
        return []
    quote_ranges = list(quote_ranges)
    openings = {r.start + 1 for r in quote_ranges} if allow_after_opener else set()
    results = []
    for match in regex.finditer(text):
        start = match.start()
        if (
            not search_inside_quotes
            and start not in openings
            and is_index_inside_quotes(start, quote_ranges)
        ):
            continue
        results.append(match)
    return results


def captured_name(match: re.Match) -> str:
    """First non-empty capture group, trimmed ("" if none)."""
    for group in match.groups():
        if group and group.strip():
            return group.strip()
    return ""


def name_start(match: re.Match) -> int:
    """Offset of the first non-empty capture group (match start if none)."""
    for i, group in enumerate(match.groups(), start=1):
        if group and group.strip():
            return match.start(i) + (len(group) - len(group.lstrip()))
    return match.start()


def _suffix_pattern(language: LanguageProfile) -> Optional[re.Pattern]:
    if not language.stripped_name_suffixes:
        return None
    alternation = "|".join(re.escape(s) for s in language.stripped_name_suffixes)
    return re.compile(rf"-(?:{alternation})$", re.IGNORECASE)


def collect_detections(
    text: str,
    profile: Profile,
    matchers: CompiledMatcherSet,
    *,
    quote_ranges: Optional[list[QuoteRange]] = None,
    priority_weights: Optional[dict[str, float]] = None,
    scan_dialogue_actions: bool = False,
    scan_quoted_names: bool = False,
    last_subject: Optional[str] = None,
    language: Optional[LanguageProfile] = None,
) -> list[MatchRecord]:
    """
    Run every enabled matcher over text.

    Args:
        text: Text to scan
        profile: Profile supplying the per-role toggles
        matchers: Matchers compiled from the same profile
        quote_ranges: Precomputed quote ranges (scanned from text if None)
        priority_weights: MatchKind value -> priority
        scan_dialogue_actions: Allow attribution/action inside quotes
        scan_quoted_names: Allow possessive/bare names inside quotes
        last_subject: Current subject for pronoun continuation
        language: Language profile (quote styles, stripped suffixes)

    Returns:
        MatchRecords grouped by role, in text order within each role
    """
    if not text or matchers is None:
        return []

    if language is None:
        language = get_profile("en")
    if quote_ranges is None:
        quote_ranges = get_quote_ranges(text, profile=language)
    weights = priority_weights or {}
    subject = (last_subject or "").strip() if isinstance(last_subject, str) else ""
    suffix = _suffix_pattern(language)

    records: list[MatchRecord] = []

    def emit(kind: MatchKind, name: str, index: int) -> None:
        name = name.strip()
        if not name:
            return
        records.append(MatchRecord(
            name=name,
            match_kind=kind,
            match_index=index,
            priority=finite_number(weights.get(kind.value)),
        ))

    def run(
        kind: MatchKind,
        regex: Optional[re.Pattern],
        inside_quotes: bool,
        after_opener: bool = False,
    ) -> None:
        for match in find_matches(text, regex, quote_ranges, inside_quotes, after_opener):
            emit(kind, captured_name(match), name_start(match))

    run(MatchKind.SPEAKER, matchers.speaker_regex, False, after_opener=True)

    if profile.detect_attribution:
        run(MatchKind.ATTRIBUTION, matchers.attribution_regex, scan_dialogue_actions)

    if profile.detect_action:
        run(MatchKind.ACTION, matchers.action_regex, scan_dialogue_actions)

    if profile.detect_pronoun and subject:
        for match in find_matches(text, matchers.pronoun_regex, quote_ranges):
            emit(MatchKind.PRONOUN, subject, match.start())

    if profile.detect_vocative:
        run(MatchKind.VOCATIVE, matchers.vocative_regex, True)

    if profile.detect_possessive:
        run(MatchKind.POSSESSIVE, matchers.possessive_regex, scan_quoted_names)

    if profile.detect_general:
        for match in find_matches(text, matchers.name_regex, quote_ranges, scan_quoted_names):
            name = captured_name(match)
            if suffix is not None:
                name = suffix.sub("", name)
            emit(MatchKind.NAME, name, name_start(match))

    logger.debug(f"Collected {len(records)} detections from {len(text)} chars")
    return records
