"""
Pattern compilation for CostumeSwitch.

Turns a Profile (names, verbs, pronouns) into a CompiledMatcherSet: one
regex per detection role, built by filling role templates at the
``{{PATTERNS}}`` placeholder with the alternation of every configured name.

Pattern strings:
- ``/body/flags`` (flags from "gimsuy") is used as regex source
- anything else is matched literally ("Mr. Smith" does not match "MrXSmith")

Name-tail grammar (attribution and action roles), after the name:

    honorific?  possessive?  compound-word?  descriptor{0,3}  separator
    filler-word{0,7}?  verb

Every repetition in the grammar has a fixed upper bound (the MAX_*
constants below); build_name_tail refuses counts outside them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from costumeswitch.language.profile import get_profile
from costumeswitch.models import CompiledMatcherSet, PatternEntry, Profile

logger = logging.getLogger("costumeswitch.patterns")

PLACEHOLDER = "{{PATTERNS}}"
VALID_FLAGS = "gimsuy"

DEFAULT_WORD_PATTERN = r"\w"
DEFAULT_BOUNDARY_LOOKBEHIND = r"(?<![A-Za-z0-9_'’])"

# Grammar bounds
MAX_DESCRIPTOR_CLAUSES = 3
MAX_DESCRIPTOR_WORDS = 8
MAX_FILLER_WORDS = 7
MAX_PRONOUN_FILLER_WORDS = 3

# JS-style flag letters with a Python counterpart; g/u/y have none
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}

_REGEX_ENTRY = re.compile(r"^/((?:\\.|[^/])+)/([gimsuy]*)$")

# Horizontal whitespace: name tails never cross a line break
HWS = r"[^\S\r\n]"
POSSESSIVE = r"['’]s"
CAPITAL = r"(?-i:[A-ZÀ-ÖØ-Þ])"
IDEOGRAPHIC = r"[぀-ヿ㐀-䶿一-鿿가-힯]"
SEPARATOR_PUNCT = r"[,;:—–-]"


@dataclass(frozen=True)
class CompileOptions:
    """
    Options for compile_profile.

    Attributes:
        word_pattern: Regex for one word character
        boundary_lookbehind: Guard placed before names and pronouns
        default_pronouns: Used when the profile has no pronoun vocabulary
        language_code: LanguageProfile supplying honorifics/pronouns
        extra_flags: Additional JS-style flag letters for every role
    """
    word_pattern: str = DEFAULT_WORD_PATTERN
    boundary_lookbehind: str = DEFAULT_BOUNDARY_LOOKBEHIND
    default_pronouns: tuple[str, ...] = ()
    language_code: str = "en"
    extra_flags: str = ""


# ---------------------------------------------------------------------------
# Pattern entries
# ---------------------------------------------------------------------------

def escape_regex(value: object) -> str:
    return re.escape(str(value))


def parse_pattern_entry(raw: object) -> Optional[PatternEntry]:
    """
    Parse one configured pattern string.

    Returns None for blank strings. A ``/body/flags`` string whose body is
    not valid Python regex source is matched literally instead.
    """
    text = str(raw if raw is not None else "").strip()
    if not text:
        return None

    match = _REGEX_ENTRY.match(text)
    if match:
        body, flags = match.group(1), match.group(2)
        try:
            re.compile(f"(?:{body})")
        except re.error as e:
            logger.warning(f"Invalid regex pattern {text!r} ({e}); matching it literally")
        else:
            return PatternEntry(body=body, flags=flags, raw=text)

    return PatternEntry(body=escape_regex(text), flags="", raw=text)


def compute_flags(entries: Iterable[Optional[PatternEntry]], require_i: bool = True) -> str:
    """Union of entry flags (restricted to gimsuy), plus "i" unless disabled."""
    flags = ["i"] if require_i else []
    for entry in entries:
        if entry is None:
            continue
        for flag in entry.flags:
            if flag in VALID_FLAGS and flag not in flags:
                flags.append(flag)
    return "".join(flags)


def to_re_flags(flags: str) -> int:
    """Translate JS-style flag letters into re module flags."""
    value = 0
    for flag in flags:
        value |= _FLAG_MAP.get(flag, 0)
    return value


def _parse_all(pattern_list: Optional[Iterable[object]]) -> list[PatternEntry]:
    return [e for e in map(parse_pattern_entry, pattern_list or []) if e is not None]


def build_regex(
    pattern_list: Optional[Iterable[object]],
    template: str,
    *,
    require_i: bool = True,
    extra_flags: str = "",
    base_flags: int = 0,
) -> Optional[re.Pattern]:
    """
    Fill a role template with the alternation of all patterns.

    Returns None when no usable pattern remains.
    """
    entries = _parse_all(pattern_list)
    if not entries:
        return None

    pattern_body = "|".join(f"(?:{entry.body})" for entry in entries)
    final_body = template.replace(PLACEHOLDER, pattern_body)
    final_flags = compute_flags(entries, require_i)
    for flag in extra_flags:
        if flag and flag not in final_flags:
            final_flags += flag

    try:
        return re.compile(final_body, to_re_flags(final_flags) | base_flags)
    except re.error as e:
        logger.warning(f"Could not compile matcher from {len(entries)} patterns: {e}")
        return None


def build_generic_regex(pattern_list: Optional[Iterable[object]]) -> Optional[re.Pattern]:
    """Plain alternation of patterns with no boundary grammar."""
    entries = _parse_all(pattern_list)
    if not entries:
        return None
    body = "|".join(entry.body for entry in entries)
    try:
        return re.compile(f"(?:{body})", to_re_flags(compute_flags(entries)))
    except re.error as e:
        logger.warning(f"Could not compile veto matcher: {e}")
        return None


def build_alternation(values: Optional[Iterable[object]]) -> str:
    """Deduplicated ``a|b|c`` source for a verb or pronoun vocabulary."""
    seen: set[str] = set()
    bodies = []
    for entry in _parse_all(values):
        if entry.body in seen:
            continue
        seen.add(entry.body)
        bodies.append(entry.body)
    return "|".join(bodies)


def gather_patterns(profile: Profile) -> list[str]:
    """
    Effective name patterns of a profile.

    Slot names and aliases first, then the legacy ``patterns`` list;
    deduplicated by trimmed string, order-preserving; entries listed in
    ``ignore_patterns`` (case-insensitive) removed.
    """
    seen: set[str] = set()
    gathered: list[str] = []

    def add(value: object) -> None:
        text = str(value if value is not None else "").strip()
        if text and text not in seen:
            seen.add(text)
            gathered.append(text)

    for slot in profile.pattern_slots:
        for value in slot.all_patterns():
            add(value)
    for value in profile.patterns:
        add(value)

    ignored = {
        str(value).strip().lower()
        for value in profile.ignore_patterns
        if value is not None and str(value).strip()
    }
    return [p for p in gathered if p.lower() not in ignored]


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

def _check_bound(label: str, value: int, limit: int) -> int:
    if not isinstance(value, int) or value < 0 or value > limit:
        raise ValueError(f"{label} must be an integer in 0..{limit}, got {value!r}")
    return value


def word_regex(word_pattern: str = DEFAULT_WORD_PATTERN) -> str:
    """One word, allowing inner apostrophes and hyphens (don't, half-elf)."""
    return rf"{word_pattern}+(?:['’\-]{word_pattern}+)*"


def build_honorific(honorifics: Iterable[str]) -> str:
    """Optional honorific suffix, optionally after a dash or space."""
    alts = []
    for token in sorted(set(honorifics), key=lambda t: (-len(t), t)):
        escaped = re.escape(token)
        # Romanized suffixes must end at a word edge (San, not Sandra)
        alts.append(rf"{escaped}(?![A-Za-z0-9])" if token.isascii() else escaped)
    if not alts:
        return ""
    return rf"(?:(?:-|{HWS})?(?:{'|'.join(alts)})\.?)?"


def build_name_tail(
    word_pattern: str = DEFAULT_WORD_PATTERN,
    honorifics: Iterable[str] = (),
    *,
    descriptor_clauses: int = MAX_DESCRIPTOR_CLAUSES,
    descriptor_words: int = MAX_DESCRIPTOR_WORDS,
    filler_words: int = MAX_FILLER_WORDS,
) -> str:
    """
    Regex source matched between a name and its verb.

    Raises:
        ValueError: If a repetition count falls outside its fixed bound
    """
    _check_bound("descriptor_clauses", descriptor_clauses, MAX_DESCRIPTOR_CLAUSES)
    _check_bound("filler_words", filler_words, MAX_FILLER_WORDS)
    if _check_bound("descriptor_words", descriptor_words, MAX_DESCRIPTOR_WORDS) < 1:
        raise ValueError("descriptor_words must be at least 1")

    word = word_regex(word_pattern)
    more_words = descriptor_words - 1

    honorific = build_honorific(honorifics)
    compound = rf"(?:(?:{HWS}+|-)(?:{CAPITAL}{word_pattern}*|{IDEOGRAPHIC}+))?"
    comma_clause = rf",{HWS}*{word}(?:{HWS}+{word}){{0,{more_words}}}"
    paren_clause = rf"{HWS}*\({HWS}*{word}(?:{HWS}+{word}){{0,{more_words}}}{HWS}*\)"
    descriptors = rf"(?:{comma_clause}|{paren_clause}){{0,{descriptor_clauses}}}"
    separator = rf"(?:{HWS}|{SEPARATOR_PUNCT})+"
    filler = rf"(?:{word}{HWS}+){{0,{filler_words}}}?"

    return f"{honorific}(?:{POSSESSIVE})?{compound}{descriptors}{separator}{filler}"


def build_templates(
    options: CompileOptions,
    honorifics: Iterable[str],
    attribution_alt: str,
    action_alt: str,
    quote_openers: Iterable[str] = (),
) -> dict[str, Optional[str]]:
    """
    Role templates containing the {{PATTERNS}} placeholder.

    A speaker tag sits at line start or right after a bracket or one of
    quote_openers.
    """
    wp = options.word_pattern
    boundary = options.boundary_lookbehind
    honorific = build_honorific(honorifics)
    tail = build_name_tail(wp, honorifics)
    name = f"({PLACEHOLDER})"
    openers = "".join(re.escape(g) for g in sorted(set(quote_openers)) if len(g) == 1)

    return {
        "speaker": rf"(?:^|(?<=[>\]\[({openers}]))[ \t]*{name}{honorific}[ \t]*[:：]",
        "attribution": (
            rf"{boundary}{name}{tail}(?:{attribution_alt})(?!{wp})"
            if attribution_alt else None
        ),
        "action": (
            rf"{boundary}{name}{tail}(?:{action_alt})(?!{wp})"
            if action_alt else None
        ),
        "vocative": rf"(?:^|(?<=[\"“‘'「『«\s(\[])){name}{honorific}(?=[,.!?…])",
        "possessive": rf"{boundary}{name}{POSSESSIVE}(?!{wp})",
        "name": rf"(?<!{wp}){name}(?!{wp})",
    }


def build_pronoun_regex(
    pronoun_alt: str,
    action_alt: str,
    options: CompileOptions,
) -> Optional[re.Pattern]:
    """Pronoun + up to three filler words + action verb."""
    if not pronoun_alt or not action_alt:
        return None
    wp = options.word_pattern
    word = word_regex(wp)
    source = (
        rf"{options.boundary_lookbehind}(?:{pronoun_alt})(?:{POSSESSIVE})?{HWS}+"
        rf"(?:{word}{HWS}+){{0,{MAX_PRONOUN_FILLER_WORDS}}}?(?:{action_alt})(?!{wp})"
    )
    return re.compile(source, re.IGNORECASE | to_re_flags(options.extra_flags))


# ---------------------------------------------------------------------------
# Profile compilation
# ---------------------------------------------------------------------------

def compile_profile(
    profile: Profile,
    options: Optional[CompileOptions] = None,
) -> CompiledMatcherSet:
    """
    Build every role matcher for a profile.

    Roles with nothing to match (no names, no verbs, no pronouns) are None.
    The result holds no per-text state and can be reused across texts.

    Args:
        profile: Detection profile
        options: Word class, boundary and flag options

    Returns:
        CompiledMatcherSet
    """
    if options is None:
        options = CompileOptions()
    language = get_profile(options.language_code)

    patterns = gather_patterns(profile)
    attribution_alt = build_alternation(profile.attribution_verbs)
    action_alt = build_alternation(profile.action_verbs)
    pronouns = (
        profile.pronoun_vocabulary
        or options.default_pronouns
        or language.default_pronouns
    )
    pronoun_alt = build_alternation(pronouns)

    templates = build_templates(
        options,
        language.honorifics,
        attribution_alt,
        action_alt,
        quote_openers=[pair.open for pair in language.quote_pairs],
    )

    def role(name: str, base_flags: int = 0) -> Optional[re.Pattern]:
        template = templates[name]
        if template is None:
            return None
        return build_regex(
            patterns, template, extra_flags=options.extra_flags, base_flags=base_flags,
        )

    matchers = CompiledMatcherSet(
        speaker_regex=role("speaker", re.MULTILINE),
        attribution_regex=role("attribution"),
        action_regex=role("action"),
        pronoun_regex=build_pronoun_regex(pronoun_alt, action_alt, options) if patterns else None,
        vocative_regex=role("vocative"),
        possessive_regex=role("possessive"),
        name_regex=role("name"),
        veto_regex=build_generic_regex(profile.veto_patterns),
        effective_patterns=tuple(patterns),
    )

    present = [k for k, v in matchers.roles().items() if v is not None]
    logger.debug(
        f"Compiled matchers: patterns={len(patterns)} roles={','.join(present) or 'none'}"
    )
    return matchers
