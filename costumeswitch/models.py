"""
Core data models for CostumeSwitch.

These are the values that flow through the detector:
- Profile: configuration driving one compilation of matchers
- PatternSlot: one configured character (name + aliases)
- PatternEntry: a parsed literal or /regex/ pattern string
- CompiledMatcherSet: the named matchers built from a Profile
- MatchRecord: a single tagged detection
- DetectionSummary: per-name aggregate of MatchRecords
- ScanConfig: scan-level settings (priorities, quote policy)
- Passage: a unit of input text
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MatchKind(str, Enum):
    """Detection category tagging a MatchRecord."""
    SPEAKER = "speaker"
    ATTRIBUTION = "attribution"
    ACTION = "action"
    PRONOUN = "pronoun"
    VOCATIVE = "vocative"
    POSSESSIVE = "possessive"
    NAME = "name"


DEFAULT_PRIORITY_WEIGHTS: dict[str, int] = {
    MatchKind.SPEAKER.value: 5,
    MatchKind.ATTRIBUTION.value: 4,
    MatchKind.ACTION.value: 3,
    MatchKind.PRONOUN.value: 2,
    MatchKind.VOCATIVE.value: 2,
    MatchKind.POSSESSIVE.value: 1,
    MatchKind.NAME.value: 0,
}

# Keys under which configuration records may carry alias strings
ALIAS_KEYS = ("aliases", "patterns", "alias", "altNames", "alt_names")


def finite_number(value: Any) -> Optional[float]:
    """Return value if it is a finite int/float (not bool), else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def kind_value(kind: Any) -> Optional[str]:
    """Plain string form of a MatchKind (or pass-through string)."""
    if kind is None:
        return None
    if isinstance(kind, MatchKind):
        return kind.value
    return str(kind)


def _string_list(values: Any) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v) for v in values if v is not None]


def _pick(data: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class PatternSlot:
    """
    A configured character.

    Attributes:
        name: Primary name (a literal or /regex/ pattern string)
        folder: Host metadata (e.g. costume folder); unused by detection
        aliases: Additional pattern strings for the same character
    """
    name: str = ""
    folder: Optional[str] = None
    aliases: tuple[str, ...] = ()

    def all_patterns(self) -> list[str]:
        """Primary name followed by every alias."""
        return [self.name, *self.aliases]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "folder": self.folder,
            "aliases": list(self.aliases),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PatternSlot":
        """Build from a configuration record, collecting every alias key."""
        if isinstance(data, str):
            return cls(name=data)
        aliases: list[str] = []
        for key in ALIAS_KEYS:
            aliases.extend(_string_list(data.get(key)))
        folder = _pick(data, "folder", "defaultFolder", "default_folder")
        return cls(
            name=str(data.get("name") or ""),
            folder=folder,
            aliases=tuple(aliases),
        )


@dataclass(frozen=True)
class Profile:
    """
    Immutable detection configuration.

    The profile is assumed to be already normalized by whoever edits and
    stores it; fields are plain values.

    Attributes:
        pattern_slots: Configured characters (name + aliases)
        patterns: Legacy flat list of name patterns
        attribution_verbs: Dialogue-attribution verbs ("said", "asked")
        action_verbs: Action verbs ("nodded", "frowned")
        pronoun_vocabulary: Pronouns for action continuation
        ignore_patterns: Names excluded from matching (case-insensitive)
        veto_patterns: Patterns whose presence suppresses a passage
        detect_*: Per-role toggles
    """
    pattern_slots: tuple[PatternSlot, ...] = ()
    patterns: tuple[str, ...] = ()
    attribution_verbs: tuple[str, ...] = ()
    action_verbs: tuple[str, ...] = ()
    pronoun_vocabulary: tuple[str, ...] = ("he", "she", "they")
    ignore_patterns: tuple[str, ...] = ()
    veto_patterns: tuple[str, ...] = ()
    detect_attribution: bool = True
    detect_action: bool = True
    detect_pronoun: bool = False
    detect_vocative: bool = True
    detect_possessive: bool = False
    detect_general: bool = False

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "pattern_slots": [s.to_dict() for s in self.pattern_slots],
            "patterns": list(self.patterns),
            "attribution_verbs": list(self.attribution_verbs),
            "action_verbs": list(self.action_verbs),
            "pronoun_vocabulary": list(self.pronoun_vocabulary),
            "ignore_patterns": list(self.ignore_patterns),
            "veto_patterns": list(self.veto_patterns),
            "detect_attribution": self.detect_attribution,
            "detect_action": self.detect_action,
            "detect_pronoun": self.detect_pronoun,
            "detect_vocative": self.detect_vocative,
            "detect_possessive": self.detect_possessive,
            "detect_general": self.detect_general,
        }

    @classmethod
    def from_dict(cls, data: dict, *, verb_edition: str = "default") -> "Profile":
        """
        Deserialize from dictionary.

        Accepts snake_case keys and camelCase configuration keys
        (patternSlots, detectAction, ...). Verb lists that are absent fall back to the
        catalog's legacy lists for ``verb_edition``.
        """
        from costumeswitch.language.catalog import build_legacy_verb_list

        slots = _pick(data, "pattern_slots", "patternSlots", "mappings", default=[]) or []
        attribution = _pick(data, "attribution_verbs", "attributionVerbs")
        if attribution is None:
            attribution = build_legacy_verb_list(category="attribution", edition=verb_edition)
        action = _pick(data, "action_verbs", "actionVerbs")
        if action is None:
            action = build_legacy_verb_list(category="action", edition=verb_edition)
        pronouns = _string_list(_pick(data, "pronoun_vocabulary", "pronounVocabulary"))

        return cls(
            pattern_slots=tuple(PatternSlot.from_dict(s) for s in slots),
            patterns=tuple(_string_list(data.get("patterns"))),
            attribution_verbs=tuple(_string_list(attribution)),
            action_verbs=tuple(_string_list(action)),
            pronoun_vocabulary=tuple(pronouns) or ("he", "she", "they"),
            ignore_patterns=tuple(_string_list(_pick(data, "ignore_patterns", "ignorePatterns"))),
            veto_patterns=tuple(_string_list(_pick(data, "veto_patterns", "vetoPatterns"))),
            detect_attribution=bool(_pick(data, "detect_attribution", "detectAttribution", default=True)),
            detect_action=bool(_pick(data, "detect_action", "detectAction", default=True)),
            detect_pronoun=bool(_pick(data, "detect_pronoun", "detectPronoun", default=False)),
            detect_vocative=bool(_pick(data, "detect_vocative", "detectVocative", default=True)),
            detect_possessive=bool(_pick(data, "detect_possessive", "detectPossessive", default=False)),
            detect_general=bool(_pick(data, "detect_general", "detectGeneral", default=False)),
        )


@dataclass(frozen=True)
class PatternEntry:
    """
    A parsed pattern string.

    Attributes:
        body: Valid regex source (escaped for literals)
        flags: JS-style flag letters, subset of "gimsuy"
        raw: The trimmed original string
    """
    body: str
    flags: str = ""
    raw: str = ""


@dataclass(frozen=True)
class CompiledMatcherSet:
    """
    Named matchers built from one (Profile, options) pair.

    A role is None when it is not configured (no names, no verbs, no
    pronouns), which is distinct from a configured matcher that simply
    finds nothing in a given text.
    """
    speaker_regex: Optional[re.Pattern] = None
    attribution_regex: Optional[re.Pattern] = None
    action_regex: Optional[re.Pattern] = None
    pronoun_regex: Optional[re.Pattern] = None
    vocative_regex: Optional[re.Pattern] = None
    possessive_regex: Optional[re.Pattern] = None
    name_regex: Optional[re.Pattern] = None
    veto_regex: Optional[re.Pattern] = None
    effective_patterns: tuple[str, ...] = ()

    def roles(self) -> dict[str, Optional[re.Pattern]]:
        """Mapping of role name -> matcher (or None)."""
        return {
            "speaker": self.speaker_regex,
            "attribution": self.attribution_regex,
            "action": self.action_regex,
            "pronoun": self.pronoun_regex,
            "vocative": self.vocative_regex,
            "possessive": self.possessive_regex,
            "name": self.name_regex,
            "veto": self.veto_regex,
        }

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in self.roles().values())


@dataclass(frozen=True)
class QuoteRange:
    """Offsets of a balanced quoted span (opening and closing glyph)."""
    start: int
    end: int

    def contains(self, index: int) -> bool:
        """Strict interior test; the quote glyphs themselves are outside."""
        return self.start < index < self.end


@dataclass(frozen=True)
class MatchRecord:
    """
    A single detection.

    Attributes:
        name: Resolved, trimmed, non-empty name
        match_kind: MatchKind (or a foreign kind string from a merged report)
        match_index: Character offset of the match, None if unknown
        priority: Configured priority for the kind, None if unconfigured
    """
    name: str
    match_kind: Optional[str] = None
    match_index: Optional[int] = None
    priority: Optional[float] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "match_kind": kind_value(self.match_kind),
            "match_index": self.match_index,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class DetectionSummary:
    """
    Aggregate of all detections for one (case-insensitive) name.

    ``earliest`` and ``latest`` are 1-based offsets, None when no
    detection for the name carried an index.
    """
    name: str
    total: int = 0
    highest_priority: Optional[float] = None
    earliest: Optional[int] = None
    latest: Optional[int] = None
    kinds: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "total": self.total,
            "highest_priority": self.highest_priority,
            "earliest": self.earliest,
            "latest": self.latest,
            "kinds": dict(self.kinds),
        }


@dataclass
class ScanConfig:
    """
    Scan-level configuration.

    Attributes:
        priority_weights: MatchKind value -> numeric priority
        scan_dialogue_actions: Allow attribution/action matches inside quotes
        scan_quoted_names: Allow possessive/bare-name matches inside quotes
        language_code: ISO code of the LanguageProfile to use
        verb_edition: Verb catalog edition for default vocabularies
    """
    priority_weights: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_PRIORITY_WEIGHTS)
    )
    scan_dialogue_actions: bool = False
    scan_quoted_names: bool = False
    language_code: str = "en"
    verb_edition: str = "default"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "priority_weights": dict(self.priority_weights),
            "scan_dialogue_actions": self.scan_dialogue_actions,
            "scan_quoted_names": self.scan_quoted_names,
            "language_code": self.language_code,
            "verb_edition": self.verb_edition,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScanConfig":
        """Deserialize from dictionary."""
        weights = _pick(data, "priority_weights", "priorityWeights")
        return cls(
            priority_weights=dict(weights) if weights is not None else dict(DEFAULT_PRIORITY_WEIGHTS),
            scan_dialogue_actions=bool(_pick(data, "scan_dialogue_actions", "scanDialogueActions", default=False)),
            scan_quoted_names=bool(_pick(data, "scan_quoted_names", "scanQuotedNames", default=False)),
            language_code=data.get("language_code", "en"),
            verb_edition=data.get("verb_edition", "default"),
        )


@dataclass
class Passage:
    """
    A unit of input text.

    Attributes:
        index: Position in the source (0-indexed)
        text: The passage text
        title: Section title, if the source had one
        source_file: Originating file or document name
    """
    index: int
    text: str
    title: Optional[str] = None
    source_file: Optional[str] = None

    @property
    def word_count(self) -> int:
        return len(self.text.split())
