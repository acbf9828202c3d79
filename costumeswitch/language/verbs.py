"""
Verb conjugation for CostumeSwitch.

Derives the five inflected forms of an English verb from its lemma using
spelling rules:

    third person      cry -> cries, tie -> ties, watch -> watches
    past / participle  smile -> smiled, cry -> cried, drop -> dropped
    present participle tie -> tying, agree -> agreeing, smile -> smiling

Irregulars are handled with explicit overrides applied after the rules.
A particle ("up", "out") attaches after the inflected verb in every form:
``perk up -> perked up``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

FORM_KEYS = (
    "base",
    "third_person",
    "past",
    "past_participle",
    "present_participle",
)

CATEGORY_KEYS = ("attribution", "action")
EDITION_KEYS = ("default", "extended")

_CONSONANT = re.compile(r"[bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)
_VOWEL = re.compile(r"[aeiou]", re.IGNORECASE)
_CONSONANT_Y = re.compile(r"[^aeiou]y$", re.IGNORECASE)
_SIBILANT_O = re.compile(r"(?:s|sh|ch|x|z|o)$", re.IGNORECASE)
_NO_DOUBLE = re.compile(r"[wxy]", re.IGNORECASE)


@dataclass(frozen=True)
class VerbForms:
    """The five forms of a verb (particle already attached)."""
    base: str
    third_person: str
    past: str
    past_participle: str
    present_participle: str

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in FORM_KEYS}


@dataclass(frozen=True)
class EditionFlags:
    default: bool = False
    extended: bool = False


@dataclass(frozen=True)
class VerbCategories:
    """Which category x edition vocabularies a verb belongs to."""
    attribution: EditionFlags = EditionFlags()
    action: EditionFlags = EditionFlags()

    def includes(self, category: str, edition: str) -> bool:
        return bool(getattr(getattr(self, category), edition))


@dataclass(frozen=True)
class VerbEntry:
    """A catalog verb: base form, category flags and all five forms."""
    base: str
    categories: VerbCategories
    forms: VerbForms


# ---------------------------------------------------------------------------
# Spelling rules
# ---------------------------------------------------------------------------

def _is_consonant(letter: str) -> bool:
    return bool(_CONSONANT.fullmatch(letter))


def _is_vowel(letter: str) -> bool:
    return bool(_VOWEL.fullmatch(letter))


def should_double_final_consonant(lemma: str) -> bool:
    """Consonant-vowel-consonant ending, final letter not w/x/y."""
    if len(lemma) < 3:
        return False
    last, second_last, third_last = lemma[-1], lemma[-2], lemma[-3]
    return (
        _is_consonant(last)
        and not _NO_DOUBLE.fullmatch(last)
        and _is_vowel(second_last)
        and _is_consonant(third_last)
    )


def to_third_person(lemma: str) -> str:
    if lemma.endswith("ie"):
        return f"{lemma[:-2]}ies"
    if _CONSONANT_Y.search(lemma):
        return f"{lemma[:-1]}ies"
    if _SIBILANT_O.search(lemma):
        return f"{lemma}es"
    return f"{lemma}s"


def to_past_tense(lemma: str) -> str:
    if lemma.endswith("e"):
        return f"{lemma}d"
    if _CONSONANT_Y.search(lemma):
        return f"{lemma[:-1]}ied"
    if should_double_final_consonant(lemma):
        return f"{lemma}{lemma[-1]}ed"
    return f"{lemma}ed"


def to_present_participle(lemma: str) -> str:
    if lemma.endswith("ie"):
        return f"{lemma[:-2]}ying"
    if lemma.endswith(("ee", "oe", "ye")):
        return f"{lemma}ing"
    if lemma.endswith("e"):
        return f"{lemma[:-1]}ing"
    if should_double_final_consonant(lemma):
        return f"{lemma}{lemma[-1]}ing"
    return f"{lemma}ing"


def build_inflections(lemma: str) -> dict[str, str]:
    """Rule-derived forms of a bare lemma (no particle)."""
    past = to_past_tense(lemma)
    return {
        "base": lemma,
        "third_person": to_third_person(lemma),
        "past": past,
        "past_participle": past,
        "present_participle": to_present_participle(lemma),
    }


# ---------------------------------------------------------------------------
# Entry construction
# ---------------------------------------------------------------------------

def _require_lemma(lemma: object) -> str:
    if not isinstance(lemma, str) or not lemma.strip():
        raise ValueError(f"lemma must be a non-empty string, got {lemma!r}")
    return lemma.strip()


def _apply_particle(forms: dict[str, str], particle: str, lemma: str) -> VerbForms:
    particle = (particle or "").strip()
    attached = {}
    for key in FORM_KEYS:
        value = lemma if key == "base" else forms[key]
        attached[key] = f"{value} {particle}" if particle else value
    return VerbForms(**attached)


def conjugate(
    lemma: str,
    particle: str = "",
    overrides: Optional[dict[str, str]] = None,
) -> VerbForms:
    """
    Derive all five forms of a lemma.

    Args:
        lemma: Dictionary form ("drop", "perk")
        particle: Optional particle appended to every form ("up")
        overrides: Replacement forms for irregulars, keyed by form name

    Returns:
        VerbForms with the particle attached

    Raises:
        ValueError: On an empty lemma or an unknown override key
    """
    lemma = _require_lemma(lemma)
    forms = build_inflections(lemma)
    for key, value in (overrides or {}).items():
        if key not in FORM_KEYS:
            raise ValueError(f"Unknown verb form: {key!r}")
        if value:
            forms[key] = value
    return _apply_particle(forms, particle, lemma)


def create_conjugated_entry(
    lemma: str,
    categories: VerbCategories,
    particle: str = "",
    overrides: Optional[dict[str, str]] = None,
) -> VerbEntry:
    """Build a catalog entry from rule-derived forms."""
    forms = conjugate(lemma, particle, overrides)
    return VerbEntry(base=forms.base, categories=categories, forms=forms)


def create_manual_entry(
    lemma: str,
    categories: VerbCategories,
    forms: Optional[dict[str, str]],
    particle: str = "",
) -> VerbEntry:
    """
    Build a catalog entry from explicitly supplied forms.

    Raises:
        ValueError: If the lemma is empty or any of the five forms is missing
    """
    lemma = _require_lemma(lemma)
    if not forms:
        raise ValueError(f"forms must be provided for manual entry {lemma!r}")
    for key in FORM_KEYS:
        if not forms.get(key):
            raise ValueError(f"forms.{key} is required for manual entry {lemma!r}")
    inflected = _apply_particle(dict(forms), particle, lemma)
    return VerbEntry(base=inflected.base, categories=categories, forms=inflected)

