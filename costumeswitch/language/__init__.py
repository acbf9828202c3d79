"""
Language support for CostumeSwitch.

Bundles the static tables (quote styles, honorifics, pronouns) and the
verb vocabularies that feed attribution and action detection.
"""

from costumeswitch.language.profile import LanguageProfile, QuotePair, get_profile
from costumeswitch.language.verbs import VerbEntry, VerbForms, conjugate
from costumeswitch.language.catalog import (
    build_legacy_verb_list,
    build_verb_slices,
    get_verb_entries,
)

__all__ = [
    "LanguageProfile",
    "QuotePair",
    "get_profile",
    "VerbEntry",
    "VerbForms",
    "conjugate",
    "build_legacy_verb_list",
    "build_verb_slices",
    "get_verb_entries",
]
