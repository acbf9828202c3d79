"""
Verb catalog for CostumeSwitch.

Aggregates the curated verb lists into VerbEntry records and serves
category/edition-filtered vocabularies:

- get_verb_entries(): full entries, sorted by base form
- build_verb_slices(): unique values per form (base, past, ...)
- build_legacy_verb_list(): the flat list profiles use by default
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from costumeswitch.language.verbs import (
    CATEGORY_KEYS,
    EDITION_KEYS,
    FORM_KEYS,
    VerbEntry,
    create_conjugated_entry,
    create_manual_entry,
)
from costumeswitch.language import verb_data

logger = logging.getLogger("costumeswitch.catalog")

# Built lazily
_CATALOG: Optional[list[VerbEntry]] = None


def _build_catalog() -> list[VerbEntry]:
    entries: list[VerbEntry] = []
    for lemma, categories, overrides in verb_data.ATTRIBUTION_VERBS + verb_data.ACTION_VERBS:
        entries.append(create_conjugated_entry(lemma, categories, overrides=overrides))
    for lemma, particle, categories, overrides in verb_data.PHRASAL_VERBS:
        entries.append(create_conjugated_entry(lemma, categories, particle, overrides))
    for lemma, categories, overrides in verb_data.IRREGULAR_VERBS:
        entries.append(create_conjugated_entry(lemma, categories, overrides=overrides))
    for lemma, categories, forms in verb_data.MANUAL_VERBS:
        entries.append(create_manual_entry(lemma, categories, forms))
    return entries


def get_catalog() -> list[VerbEntry]:
    """Every catalog entry, in definition order."""
    global _CATALOG
    if _CATALOG is None:
        _CATALOG = _build_catalog()
        logger.info(f"Verb catalog built: {len(_CATALOG)} entries")
    return _CATALOG


def _normalize_options(category: Optional[str], edition: Optional[str]) -> tuple[str, str]:
    category = category or "attribution"
    edition = edition or "default"
    if category not in CATEGORY_KEYS:
        raise ValueError(
            f"Unknown verb category: {category!r}. Must be {'|'.join(CATEGORY_KEYS)}."
        )
    if edition not in EDITION_KEYS:
        raise ValueError(
            f"Unknown verb edition: {edition!r}. Must be {'|'.join(EDITION_KEYS)}."
        )
    return category, edition


def get_verb_entries(
    category: Optional[str] = "attribution",
    edition: Optional[str] = "default",
) -> list[VerbEntry]:
    """
    Catalog entries in a category/edition, sorted by base form.

    Raises:
        ValueError: On an unknown category or edition
    """
    category, edition = _normalize_options(category, edition)
    entries = [e for e in get_catalog() if e.categories.includes(category, edition)]
    return sorted(entries, key=lambda e: e.base.casefold())


def _unique(entries: list[VerbEntry], selector: Callable[[VerbEntry], str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for entry in entries:
        value = selector(entry)
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def build_verb_slices(
    category: Optional[str] = "attribution",
    edition: Optional[str] = "default",
) -> dict[str, list[str]]:
    """Unique values of each form across the selected entries."""
    entries = get_verb_entries(category, edition)
    return {
        key: _unique(entries, lambda e, key=key: getattr(e.forms, key))
        for key in FORM_KEYS
    }


def build_legacy_verb_list(
    category: Optional[str] = "attribution",
    edition: Optional[str] = "default",
) -> list[str]:
    """
    Flat vocabulary list used as a profile's default verbs.

    For action/default the list interleaves each verb's base form and past
    form (one or two rows per verb, not deduplicated). Every other
    combination is the unique list of past forms.
    """
    category, edition = _normalize_options(category, edition)
    entries = get_verb_entries(category, edition)

    if category == "action" and edition == "default":
        legacy = []
        for entry in entries:
            base_form = entry.forms.base
            past_form = entry.forms.past
            if base_form:
                legacy.append(base_form)
            if past_form and past_form != base_form:
                legacy.append(past_form)
        return legacy

    return _unique(entries, lambda e: e.forms.past)
