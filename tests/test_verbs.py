"""Tests for verb conjugation."""

import pytest

from costumeswitch.language.verbs import (
    FORM_KEYS,
    VerbCategories,
    conjugate,
    create_conjugated_entry,
    create_manual_entry,
    should_double_final_consonant,
    to_past_tense,
    to_present_participle,
    to_third_person,
)


class TestSpellingRules:
    """Tests for rule-derived inflections."""

    def test_doubling(self):
        """Test consonant-vowel-consonant endings double."""
        forms = conjugate("drop")
        assert forms.past == "dropped"
        assert forms.present_participle == "dropping"

    def test_no_doubling_after_w_x_y(self):
        assert not should_double_final_consonant("bow")
        assert not should_double_final_consonant("fix")
        assert not should_double_final_consonant("play")
        assert to_past_tense("fix") == "fixed"

    def test_ie_ending(self):
        assert to_present_participle("tie") == "tying"
        assert to_third_person("tie") == "ties"
        assert to_past_tense("tie") == "tied"

    def test_vowel_y(self):
        forms = conjugate("play")
        assert forms.third_person == "plays"
        assert forms.past == "played"

    def test_consonant_y(self):
        forms = conjugate("cry")
        assert forms.third_person == "cries"
        assert forms.past == "cried"
        assert forms.present_participle == "crying"

    def test_sibilant_and_o(self):
        assert to_third_person("watch") == "watches"
        assert to_third_person("hiss") == "hisses"
        assert to_third_person("go") == "goes"
        assert to_third_person("nod") == "nods"

    def test_silent_e(self):
        forms = conjugate("smile")
        assert forms.past == "smiled"
        assert forms.present_participle == "smiling"

    def test_ee_oe_ye(self):
        """Test -ee/-oe/-ye keep their e before -ing."""
        assert to_present_participle("agree") == "agreeing"
        assert to_present_participle("tiptoe") == "tiptoeing"
        assert to_present_participle("eye") == "eyeing"

    def test_past_participle_matches_past(self):
        forms = conjugate("ask")
        assert forms.past == forms.past_participle == "asked"


class TestParticles:
    """Tests for phrasal verbs."""

    def test_particle_attaches_to_every_form(self):
        forms = conjugate("perk", "up")
        assert forms.base == "perk up"
        assert forms.past == "perked up"
        assert forms.third_person == "perks up"
        assert forms.present_participle == "perking up"

    def test_particle_with_overrides(self):
        forms = conjugate("fall", "apart", {"past": "fell", "past_participle": "fallen"})
        assert forms.past == "fell apart"
        assert forms.past_participle == "fallen apart"

    def test_blank_particle(self):
        assert conjugate("nod", "  ").base == "nod"


class TestOverrides:
    def test_irregular(self):
        forms = conjugate("arise", overrides={"past": "arose", "past_participle": "arisen"})
        assert forms.past == "arose"
        assert forms.past_participle == "arisen"
        assert forms.third_person == "arises"

    def test_unknown_form(self):
        with pytest.raises(ValueError, match="Unknown verb form"):
            conjugate("go", overrides={"future": "will go"})


class TestEntries:
    """Tests for catalog entry construction."""

    def test_empty_lemma(self):
        with pytest.raises(ValueError, match="lemma"):
            conjugate("  ")
        with pytest.raises(ValueError, match="lemma"):
            create_conjugated_entry(None, VerbCategories())

    def test_conjugated_entry(self):
        entry = create_conjugated_entry("perk", VerbCategories(), "up")
        assert entry.base == "perk up"
        assert entry.forms.past == "perked up"

    def test_manual_entry(self):
        forms = {
            "base": "shake",
            "third_person": "shakes",
            "past": "shook",
            "past_participle": "shaken",
            "present_participle": "shaking",
        }
        entry = create_manual_entry("shake", VerbCategories(), forms)
        assert entry.forms.to_dict() == forms
        assert list(entry.forms.to_dict()) == list(FORM_KEYS)

    def test_manual_entry_missing_form(self):
        """Test a missing form is named in the error."""
        forms = {"base": "go", "third_person": "goes", "past_participle": "gone", "present_participle": "going"}
        with pytest.raises(ValueError, match="forms.past "):
            create_manual_entry("go", VerbCategories(), forms)

    def test_manual_entry_without_forms(self):
        with pytest.raises(ValueError):
            create_manual_entry("go", VerbCategories(), None)
