"""Tests for the command-line interface."""

import io
import json

import pytest

from costumeswitch.cli import main


@pytest.fixture
def story(tmp_path):
    path = tmp_path / "story.txt"
    path.write_text(
        'Alice said, "Hi there."\n\nShe nodded.\n\nBob: Hello.\n\nOOC: Bob said hi.',
        encoding="utf-8",
    )
    return path


class TestScanCommand:
    """Tests for `costumeswitch scan`."""

    def test_scan_text(self, story, capsys):
        assert main(["scan", str(story), "-n", "Alice", "-n", "Bob"]) == 0
        out = capsys.readouterr().out
        assert "1. Alice (attribution)" in out
        assert "3. Bob (speaker)" in out

    def test_scan_json(self, story, capsys):
        assert main(["scan", str(story), "-n", "Alice", "-n", "Bob", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 4
        assert data[0]["best"]["name"] == "Alice"
        assert data[2]["best"]["match_kind"] == "speaker"

    def test_scan_with_profile(self, story, tmp_path, capsys):
        """Test a profile file enables pronouns and vetoes."""
        profile = tmp_path / "profile.json"
        profile.write_text(json.dumps({
            "profile": {
                "patternSlots": [{"name": "Alice"}, {"name": "Bob"}],
                "detectPronoun": True,
                "vetoPatterns": ["OOC"],
            },
        }), encoding="utf-8")

        assert main(["scan", str(story), "-p", str(profile)]) == 0
        out = capsys.readouterr().out
        assert "2. Alice (pronoun)" in out
        assert "4. [vetoed]" in out

    def test_summary(self, story, capsys):
        assert main(["scan", str(story), "-n", "Alice", "-n", "Bob", "--summary"]) == 0
        out = capsys.readouterr().out
        assert "Summary:" in out
        assert "Bob: 2" in out

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("Bob nodded."))
        assert main(["scan", "-", "-n", "Bob"]) == 0
        assert "Bob (action)" in capsys.readouterr().out

    def test_no_names(self, story, capsys):
        """Test scanning without any names is an error."""
        assert main(["scan", str(story)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_source(self, tmp_path, capsys):
        assert main(["scan", str(tmp_path / "none.txt"), "-n", "Alice"]) == 1
        assert "not found" in capsys.readouterr().out


class TestOtherCommands:
    def test_quotes(self, story, capsys):
        assert main(["quotes", str(story)]) == 0
        assert '"Hi there."' in capsys.readouterr().out

    def test_verbs(self, capsys):
        assert main(["verbs", "--category", "action", "--form", "past"]) == 0
        lines = capsys.readouterr().out.split()
        assert "nodded" in lines
        assert "nod" not in lines

    def test_verbs_legacy(self, capsys):
        assert main(["verbs"]) == 0
        assert "said" in capsys.readouterr().out.split()

    def test_conjugate(self, capsys):
        assert main(["conjugate", "perk", "--particle", "up"]) == 0
        out = capsys.readouterr().out
        assert "past: perked up" in out

    def test_conjugate_bad_lemma(self, capsys):
        assert main(["conjugate", " "]) == 1

    def test_no_command(self, capsys):
        assert main([]) == 0
