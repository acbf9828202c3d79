"""Tests for version consistency."""

import re

import pytest


def test_version_matches_metadata():
    """Package __version__ matches importlib.metadata."""
    from importlib.metadata import version

    from costumeswitch import __version__

    assert __version__ == version("costumeswitch")


def test_version_is_semver():
    """Version follows semver format."""
    from costumeswitch import __version__

    assert re.match(r"^\d+\.\d+\.\d+", __version__)


def test_cli_version_flag(capsys):
    """costumeswitch --version prints the correct version."""
    from costumeswitch import __version__
    from costumeswitch.cli import main

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
