"""
Timing guards for detection.

Budgets are generous; they catch runaway regex backtracking, not small
slowdowns.

Run with: pytest tests/perf/ -v -s
"""

from __future__ import annotations

import time

from costumeswitch.detection.patterns import compile_profile
from costumeswitch.models import Profile
from costumeswitch.session import DetectionSession


def _profile(speakers: list[str]) -> Profile:
    return Profile.from_dict({
        "patterns": speakers,
        "detectPronoun": True,
        "detectPossessive": True,
        "detectGeneral": True,
    })


class TestDetectionTiming:
    """Timing checks for compile and scan."""

    def test_compile(self, speakers):
        start = time.perf_counter()
        for _ in range(5):
            compile_profile(_profile(speakers))
        elapsed = (time.perf_counter() - start) / 5
        print(f"\n  compile: {elapsed * 1000:.1f}ms")
        assert elapsed < 2.0

    def test_scan_passages(self, passages, speakers):
        session = DetectionSession(_profile(speakers))
        assert session.matchers.attribution_regex is not None

        start = time.perf_counter()
        detected = sum(1 for p in passages if session.scan(p).best is not None)
        elapsed = time.perf_counter() - start
        print(f"\n  scan {len(passages)} passages: {elapsed * 1000:.1f}ms")

        assert detected > 0
        assert elapsed < 10.0

    def test_adversarial_backtracking(self, adversarial_text, speakers):
        """Test unterminated descriptor runs stay bounded."""
        session = DetectionSession(_profile(speakers))
        assert session.matchers.attribution_regex is not None

        start = time.perf_counter()
        session.scan(adversarial_text)
        elapsed = time.perf_counter() - start
        print(f"\n  adversarial {len(adversarial_text)} chars: {elapsed * 1000:.1f}ms")

        assert elapsed < 10.0
