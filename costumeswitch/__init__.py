"""
CostumeSwitch - character detection for narrative text

Finds which named character a passage of prose or dialogue is about,
using layered, quote-aware regex heuristics: speaker tags, attribution
and action verbs, pronoun continuation, vocatives, possessives and bare
names.

Example:
    from costumeswitch import DetectionSession, Profile

    session = DetectionSession(Profile.from_dict({"patterns": ["Alice", "Bob"]}))
    result = session.scan('Alice said, "Hi there."')
    print(result.best.name)    # Alice
"""

__version__ = "0.1.0"

from costumeswitch.models import (
    CompiledMatcherSet,
    DetectionSummary,
    MatchKind,
    MatchRecord,
    Passage,
    PatternSlot,
    Profile,
    QuoteRange,
    ScanConfig,
)
from costumeswitch.detection import collect_detections, compile_profile, get_quote_ranges
from costumeswitch.report import DetectionReport, merge_detections, summarize_detections
from costumeswitch.session import DetectionSession, ScanResult

__all__ = [
    "CompiledMatcherSet",
    "DetectionReport",
    "DetectionSession",
    "DetectionSummary",
    "MatchKind",
    "MatchRecord",
    "Passage",
    "PatternSlot",
    "Profile",
    "QuoteRange",
    "ScanConfig",
    "ScanResult",
    "collect_detections",
    "compile_profile",
    "get_quote_ranges",
    "merge_detections",
    "summarize_detections",
]
