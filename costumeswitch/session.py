"""
DetectionSession - stateful detection over a stream of passages.

The detection functions are pure; a session is the caller that owns the
state they need between passages:
- matchers compiled once for the profile
- the last detected subject, used for pronoun continuation

Example:
    session = DetectionSession(Profile.from_dict({"patterns": ["Alice", "Bob"]}))
    result = session.scan('Alice said, "Hi there."')
    result.best.name        # "Alice"
    session.last_subject    # "Alice"
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from costumeswitch.detection.collector import collect_detections
from costumeswitch.detection.patterns import CompileOptions, compile_profile
from costumeswitch.detection.quotes import get_quote_ranges
from costumeswitch.language.profile import get_profile
from costumeswitch.models import (
    CompiledMatcherSet,
    DetectionSummary,
    MatchRecord,
    Profile,
    ScanConfig,
)
from costumeswitch.report import merge_detections, summarize_detections

logger = logging.getLogger("costumeswitch.session")


@dataclass
class ScanResult:
    """
    Outcome of scanning one passage.

    Attributes:
        matches: Merged, ordered detections
        summaries: Per-name aggregates of matches
        best: Winning detection (None if nothing matched or vetoed)
        vetoed: True if a veto pattern suppressed the passage
    """
    matches: list[MatchRecord] = field(default_factory=list)
    summaries: list[DetectionSummary] = field(default_factory=list)
    best: Optional[MatchRecord] = None
    vetoed: bool = False

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "matches": [m.to_dict() for m in self.matches],
            "summaries": [s.to_dict() for s in self.summaries],
            "best": self.best.to_dict() if self.best else None,
            "vetoed": self.vetoed,
        }


def select_best(matches: list[MatchRecord]) -> Optional[MatchRecord]:
    """
    Pick the winning detection.

    Highest priority wins (unconfigured lowest); on a tie the later match
    wins, being the most recent cue.
    """
    best = None
    best_key = None
    for match in matches:
        key = (
            -float("inf") if match.priority is None else match.priority,
            -1 if match.match_index is None else match.match_index,
        )
        if best_key is None or key >= best_key:
            best, best_key = match, key
    return best


class DetectionSession:
    """Detection over consecutive passages sharing one profile."""

    def __init__(
        self,
        profile: Profile,
        config: Optional[ScanConfig] = None,
        options: Optional[CompileOptions] = None,
    ):
        self.profile = profile
        self.config = config or ScanConfig()
        self.options = options or CompileOptions(language_code=self.config.language_code)
        self.language = get_profile(self.options.language_code)
        self.last_subject: Optional[str] = None
        self._matchers: Optional[CompiledMatcherSet] = None

    @property
    def matchers(self) -> CompiledMatcherSet:
        """Matchers for the profile, compiled on first use."""
        if self._matchers is None:
            self._matchers = compile_profile(self.profile, self.options)
            logger.info(
                f"Session compiled {len(self._matchers.effective_patterns)} name patterns"
            )
        return self._matchers

    def set_profile(self, profile: Profile) -> None:
        """Switch profiles; matchers are recompiled, the subject is kept."""
        self.profile = profile
        self._matchers = None

    def reset(self) -> None:
        """Forget the last subject."""
        self.last_subject = None

    def is_vetoed(self, text: str) -> bool:
        veto = self.matchers.veto_regex
        return bool(text) and veto is not None and veto.search(text) is not None

    def scan(self, text: str) -> ScanResult:
        """
        Detect the subject of one passage.

        Updates last_subject when a detection wins. A vetoed passage yields
        no detections and leaves last_subject unchanged.
        """
        if not text:
            return ScanResult()

        if self.is_vetoed(text):
            logger.debug("Passage vetoed")
            return ScanResult(vetoed=True)

        records = collect_detections(
            text,
            self.profile,
            self.matchers,
            quote_ranges=get_quote_ranges(text, profile=self.language),
            priority_weights=self.config.priority_weights,
            scan_dialogue_actions=self.config.scan_dialogue_actions,
            scan_quoted_names=self.config.scan_quoted_names,
            last_subject=self.last_subject,
            language=self.language,
        )
        matches = merge_detections(records)
        best = select_best(matches)
        if best is not None:
            if best.name != self.last_subject:
                logger.debug(f"Subject: {self.last_subject} -> {best.name}")
            self.last_subject = best.name

        return ScanResult(
            matches=matches,
            summaries=summarize_detections(matches),
            best=best,
            vetoed=False,
        )
