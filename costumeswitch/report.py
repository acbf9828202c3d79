"""
Report merging and summarizing for CostumeSwitch.

A detection report may carry up to three collections, each with its own
record shape:
- matches: MatchRecords (index under match_index, falling back to char_index)
- score_details: scored entries (index under char_index, falling back to
  match_index)
- events: history entries (index under char_index only, no priority)

Each shape has its own converter into MatchRecord. merge_detections then
deduplicates and orders the union; summarize_detections aggregates it per
name.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from costumeswitch.models import (
    DetectionSummary,
    MatchRecord,
    finite_number,
    kind_value,
)

MAX_INDEX = float("inf")


@dataclass
class DetectionReport:
    """Raw collections of one or more detection runs."""
    matches: list[Any] = field(default_factory=list)
    score_details: list[Any] = field(default_factory=list)
    events: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "DetectionReport":
        """Deserialize from dictionary (camelCase or snake_case keys)."""
        def collection(*keys: str) -> list:
            for key in keys:
                value = data.get(key)
                if isinstance(value, (list, tuple)):
                    return list(value)
            return []

        return cls(
            matches=collection("matches"),
            score_details=collection("score_details", "scoreDetails"),
            events=collection("events"),
        )


# ---------------------------------------------------------------------------
# Shape converters
# ---------------------------------------------------------------------------

def _as_mapping(item: Any) -> Optional[dict]:
    if isinstance(item, MatchRecord):
        return item.to_dict()
    if isinstance(item, dict):
        return item
    return None


def _first_present(data: dict, *keys: str) -> Any:
    """First value that is not None (missing keys count as None)."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _build_record(data: dict, index: Any, priority: Any) -> Optional[MatchRecord]:
    name = str(data.get("name") or "").strip()
    if not name:
        return None
    kind = _first_present(data, "match_kind", "matchKind")
    return MatchRecord(
        name=name,
        match_kind=kind_value(kind) or None,
        match_index=finite_number(index),
        priority=finite_number(priority),
    )


def record_from_match(item: Any) -> Optional[MatchRecord]:
    data = _as_mapping(item)
    if data is None:
        return None
    index = _first_present(data, "match_index", "matchIndex", "char_index", "charIndex")
    return _build_record(data, index, data.get("priority"))


def record_from_score_detail(item: Any) -> Optional[MatchRecord]:
    data = _as_mapping(item)
    if data is None:
        return None
    index = _first_present(data, "char_index", "charIndex", "match_index", "matchIndex")
    return _build_record(data, index, data.get("priority"))


def record_from_event(item: Any) -> Optional[MatchRecord]:
    data = _as_mapping(item)
    if data is None:
        return None
    index = _first_present(data, "char_index", "charIndex")
    return _build_record(data, index, None)


def _dedupe_key(record: MatchRecord) -> str:
    kind = (kind_value(record.match_kind) or "").lower()
    index = record.match_index
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    index = "?" if index is None else str(index)
    return f"{record.name.lower()}|{kind}|{index}"


# ---------------------------------------------------------------------------
# Merge / summarize
# ---------------------------------------------------------------------------

def _priority_key(value: Optional[float]) -> float:
    return -float("inf") if value is None else value


def merge_detections(
    report: Union[DetectionReport, dict, Iterable[Any], None],
) -> list[MatchRecord]:
    """
    Deduplicate and order every detection in a report.

    Duplicates (same lowercase name, kind and index) keep the first
    occurrence, in the order matches, score_details, events.

    Order: index ascending (unknown last), priority descending (unknown
    lowest), name case-insensitively.

    Args:
        report: DetectionReport, a dict of collections, or a plain list of
            matches

    Returns:
        Merged MatchRecords
    """
    if report is None:
        return []
    if isinstance(report, dict):
        report = DetectionReport.from_dict(report)
    elif not isinstance(report, DetectionReport):
        report = DetectionReport(matches=list(report))

    merged: list[MatchRecord] = []
    seen: set[str] = set()

    sources = (
        (report.matches, record_from_match),
        (report.score_details, record_from_score_detail),
        (report.events, record_from_event),
    )
    for items, convert in sources:
        for item in items or []:
            record = convert(item)
            if record is None:
                continue
            key = _dedupe_key(record)
            if key in seen:
                continue
            seen.add(key)
            merged.append(record)

    merged.sort(key=lambda r: (
        MAX_INDEX if r.match_index is None else r.match_index,
        -_priority_key(r.priority),
        r.name.casefold(),
    ))
    return merged


def summarize_detections(matches: Iterable[Any]) -> list[DetectionSummary]:
    """
    Aggregate detections per case-insensitive name.

    Only detections with a finite index contribute to earliest/latest,
    which are reported 1-based.

    Order: total descending, highest priority descending, earliest
    ascending (unknown last), name case-insensitively.
    """
    groups: dict[str, dict] = {}

    for item in matches or []:
        record = record_from_match(item)
        if record is None:
            continue
        key = record.name.lower()
        group = groups.get(key)
        if group is None:
            group = groups[key] = {
                "name": record.name,
                "total": 0,
                "priority": None,
                "first": None,
                "last": None,
                "kinds": {},
            }
        group["total"] += 1
        kind = kind_value(record.match_kind) or "unknown"
        group["kinds"][kind] = group["kinds"].get(kind, 0) + 1
        if record.priority is not None:
            if group["priority"] is None or record.priority > group["priority"]:
                group["priority"] = record.priority
        if record.match_index is not None:
            if group["first"] is None or record.match_index < group["first"]:
                group["first"] = record.match_index
            if group["last"] is None or record.match_index > group["last"]:
                group["last"] = record.match_index

    summaries = [
        DetectionSummary(
            name=g["name"],
            total=g["total"],
            highest_priority=g["priority"],
            earliest=None if g["first"] is None else g["first"] + 1,
            latest=None if g["last"] is None else g["last"] + 1,
            kinds=g["kinds"],
        )
        for g in groups.values()
    ]

    summaries.sort(key=lambda s: (
        -s.total,
        -_priority_key(s.highest_priority),
        MAX_INDEX if s.earliest is None else s.earliest,
        s.name.casefold(),
    ))
    return summaries
