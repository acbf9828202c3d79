"""Tests for report merging and summaries."""

from costumeswitch.models import MatchKind, MatchRecord
from costumeswitch.report import (
    DetectionReport,
    merge_detections,
    record_from_event,
    record_from_match,
    record_from_score_detail,
    summarize_detections,
)


class TestConverters:
    """Tests for the per-shape record converters."""

    def test_match_prefers_match_index(self):
        record = record_from_match({"name": "Bob", "matchIndex": 3, "charIndex": 9})
        assert record.match_index == 3

    def test_match_falls_back_to_char_index(self):
        record = record_from_match({"name": "Bob", "charIndex": 9})
        assert record.match_index == 9

    def test_score_detail_prefers_char_index(self):
        record = record_from_score_detail({"name": "Bob", "matchIndex": 3, "charIndex": 9})
        assert record.match_index == 9

    def test_event_has_no_priority(self):
        """Test events ignore priority and match_index."""
        record = record_from_event({"name": "Bob", "matchIndex": 3, "priority": 5})
        assert record.match_index is None
        assert record.priority is None

    def test_non_finite_values(self):
        """Test non-numeric and non-finite values become None."""
        record = record_from_match({
            "name": "Bob",
            "matchIndex": float("nan"),
            "priority": "high",
        })
        assert record.match_index is None
        assert record.priority is None
        assert record_from_match({"name": "Bob", "matchIndex": True}).match_index is None

    def test_blank_name_dropped(self):
        assert record_from_match({"name": "  ", "matchIndex": 1}) is None
        assert record_from_match("Bob") is None

    def test_snake_case_and_records(self):
        """Test snake_case dicts and MatchRecords are both accepted."""
        record = record_from_match({"name": " Bob ", "match_kind": "speaker", "match_index": 2})
        assert record == MatchRecord("Bob", "speaker", 2, None)
        assert record_from_match(record) == record


class TestMergeDetections:
    """Tests for deduplication and ordering."""

    def test_dedupe_across_fragments(self):
        """Test the same detection from two collections merges to one."""
        report = {
            "matches": [{"name": "Bob", "matchKind": "speaker", "matchIndex": 5}],
            "scoreDetails": [{"name": "Bob", "matchKind": "speaker", "charIndex": 5}],
        }
        assert merge_detections(report) == [MatchRecord("Bob", "speaker", 5, None)]

    def test_integral_float_index_dedupes(self):
        """Test 5 and 5.0 are the same index."""
        report = {
            "matches": [{"name": "Bob", "matchKind": "speaker", "matchIndex": 5}],
            "scoreDetails": [{"name": "Bob", "matchKind": "speaker", "charIndex": 5.0}],
        }
        assert len(merge_detections(report)) == 1

        report["scoreDetails"][0]["charIndex"] = 5.5
        assert len(merge_detections(report)) == 2

    def test_first_occurrence_wins(self):
        """Test case-insensitive duplicates keep the first record."""
        report = DetectionReport(matches=[
            {"name": "Bob", "matchKind": "speaker", "matchIndex": 5, "priority": 1},
            {"name": "bob", "matchKind": "Speaker", "matchIndex": 5, "priority": 9},
        ])
        merged = merge_detections(report)
        assert len(merged) == 1
        assert merged[0].name == "Bob"
        assert merged[0].priority == 1

    def test_unknown_index_dedupes(self):
        report = {"events": [{"name": "Ann"}, {"name": "Ann"}]}
        assert len(merge_detections(report)) == 1

    def test_different_kinds_kept(self):
        report = {"matches": [
            {"name": "Bob", "matchKind": "speaker", "matchIndex": 5},
            {"name": "Bob", "matchKind": "name", "matchIndex": 5},
        ]}
        assert len(merge_detections(report)) == 2

    def test_order(self):
        """Test index ascending, then priority descending, then name."""
        report = {"matches": [
            {"name": "Zed", "matchKind": "name"},
            {"name": "carl", "matchKind": "name", "matchIndex": 4, "priority": 1},
            {"name": "Bea", "matchKind": "name", "matchIndex": 4, "priority": 1},
            {"name": "Dan", "matchKind": "name", "matchIndex": 4},
            {"name": "Eve", "matchKind": "speaker", "matchIndex": 4, "priority": 5},
            {"name": "Amy", "matchKind": "name", "matchIndex": 10},
            {"name": "Fay", "matchKind": "name", "matchIndex": 0},
        ]}
        names = [r.name for r in merge_detections(report)]
        assert names == ["Fay", "Eve", "Bea", "carl", "Dan", "Amy", "Zed"]

    def test_plain_list(self):
        """Test a bare list is read as matches."""
        records = [MatchRecord("Bob", MatchKind.SPEAKER, 5, 5.0)]
        merged = merge_detections(records)
        assert merged == [MatchRecord("Bob", "speaker", 5, 5.0)]

    def test_empty(self):
        assert merge_detections(None) == []
        assert merge_detections({}) == []

    def test_report_from_dict(self):
        report = DetectionReport.from_dict({"score_details": [{"name": "A"}], "events": "bad"})
        assert len(report.score_details) == 1
        assert report.events == []


class TestSummarizeDetections:
    """Tests for per-name summaries."""

    def test_total_dominates_priority(self):
        """Test a name with more detections ranks first."""
        summaries = summarize_detections([
            {"name": "Bob", "priority": 2},
            {"name": "Bob", "priority": 1},
            {"name": "Alice", "priority": 3},
        ])
        assert [s.name for s in summaries] == ["Bob", "Alice"]
        assert summaries[0].total == 2
        assert summaries[0].highest_priority == 2

    def test_priority_breaks_ties(self):
        summaries = summarize_detections([
            {"name": "Bob", "priority": 1},
            {"name": "Alice", "priority": 3},
        ])
        assert [s.name for s in summaries] == ["Alice", "Bob"]

    def test_earliest_breaks_ties(self):
        summaries = summarize_detections([
            {"name": "Bob", "matchIndex": 20},
            {"name": "Alice"},
            {"name": "Cy", "matchIndex": 3},
        ])
        assert [s.name for s in summaries] == ["Cy", "Bob", "Alice"]

    def test_offsets_are_one_based(self):
        summaries = summarize_detections([
            {"name": "Bob", "matchKind": "speaker", "matchIndex": 10},
            {"name": "bob", "matchIndex": 4},
        ])
        summary = summaries[0]
        assert summary.name == "Bob"
        assert summary.earliest == 5
        assert summary.latest == 11
        assert summary.kinds == {"speaker": 1, "unknown": 1}

    def test_no_index(self):
        summary = summarize_detections([{"name": "Bob"}])[0]
        assert summary.earliest is None
        assert summary.latest is None
        assert summary.highest_priority is None

    def test_accepts_records(self):
        summaries = summarize_detections([MatchRecord("Bob", MatchKind.NAME, 0, 0)])
        assert summaries[0].kinds == {"name": 1}
        assert summaries[0].to_dict()["earliest"] == 1
