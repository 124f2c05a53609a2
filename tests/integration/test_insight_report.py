"""
End-to-end flow: raw dashboard records → correlation → insights → payload.

Exercises the documented scenarios through the public package exports.
"""

import json

import pytest

import resilience
from resilience import CoreEmotion, build_report, correlate, generate_insights, resolve_core_emotion


class TestScenarios:
    """The four reference scenarios"""

    def test_joyful_resolves_to_joy(self):
        assert resolve_core_emotion("Joyful") is CoreEmotion.JOY

    def test_core_name_and_synonym_share_a_bucket(self, fear_moods):
        fear = correlate(fear_moods, [], [])[CoreEmotion.FEAR]
        assert fear.total_entries == 2
        assert fear.average_intensity == 6

    def test_thought_record_improvement(self):
        moods = [{"id": 1, "coreEmotion": "Fear", "intensity": 7}]
        thoughts = [{"id": 9, "emotionRecordId": 1, "beforeRating": 7, "afterRating": 3}]
        assert correlate(moods, [], thoughts)[CoreEmotion.FEAR].average_improvement == -4

    def test_no_data_no_insights(self):
        assert generate_insights(correlate([], [], [])) == []


class TestBuildReport:
    """Tests for the report service"""

    def test_report_counts_and_insights(self, mixed_records):
        report = build_report(*mixed_records)
        assert report.seen == {"mood_entries": 3, "journal_entries": 3, "thought_records": 2}
        assert report.skipped == {"mood_entries": 0, "journal_entries": 0, "thought_records": 0}
        assert report.insight_texts == [
            "Your most frequently recorded emotion is Joy, which appears in 1 entries.",
            "You've written about Joy in 1 journal entries.",
            "You've shown the most improvement with Joy, with an average change of 2.0 points "
            "after completing thought records.",
            "Consider creating thought records for Sadness to develop coping strategies for this emotion.",
            'Your most common cognitive distortion is "Catastrophizing", which appears in 2 thought records.',
        ]

    def test_payload_is_json_serializable(self, mixed_records):
        payload = build_report(*mixed_records).to_dict()
        decoded = json.loads(json.dumps(payload))
        assert list(decoded["connections"]) == [core.value for core in CoreEmotion]
        fear = decoded["connections"]["Fear"]
        assert fear["totalEntries"] == 1
        assert fear["averageIntensity"] == 7
        assert fear["thoughtRecords"][0]["moodEntryId"] == 1
        assert decoded["connections"]["Sadness"]["journalEntries"][0]["aiSuggestedTags"] == ["sad"]

    def test_skipped_records_are_counted(self):
        report = build_report([{"id": 1, "coreEmotion": "Fear"}, 5], [None], [])
        assert report.seen["mood_entries"] == 2
        assert report.skipped == {"mood_entries": 1, "journal_entries": 1, "thought_records": 0}
        assert report.buckets[CoreEmotion.FEAR].total_entries == 1

    def test_generators_are_consumed_once(self, fear_moods):
        report = build_report((m for m in fear_moods), iter([]), iter([]))
        assert report.seen["mood_entries"] == 2
        assert report.buckets[CoreEmotion.FEAR].total_entries == 2

    def test_none_collection_raises(self):
        with pytest.raises(TypeError, match="journal_entries collection is required"):
            build_report([], None, [])

    def test_mapping_collection_raises(self):
        with pytest.raises(TypeError, match="thought_records collection must be an iterable"):
            build_report([], [], {"id": 1})


class TestPackageExports:
    """Tests for the lazy top-level exports"""

    def test_exports_resolve(self):
        for name in resilience.__all__:
            assert getattr(resilience, name) is not None

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            resilience.not_a_thing  # noqa: B018

    def test_version(self):
        assert resilience.__version__ == "1.0.0"
