"""
Tests for the insight generator rules.
"""

import pytest

from resilience.emotions.types import CoreEmotion
from resilience.insights.correlator import CorrelationBucket, correlate
from resilience.insights.generator import (
    Insight,
    InsightCategory,
    format_distortion_name,
    generate_insight_objects,
    generate_insights,
)


class TestFormatDistortionName:
    """Tests for distortion label formatting"""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("all-or-nothing", "All Or Nothing"),
            ("should_statements", "Should Statements"),
            ("mindReading", "Mind Reading"),
            ("catastrophizing", "Catastrophizing"),
            ("  emotional reasoning ", "Emotional Reasoning"),
            ("", ""),
        ],
    )
    def test_title_case(self, raw, expected):
        assert format_distortion_name(raw) == expected


class TestGenerateInsights:
    """Tests for the rule sequence"""

    def test_empty_buckets_give_no_insights(self):
        assert generate_insights(correlate([], [], [])) == []
        assert generate_insights({}) == []

    def test_most_frequent_emotion(self, fear_moods):
        insights = generate_insights(correlate(fear_moods, [], []))
        assert insights == ["Your most frequently recorded emotion is Fear, which appears in 2 entries."]

    def test_tie_goes_to_wheel_order(self):
        moods = [{"id": 1, "coreEmotion": "Fear"}, {"id": 2, "coreEmotion": "Joy"}]
        insights = generate_insights(correlate(moods, [], []))
        assert insights[0] == "Your most frequently recorded emotion is Joy, which appears in 1 entries."

    def test_journal_frequency_and_needs_attention(self, fear_moods):
        journals = [{"id": "j1", "tags": ["fear"]}, {"id": "j2", "content": "scared again"}]
        insights = generate_insights(correlate(fear_moods, journals, []))
        assert insights == [
            "Your most frequently recorded emotion is Fear, which appears in 2 entries.",
            "You've written about Fear in 2 journal entries.",
            "Consider creating thought records for Fear to develop coping strategies for this emotion.",
        ]

    def test_most_improved_requires_positive_average(self):
        moods = [{"id": 1, "coreEmotion": "Fear", "intensity": 7}]
        thoughts = [{"id": 10, "emotionRecordId": 1, "beforeRating": 7, "afterRating": 3}]
        insights = generate_insight_objects(correlate(moods, [], thoughts))
        assert InsightCategory.MOST_IMPROVED not in [i.category for i in insights]

    def test_most_improved_formats_one_decimal(self):
        thoughts = [
            {"id": 10, "emotions": ["joy"], "beforeRating": 3, "afterRating": 7},
            {"id": 11, "emotions": ["joy"], "beforeRating": 5, "afterRating": 6},
            {"id": 12, "emotions": ["sad"], "beforeRating": 5, "afterRating": 6},
        ]
        insights = generate_insights(correlate([], [], thoughts))
        assert (
            "You've shown the most improvement with Joy, with an average change of 2.5 points "
            "after completing thought records." in insights
        )

    def test_needs_attention_skips_buckets_with_thought_records(self):
        moods = [{"id": 1, "coreEmotion": "Joy"}, {"id": 2, "coreEmotion": "Sad"}]
        journals = [{"id": "j1", "tags": ["happy", "sad"]}]
        thoughts = [{"id": 10, "emotions": ["joy"]}]
        insights = generate_insight_objects(correlate(moods, journals, thoughts))
        attention = [i for i in insights if i.category is InsightCategory.NEEDS_ATTENTION]
        assert len(attention) == 1
        assert attention[0].emotion is CoreEmotion.SADNESS

    def test_distortion_summary_counts_every_occurrence(self):
        thoughts = [
            {"id": 10, "emotions": ["fear"], "cognitiveDistortions": ["all-or-nothing", "mindReading"]},
            {"id": 11, "emotions": ["sad"], "cognitiveDistortions": ["all_or_nothing", "all-or-nothing"]},
            {"id": 12, "emotions": ["joy"], "cognitiveDistortions": ["labeling"]},
        ]
        insights = generate_insights(correlate([], [], thoughts))
        assert insights[-1] == (
            'Your most common cognitive distortion is "All Or Nothing", which appears in 3 thought records.'
        )

    def test_distortion_tie_goes_to_first_seen(self):
        thoughts = [{"id": 10, "emotions": ["joy"], "cognitiveDistortions": ["labeling", "overgeneralization"]}]
        insights = generate_insights(correlate([], [], thoughts))
        assert insights[-1].startswith('Your most common cognitive distortion is "Labeling"')

    def test_records_sharing_an_id_are_tallied_separately(self):
        thoughts = [
            {"id": 10, "emotions": ["joy"], "cognitiveDistortions": ["labeling"]},
            {"id": 10, "emotions": ["sad"], "cognitiveDistortions": ["labeling"]},
        ]
        insights = generate_insights(correlate([], [], thoughts))
        assert insights[-1].endswith("which appears in 2 thought records.")

    def test_shared_record_across_buckets_counted_once(self):
        record = correlate([], [], [{"id": 10, "emotions": ["joy"], "cognitiveDistortions": ["labeling"]}])[
            CoreEmotion.JOY
        ].thought_records[0]
        buckets = {
            CoreEmotion.JOY: CorrelationBucket(CoreEmotion.JOY, thought_records=(record,)),
            CoreEmotion.FEAR: CorrelationBucket(CoreEmotion.FEAR, thought_records=(record,)),
        }
        insights = generate_insights(buckets)
        assert insights[-1].endswith("which appears in 1 thought records.")

    def test_full_rule_order(self, mixed_records):
        insights = generate_insight_objects(correlate(*mixed_records))
        assert [i.category for i in insights] == [
            InsightCategory.MOST_FREQUENT,
            InsightCategory.JOURNAL_FREQUENCY,
            InsightCategory.MOST_IMPROVED,
            InsightCategory.NEEDS_ATTENTION,
            InsightCategory.DISTORTION_SUMMARY,
        ]
        assert [i.emotion for i in insights[:4]] == [
            CoreEmotion.JOY,
            CoreEmotion.JOY,
            CoreEmotion.JOY,
            CoreEmotion.SADNESS,
        ]


class TestInsight:
    """Tests for the Insight value object"""

    def test_str_and_dict(self):
        insight = Insight(InsightCategory.MOST_FREQUENT, "text", CoreEmotion.FEAR)
        assert str(insight) == "text"
        assert insight.to_dict() == {"category": "most-frequent", "text": "text", "emotion": "Fear"}

    def test_strings_match_objects(self, mixed_records):
        buckets = correlate(*mixed_records)
        assert generate_insights(buckets) == [i.text for i in generate_insight_objects(buckets)]
