"""
Natural-language insights over correlation buckets.

Rules run in a fixed order and each contributes at most one sentence:

1. most-frequent       bucket with the highest total_entries
2. journal-frequency   journal count for that same bucket
3. most-improved       highest strictly positive average_improvement
4. needs-attention     first bucket with entries and journals but no thought records
5. distortion-summary  most common cognitive distortion across thought records

Ties are broken by wheel order (CoreEmotion member order), distortion ties by
first appearance. Empty input yields an empty list.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from resilience import config
from resilience.emotions.types import CoreEmotion
from resilience.insights.correlator import CorrelationBucket
from resilience.observability.logging import get_logger
from resilience.observability.telemetry import EventType, log_event

logger = get_logger(__name__)


class InsightCategory(str, Enum):
    MOST_FREQUENT = "most-frequent"
    JOURNAL_FREQUENCY = "journal-frequency"
    MOST_IMPROVED = "most-improved"
    NEEDS_ATTENTION = "needs-attention"
    DISTORTION_SUMMARY = "distortion-summary"


@dataclass(frozen=True)
class Insight:
    """One generated sentence and the rule that produced it."""

    category: InsightCategory
    text: str
    emotion: CoreEmotion | None = None

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, str | None]:
        return {
            "category": self.category.value,
            "text": self.text,
            "emotion": self.emotion.value if self.emotion else None,
        }


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[-_\s]+")


def format_distortion_name(name: str) -> str:
    """
    Title-case a distortion label.

    Examples:
        "all-or-nothing"     -> "All Or Nothing"
        "should_statements"  -> "Should Statements"
        "mindReading"        -> "Mind Reading"
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", name.strip())
    words = [word for word in _SEPARATORS.split(spaced) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def _ordered_buckets(
    buckets: Mapping[CoreEmotion, CorrelationBucket],
) -> list[tuple[CoreEmotion, CorrelationBucket]]:
    ordered = []
    for emotion in CoreEmotion:
        bucket = buckets.get(emotion)
        if bucket is not None:
            ordered.append((emotion, bucket))
    return ordered


def _most_frequent(
    ordered: list[tuple[CoreEmotion, CorrelationBucket]],
) -> tuple[CoreEmotion, CorrelationBucket] | None:
    best: tuple[CoreEmotion, CorrelationBucket] | None = None
    for emotion, bucket in ordered:
        if bucket.total_entries > 0 and (best is None or bucket.total_entries > best[1].total_entries):
            best = (emotion, bucket)
    return best


def _most_improved(
    ordered: list[tuple[CoreEmotion, CorrelationBucket]],
) -> tuple[CoreEmotion, CorrelationBucket] | None:
    best: tuple[CoreEmotion, CorrelationBucket] | None = None
    for emotion, bucket in ordered:
        if not bucket.thought_records:
            continue
        if best is None or bucket.average_improvement > best[1].average_improvement:
            best = (emotion, bucket)
    if best is None or best[1].average_improvement <= 0:
        return None
    return best


def _distortion_tally(
    ordered: list[tuple[CoreEmotion, CorrelationBucket]],
) -> dict[str, int]:
    """Count every distortion occurrence, in first-seen order.

    A record instance shared by several buckets is tallied once.
    """
    seen: set[int] = set()
    tally: dict[str, int] = {}
    for _emotion, bucket in ordered:
        for record in bucket.thought_records:
            if id(record) in seen:
                continue
            seen.add(id(record))
            for name in map(format_distortion_name, record.cognitive_distortions):
                if name:
                    tally[name] = tally.get(name, 0) + 1
    return tally


def generate_insight_objects(
    buckets: Mapping[CoreEmotion, CorrelationBucket],
) -> list[Insight]:
    """Run every insight rule and return the typed results in rule order."""
    ordered = _ordered_buckets(buckets)
    insights: list[Insight] = []

    top = _most_frequent(ordered)
    if top is not None:
        emotion, bucket = top
        insights.append(
            Insight(
                InsightCategory.MOST_FREQUENT,
                f"Your most frequently recorded emotion is {emotion.value}, "
                f"which appears in {bucket.total_entries} entries.",
                emotion,
            )
        )
        if bucket.journal_entries:
            insights.append(
                Insight(
                    InsightCategory.JOURNAL_FREQUENCY,
                    f"You've written about {emotion.value} in "
                    f"{len(bucket.journal_entries)} journal entries.",
                    emotion,
                )
            )

    improved = _most_improved(ordered)
    if improved is not None:
        emotion, bucket = improved
        change = f"{bucket.average_improvement:.{config.INSIGHT_IMPROVEMENT_DECIMALS}f}"
        insights.append(
            Insight(
                InsightCategory.MOST_IMPROVED,
                f"You've shown the most improvement with {emotion.value}, with an average "
                f"change of {change} points after completing thought records.",
                emotion,
            )
        )

    for emotion, bucket in ordered:
        if bucket.total_entries > 0 and bucket.journal_entries and not bucket.thought_records:
            insights.append(
                Insight(
                    InsightCategory.NEEDS_ATTENTION,
                    f"Consider creating thought records for {emotion.value} to develop "
                    "coping strategies for this emotion.",
                    emotion,
                )
            )
            break

    tally = _distortion_tally(ordered)
    if tally:
        # max() keeps the first maximal key, so ties go to the first seen
        name = max(tally, key=tally.__getitem__)
        insights.append(
            Insight(
                InsightCategory.DISTORTION_SUMMARY,
                f'Your most common cognitive distortion is "{name}", '
                f"which appears in {tally[name]} thought records.",
            )
        )

    log_event(
        EventType.INSIGHTS_GENERATED,
        count=len(insights),
        categories=",".join(insight.category.value for insight in insights) or "none",
    )
    return insights


def generate_insights(buckets: Mapping[CoreEmotion, CorrelationBucket]) -> list[str]:
    """Insight sentences for a correlation result (possibly empty)."""
    return [insight.text for insight in generate_insight_objects(buckets)]
