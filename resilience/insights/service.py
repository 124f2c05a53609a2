"""Report service: correlate the three streams and generate insights in one call.

Facade for callers (dashboard route, CLI) that want the whole payload
rather than the individual stages.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from resilience.emotions.types import CoreEmotion
from resilience.insights.correlator import (
    CorrelationBucket,
    EmotionCorrelator,
    get_correlator,
)
from resilience.insights.generator import Insight, generate_insight_objects
from resilience.observability.logging import get_logger
from resilience.records.models import require_collection

logger = get_logger(__name__)


@dataclass(frozen=True)
class CorrelationReport:
    """Buckets, insights and ingestion counts for one correlation run."""

    buckets: dict[CoreEmotion, CorrelationBucket]
    insights: tuple[Insight, ...] = ()
    seen: dict[str, int] = field(default_factory=dict)
    skipped: dict[str, int] = field(default_factory=dict)

    @property
    def insight_texts(self) -> list[str]:
        return [insight.text for insight in self.insights]

    def to_dict(self) -> dict[str, Any]:
        """Dashboard payload: connections keyed by core name, then insight strings."""
        return {
            "connections": {
                emotion.value: bucket.to_dict() for emotion, bucket in self.buckets.items()
            },
            "insights": self.insight_texts,
        }


def build_report(
    mood_entries: Iterable[Any],
    journal_entries: Iterable[Any],
    thought_records: Iterable[Any],
    correlator: EmotionCorrelator | None = None,
) -> CorrelationReport:
    """
    Correlate and summarize in one pass.

    Generators are materialized first so the seen counts and the correlation
    run observe the same items.

    Raises:
        TypeError: a collection argument is None or not iterable
    """
    streams = {
        "mood_entries": mood_entries,
        "journal_entries": journal_entries,
        "thought_records": thought_records,
    }
    materialized: dict[str, list[Any]] = {}
    for name, items in streams.items():
        require_collection(items, name)
        materialized[name] = list(items)

    correlator = correlator or get_correlator()
    buckets, skipped = correlator.correlate_with_stats(
        materialized["mood_entries"],
        materialized["journal_entries"],
        materialized["thought_records"],
    )
    insights = generate_insight_objects(buckets)

    seen = {name: len(items) for name, items in materialized.items()}
    logger.info(
        "Built report: %d moods, %d journals, %d thoughts, %d insights (%d skipped)",
        seen["mood_entries"],
        seen["journal_entries"],
        seen["thought_records"],
        len(insights),
        sum(skipped.values()),
    )
    return CorrelationReport(
        buckets=buckets,
        insights=tuple(insights),
        seen=seen,
        skipped=skipped,
    )
