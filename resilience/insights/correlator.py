"""
Cross-entity correlation of mood entries, journal entries and thought records.

Joins the three independently authored streams through the emotion taxonomy:
every record is resolved to one or more CoreEmotion buckets, and each bucket
carries counts, linked records and derived averages.

Stages (order matters):
1. Seed one empty bucket per core emotion (stable chart axes)
2. Mood entries: each distinct resolved core counts the entry once
3. Journal entries: curated tags → AI tags → text scan, deduplicated by id
4. Thought records: linked mood entry first, own emotion labels second
5. Finalize averages over every matched record (0 when empty, never NaN);
   an unrated thought record counts toward the improvement average as 0

Improvement sign convention: ``after_rating - before_rating``. A drop in
distress after the exercise is a negative number.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

from resilience.emotions.resolver import EmotionResolver, get_resolver
from resilience.emotions.types import CoreEmotion
from resilience.observability.logging import get_logger
from resilience.observability.telemetry import EventType, log_event
from resilience.records.models import (
    JournalEntry,
    MoodEntry,
    RecordId,
    ThoughtRecord,
    coerce_records,
)

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CorrelationBucket:
    """Aggregated statistics for one core emotion across all three streams."""

    emotion: CoreEmotion
    total_entries: int = 0
    journal_entries: tuple[JournalEntry, ...] = ()
    thought_records: tuple[ThoughtRecord, ...] = ()
    average_intensity: float = 0.0
    average_improvement: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not (self.total_entries or self.journal_entries or self.thought_records)

    def to_dict(self) -> dict[str, Any]:
        """Dashboard shape (camelCase keys, records as JSON payloads)."""
        return {
            "totalEntries": self.total_entries,
            "journalEntries": [entry.to_payload() for entry in self.journal_entries],
            "thoughtRecords": [record.to_payload() for record in self.thought_records],
            "averageIntensity": self.average_intensity,
            "averageImprovement": self.average_improvement,
        }


CorrelationMap = dict[CoreEmotion, CorrelationBucket]


@dataclass
class _Accumulator:
    """Mutable per-call scratch space; never escapes correlate()."""

    total_entries: int = 0
    intensity_sum: float = 0.0
    journal_entries: list[JournalEntry] = field(default_factory=list)
    journal_keys: set[Hashable] = field(default_factory=set)
    thought_records: list[ThoughtRecord] = field(default_factory=list)
    improvement_sum: float = 0.0

    def finalize(self, emotion: CoreEmotion) -> CorrelationBucket:
        average_intensity = self.intensity_sum / self.total_entries if self.total_entries else 0.0
        average_improvement = (
            self.improvement_sum / len(self.thought_records) if self.thought_records else 0.0
        )
        return CorrelationBucket(
            emotion=emotion,
            total_entries=self.total_entries,
            journal_entries=tuple(self.journal_entries),
            thought_records=tuple(self.thought_records),
            average_intensity=average_intensity,
            average_improvement=average_improvement,
        )


# ---------------------------------------------------------------------------
# Correlator
# ---------------------------------------------------------------------------


class EmotionCorrelator:
    """
    Build per-emotion correlation buckets from already-fetched records.

    Stateless between calls: every correlate() builds fresh accumulators, so
    one instance may serve concurrent requests.
    """

    def __init__(self, resolver: EmotionResolver | None = None) -> None:
        self.resolver = resolver or get_resolver()
        self._term_patterns = tuple(
            (re.compile(rf"\b{re.escape(term)}\b"), core)
            for term, core in self.resolver.taxonomy.known_terms()
        )

    def correlate(
        self,
        mood_entries: Iterable[Any],
        journal_entries: Iterable[Any],
        thought_records: Iterable[Any],
    ) -> CorrelationMap:
        """
        Correlate the three streams into one bucket per core emotion.

        Side Effects:
            - None (inputs are never mutated; only log events are emitted)

        Raises:
            TypeError: a collection argument is None or not iterable
        """
        result, _skipped = self.correlate_with_stats(mood_entries, journal_entries, thought_records)
        return result

    def correlate_with_stats(
        self,
        mood_entries: Iterable[Any],
        journal_entries: Iterable[Any],
        thought_records: Iterable[Any],
    ) -> tuple[CorrelationMap, dict[str, int]]:
        """correlate() plus per-stream counts of records skipped as malformed."""
        moods, moods_skipped = coerce_records(mood_entries, MoodEntry, "mood_entries")
        journals, journals_skipped = coerce_records(journal_entries, JournalEntry, "journal_entries")
        thoughts, thoughts_skipped = coerce_records(thought_records, ThoughtRecord, "thought_records")

        log_event(
            EventType.CORRELATION_START,
            moods=len(moods),
            journals=len(journals),
            thoughts=len(thoughts),
        )

        accumulators = {emotion: _Accumulator() for emotion in CoreEmotion}

        mood_cores = self._add_mood_entries(moods, accumulators)
        self._add_journal_entries(journals, accumulators)
        self._add_thought_records(thoughts, moods, mood_cores, accumulators)

        result = {emotion: acc.finalize(emotion) for emotion, acc in accumulators.items()}
        skipped = {
            "mood_entries": moods_skipped,
            "journal_entries": journals_skipped,
            "thought_records": thoughts_skipped,
        }

        log_event(
            EventType.CORRELATION_COMPLETE,
            matched_emotions=sum(1 for bucket in result.values() if not bucket.is_empty),
            skipped=sum(skipped.values()),
        )
        return result, skipped

    # ------------------------------------------------------------------
    # Stage 2: mood entries
    # ------------------------------------------------------------------

    def _resolve_mood_cores(self, entry: MoodEntry) -> list[CoreEmotion]:
        cores: list[CoreEmotion] = []
        for label in entry.labels():
            core = self.resolver.resolve_core_emotion(label)
            if core is not None and core not in cores:
                cores.append(core)
        return cores

    def _add_mood_entries(
        self,
        moods: list[MoodEntry],
        accumulators: dict[CoreEmotion, _Accumulator],
    ) -> list[list[CoreEmotion]]:
        """Count each mood entry once per distinct core; returns cores per entry."""
        mood_cores: list[list[CoreEmotion]] = []
        for entry in moods:
            cores = self._resolve_mood_cores(entry)
            mood_cores.append(cores)
            intensity = entry.intensity or 0.0
            for core in cores:
                acc = accumulators[core]
                acc.total_entries += 1
                acc.intensity_sum += intensity
        return mood_cores

    # ------------------------------------------------------------------
    # Stage 3: journal entries
    # ------------------------------------------------------------------

    def _scan_text(self, text: str) -> list[CoreEmotion]:
        lowered = text.lower()
        cores: list[CoreEmotion] = []
        for pattern, core in self._term_patterns:
            if core not in cores and pattern.search(lowered):
                cores.append(core)
        return cores

    def journal_cores(self, entry: JournalEntry) -> list[CoreEmotion]:
        """
        Cores a journal entry speaks about.

        Falls back in order: user-curated tags, AI-suggested tags, then a
        word-boundary scan of title and content for any core name or variant.
        """
        for tags in (entry.curated_tags(), entry.suggested_tags()):
            if tags:
                return self.resolver.find_matching_emotions(tags)
        text = entry.text()
        return self._scan_text(text) if text else []

    def _add_journal_entries(
        self,
        journals: list[JournalEntry],
        accumulators: dict[CoreEmotion, _Accumulator],
    ) -> None:
        for index, entry in enumerate(journals):
            key: Hashable = ("id", entry.id) if entry.id is not None else ("index", index)
            for core in self.journal_cores(entry):
                acc = accumulators[core]
                if key in acc.journal_keys:
                    continue
                acc.journal_keys.add(key)
                acc.journal_entries.append(entry)

    # ------------------------------------------------------------------
    # Stage 4: thought records
    # ------------------------------------------------------------------

    def _add_thought_records(
        self,
        thoughts: list[ThoughtRecord],
        moods: list[MoodEntry],
        mood_cores: list[list[CoreEmotion]],
        accumulators: dict[CoreEmotion, _Accumulator],
    ) -> None:
        # First occurrence wins when ids repeat
        moods_by_id: dict[RecordId, tuple[MoodEntry, list[CoreEmotion]]] = {}
        for entry, cores in zip(moods, mood_cores):
            if entry.id is not None and entry.id not in moods_by_id:
                moods_by_id[entry.id] = (entry, cores)

        for record in thoughts:
            linked = moods_by_id.get(record.mood_entry_id) if record.mood_entry_id is not None else None

            core: CoreEmotion | None = None
            before = record.before_rating
            if linked is not None:
                mood, cores = linked
                # Label precedence (core, primary, tertiary) is preserved in cores
                core = cores[0] if cores else None
                if before is None:
                    before = mood.intensity
            if core is None:
                core = next(
                    (
                        resolved
                        for resolved in map(self.resolver.resolve_core_emotion, record.emotions)
                        if resolved is not None
                    ),
                    None,
                )
            if core is None:
                log_event(
                    EventType.THOUGHT_RECORD_UNLINKED,
                    record_id=record.id,
                    linked=linked is not None,
                )
                continue

            acc = accumulators[core]
            acc.thought_records.append(record)
            if before is not None and record.after_rating is not None:
                acc.improvement_sum += record.after_rating - before


_DEFAULT_CORRELATOR: EmotionCorrelator | None = None


def get_correlator() -> EmotionCorrelator:
    """Shared correlator over the default resolver (built on first use)."""
    global _DEFAULT_CORRELATOR
    if _DEFAULT_CORRELATOR is None:
        _DEFAULT_CORRELATOR = EmotionCorrelator()
    return _DEFAULT_CORRELATOR


def correlate(
    mood_entries: Iterable[Any],
    journal_entries: Iterable[Any],
    thought_records: Iterable[Any],
) -> CorrelationMap:
    """Module-level entry point; see EmotionCorrelator.correlate."""
    return get_correlator().correlate(mood_entries, journal_entries, thought_records)
