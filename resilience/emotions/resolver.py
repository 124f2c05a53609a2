"""
Emotion label resolution against the three-ring taxonomy.

Turns arbitrary labels (form values, user tags, LLM-suggested synonyms) into a
CoreEmotion, and on request into secondary/tertiary wheel entries.

Core resolution is an ordered chain of strategies. The first hit wins and no
later strategy runs (order matters, never reorder):

1. exact_core         label == core emotion name
2. exact_variant      label is a listed variant of a core emotion
3. substring_variant  label contains a variant, or a variant contains the label
4. hierarchy          label names a secondary/tertiary emotion (exact, then substring)
5. similarity         best approximate score over all variants > threshold
6. direct_mapping     curated free-text words outside the wheel
7. sentiment          generic positive word → Joy, negative word → Sadness
8. suffix_retry       strip "ed"/"ing" once and rerun strategies 1-4 on the stem

Cheap exact strategies run before fuzzy ones and the sentiment guess runs
last: a wrong bucket is worse than a dropped label.

Cost: pure string work, no I/O. Safe to call from any thread.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from resilience import config
from resilience.emotions.similarity import normalize_term, similarity
from resilience.emotions.taxonomy import EmotionTaxonomy, get_taxonomy
from resilience.emotions.types import (
    CoreEmotion,
    EmotionHierarchy,
    EmotionMatch,
    MatchStrategy,
)
from resilience.observability.logging import get_logger
from resilience.observability.telemetry import EventType, log_event

logger = get_logger(__name__)

StrategyFn = Callable[[str], CoreEmotion | None]


class EmotionResolver:
    """
    Resolve free-text emotion labels onto the emotion wheel.

    Holds only the (immutable) taxonomy and two tuning constants, so one
    instance can be shared freely. Nothing here raises for bad labels:
    anything unresolvable comes back as None.
    """

    def __init__(
        self,
        taxonomy: EmotionTaxonomy | None = None,
        similarity_threshold: float | None = None,
        min_substring_length: int | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_taxonomy()
        self.similarity_threshold = (
            config.SIMILARITY_THRESHOLD if similarity_threshold is None else similarity_threshold
        )
        self.min_substring_length = (
            config.SUBSTRING_MIN_CHARS if min_substring_length is None else min_substring_length
        )

        self._cheap_strategies: tuple[tuple[MatchStrategy, StrategyFn], ...] = (
            (MatchStrategy.EXACT_CORE, self._exact_core),
            (MatchStrategy.EXACT_VARIANT, self._exact_variant),
            (MatchStrategy.SUBSTRING_VARIANT, self._substring_variant),
            (MatchStrategy.HIERARCHY, self._hierarchy),
        )
        self._strategies: tuple[tuple[MatchStrategy, StrategyFn], ...] = (
            *self._cheap_strategies,
            (MatchStrategy.SIMILARITY, self._similarity),
            (MatchStrategy.DIRECT_MAPPING, self._direct_mapping),
            (MatchStrategy.SENTIMENT, self._sentiment),
            (MatchStrategy.SUFFIX_RETRY, self._suffix_retry),
        )

    @property
    def strategy_order(self) -> tuple[MatchStrategy, ...]:
        return tuple(strategy for strategy, _ in self._strategies)

    # ------------------------------------------------------------------
    # Core emotion
    # ------------------------------------------------------------------

    def match(self, label: object) -> EmotionMatch | None:
        """Resolve a label and report which strategy matched."""
        normalized = normalize_term(label)
        if not normalized:
            return None

        for strategy, fn in self._strategies:
            core = fn(normalized)
            if core is not None:
                log_event(
                    EventType.LABEL_RESOLVED,
                    label=normalized,
                    core=core.value,
                    strategy=strategy.value,
                )
                return EmotionMatch(core=core, strategy=strategy, label=normalized)

        log_event(EventType.LABEL_UNRESOLVED, label=normalized)
        return None

    def resolve_core_emotion(self, label: object) -> CoreEmotion | None:
        """Best-matching CoreEmotion for ``label``, or None."""
        result = self.match(label)
        return result.core if result else None

    def _contains(self, label: str, term: str) -> bool:
        """Substring match in either direction, with a floor on short labels."""
        if term in label:
            return True
        return len(label) >= self.min_substring_length and label in term

    def _exact_core(self, label: str) -> CoreEmotion | None:
        return CoreEmotion.from_name(label)

    def _exact_variant(self, label: str) -> CoreEmotion | None:
        for core, variants in self.taxonomy.variants.items():
            if label in variants:
                return core
        return None

    def _substring_variant(self, label: str) -> CoreEmotion | None:
        for core, variants in self.taxonomy.variants.items():
            for variant in variants:
                if self._contains(label, variant):
                    return core
        return None

    def _hierarchy(self, label: str) -> CoreEmotion | None:
        taxonomy = self.taxonomy

        secondary = taxonomy.find_secondary(label)
        if secondary:
            return taxonomy.core_of_secondary(secondary)
        tertiary = taxonomy.find_tertiary(label)
        if tertiary:
            return taxonomy.core_of_tertiary(tertiary)

        for name, core in taxonomy.secondary_to_core.items():
            if self._contains(label, name.lower()):
                return core
        for name in taxonomy.tertiary_to_secondary:
            if self._contains(label, name.lower()):
                return taxonomy.core_of_tertiary(name)
        return None

    def _similarity(self, label: str) -> CoreEmotion | None:
        best_core: CoreEmotion | None = None
        best_score = 0.0
        for core, variants in self.taxonomy.variants.items():
            for candidate in (core.value.lower(), *variants):
                score = similarity(label, candidate)
                if score > best_score:
                    best_score = score
                    best_core = core

        if best_core is not None and best_score > self.similarity_threshold:
            logger.debug("Similarity match %r -> %s (%.2f)", label, best_core.value, best_score)
            return best_core
        return None

    def _direct_mapping(self, label: str) -> CoreEmotion | None:
        for term, core in self.taxonomy.direct_mappings.items():
            if self._contains(label, term):
                return core
        return None

    def _sentiment(self, label: str) -> CoreEmotion | None:
        # Word boundaries keep "unpleasant" from counting as "pleasant"
        if _contains_word(label, self.taxonomy.positive_words):
            return CoreEmotion.JOY
        if _contains_word(label, self.taxonomy.negative_words):
            return CoreEmotion.SADNESS
        return None

    def _suffix_retry(self, label: str) -> CoreEmotion | None:
        for suffix in self.taxonomy.retry_suffixes:
            if label.endswith(suffix):
                stem = label[: -len(suffix)].strip()
                if not stem:
                    return None
                for _strategy, fn in self._cheap_strategies:
                    core = fn(stem)
                    if core is not None:
                        return core
                return None
        return None

    # ------------------------------------------------------------------
    # Lower rings
    # ------------------------------------------------------------------

    def resolve_secondary_emotion(self, label: object) -> str | None:
        """
        Secondary wheel entry for ``label``, or None.

        Checks the secondary and tertiary rings, then falls back to the first
        secondary registered under the resolved core. That last step is a plain
        "pick any child", so displays always get a full path.
        """
        normalized = normalize_term(label)
        if not normalized:
            return None
        taxonomy = self.taxonomy

        secondary = taxonomy.find_secondary(normalized)
        if secondary:
            return secondary
        tertiary = taxonomy.find_tertiary(normalized)
        if tertiary:
            return taxonomy.tertiary_to_secondary[tertiary]

        for name in taxonomy.secondary_to_core:
            if self._contains(normalized, name.lower()):
                return name
        for name, parent in taxonomy.tertiary_to_secondary.items():
            if self._contains(normalized, name.lower()):
                return parent

        core = self.resolve_core_emotion(normalized)
        return taxonomy.first_secondary(core) if core else None

    def resolve_tertiary_emotion(self, label: object) -> str | None:
        """Tertiary wheel entry for ``label``, or None (same fallback policy)."""
        normalized = normalize_term(label)
        if not normalized:
            return None
        taxonomy = self.taxonomy

        tertiary = taxonomy.find_tertiary(normalized)
        if tertiary:
            return tertiary
        for name in taxonomy.tertiary_to_secondary:
            if self._contains(normalized, name.lower()):
                return name

        secondary = self.resolve_secondary_emotion(normalized)
        if not secondary:
            return None
        child = taxonomy.first_tertiary(secondary)
        if child:
            return child
        core = taxonomy.core_of_secondary(secondary)
        return taxonomy.first_tertiary_for_core(core) if core else None

    def categorize_emotion(self, label: object) -> EmotionHierarchy:
        """
        Full core/secondary/tertiary placement for ``label``.

        Exact ring hits keep their own lineage (a tertiary name reports its real
        parent and grandparent). Anything else goes through core resolution and
        takes the first child at each lower ring.
        """
        normalized = normalize_term(label)
        if not normalized:
            return EmotionHierarchy()
        taxonomy = self.taxonomy

        tertiary = taxonomy.find_tertiary(normalized)
        if tertiary:
            parent = taxonomy.tertiary_to_secondary[tertiary]
            return EmotionHierarchy(
                core=taxonomy.core_of_secondary(parent), secondary=parent, tertiary=tertiary
            )

        secondary = taxonomy.find_secondary(normalized)
        if secondary:
            core = taxonomy.core_of_secondary(secondary)
            child = taxonomy.first_tertiary(secondary)
            if child is None and core is not None:
                child = taxonomy.first_tertiary_for_core(core)
            return EmotionHierarchy(core=core, secondary=secondary, tertiary=child)

        core = self.resolve_core_emotion(normalized)
        if core is None:
            return EmotionHierarchy()

        secondary = self.resolve_secondary_emotion(normalized)
        if secondary is None or taxonomy.core_of_secondary(secondary) is not core:
            secondary = taxonomy.first_secondary(core)

        tertiary = self.resolve_tertiary_emotion(normalized)
        if tertiary is None or taxonomy.tertiary_to_secondary.get(tertiary) != secondary:
            tertiary = taxonomy.first_tertiary(secondary) if secondary else None
        if tertiary is None:
            tertiary = taxonomy.first_tertiary_for_core(core)

        return EmotionHierarchy(core=core, secondary=secondary, tertiary=tertiary)

    # ------------------------------------------------------------------
    # Tag helpers
    # ------------------------------------------------------------------

    def find_matching_emotions(self, tags: Iterable[object]) -> list[CoreEmotion]:
        """Distinct cores for a tag list, in first-seen order."""
        matches: list[CoreEmotion] = []
        for tag in tags:
            core = self.resolve_core_emotion(tag)
            if core is not None and core not in matches:
                matches.append(core)
        return matches

    def standardize_emotion_tags(self, tags: Iterable[object]) -> dict[CoreEmotion, int]:
        """Count tags per resolved core; unresolved tags are dropped."""
        counts: dict[CoreEmotion, int] = {}
        for tag in tags:
            core = self.resolve_core_emotion(tag)
            if core is not None:
                counts[core] = counts.get(core, 0) + 1
        return counts

    def are_emotions_related(self, first: object, second: object) -> bool:
        """True when both labels resolve to the same (non-null) core."""
        core = self.resolve_core_emotion(first)
        return core is not None and core is self.resolve_core_emotion(second)

    def get_related_emotions(self, core: CoreEmotion | str) -> list[str]:
        """Core name, its variants (capitalized), secondaries and their tertiaries."""
        member = core if isinstance(core, CoreEmotion) else CoreEmotion.from_name(core)
        if member is None:
            return []
        taxonomy = self.taxonomy

        related: list[str] = [member.value]
        related.extend(variant[:1].upper() + variant[1:] for variant in taxonomy.variants[member])
        for secondary in taxonomy.secondaries_of(member):
            related.append(secondary)
            related.extend(taxonomy.tertiaries_of(secondary))
        return list(dict.fromkeys(related))

    def get_emotion_color(self, label: object) -> str:
        """Display color: direct table hit, else the resolved core's color, else grey."""
        taxonomy = self.taxonomy
        if isinstance(label, str) and label.strip():
            direct = taxonomy.color_for(label)
            if direct:
                return direct
        core = self.resolve_core_emotion(label)
        if core is not None:
            return taxonomy.colors.get(core.value, taxonomy.default_color)
        return taxonomy.default_color


def _contains_word(text: str, words: Iterable[str]) -> bool:
    return any(re.search(rf"\b{re.escape(word)}\b", text) for word in words)


# Shared default instance (taxonomy and thresholds are read-only)
_DEFAULT_RESOLVER = EmotionResolver()


def get_resolver() -> EmotionResolver:
    """Return the shared resolver built from the configured thresholds."""
    return _DEFAULT_RESOLVER


def resolve_core_emotion(label: object) -> CoreEmotion | None:
    return _DEFAULT_RESOLVER.resolve_core_emotion(label)


def resolve_secondary_emotion(label: object) -> str | None:
    return _DEFAULT_RESOLVER.resolve_secondary_emotion(label)


def resolve_tertiary_emotion(label: object) -> str | None:
    return _DEFAULT_RESOLVER.resolve_tertiary_emotion(label)


def categorize_emotion(label: object) -> EmotionHierarchy:
    return _DEFAULT_RESOLVER.categorize_emotion(label)


def find_matching_emotions(tags: Iterable[object]) -> list[CoreEmotion]:
    return _DEFAULT_RESOLVER.find_matching_emotions(tags)


def standardize_emotion_tags(tags: Iterable[object]) -> dict[CoreEmotion, int]:
    return _DEFAULT_RESOLVER.standardize_emotion_tags(tags)


def are_emotions_related(first: object, second: object) -> bool:
    return _DEFAULT_RESOLVER.are_emotions_related(first, second)


def get_related_emotions(core: CoreEmotion | str) -> list[str]:
    return _DEFAULT_RESOLVER.get_related_emotions(core)


def get_emotion_color(label: object) -> str:
    return _DEFAULT_RESOLVER.get_emotion_color(label)
