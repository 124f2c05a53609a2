"""
Read-only, validated view over the emotion wheel tables.

The tables in taxonomy_data.py are plain dicts keyed by display name. This
module turns them into an immutable EmotionTaxonomy once at import: core names
become CoreEmotion members, every lookup gets a lower-cased index, and the
tree invariant is checked so a bad edit fails at startup rather than at the
first request.

The module-level TAXONOMY instance is shared by every caller. It exposes only
tuples, frozensets and MappingProxyType views, so concurrent readers need no
locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from resilience.emotions import taxonomy_data
from resilience.emotions.types import CoreEmotion
from resilience.errors import TaxonomyError


def _freeze(data: dict) -> Mapping:
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class EmotionTaxonomy:
    """Immutable three-ring emotion taxonomy plus fallback vocabularies."""

    variants: Mapping[CoreEmotion, tuple[str, ...]]
    secondary_to_core: Mapping[str, CoreEmotion]
    tertiary_to_secondary: Mapping[str, str]
    colors: Mapping[str, str]
    direct_mappings: Mapping[str, CoreEmotion]
    positive_words: tuple[str, ...]
    negative_words: tuple[str, ...]
    retry_suffixes: tuple[str, ...]
    default_color: str = taxonomy_data.DEFAULT_EMOTION_COLOR

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_tables(
        cls,
        core_variants: Mapping[str, tuple[str, ...] | list[str]],
        secondary_to_core: Mapping[str, str],
        tertiary_to_secondary: Mapping[str, str],
        colors: Mapping[str, str] | None = None,
        direct_mappings: Mapping[str, str] | None = None,
        positive_words: tuple[str, ...] | list[str] = (),
        negative_words: tuple[str, ...] | list[str] = (),
        retry_suffixes: tuple[str, ...] | list[str] = (),
    ) -> EmotionTaxonomy:
        """
        Build and validate a taxonomy from display-name tables.

        Raises:
            TaxonomyError: unknown core name, a tertiary whose parent is not a
                secondary, a core without variants, or a name placed on two
                rings under different core emotions.
        """
        variants: dict[CoreEmotion, tuple[str, ...]] = {}
        for name, terms in core_variants.items():
            core = _require_core(name, f"variants table key {name!r}")
            cleaned: list[str] = []
            for term in terms:
                lowered = term.strip().lower()
                if lowered and lowered not in cleaned:
                    cleaned.append(lowered)
            variants[core] = tuple(cleaned)

        missing = [core.value for core in CoreEmotion if not variants.get(core)]
        if missing:
            raise TaxonomyError(f"Core emotions without variants: {', '.join(missing)}")

        # Preserve wheel order regardless of table order
        ordered_variants = {core: variants[core] for core in CoreEmotion}

        secondaries: dict[str, CoreEmotion] = {}
        for name, core_name in secondary_to_core.items():
            secondaries[name] = _require_core(core_name, f"secondary emotion {name!r}")

        secondary_lower = {name.lower(): name for name in secondaries}
        tertiaries: dict[str, str] = {}
        for name, parent in tertiary_to_secondary.items():
            canonical_parent = secondary_lower.get(parent.lower())
            if canonical_parent is None:
                raise TaxonomyError(
                    f"Tertiary emotion {name!r} points at unknown secondary {parent!r}"
                )
            tertiaries[name] = canonical_parent

        # A name may sit on two rings only if both placements share a core
        for name, parent in tertiaries.items():
            also_secondary = secondary_lower.get(name.lower())
            if also_secondary is None:
                continue
            if secondaries[also_secondary] is not secondaries[parent]:
                raise TaxonomyError(
                    f"{name!r} rolls up to {secondaries[also_secondary].value} as a secondary "
                    f"but to {secondaries[parent].value} as a tertiary"
                )

        direct: dict[str, CoreEmotion] = {}
        for term, core_name in (direct_mappings or {}).items():
            direct[term.strip().lower()] = _require_core(core_name, f"direct mapping {term!r}")

        return cls(
            variants=_freeze(ordered_variants),
            secondary_to_core=_freeze(secondaries),
            tertiary_to_secondary=_freeze(tertiaries),
            colors=_freeze(dict(colors or {})),
            direct_mappings=_freeze(direct),
            positive_words=tuple(w.lower() for w in positive_words),
            negative_words=tuple(w.lower() for w in negative_words),
            retry_suffixes=tuple(retry_suffixes),
        )

    # ------------------------------------------------------------------
    # Ring lookups
    # ------------------------------------------------------------------

    @property
    def cores(self) -> tuple[CoreEmotion, ...]:
        return tuple(self.variants)

    def secondary_names(self) -> tuple[str, ...]:
        return tuple(self.secondary_to_core)

    def tertiary_names(self) -> tuple[str, ...]:
        return tuple(self.tertiary_to_secondary)

    def find_secondary(self, name: str) -> str | None:
        """Canonical secondary name for a case-insensitive exact match."""
        wanted = name.strip().lower()
        for secondary in self.secondary_to_core:
            if secondary.lower() == wanted:
                return secondary
        return None

    def find_tertiary(self, name: str) -> str | None:
        """Canonical tertiary name for a case-insensitive exact match."""
        wanted = name.strip().lower()
        for tertiary in self.tertiary_to_secondary:
            if tertiary.lower() == wanted:
                return tertiary
        return None

    def core_of_secondary(self, secondary: str) -> CoreEmotion | None:
        return self.secondary_to_core.get(secondary)

    def core_of_tertiary(self, tertiary: str) -> CoreEmotion | None:
        parent = self.tertiary_to_secondary.get(tertiary)
        return self.secondary_to_core.get(parent) if parent else None

    def secondaries_of(self, core: CoreEmotion) -> tuple[str, ...]:
        """Secondary emotions under a core, in registration order."""
        return tuple(name for name, parent in self.secondary_to_core.items() if parent is core)

    def tertiaries_of(self, secondary: str) -> tuple[str, ...]:
        """Tertiary emotions under a secondary, in registration order."""
        return tuple(
            name for name, parent in self.tertiary_to_secondary.items() if parent == secondary
        )

    def first_secondary(self, core: CoreEmotion) -> str | None:
        children = self.secondaries_of(core)
        return children[0] if children else None

    def first_tertiary(self, secondary: str) -> str | None:
        children = self.tertiaries_of(secondary)
        return children[0] if children else None

    def first_tertiary_for_core(self, core: CoreEmotion) -> str | None:
        for secondary in self.secondaries_of(core):
            tertiary = self.first_tertiary(secondary)
            if tertiary:
                return tertiary
        return None

    # ------------------------------------------------------------------
    # Vocabulary
    # ------------------------------------------------------------------

    def known_terms(self) -> tuple[tuple[str, CoreEmotion], ...]:
        """Every core name and variant (lower-cased) paired with its core."""
        terms: list[tuple[str, CoreEmotion]] = []
        for core, core_variants in self.variants.items():
            terms.append((core.value.lower(), core))
            terms.extend((variant, core) for variant in core_variants if variant != core.value.lower())
        return tuple(terms)

    def color_for(self, name: str) -> str | None:
        """Exact (case-sensitive, then case-insensitive) color table hit."""
        if name in self.colors:
            return self.colors[name]
        wanted = name.strip().lower()
        for key, color in self.colors.items():
            if key.lower() == wanted:
                return color
        return None


def _require_core(name: str, where: str) -> CoreEmotion:
    core = CoreEmotion.from_name(name)
    if core is None:
        raise TaxonomyError(f"Unknown core emotion {name!r} in {where}")
    return core


TAXONOMY: EmotionTaxonomy = EmotionTaxonomy.from_tables(
    core_variants=taxonomy_data.CORE_EMOTION_VARIANTS,
    secondary_to_core=taxonomy_data.SECONDARY_TO_CORE,
    tertiary_to_secondary=taxonomy_data.TERTIARY_TO_SECONDARY,
    colors=taxonomy_data.EMOTION_COLORS,
    direct_mappings=taxonomy_data.DIRECT_MAPPINGS,
    positive_words=taxonomy_data.POSITIVE_SENTIMENT_WORDS,
    negative_words=taxonomy_data.NEGATIVE_SENTIMENT_WORDS,
    retry_suffixes=taxonomy_data.RETRY_SUFFIXES,
)


def get_taxonomy() -> EmotionTaxonomy:
    """Return the process-wide taxonomy (built and validated at import)."""
    return TAXONOMY
