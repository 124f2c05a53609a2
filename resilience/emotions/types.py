"""
Module: types
Purpose: Shared domain types for the emotion taxonomy and resolver.
Dependencies: None (leaf module)

Stable import boundary: taxonomy, resolver, correlator and insight generator
all speak in these types. Keeping them in a leaf module prevents circular
imports between the emotions and insights packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CoreEmotion(str, Enum):
    """Top ring of the emotion wheel.

    Extends str so JSON serialization produces raw names (e.g. "Fear"),
    preserving the dashboard contract. Member order is the wheel order and
    is the stable axis order for every correlation result.
    """

    JOY = "Joy"
    SADNESS = "Sadness"
    FEAR = "Fear"
    SURPRISE = "Surprise"
    ANGER = "Anger"
    LOVE = "Love"
    DISGUST = "Disgust"
    TRUST = "Trust"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> CoreEmotion | None:
        """Case-insensitive lookup by display name. Returns None if unknown."""
        if not isinstance(name, str):
            return None
        wanted = name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class MatchStrategy(str, Enum):
    """Resolver strategy that produced a match, in evaluation order."""

    EXACT_CORE = "exact_core"
    EXACT_VARIANT = "exact_variant"
    SUBSTRING_VARIANT = "substring_variant"
    HIERARCHY = "hierarchy"
    SIMILARITY = "similarity"
    DIRECT_MAPPING = "direct_mapping"
    SENTIMENT = "sentiment"
    SUFFIX_RETRY = "suffix_retry"


@dataclass(frozen=True)
class EmotionMatch:
    """Result of a successful core-emotion resolution."""

    core: CoreEmotion
    strategy: MatchStrategy
    label: str  # normalized input


@dataclass(frozen=True)
class EmotionHierarchy:
    """Core → secondary → tertiary placement of a label.

    Any level may be None when nothing resolves. Whenever ``core`` is set the
    lower levels are filled too, picking the first registered child if the
    label itself names nothing that specific.
    """

    core: CoreEmotion | None = None
    secondary: str | None = None
    tertiary: str | None = None

    @property
    def is_resolved(self) -> bool:
        return self.core is not None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "coreEmotion": self.core.value if self.core else None,
            "secondaryEmotion": self.secondary,
            "tertiaryEmotion": self.tertiary,
        }
