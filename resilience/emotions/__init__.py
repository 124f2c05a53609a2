"""
Emotion taxonomy and label resolution.
"""

from resilience.emotions.resolver import (
    EmotionResolver,
    are_emotions_related,
    categorize_emotion,
    find_matching_emotions,
    get_emotion_color,
    get_related_emotions,
    get_resolver,
    resolve_core_emotion,
    resolve_secondary_emotion,
    resolve_tertiary_emotion,
    standardize_emotion_tags,
)
from resilience.emotions.similarity import normalize_term, similarity
from resilience.emotions.taxonomy import TAXONOMY, EmotionTaxonomy, get_taxonomy
from resilience.emotions.types import (
    CoreEmotion,
    EmotionHierarchy,
    EmotionMatch,
    MatchStrategy,
)

__all__ = [
    # Types
    "CoreEmotion",
    "EmotionHierarchy",
    "EmotionMatch",
    "MatchStrategy",
    # Taxonomy
    "TAXONOMY",
    "EmotionTaxonomy",
    "get_taxonomy",
    # Similarity
    "normalize_term",
    "similarity",
    # Resolver
    "EmotionResolver",
    "get_resolver",
    "resolve_core_emotion",
    "resolve_secondary_emotion",
    "resolve_tertiary_emotion",
    "categorize_emotion",
    "find_matching_emotions",
    "standardize_emotion_tags",
    "are_emotions_related",
    "get_related_emotions",
    "get_emotion_color",
]
