"""Resilience emotion engine - taxonomy resolution and cross-entity correlation"""

from __future__ import annotations

__version__ = "1.0.0"


# Lazy imports so `import resilience.config` does not build the taxonomy
def __getattr__(name: str):
    """
    Lazy imports to avoid import cycles (the resolver reads resilience.config)
    and to keep lightweight imports cheap.
    """
    if name in (
        "CoreEmotion",
        "EmotionHierarchy",
        "resolve_core_emotion",
        "resolve_secondary_emotion",
        "resolve_tertiary_emotion",
        "categorize_emotion",
        "find_matching_emotions",
        "standardize_emotion_tags",
        "are_emotions_related",
        "get_related_emotions",
        "get_emotion_color",
    ):
        from resilience import emotions

        return getattr(emotions, name)

    if name in ("CorrelationBucket", "correlate"):
        from resilience.insights import correlator

        return getattr(correlator, name)

    if name in ("Insight", "InsightCategory", "generate_insights"):
        from resilience.insights import generator

        return getattr(generator, name)

    if name in ("CorrelationReport", "build_report"):
        from resilience.insights import service

        return getattr(service, name)

    if name in ("MoodEntry", "JournalEntry", "ThoughtRecord"):
        from resilience.records import models

        return getattr(models, name)

    if name in ("ResilienceError", "TaxonomyError"):
        from resilience import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "CoreEmotion",
    "EmotionHierarchy",
    "resolve_core_emotion",
    "resolve_secondary_emotion",
    "resolve_tertiary_emotion",
    "categorize_emotion",
    "find_matching_emotions",
    "standardize_emotion_tags",
    "are_emotions_related",
    "get_related_emotions",
    "get_emotion_color",
    "CorrelationBucket",
    "correlate",
    "Insight",
    "InsightCategory",
    "generate_insights",
    "CorrelationReport",
    "build_report",
    "MoodEntry",
    "JournalEntry",
    "ThoughtRecord",
    "ResilienceError",
    "TaxonomyError",
]
