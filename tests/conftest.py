"""
Pytest configuration for the emotion engine tests

Provides a deliberately tiny taxonomy (one variant per core emotion) for
strategy-level resolver tests, plus small record fixtures shared by the
correlator, insight and CLI tests.
"""

import pytest

from resilience.emotions.resolver import EmotionResolver
from resilience.emotions.taxonomy import EmotionTaxonomy

TINY_VARIANTS = {
    "Joy": ("joy",),
    "Sadness": ("sad",),
    "Fear": ("scared",),
    "Surprise": ("surprised",),
    "Anger": ("angry",),
    "Love": ("love",),
    "Disgust": ("disgusted",),
    "Trust": ("trust",),
}


@pytest.fixture(scope="session")
def tiny_taxonomy():
    """Minimal valid taxonomy: one variant per core, a short secondary/tertiary chain"""
    return EmotionTaxonomy.from_tables(
        core_variants=TINY_VARIANTS,
        secondary_to_core={"Lonely": "Sadness", "Nervous": "Fear"},
        tertiary_to_secondary={"Isolated": "Lonely", "Jittery": "Nervous"},
        direct_mappings={"numb": "Sadness"},
        positive_words=("pleasant",),
        negative_words=("unpleasant",),
        retry_suffixes=("ed", "ing"),
    )


@pytest.fixture
def tiny_resolver(tiny_taxonomy):
    """Resolver over the tiny taxonomy with a strict similarity threshold"""
    return EmotionResolver(taxonomy=tiny_taxonomy, similarity_threshold=0.9)


@pytest.fixture
def fear_moods():
    """Two Fear mood entries, one by core name and one by variant"""
    return [
        {"id": 1, "coreEmotion": "Fear", "intensity": 8},
        {"id": 2, "coreEmotion": "Scared", "intensity": 4},
    ]


@pytest.fixture
def mixed_records():
    """A small export touching Fear, Joy and Sadness"""
    moods = [
        {"id": 1, "coreEmotion": "Fear", "intensity": 7, "timestamp": "2024-03-01T09:00:00"},
        {"id": 2, "coreEmotion": "Joy", "primaryEmotion": "Happy", "intensity": 5},
        {"id": 3, "primaryEmotion": "Lonely", "intensity": 6},
    ]
    journals = [
        {"id": "j1", "title": "Work", "content": "Felt anxious before the review."},
        {"id": "j2", "userSelectedTags": ["happy"], "content": "Lunch with friends."},
        {"id": "j3", "aiSuggestedTags": ["sad"], "content": "Quiet evening."},
    ]
    thoughts = [
        {
            "id": 10,
            "emotionRecordId": 1,
            "beforeRating": 7,
            "afterRating": 3,
            "cognitiveDistortions": ["catastrophizing", "mind-reading"],
        },
        {
            "id": 11,
            "emotions": ["happy"],
            "beforeRating": 4,
            "afterRating": 6,
            "cognitiveDistortions": ["catastrophizing"],
        },
    ]
    return moods, journals, thoughts
