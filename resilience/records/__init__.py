"""
Input record models for mood entries, journal entries and thought records.
"""

from resilience.records.models import (
    JournalEntry,
    MoodEntry,
    RecordModel,
    ThoughtRecord,
    coerce_records,
    require_collection,
)

__all__ = [
    "RecordModel",
    "MoodEntry",
    "JournalEntry",
    "ThoughtRecord",
    "coerce_records",
    "require_collection",
]
