"""
Input record models (Pydantic v2) for the correlation engine.

The three streams arrive already fetched by the caller, as ORM rows, API
payloads or plain dicts, in either snake_case or the dashboard's camelCase.
These models are lenient: a wrong-typed field is coerced to
empty/None instead of failing validation, so one bad row contributes nothing
rather than aborting the batch. Unknown keys are kept as extras and survive
model_dump(), which keeps the dashboard payload intact.

Models are frozen and list-like fields are tuples: the correlator can hand
the same instances to several buckets without anyone mutating them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from resilience import config
from resilience.observability.telemetry import EventType, log_event

RecordId = int | str

# =============================================================================
# COERCION HELPERS
# =============================================================================


def _coerce_id(value: Any) -> RecordId | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def _coerce_number(value: Any) -> float | None:
    """
    Finite float or None.

    Booleans, non-numeric strings and ints too large for a float become None.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _coerce_label(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _coerce_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _coerce_str_tuple(value: Any) -> tuple[str, ...]:
    """
    Normalize a tag-like field to a tuple of non-empty strings.

    A bare string is treated as a comma-separated list; non-string items
    inside a list are dropped.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        return ()
    cleaned = []
    for item in items:
        if isinstance(item, str) and item.strip():
            cleaned.append(item.strip())
    return tuple(cleaned)


# =============================================================================
# MODELS
# =============================================================================


class RecordModel(BaseModel):
    """Base model: frozen, alias-tolerant, keeps unknown keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: RecordId | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_lenient(cls, value: Any) -> RecordId | None:
        return _coerce_id(value)

    def to_payload(self) -> dict[str, Any]:
        """camelCase JSON-safe dump for the dashboard."""
        return self.model_dump(mode="json", by_alias=True)


class MoodEntry(RecordModel):
    """A logged emotional state with up to three wheel labels and an intensity."""

    timestamp: datetime | None = None
    core_emotion: str | None = Field(
        default=None,
        validation_alias=AliasChoices("core_emotion", "coreEmotion", "core"),
        serialization_alias="coreEmotion",
    )
    primary_emotion: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "primary_emotion", "primaryEmotion", "secondary_emotion", "secondaryEmotion", "primary"
        ),
        serialization_alias="primaryEmotion",
    )
    tertiary_emotion: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tertiary_emotion", "tertiaryEmotion", "tertiary"),
        serialization_alias="tertiaryEmotion",
    )
    intensity: float | None = None

    @field_validator("timestamp", mode="wrap")
    @classmethod
    def _timestamp_lenient(cls, value: Any, handler: Any) -> datetime | None:
        try:
            return handler(value)
        except ValidationError:
            return None

    @field_validator("core_emotion", "primary_emotion", "tertiary_emotion", mode="before")
    @classmethod
    def _label_lenient(cls, value: Any) -> str | None:
        return _coerce_label(value)

    @field_validator("intensity", mode="before")
    @classmethod
    def _intensity_bounded(cls, value: Any) -> float | None:
        number = _coerce_number(value)
        if number is None:
            return None
        return min(max(number, config.MOOD_INTENSITY_MIN), config.MOOD_INTENSITY_MAX)

    def labels(self) -> tuple[str, ...]:
        """Populated labels in precedence order: core, primary, tertiary."""
        return tuple(
            label
            for label in (self.core_emotion, self.primary_emotion, self.tertiary_emotion)
            if label
        )


class JournalEntry(RecordModel):
    """Free-text reflection with optional user and AI tag fields."""

    title: str = ""
    content: str = ""
    user_selected_tags: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("user_selected_tags", "userSelectedTags"),
        serialization_alias="userSelectedTags",
    )
    selected_tags: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("selected_tags", "selectedTags"),
        serialization_alias="selectedTags",
    )
    tags: tuple[str, ...] = ()
    ai_suggested_tags: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("ai_suggested_tags", "aiSuggestedTags"),
        serialization_alias="aiSuggestedTags",
    )
    initial_ai_tags: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("initial_ai_tags", "initialAiTags"),
        serialization_alias="initialAiTags",
    )
    emotions: tuple[str, ...] = ()

    @field_validator("title", "content", mode="before")
    @classmethod
    def _text_lenient(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator(
        "user_selected_tags",
        "selected_tags",
        "tags",
        "ai_suggested_tags",
        "initial_ai_tags",
        "emotions",
        mode="before",
    )
    @classmethod
    def _tags_lenient(cls, value: Any) -> tuple[str, ...]:
        return _coerce_str_tuple(value)

    def curated_tags(self) -> tuple[str, ...]:
        """Tags a person chose, across all user-facing tag fields."""
        return (*self.user_selected_tags, *self.selected_tags, *self.tags)

    def suggested_tags(self) -> tuple[str, ...]:
        """Tags proposed by the analysis model."""
        return (*self.ai_suggested_tags, *self.initial_ai_tags, *self.emotions)

    def text(self) -> str:
        return f"{self.title}\n{self.content}".strip()


class ThoughtRecord(RecordModel):
    """Structured CBT exercise, optionally linked to the mood entry it examines."""

    mood_entry_id: RecordId | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "mood_entry_id", "moodEntryId", "emotion_record_id", "emotionRecordId"
        ),
        serialization_alias="moodEntryId",
    )
    automatic_thoughts: str = Field(
        default="",
        validation_alias=AliasChoices("automatic_thoughts", "automaticThoughts"),
        serialization_alias="automaticThoughts",
    )
    cognitive_distortions: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("cognitive_distortions", "cognitiveDistortions"),
        serialization_alias="cognitiveDistortions",
    )
    emotions: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("emotions", "emotion_labels", "emotionLabels", "emotion"),
    )
    before_rating: float | None = Field(
        default=None,
        validation_alias=AliasChoices("before_rating", "beforeRating"),
        serialization_alias="beforeRating",
    )
    after_rating: float | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "after_rating", "afterRating", "reflection_rating", "reflectionRating"
        ),
        serialization_alias="afterRating",
    )

    @field_validator("mood_entry_id", mode="before")
    @classmethod
    def _link_lenient(cls, value: Any) -> RecordId | None:
        return _coerce_id(value)

    @field_validator("automatic_thoughts", mode="before")
    @classmethod
    def _thoughts_lenient(cls, value: Any) -> str:
        return _coerce_text(value)

    @field_validator("cognitive_distortions", "emotions", mode="before")
    @classmethod
    def _labels_lenient(cls, value: Any) -> tuple[str, ...]:
        return _coerce_str_tuple(value)

    @field_validator("before_rating", "after_rating", mode="before")
    @classmethod
    def _rating_lenient(cls, value: Any) -> float | None:
        return _coerce_number(value)


# =============================================================================
# INGESTION
# =============================================================================

ModelT = TypeVar("ModelT", bound=RecordModel)


def require_collection(items: Any, stream: str) -> None:
    """
    Reject arguments that are not a collection of records.

    Raises:
        TypeError: ``items`` is None, a string/mapping, or not iterable.
            That is a caller bug, not bad data.
    """
    if items is None:
        raise TypeError(f"{stream} collection is required, got None")
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        raise TypeError(
            f"{stream} collection must be an iterable of records, got {type(items).__name__}"
        )


def coerce_records(
    items: Iterable[Any], model: type[ModelT], stream: str
) -> tuple[list[ModelT], int]:
    """
    Validate a caller-supplied collection into model instances.

    Accepts model instances, mappings and attribute objects (ORM rows).
    Anything else is skipped with a RECORD_SKIPPED event.

    Returns:
        (records, skipped_count)

    Raises:
        TypeError: see require_collection
    """
    require_collection(items, stream)

    records: list[ModelT] = []
    skipped = 0
    for index, item in enumerate(items):
        try:
            if isinstance(item, model):
                records.append(item)
            elif isinstance(item, Mapping):
                records.append(model.model_validate(dict(item)))
            elif isinstance(item, BaseModel):
                records.append(model.model_validate(item.model_dump(by_alias=True)))
            elif hasattr(item, "__dict__") and not isinstance(item, type):
                records.append(model.model_validate(item, from_attributes=True))
            else:
                skipped += 1
                log_event(
                    EventType.RECORD_SKIPPED,
                    stream=stream,
                    index=index,
                    reason=f"unsupported_type:{type(item).__name__}",
                )
        except ValidationError as e:
            skipped += 1
            log_event(
                EventType.RECORD_SKIPPED,
                stream=stream,
                index=index,
                reason="validation_error",
                errors=e.error_count(),
            )
    return records, skipped
