"""
Structured event logging for the emotion engine.

One line per event, severity chosen by event type. Unlike a metrics client this
module keeps no counters or buffers: the resolver and correlator must stay free
of shared mutable state, so everything observable goes through logging.

Usage:
    from resilience.observability.telemetry import EventType, log_event

    log_event(EventType.RECORD_SKIPPED, stream="mood", index=3, reason="not_a_mapping")

Output:
    event=record_skipped stream=mood index=3 reason=not_a_mapping
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger("resilience.telemetry")


class EventType(str, Enum):
    """Event taxonomy for the resolve → correlate → insight flow"""

    # 1. Taxonomy resolution
    LABEL_RESOLVED = "label_resolved"
    LABEL_UNRESOLVED = "label_unresolved"

    # 2. Record ingestion
    RECORD_SKIPPED = "record_skipped"

    # 3. Correlation
    CORRELATION_START = "correlation_start"
    CORRELATION_COMPLETE = "correlation_complete"
    THOUGHT_RECORD_UNLINKED = "thought_record_unlinked"

    # 4. Insights
    INSIGHTS_GENERATED = "insights_generated"

    # 5. Configuration
    POLICY_DEFAULTS_USED = "policy_defaults_used"


EVENT_SEVERITY: dict[EventType, int] = {
    EventType.LABEL_RESOLVED: logging.DEBUG,
    EventType.LABEL_UNRESOLVED: logging.DEBUG,
    EventType.RECORD_SKIPPED: logging.WARNING,
    EventType.CORRELATION_START: logging.DEBUG,
    EventType.CORRELATION_COMPLETE: logging.INFO,
    EventType.THOUGHT_RECORD_UNLINKED: logging.DEBUG,
    EventType.INSIGHTS_GENERATED: logging.INFO,
    EventType.POLICY_DEFAULTS_USED: logging.WARNING,
}


def _format_fields(fields: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in sorted(fields.items()))


def log_event(event: EventType | str, **fields: Any) -> None:
    """
    Structured log event. Caller must keep journal text and thoughts out of fields.

    Side Effects:
        - Writes to logger at the severity mapped for the event
    """
    if isinstance(event, EventType):
        level = EVENT_SEVERITY.get(event, logging.INFO)
        name = event.value
    else:
        level = logging.INFO
        name = event

    if not logger.isEnabledFor(level):
        return

    if fields:
        logger.log(level, "event=%s %s", name, _format_fields(fields))
    else:
        logger.log(level, "event=%s", name)
