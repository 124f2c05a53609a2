"""
Centralized Resolver and Ingestion Thresholds

IMPORTANT: Values are loaded from resilience_policy.yaml (shipped next to this module,
overridable by config/resilience_policy.yaml in the working directory).
This module provides constants with hardcoded defaults, but YAML is the source of truth.

The similarity threshold and the substring floor are empirically chosen. They are
tuning knobs for recall vs precision of the fallback strategies, not business rules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from resilience.observability.logging import get_logger
from resilience.observability.telemetry import EventType, log_event

logger = get_logger(__name__)

POLICY_FILENAME = "resilience_policy.yaml"


def _load_policy_config() -> dict[str, Any]:
    """
    Load configuration from resilience_policy.yaml.

    Side Effects:
        - Reads the first policy file found from the filesystem

    Returns:
        Dict with resolver and records config sections ({} when not found)
    """
    possible_paths = [
        Path("config") / POLICY_FILENAME,
        Path(__file__).parent / POLICY_FILENAME,
    ]

    for config_path in possible_paths:
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            logger.debug("Loaded resolver policy from %s", config_path)
            return config if isinstance(config, dict) else {}

    log_event(EventType.POLICY_DEFAULTS_USED, filename=POLICY_FILENAME)
    return {}


# Load config once at module import time
_POLICY_CONFIG = _load_policy_config()
_RESOLVER_CONFIG: dict[str, Any] = _POLICY_CONFIG.get("resolver") or {}
_RECORDS_CONFIG: dict[str, Any] = _POLICY_CONFIG.get("records") or {}

# ============================================================================
# RESOLVER
# ============================================================================

# Approximate match accepted only if best score > this value
SIMILARITY_ACCEPT_THRESHOLD: float = float(_RESOLVER_CONFIG.get("similarity_accept_threshold", 0.6))

# Minimum label length for the "variant contains label" direction of substring matching
MIN_SUBSTRING_LENGTH: int = int(_RESOLVER_CONFIG.get("min_substring_length", 3))

# ============================================================================
# RECORDS
# ============================================================================

INTENSITY_MIN: float = float(_RECORDS_CONFIG.get("intensity_min", 0))
INTENSITY_MAX: float = float(_RECORDS_CONFIG.get("intensity_max", 10))


def get_all_thresholds() -> dict[str, Any]:
    """Get all thresholds as a dictionary (for diagnostics)."""
    return {
        "resolver": {
            "similarity_accept_threshold": SIMILARITY_ACCEPT_THRESHOLD,
            "min_substring_length": MIN_SUBSTRING_LENGTH,
        },
        "records": {
            "intensity_min": INTENSITY_MIN,
            "intensity_max": INTENSITY_MAX,
        },
    }
