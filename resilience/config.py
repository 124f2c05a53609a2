"""Centralized configuration for the emotion engine.

Re-exports the YAML-backed thresholds from resilience.runtime.thresholds, then
applies environment overrides. Overrides use safe defaults so the engine works
without any env configuration.
"""

from __future__ import annotations

import os

from resilience.runtime.thresholds import (  # noqa: F401  re-export
    INTENSITY_MAX,
    INTENSITY_MIN,
    MIN_SUBSTRING_LENGTH,
    SIMILARITY_ACCEPT_THRESHOLD,
    get_all_thresholds,
)

# --- App ---
APP_VERSION: str = "1.0.0"

# --- Resolver ---
SIMILARITY_THRESHOLD: float = float(
    os.getenv("RESILIENCE_SIMILARITY_THRESHOLD", str(SIMILARITY_ACCEPT_THRESHOLD))
)
SUBSTRING_MIN_CHARS: int = int(
    os.getenv("RESILIENCE_MIN_SUBSTRING_LENGTH", str(MIN_SUBSTRING_LENGTH))
)

# --- Records ---
MOOD_INTENSITY_MIN: float = INTENSITY_MIN
MOOD_INTENSITY_MAX: float = INTENSITY_MAX

# --- Insights ---
INSIGHT_IMPROVEMENT_DECIMALS: int = 1
