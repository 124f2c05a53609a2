"""
Cross-entity correlation and insight generation.
"""

from resilience.insights.correlator import (
    CorrelationBucket,
    EmotionCorrelator,
    correlate,
    get_correlator,
)
from resilience.insights.generator import (
    Insight,
    InsightCategory,
    format_distortion_name,
    generate_insight_objects,
    generate_insights,
)
from resilience.insights.service import CorrelationReport, build_report

__all__ = [
    # Correlator
    "CorrelationBucket",
    "EmotionCorrelator",
    "correlate",
    "get_correlator",
    # Generator
    "Insight",
    "InsightCategory",
    "format_distortion_name",
    "generate_insight_objects",
    "generate_insights",
    # Service
    "CorrelationReport",
    "build_report",
]
