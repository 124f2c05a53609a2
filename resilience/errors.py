"""
Exception types raised by the emotion engine.

Bad user data never raises: unresolvable labels yield None and malformed
records are skipped. Only broken static tables and contract violations by the
calling code surface as exceptions.
"""

from __future__ import annotations


class ResilienceError(Exception):
    """Base class for engine errors."""

    pass


class TaxonomyError(ResilienceError, ValueError):
    """Raised when the static taxonomy tables do not form a strict tree."""

    pass
