"""Label normalization and the cheap approximate-match score.

The score is a containment + character-overlap heuristic, not an edit
distance. It only backs the last-resort similarity strategy of the resolver,
where speed and determinism matter more than linguistic accuracy.
"""

from __future__ import annotations

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def normalize_term(label: Any) -> str:
    """Lower-case, trim and collapse inner whitespace. Non-strings become ""."""
    if not isinstance(label, str):
        return ""
    return _WHITESPACE.sub(" ", label).strip().lower()


def similarity(a: str, b: str) -> float:
    """
    Approximate similarity of two normalized strings, in [0, 1].

    - 0.0 if either string is empty
    - 1.0 on equality
    - min(len)/max(len) when one contains the other
    - otherwise (characters of ``a`` that occur anywhere in ``b``) / max(len)

    The overlap branch is order-insensitive and not symmetric: repeated
    characters in ``a`` each count.
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    longest = max(len(a), len(b))
    if a in b or b in a:
        return min(len(a), len(b)) / longest

    alphabet = set(b)
    matches = sum(1 for ch in a if ch in alphabet)
    return matches / longest
