"""Utilities for classifying sample activity types."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

__all__ = ["normalize_activity_type", "dominant_activity_type"]


def normalize_activity_type(value: Any) -> str | None:
    """Return a lowercase activity type string or ``None`` when missing.

    Classifiers and recorded files disagree on casing ("Walking", "walking",
    " WALKING "). Normalising once keeps downstream comparisons cheap and
    deterministic.
    """

    if value is None:
        return None
    normalized = str(value).strip().lower()
    return normalized or None


def dominant_activity_type(types: Iterable[str | None]) -> str | None:
    """Return the most common non-null type, or ``None`` when there are none.

    Ties go to the type seen first.
    """

    counts: Counter[str] = Counter()
    for value in types:
        if value is not None:
            counts[value] += 1
    if not counts:
        return None
    # Counter preserves insertion order and most_common is stable on ties.
    return counts.most_common(1)[0][0]
