"""General utility helpers shared across modules."""

from __future__ import annotations

from typing import Iterable

import numpy as np

KILOMETRES_PER_MILE = 1.609344


def format_duration(seconds: float) -> str:
    """Format seconds into a ``H:MM:SS`` string."""

    total = int(round(max(0.0, seconds)))
    hours, rem = divmod(total, 3600)
    mins, sec = divmod(rem, 60)
    return f"{hours}:{mins:02d}:{sec:02d}"


def kilometres_per_hour(metres_per_second: float) -> float:
    return metres_per_second * 3.6


def miles_per_hour(metres_per_second: float) -> float:
    return kilometres_per_hour(metres_per_second) / KILOMETRES_PER_MILE


def mean(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``, or ``0.0`` when empty.

    ``numpy.mean`` returns NaN (with a warning) for an empty input; callers
    here treat "no evidence" as zero instead.
    """

    array = np.fromiter((float(v) for v in values), dtype=float)
    if array.size == 0:
        return 0.0
    return float(np.mean(array))


__all__ = [
    "KILOMETRES_PER_MILE",
    "format_duration",
    "kilometres_per_hour",
    "mean",
    "miles_per_hour",
]
