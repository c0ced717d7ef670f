"""Moving and stationary timeline segments and the rules relating them."""

from __future__ import annotations

from .adjacency import distance_between, maximum_mergeable_distance, within_mergeable_distance
from .base import TimelineSegment, locked
from .cleansing import CleanseOutcome, CleanseResult, EdgeCleanser, cleanse_edge
from .containment import percent_inside, samples_inside, samples_outside
from .path import Path
from .visit import Visit

__all__ = [
    "CleanseOutcome",
    "CleanseResult",
    "EdgeCleanser",
    "Path",
    "TimelineSegment",
    "Visit",
    "cleanse_edge",
    "distance_between",
    "locked",
    "maximum_mergeable_distance",
    "percent_inside",
    "samples_inside",
    "samples_outside",
    "within_mergeable_distance",
]
