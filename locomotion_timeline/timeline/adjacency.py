"""Spatial gap and merge bound between adjacent timeline segments.

Both functions are symmetric in their arguments. Path/visit pairs are handed
to the visit, which owns the footprint geometry.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import MERGEABLE_DISTANCE_SLACK
from ..errors import UnsupportedSegmentError
from ..utils import mean
from .base import TimelineSegment
from .path import Path
from .visit import Visit

_LOG = logging.getLogger(__name__)


def _check_segments(a: object, b: object) -> None:
    for item in (a, b):
        if not isinstance(item, TimelineSegment):
            raise UnsupportedSegmentError(
                f"Expected a timeline segment, got {type(item).__name__}"
            )


def _path_distance(a: Path, b: Path) -> Optional[float]:
    my_edge = a.edge_sample_with(b, located_only=True)
    their_edge = b.edge_sample_with(a, located_only=True)
    if my_edge is None or their_edge is None:
        return None
    return my_edge.distance_from(their_edge)


def distance_between(a: TimelineSegment, b: TimelineSegment) -> Optional[float]:
    """Return the gap in metres between the near edges of ``a`` and ``b``.

    ``None`` means the gap cannot be determined, which is not the same as
    touching segments.
    """

    _check_segments(a, b)
    if isinstance(a, Path) and isinstance(b, Path):
        return _path_distance(a, b)
    if isinstance(a, Path) and isinstance(b, Visit):
        return b.distance_from(a)
    if isinstance(a, Visit) and isinstance(b, Path):
        return a.distance_from(b)
    # Visit-visit gaps belong to the visit merger.
    return None


def _path_mergeable_distance(
    a: Path, b: Path, slack: float = MERGEABLE_DISTANCE_SLACK
) -> float:
    separation = a.time_interval_from(b)
    if separation is None:
        return 0.0
    # Zero and negative speeds carry no evidence and stay out of the mean.
    speeds = [s for s in (a.metres_per_second, b.metres_per_second) if s > 0]
    return mean(speeds) * separation * slack


def maximum_mergeable_distance(a: TimelineSegment, b: TimelineSegment) -> float:
    """Largest edge gap (metres) at which ``a`` and ``b`` may still be one trip.

    ``0.0`` means never mergeable.
    """

    _check_segments(a, b)
    if isinstance(a, Path) and isinstance(b, Path):
        return _path_mergeable_distance(a, b)
    if isinstance(a, Path) and isinstance(b, Visit):
        return b.maximum_mergeable_distance_from(a)
    if isinstance(a, Visit) and isinstance(b, Path):
        return a.maximum_mergeable_distance_from(b)
    return 0.0


def within_mergeable_distance(a: TimelineSegment, b: TimelineSegment) -> bool:
    distance = distance_between(a, b)
    if distance is None:
        return False
    bound = maximum_mergeable_distance(a, b)
    _LOG.debug("Edge gap %.1fm against mergeable bound %.1fm", distance, bound)
    return distance <= bound


__all__ = [
    "distance_between",
    "maximum_mergeable_distance",
    "within_mergeable_distance",
]
