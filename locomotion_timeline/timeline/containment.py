"""Which samples of a path fall inside a visit's footprint."""

from __future__ import annotations

from typing import Set

from ..geodesy import geodesic_distance
from ..models import LocomotionSample
from .base import locked
from .path import Path
from .visit import Visit


def samples_inside(path: Path, visit: Visit) -> Set[LocomotionSample]:
    """Located samples within ``visit.radius2sd`` of the visit center.

    Unlocated samples are neither inside nor outside.
    """

    with locked(path, visit):
        center = visit.center
        if center is None:
            return set()
        radius = visit.radius2sd
        return {
            s
            for s in path.located_samples()
            if geodesic_distance(center, s.location.coordinate) <= radius
        }


def samples_outside(path: Path, visit: Visit) -> Set[LocomotionSample]:
    """Located samples of ``path`` that are not inside ``visit``."""

    with locked(path, visit):
        return set(path.located_samples()) - samples_inside(path, visit)


def percent_inside(path: Path, visit: Visit) -> float:
    return visit.contained_percent_of(path)


__all__ = ["percent_inside", "samples_inside", "samples_outside"]
