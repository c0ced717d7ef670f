"""Stationary segments: footprint estimation and merge bounds against paths."""

from __future__ import annotations

from typing import Iterable, Optional, TYPE_CHECKING

import numpy as np

from ..config import MERGEABLE_DISTANCE_SLACK, VISIT_MAXIMUM_RADIUS, VISIT_MINIMUM_RADIUS
from ..geodesy import Coordinate, geodesic_distance
from ..models import Location, LocomotionSample
from .base import TimelineSegment

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .path import Path


class Visit(TimelineSegment):
    """A run of samples recorded while staying in one place.

    The footprint is a circle around the mean position whose radius is the
    mean distance from the center plus a number of standard deviations,
    clamped to ``[minimum_radius, maximum_radius]``.
    """

    def __init__(
        self,
        samples: Iterable[LocomotionSample] = (),
        *,
        minimum_radius: float = VISIT_MINIMUM_RADIUS,
        maximum_radius: float = VISIT_MAXIMUM_RADIUS,
        mergeable_slack: float = MERGEABLE_DISTANCE_SLACK,
    ) -> None:
        self.minimum_radius = minimum_radius
        self.maximum_radius = maximum_radius
        self.mergeable_slack = mergeable_slack
        self._center: Optional[Coordinate] = None
        self._radius_stats: Optional[tuple[float, float]] = None
        super().__init__(samples)

    def samples_changed(self) -> None:
        super().samples_changed()
        self._center = None
        self._radius_stats = None

    @property
    def center(self) -> Optional[Coordinate]:
        with self.lock:
            if self._center is None:
                located = self.located_samples()
                if not located:
                    return None
                lats = np.array([s.location.coordinate.latitude for s in located])
                lons = np.array([s.location.coordinate.longitude for s in located])
                self._center = Coordinate(float(lats.mean()), float(lons.mean()))
            return self._center

    def _radius_mean_sd(self) -> tuple[float, float]:
        with self.lock:
            if self._radius_stats is None:
                center = self.center
                if center is None:
                    self._radius_stats = (0.0, 0.0)
                else:
                    dists = np.array(
                        [
                            geodesic_distance(center, s.location.coordinate)
                            for s in self.located_samples()
                        ],
                        dtype=float,
                    )
                    self._radius_stats = (float(dists.mean()), float(dists.std()))
            return self._radius_stats

    def radius(self, sd: float) -> float:
        mean, std = self._radius_mean_sd()
        value = mean + std * sd
        return float(min(max(value, self.minimum_radius), self.maximum_radius))

    @property
    def radius1sd(self) -> float:
        return self.radius(1)

    @property
    def radius2sd(self) -> float:
        return self.radius(2)

    def contains(self, location: Location, sd: float = 2) -> bool:
        center = self.center
        if center is None or not location.coordinate.is_valid:
            return False
        return geodesic_distance(center, location.coordinate) <= self.radius(sd)

    # ------------------------------------------------------------------
    # Capabilities consumed by paths
    # ------------------------------------------------------------------
    def distance_from(self, path: "Path") -> Optional[float]:
        """Distance from the footprint edge to the path's nearest edge sample."""

        center = self.center
        if center is None:
            return None
        edge = path.edge_sample_with(self, located_only=True)
        if edge is None:
            return None
        return geodesic_distance(center, edge.location.coordinate) - self.radius1sd

    def maximum_mergeable_distance_from(self, path: "Path") -> float:
        separation = self.time_interval_from(path)
        if separation is None:
            return 0.0
        return self.radius2sd + max(path.metres_per_second, 0.0) * separation * self.mergeable_slack

    def contained_percent_of(self, path: "Path") -> float:
        """Fraction of the path's samples that fall inside the 2 sd footprint."""

        samples = path.samples
        if not samples:
            return 0.0
        inside = sum(
            1 for s in samples if s.has_location and self.contains(s.location, sd=2)
        )
        return inside / len(samples)

    def __repr__(self) -> str:
        return f"Visit(samples={len(self)}, center={self.center}, radius2sd={self.radius2sd:.1f}m)"


__all__ = ["Visit"]
