"""Geodesic helpers for WGS84 coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from pyproj import Geod

# Shared geodesic object for all distance calculations.
GEOD = Geod(ellps="WGS84")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    @property
    def is_usable(self) -> bool:
        """Valid and not the (0, 0) fix some devices report when they have none."""

        if not self.is_valid:
            return False
        return not (self.latitude == 0.0 and self.longitude == 0.0)


def geodesic_distance(a: Coordinate, b: Coordinate) -> float:
    """Return the WGS84 geodesic distance in metres between two coordinates."""

    _, _, dist = GEOD.inv(a.longitude, a.latitude, b.longitude, b.latitude)
    return float(dist)


def path_length(coordinates: Sequence[Coordinate]) -> float:
    """Return the summed geodesic length of consecutive coordinates.

    Zero for fewer than two coordinates.
    """

    if len(coordinates) < 2:
        return 0.0
    lons = np.array([c.longitude for c in coordinates], dtype=float)
    lats = np.array([c.latitude for c in coordinates], dtype=float)
    _, _, dists = GEOD.inv(lons[:-1], lats[:-1], lons[1:], lats[1:])
    return float(np.sum(dists))


__all__ = [
    "GEOD",
    "Coordinate",
    "geodesic_distance",
    "path_length",
]
