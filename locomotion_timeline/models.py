"""Dataclasses describing location samples and classification thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .activity_types import normalize_activity_type
from .config import (
    MAXIMUM_MODE_SHIFT_SPEED,
    PATH_MINIMUM_KEEPER_DISTANCE,
    PATH_MINIMUM_KEEPER_DURATION,
    PATH_MINIMUM_VALID_DISTANCE,
    PATH_MINIMUM_VALID_DURATION,
    PATH_MINIMUM_VALID_SAMPLES,
)
from .geodesy import Coordinate, geodesic_distance


@dataclass(frozen=True, slots=True)
class Location:
    """A single positioning fix.

    Attributes:
        coordinate: Latitude/longitude of the fix.
        timestamp: When the fix was taken.
        speed: Instantaneous speed in metres/second. Negative means unknown.
        horizontal_accuracy: Accuracy radius in metres. Negative means unknown.
    """

    coordinate: Coordinate
    timestamp: datetime
    speed: float = -1.0
    horizontal_accuracy: float = -1.0

    def distance_from(self, other: "Location | Coordinate") -> float:
        target = other.coordinate if isinstance(other, Location) else other
        return geodesic_distance(self.coordinate, target)


@dataclass(eq=False, slots=True)
class LocomotionSample:
    """A timestamped observation, optionally carrying a location fix.

    Samples compare and hash by identity: two samples recorded with the same
    values are still distinct members of a segment.
    """

    date: datetime
    location: Optional[Location] = None
    activity_type: Optional[str] = None

    def __post_init__(self) -> None:
        self.activity_type = normalize_activity_type(self.activity_type)

    @property
    def has_location(self) -> bool:
        """True when the sample carries a fix with an in-range coordinate."""

        return self.location is not None and self.location.coordinate.is_valid

    @property
    def has_usable_coordinate(self) -> bool:
        return self.location is not None and self.location.coordinate.is_usable

    def distance_from(self, other: "LocomotionSample") -> Optional[float]:
        """Geodesic distance to ``other`` in metres, or ``None`` if either is unlocated."""

        if not (self.has_location and other.has_location):
            return None
        return self.location.distance_from(other.location)


@dataclass(frozen=True, slots=True)
class PathThresholds:
    """Validity, keeper and mode-shift thresholds for path classification."""

    minimum_valid_duration: float = PATH_MINIMUM_VALID_DURATION
    minimum_valid_distance: float = PATH_MINIMUM_VALID_DISTANCE
    minimum_valid_samples: int = PATH_MINIMUM_VALID_SAMPLES
    minimum_keeper_duration: float = PATH_MINIMUM_KEEPER_DURATION
    minimum_keeper_distance: float = PATH_MINIMUM_KEEPER_DISTANCE
    maximum_mode_shift_speed: float = MAXIMUM_MODE_SHIFT_SPEED

    def __post_init__(self) -> None:
        for name in (
            "minimum_valid_duration",
            "minimum_valid_distance",
            "minimum_keeper_duration",
            "minimum_keeper_distance",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.minimum_valid_samples < 0:
            raise ValueError("minimum_valid_samples must be >= 0")

    @classmethod
    def from_config(cls) -> "PathThresholds":
        """Snapshot the current values of the config module."""

        from . import config

        return cls(
            minimum_valid_duration=config.PATH_MINIMUM_VALID_DURATION,
            minimum_valid_distance=config.PATH_MINIMUM_VALID_DISTANCE,
            minimum_valid_samples=config.PATH_MINIMUM_VALID_SAMPLES,
            minimum_keeper_duration=config.PATH_MINIMUM_KEEPER_DURATION,
            minimum_keeper_distance=config.PATH_MINIMUM_KEEPER_DISTANCE,
            maximum_mode_shift_speed=config.MAXIMUM_MODE_SHIFT_SPEED,
        )


__all__ = ["Location", "LocomotionSample", "PathThresholds"]
