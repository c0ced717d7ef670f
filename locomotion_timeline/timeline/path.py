"""Moving segments: distance, duration and speed aggregation plus classification."""

from __future__ import annotations

from typing import Iterable, Optional

from ..geodesy import path_length
from ..models import LocomotionSample, PathThresholds
from ..utils import kilometres_per_hour, miles_per_hour
from .base import TimelineSegment


class Path(TimelineSegment):
    """A run of samples recorded while moving.

    ``distance`` is memoised; ``samples_changed`` clears it, so the cached
    value is either absent or equal to the sum over the current membership.
    """

    def __init__(
        self,
        samples: Iterable[LocomotionSample] = (),
        *,
        thresholds: Optional[PathThresholds] = None,
    ) -> None:
        self._distance: Optional[float] = None
        self.thresholds = thresholds or PathThresholds()
        super().__init__(samples)

    def samples_changed(self) -> None:
        super().samples_changed()
        self._distance = None

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    @property
    def distance(self) -> float:
        """Sum of the distances between consecutive located samples, in metres."""

        with self.lock:
            if self._distance is None:
                coordinates = [s.location.coordinate for s in self.located_samples()]
                self._distance = path_length(coordinates)
            return self._distance

    @property
    def metres_per_second(self) -> float:
        """Average speed over the path.

        A single sample reports its own sensor speed when it has one, since no
        distance can be computed yet.
        """

        with self.lock:
            samples = self.samples
            if len(samples) == 1:
                location = samples[0].location
                if location is not None and location.speed >= 0:
                    return location.speed
            duration = self.duration
            if duration > 0:
                return self.distance / duration
            return 0.0

    speed = metres_per_second
    mps = metres_per_second

    @property
    def kilometres_per_hour(self) -> float:
        return kilometres_per_hour(self.metres_per_second)

    kmh = kilometres_per_hour

    @property
    def miles_per_hour(self) -> float:
        return miles_per_hour(self.metres_per_second)

    mph = miles_per_hour

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def is_valid(self, thresholds: Optional[PathThresholds] = None) -> bool:
        t = thresholds or self.thresholds
        with self.lock:
            if len(self) < t.minimum_valid_samples:
                return False
            if self.duration < t.minimum_valid_duration:
                return False
            if self.distance < t.minimum_valid_distance:
                return False
            return True

    def is_worth_keeping(self, thresholds: Optional[PathThresholds] = None) -> bool:
        t = thresholds or self.thresholds
        with self.lock:
            if not self.is_valid(t):
                return False
            if self.duration < t.minimum_keeper_duration:
                return False
            if self.distance < t.minimum_keeper_distance:
                return False
            return True

    # ------------------------------------------------------------------
    # Relations to other segments
    # ------------------------------------------------------------------
    def distance_from(self, other: TimelineSegment) -> Optional[float]:
        from .adjacency import distance_between

        return distance_between(self, other)

    def maximum_mergeable_distance_from(self, other: TimelineSegment) -> float:
        from .adjacency import maximum_mergeable_distance

        return maximum_mergeable_distance(self, other)

    def within_mergeable_distance(self, other: TimelineSegment) -> bool:
        from .adjacency import within_mergeable_distance

        return within_mergeable_distance(self, other)

    def samples_inside(self, visit):
        from .containment import samples_inside

        return samples_inside(self, visit)

    def samples_outside(self, visit):
        from .containment import samples_outside

        return samples_outside(self, visit)

    def percent_inside(self, visit) -> float:
        from .containment import percent_inside

        return percent_inside(self, visit)

    def cleanse_edge(self, other: "Path", *, max_mode_shift_speed: Optional[float] = None):
        from .cleansing import cleanse_edge

        if max_mode_shift_speed is None:
            max_mode_shift_speed = self.thresholds.maximum_mode_shift_speed
        return cleanse_edge(self, other, max_mode_shift_speed=max_mode_shift_speed)

    def __str__(self) -> str:
        if self.is_worth_keeping():
            return "keeper path"
        return "valid path" if self.is_valid() else "invalid path"

    def __repr__(self) -> str:
        return (
            f"Path(samples={len(self)}, distance={self.distance:.1f}m, "
            f"duration={self.duration:.1f}s)"
        )


__all__ = ["Path"]
