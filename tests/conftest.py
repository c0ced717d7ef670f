"""Global pytest fixtures & helpers.

Adds project root to path and provides sample/path factories laid out along
a straight line heading east from a fixed origin, so distances between
samples are known exactly.
"""
from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from locomotion_timeline.geodesy import GEOD, Coordinate
from locomotion_timeline.models import Location, LocomotionSample, PathThresholds
from locomotion_timeline.timeline import Path, Visit

ORIGIN = Coordinate(latitude=51.5007, longitude=-0.1246)
T0 = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


# --- Factory helpers -------------------------------------------------
def destination(origin: Coordinate, bearing_deg: float, distance_m: float) -> Coordinate:
    """Coordinate ``distance_m`` metres from ``origin`` along ``bearing_deg``."""

    lon, lat, _ = GEOD.fwd(origin.longitude, origin.latitude, bearing_deg, distance_m)
    return Coordinate(latitude=float(lat), longitude=float(lon))


def at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


def point(metres_east: float, metres_north: float = 0.0) -> Coordinate:
    coord = destination(ORIGIN, 90.0, metres_east) if metres_east else ORIGIN
    if metres_north:
        coord = destination(coord, 0.0, metres_north)
    return coord


def make_sample(
    seconds: float,
    metres_east: Optional[float] = 0.0,
    *,
    speed: float = -1.0,
    activity_type: Optional[str] = None,
    metres_north: float = 0.0,
) -> LocomotionSample:
    """Sample at ``T0 + seconds``; ``metres_east=None`` makes it unlocated."""

    date = at(seconds)
    location = None
    if metres_east is not None:
        location = Location(
            coordinate=point(metres_east, metres_north), timestamp=date, speed=speed
        )
    return LocomotionSample(date=date, location=location, activity_type=activity_type)


def make_path(
    rows: Iterable[Tuple[float, Optional[float], float, Optional[str]]],
    thresholds: Optional[PathThresholds] = None,
) -> Path:
    """Build a path from ``(seconds, metres_east, speed, activity_type)`` rows."""

    samples = [
        make_sample(sec, east, speed=speed, activity_type=kind)
        for sec, east, speed, kind in rows
    ]
    return Path(samples, thresholds=thresholds)


def make_visit(offsets: Sequence[Tuple[float, float]], start_s: float = 0.0) -> Visit:
    """Build a visit from ``(metres_east, metres_north)`` offsets, 60 s apart."""

    samples = [
        make_sample(start_s + i * 60.0, east, metres_north=north, activity_type="stationary")
        for i, (east, north) in enumerate(offsets)
    ]
    return Visit(samples)


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def thresholds() -> PathThresholds:
    return PathThresholds(
        minimum_valid_duration=10,
        minimum_valid_distance=10,
        minimum_valid_samples=2,
        minimum_keeper_duration=60,
        minimum_keeper_distance=20,
        maximum_mode_shift_speed=2.0,
    )


@pytest.fixture
def walking_path(thresholds) -> Path:
    """Five walking samples, 15 m / 10 s apart, ending 60 m east at t=40."""

    return make_path(
        [(float(t), t * 1.5, 1.5, "walking") for t in range(0, 50, 10)],
        thresholds,
    )


@pytest.fixture
def driving_rows():
    """Automotive samples from t=50 at 75 m east; the first one is misclassified."""

    return [
        (50.0, 75.0, 1.5, "walking"),
        (60.0, 175.0, 10.0, "automotive"),
        (70.0, 275.0, 10.0, "automotive"),
        (80.0, 375.0, 10.0, "automotive"),
    ]
