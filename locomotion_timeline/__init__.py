"""Locomotion timeline package: path/visit classification and edge cleansing."""

from .errors import TimelineError, TrackFormatError, UnsupportedSegmentError
from .geodesy import Coordinate
from .models import Location, LocomotionSample, PathThresholds
from .timeline import EdgeCleanser, Path, Visit

__all__ = [
    "Coordinate",
    "EdgeCleanser",
    "Location",
    "LocomotionSample",
    "Path",
    "PathThresholds",
    "TimelineError",
    "TrackFormatError",
    "UnsupportedSegmentError",
    "Visit",
]
