"""Central error types used across the application."""

from __future__ import annotations


class TimelineError(RuntimeError):
    """Base error for timeline classification failures."""


class UnsupportedSegmentError(TimelineError, TypeError):
    """Raised when a segment operation receives something that is not a segment."""


class TrackFormatError(TimelineError):
    """Raised when a track file is missing required columns or has bad values."""


__all__ = [
    "TimelineError",
    "UnsupportedSegmentError",
    "TrackFormatError",
]
