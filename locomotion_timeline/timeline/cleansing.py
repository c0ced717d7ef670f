"""Boundary correction between adjacent paths of different activity types.

When a split between two paths lands one sample off (a GPS artefact flips
the activity type a sample early or late), the misplaced boundary sample is
moved to the path whose type it carries. At most one sample moves per call.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
from typing import Optional

from ..models import LocomotionSample, PathThresholds
from .adjacency import within_mergeable_distance
from .base import locked
from .path import Path

_LOG = logging.getLogger(__name__)


class CleanseOutcome(enum.Enum):
    NO_ACTION = "no_action"
    STRADDLED = "straddled"
    MIGRATED = "migrated"


@dataclass(frozen=True, slots=True)
class CleanseResult:
    """What an edge cleansing pass decided.

    ``sample`` is set only for ``MIGRATED``; ``info`` carries the diagnostic
    text for ``STRADDLED`` and ``MIGRATED``.
    """

    outcome: CleanseOutcome
    sample: Optional[LocomotionSample] = None
    info: Optional[str] = None

    def __bool__(self) -> bool:
        return self.outcome is CleanseOutcome.MIGRATED


NO_ACTION = CleanseResult(CleanseOutcome.NO_ACTION)


def cleanse_edge(
    path: Path, other: Path, *, max_mode_shift_speed: float
) -> CleanseResult:
    """Move ``other``'s edge sample into ``path`` when it was misassigned.

    The sample is added to ``path`` only; removing it from ``other`` is up to
    the caller (see ``EdgeCleanser.cleanse_and_transfer``).
    """

    with locked(path, other):
        if len(other) == 0:
            return NO_ACTION

        if not within_mergeable_distance(path, other):
            return NO_ACTION

        my_type = path.dominant_activity_type
        their_type = other.dominant_activity_type
        if my_type is None or their_type is None:
            return NO_ACTION

        # Same-type neighbours get merged whole, not edge cleansed.
        if my_type == their_type:
            return NO_ACTION

        my_edge = path.edge_sample_with(other)
        their_edge = other.edge_sample_with(path)
        if my_edge is None or their_edge is None:
            return NO_ACTION
        if not (my_edge.has_usable_coordinate and their_edge.has_usable_coordinate):
            return NO_ACTION

        my_speed_is_slow = my_edge.location.speed < max_mode_shift_speed
        their_speed_is_slow = their_edge.location.speed < max_mode_shift_speed

        if my_speed_is_slow != their_speed_is_slow:
            info = "edges are opposite sides of the mode shift boundary"
            _LOG.debug(info)
            return CleanseResult(CleanseOutcome.STRADDLED, info=info)

        if their_edge.activity_type == my_type:
            path.add(their_edge)
            info = f"moved path edge ({their_type}) to adjacent path"
            _LOG.debug(info)
            return CleanseResult(CleanseOutcome.MIGRATED, sample=their_edge, info=info)

        return NO_ACTION


class EdgeCleanser:
    """Edge cleansing bound to a set of thresholds."""

    def __init__(self, thresholds: Optional[PathThresholds] = None) -> None:
        self.thresholds = thresholds or PathThresholds()

    def cleanse(self, path: Path, other: Path) -> CleanseResult:
        return cleanse_edge(
            path, other, max_mode_shift_speed=self.thresholds.maximum_mode_shift_speed
        )

    def cleanse_and_transfer(self, path: Path, other: Path) -> CleanseResult:
        """Cleanse and also remove a migrated sample from ``other``, atomically."""

        with locked(path, other):
            result = self.cleanse(path, other)
            if result.sample is not None:
                other.remove(result.sample)
            return result


__all__ = ["CleanseOutcome", "CleanseResult", "EdgeCleanser", "NO_ACTION", "cleanse_edge"]
