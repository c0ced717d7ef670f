"""Shared behaviour for moving and stationary timeline segments."""

from __future__ import annotations

from bisect import bisect_right
from contextlib import contextmanager
from datetime import datetime
from threading import RLock
from typing import Iterable, Iterator, List, Optional, Tuple

from ..activity_types import dominant_activity_type
from ..models import LocomotionSample


class TimelineSegment:
    """A contiguous, time-ordered run of samples.

    Membership changes always go through ``add``/``remove`` so that
    ``samples_changed`` runs under the segment lock before any reader can see
    the new membership. Subclasses override ``samples_changed`` to drop their
    cached derived values.
    """

    def __init__(self, samples: Iterable[LocomotionSample] = ()) -> None:
        self._lock = RLock()
        self._samples: List[LocomotionSample] = []
        self._dates: List[datetime] = []
        initial = list(samples)
        if initial:
            self.add_samples(initial)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    @property
    def lock(self) -> RLock:
        return self._lock

    @property
    def samples(self) -> Tuple[LocomotionSample, ...]:
        with self._lock:
            return tuple(self._samples)

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)

    def __contains__(self, sample: object) -> bool:
        with self._lock:
            return any(s is sample for s in self._samples)

    def add(self, sample: LocomotionSample) -> None:
        self.add_samples([sample])

    def add_samples(self, samples: Iterable[LocomotionSample]) -> None:
        """Insert samples keeping timestamps non-decreasing.

        Equal timestamps keep insertion order. Samples already present are
        ignored.
        """

        with self._lock:
            changed = False
            for sample in samples:
                if any(s is sample for s in self._samples):
                    continue
                index = bisect_right(self._dates, sample.date)
                self._samples.insert(index, sample)
                self._dates.insert(index, sample.date)
                changed = True
            if changed:
                self.samples_changed()

    def remove(self, sample: LocomotionSample) -> None:
        self.remove_samples([sample])

    def remove_samples(self, samples: Iterable[LocomotionSample]) -> None:
        with self._lock:
            doomed = {id(s) for s in samples}
            kept = [s for s in self._samples if id(s) not in doomed]
            if len(kept) == len(self._samples):
                return
            self._samples = kept
            self._dates = [s.date for s in kept]
            self.samples_changed()

    def samples_changed(self) -> None:
        """Hook run after every membership change, with the lock held."""

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------
    @property
    def start(self) -> Optional[datetime]:
        with self._lock:
            return self._dates[0] if self._dates else None

    @property
    def end(self) -> Optional[datetime]:
        with self._lock:
            return self._dates[-1] if self._dates else None

    @property
    def date_range(self) -> Optional[Tuple[datetime, datetime]]:
        with self._lock:
            if not self._dates:
                return None
            return self._dates[0], self._dates[-1]

    @property
    def duration(self) -> float:
        """Seconds between the first and last sample; zero below two samples."""

        with self._lock:
            if len(self._dates) < 2:
                return 0.0
            return (self._dates[-1] - self._dates[0]).total_seconds()

    def time_interval_from(self, other: "TimelineSegment") -> Optional[float]:
        """Seconds separating this segment from ``other``.

        ``None`` when either range is unknown, ``0.0`` when the ranges overlap.
        """

        mine = self.date_range
        theirs = other.date_range
        if mine is None or theirs is None:
            return None
        if mine[1] <= theirs[0]:
            return (theirs[0] - mine[1]).total_seconds()
        if theirs[1] <= mine[0]:
            return (mine[0] - theirs[1]).total_seconds()
        return 0.0

    # ------------------------------------------------------------------
    # Edges and activity
    # ------------------------------------------------------------------
    def located_samples(self) -> List[LocomotionSample]:
        with self._lock:
            return [s for s in self._samples if s.has_location]

    def starts_before(self, other: "TimelineSegment") -> Optional[bool]:
        """Whether this segment comes first in time relative to ``other``.

        Compares start then end; identical ranges fall back to ``id`` so that
        ``a.starts_before(b)`` and ``b.starts_before(a)`` always disagree.
        ``None`` when either range is unknown.
        """

        mine = self.date_range
        theirs = other.date_range
        if mine is None or theirs is None:
            return None
        if mine != theirs:
            return mine < theirs
        return id(self) < id(other)

    def edge_sample_with(
        self, other: "TimelineSegment", *, located_only: bool = False
    ) -> Optional[LocomotionSample]:
        """Return this segment's sample nearest the boundary with ``other``.

        A segment that comes first contributes its last sample; the later one
        contributes its first. With ``located_only`` unlocated samples are
        skipped.
        """

        first = self.starts_before(other)
        if first is None:
            return None
        pool = self.located_samples() if located_only else list(self.samples)
        if not pool:
            return None
        return pool[-1] if first else pool[0]

    @property
    def dominant_activity_type(self) -> Optional[str]:
        with self._lock:
            return dominant_activity_type(s.activity_type for s in self._samples)

    @property
    def kind(self) -> str:
        return self.__class__.__name__.lower()


@contextmanager
def locked(*segments: TimelineSegment) -> Iterator[None]:
    """Hold the locks of several segments, acquired in a stable order."""

    ordered = sorted({id(s): s for s in segments}.values(), key=id)
    acquired: List[TimelineSegment] = []
    try:
        for segment in ordered:
            segment.lock.acquire()
            acquired.append(segment)
        yield
    finally:
        for segment in reversed(acquired):
            segment.lock.release()


__all__ = ["TimelineSegment", "locked"]
