"""Command line entry point: summarise a recorded track as a path.

Usage examples:

    # Distance, duration, speed and classification for a whole track
    python -m locomotion_timeline track.csv

    # Split the track in two at a given time and run an edge cleansing pass
    python -m locomotion_timeline track.csv --split-at 2024-05-01T08:15:00Z

    # Machine readable output
    python -m locomotion_timeline track.csv --json
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .errors import TrackFormatError
from .models import LocomotionSample, PathThresholds
from .timeline import EdgeCleanser, Path
from .track_io import read_samples
from .utils import format_duration

_LOG = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _path_summary(path: Path) -> Dict[str, Any]:
    return {
        "classification": str(path),
        "samples": len(path),
        "activity_type": path.dominant_activity_type,
        "start": path.start.isoformat() if path.start else None,
        "end": path.end.isoformat() if path.end else None,
        "distance_m": round(path.distance, 1),
        "duration_s": round(path.duration, 1),
        "duration": format_duration(path.duration),
        "speed_mps": round(path.metres_per_second, 2),
        "speed_kmh": round(path.kilometres_per_hour, 2),
        "speed_mph": round(path.miles_per_hour, 2),
        "is_valid": path.is_valid(),
        "is_worth_keeping": path.is_worth_keeping(),
    }


def _split(
    samples: Sequence[LocomotionSample], split_at: str, thresholds: PathThresholds
) -> tuple[Path, Path]:
    boundary = pd.Timestamp(split_at)
    if boundary.tzinfo is None:
        boundary = boundary.tz_localize("UTC")
    cut = boundary.to_pydatetime()
    before = Path([s for s in samples if s.date < cut], thresholds=thresholds)
    after = Path([s for s in samples if s.date >= cut], thresholds=thresholds)
    return before, after


def build_report(
    samples: Sequence[LocomotionSample],
    thresholds: PathThresholds,
    split_at: Optional[str] = None,
) -> Dict[str, Any]:
    """Return a JSON-friendly summary of the track and an optional split."""

    report: Dict[str, Any] = {"track": _path_summary(Path(samples, thresholds=thresholds))}
    if split_at is None:
        return report

    before, after = _split(samples, split_at, thresholds)
    cleanser = EdgeCleanser(thresholds)
    passes: List[Dict[str, Any]] = []
    for target, source in ((before, after), (after, before)):
        result = cleanser.cleanse_and_transfer(target, source)
        passes.append(
            {
                "outcome": result.outcome.value,
                "info": result.info,
                "moved_sample": result.sample.date.isoformat() if result.sample else None,
            }
        )
        if result:
            break
    report["split"] = {
        "before": _path_summary(before),
        "after": _path_summary(after),
        "gap_m": before.distance_from(after),
        "mergeable_bound_m": round(before.maximum_mergeable_distance_from(after), 1),
        "cleansing": passes,
    }
    return report


def _print_summary(title: str, summary: Dict[str, Any]) -> None:
    print(f"{title}: {summary['classification']}")
    print(f"  samples:   {summary['samples']} ({summary['activity_type'] or 'unknown type'})")
    print(f"  distance:  {summary['distance_m']} m")
    print(f"  duration:  {summary['duration']}")
    print(
        f"  speed:     {summary['speed_mps']} m/s, {summary['speed_kmh']} km/h, "
        f"{summary['speed_mph']} mph"
    )


def _print_report(report: Dict[str, Any]) -> None:
    _print_summary("Track", report["track"])
    split = report.get("split")
    if not split:
        return
    _print_summary("Before split", split["before"])
    _print_summary("After split", split["after"])
    gap = split["gap_m"]
    print(f"Edge gap: {'unknown' if gap is None else f'{gap:.1f} m'}")
    print(f"Mergeable bound: {split['mergeable_bound_m']} m")
    for entry in split["cleansing"]:
        print(f"Cleansing: {entry['outcome']}" + (f" ({entry['info']})" if entry["info"] else ""))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locomotion_timeline",
        description="Summarise a recorded track and check its path boundaries.",
    )
    parser.add_argument("track", help="CSV file with timestamp, latitude, longitude columns")
    parser.add_argument("--split-at", help="Split the track into two paths at this time")
    parser.add_argument(
        "--mode-shift-speed",
        type=float,
        help="Speed (m/s) separating slow from fast edge samples",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    thresholds = PathThresholds.from_config()
    if args.mode_shift_speed is not None:
        thresholds = replace(thresholds, maximum_mode_shift_speed=args.mode_shift_speed)

    try:
        samples = read_samples(args.track)
        report = build_report(samples, thresholds, split_at=args.split_at)
    except (TrackFormatError, FileNotFoundError, ValueError) as exc:
        _LOG.error("Failed to read track '%s': %s", args.track, exc)
        return 2

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        _print_report(report)
    return 0
