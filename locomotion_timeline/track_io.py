"""Track file reading layer (pure reads + validation).

Turns a CSV of location samples into ``LocomotionSample`` objects ordered by
time. A timestamp column whose values are all numbers is read as epoch
seconds; otherwise every value is parsed as a date string, so a bare "2024"
in a mixed column means the start of that year. Rows without a
latitude/longitude become unlocated samples rather than being dropped, so the
sample count reflects what was recorded.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .errors import TrackFormatError
from .geodesy import Coordinate
from .models import Location, LocomotionSample

_TIMESTAMP_COL = "timestamp"
_LATITUDE_COL = "latitude"
_LONGITUDE_COL = "longitude"
_SPEED_COL = "speed"
_ACCURACY_COL = "horizontal_accuracy"
_ACTIVITY_COL = "activity_type"
_REQUIRED_COLS = {_TIMESTAMP_COL, _LATITUDE_COL, _LONGITUDE_COL}

_LOG = logging.getLogger(__name__)


def _is_blank(value: object) -> bool:
    return pd.isna(value) or str(value).strip() == ""


def _parse_timestamp(value: object, row_label: str, *, epoch: bool) -> datetime:
    if _is_blank(value):
        raise TrackFormatError(f"Missing timestamp in {row_label}")
    text = str(value).strip()
    if epoch:
        return datetime.fromtimestamp(float(text), tz=timezone.utc)
    try:
        parsed = pd.Timestamp(text)
    except ValueError as exc:
        raise TrackFormatError(f"Unparsable timestamp {text!r} in {row_label}") from exc
    if parsed is pd.NaT:
        raise TrackFormatError(f"Unparsable timestamp {text!r} in {row_label}")
    if parsed.tzinfo is None:
        parsed = parsed.tz_localize("UTC")
    return parsed.to_pydatetime()


def _is_epoch_column(values: pd.Series) -> bool:
    """True when every non-blank timestamp is a number (epoch seconds)."""

    present = values[~values.map(_is_blank)]
    if present.empty:
        return False
    return bool(pd.to_numeric(present, errors="coerce").notna().all())


def _optional_float(value: object, default: float, row_label: str, column: str) -> float:
    if _is_blank(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise TrackFormatError(f"Invalid {column} {value!r} in {row_label}") from exc


def _clean_activity(value: object) -> Optional[str]:
    if _is_blank(value):
        return None
    return str(value).strip()


def samples_from_frame(frame: pd.DataFrame) -> List[LocomotionSample]:
    """Build samples from a DataFrame with the track CSV columns."""

    columns = {str(c).strip().lower(): c for c in frame.columns}
    missing = _REQUIRED_COLS - set(columns)
    if missing:
        raise TrackFormatError(
            f"Track is missing required columns: {', '.join(sorted(missing))}"
        )

    def _get(row: pd.Series, key: str) -> object:
        column = columns.get(key)
        return None if column is None else row[column]

    epoch = _is_epoch_column(frame[columns[_TIMESTAMP_COL]])
    samples: List[LocomotionSample] = []
    for idx, row in frame.iterrows():
        row_label = f"row {int(idx) + 2}"
        date = _parse_timestamp(_get(row, _TIMESTAMP_COL), row_label, epoch=epoch)
        lat = _get(row, _LATITUDE_COL)
        lon = _get(row, _LONGITUDE_COL)
        location: Optional[Location] = None
        if not (_is_blank(lat) or _is_blank(lon)):
            location = Location(
                coordinate=Coordinate(
                    latitude=_optional_float(lat, 0.0, row_label, _LATITUDE_COL),
                    longitude=_optional_float(lon, 0.0, row_label, _LONGITUDE_COL),
                ),
                timestamp=date,
                speed=_optional_float(_get(row, _SPEED_COL), -1.0, row_label, _SPEED_COL),
                horizontal_accuracy=_optional_float(
                    _get(row, _ACCURACY_COL), -1.0, row_label, _ACCURACY_COL
                ),
            )
        samples.append(
            LocomotionSample(
                date=date,
                location=location,
                activity_type=_clean_activity(_get(row, _ACTIVITY_COL)),
            )
        )
    samples.sort(key=lambda s: s.date)
    return samples


def read_samples(csv_path: str | Path) -> List[LocomotionSample]:
    """Read a track CSV into time-ordered samples."""

    path = Path(csv_path)
    frame = pd.read_csv(path, dtype=str, keep_default_na=True)
    samples = samples_from_frame(frame)
    located = sum(1 for s in samples if s.has_location)
    _LOG.info("Loaded %d samples (%d located) from %s", len(samples), located, path)
    return samples


__all__ = ["read_samples", "samples_from_frame"]
