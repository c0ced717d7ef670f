"""Central configuration for the locomotion timeline classifier.

All values are constants imported by the rest of the package. Each one can be
overridden through an environment variable of the same name (optionally via
a local `.env`). Callers that need several values together should snapshot
them with ``PathThresholds.from_config()`` rather than reading the module at
call time.
"""

from __future__ import annotations

import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except ImportError:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Valid path settings
# ---------------------------------------------------------------------------
# A path shorter than any of these is noise rather than movement.
PATH_MINIMUM_VALID_DURATION = _env_float("PATH_MINIMUM_VALID_DURATION", 10.0)  # seconds
PATH_MINIMUM_VALID_DISTANCE = _env_float("PATH_MINIMUM_VALID_DISTANCE", 10.0)  # metres
PATH_MINIMUM_VALID_SAMPLES = _env_int("PATH_MINIMUM_VALID_SAMPLES", 2)


# ---------------------------------------------------------------------------
# Keeper path settings
# ---------------------------------------------------------------------------
# Expected to be >= the valid thresholds above. Not enforced.
PATH_MINIMUM_KEEPER_DURATION = _env_float("PATH_MINIMUM_KEEPER_DURATION", 60.0)
PATH_MINIMUM_KEEPER_DISTANCE = _env_float("PATH_MINIMUM_KEEPER_DISTANCE", 20.0)


# ---------------------------------------------------------------------------
# Segment boundary heuristics
# ---------------------------------------------------------------------------
# Speed (m/s) separating "slow" from "fast" edge samples during edge cleansing.
# Normally supplied by the timeline orchestrator; this is the fallback.
MAXIMUM_MODE_SHIFT_SPEED = _env_float("MAXIMUM_MODE_SHIFT_SPEED", 2.0)

# Slack applied to mean speed x time separation when bounding the gap between
# two segments that may still belong to one trip.
MERGEABLE_DISTANCE_SLACK = _env_float("MERGEABLE_DISTANCE_SLACK", 4.0)


# ---------------------------------------------------------------------------
# Visit footprint
# ---------------------------------------------------------------------------
# Clamp for the estimated visit radius (metres).
VISIT_MINIMUM_RADIUS = _env_float("VISIT_MINIMUM_RADIUS", 10.0)
VISIT_MAXIMUM_RADIUS = _env_float("VISIT_MAXIMUM_RADIUS", 150.0)
