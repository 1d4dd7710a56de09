"""Central configuration for the GPX track view core.

All values are constants imported by the rest of the package. Adjust as needed
for your environment. Each value can be overridden through an environment
variable (optionally via a local `.env`).
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


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Point reduction
# ---------------------------------------------------------------------------
# Initial Douglas-Peucker tolerance for new view states, in [0, 1]. Zero keeps
# every point.
DEFAULT_REDUCTION_TOLERANCE = min(
    max(_env_float("TRACKVIEW_REDUCTION_TOLERANCE", 0.0), 0.0), 1.0
)


# ---------------------------------------------------------------------------
# Elevation graph
# ---------------------------------------------------------------------------
# Minimum elevation range (metres) of the graph. Flatter profiles are centred
# inside this range instead of being stretched to full height.
DEFAULT_MIN_ELEVATION_RANGE = max(_env_int("TRACKVIEW_MIN_ELEVATION_RANGE", 0), 0)

# Show the time cursor (position bar) by default.
DEFAULT_SHOW_POSITION_BAR = _env_bool("TRACKVIEW_SHOW_POSITION_BAR", False)


# ---------------------------------------------------------------------------
# Map viewport
# ---------------------------------------------------------------------------
# Centre used when nothing visible has coordinates.
VIEWPORT_FALLBACK_LATITUDE = _env_float("TRACKVIEW_FALLBACK_LATITUDE", 45.082207)
VIEWPORT_FALLBACK_LONGITUDE = _env_float("TRACKVIEW_FALLBACK_LONGITUDE", 6.054350)

# Latitude/longitude span (degrees) of the fallback viewport.
VIEWPORT_FALLBACK_SPAN_DEG = _env_float("TRACKVIEW_FALLBACK_SPAN_DEG", 0.04)

# Frame radius (metres) = half the bounding-box diagonal (kilometres) times
# this value.
VIEWPORT_RADIUS_MULTIPLIER = _env_float("TRACKVIEW_RADIUS_MULTIPLIER", 1500.0)

# Ellipsoid used for great-circle distances (any pyproj ellipsoid name).
GEOD_ELLIPSOID = os.getenv("TRACKVIEW_GEOD_ELLIPSOID", "WGS84")

# Visibility defaults for the map categories.
DEFAULT_SHOW_ROUTES = _env_bool("TRACKVIEW_SHOW_ROUTES", True)
DEFAULT_SHOW_WAYPOINTS = _env_bool("TRACKVIEW_SHOW_WAYPOINTS", True)
DEFAULT_SHOW_TRACKS = _env_bool("TRACKVIEW_SHOW_TRACKS", True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("TRACKVIEW_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
