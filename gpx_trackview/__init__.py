"""GPX track view core: point reduction, bounds and display view states."""

from .errors import GpxLoadError, TrackViewError, UnsupportedMutationError
from .models import GpxDocument, Route, Track, TrackPoint, TrackSegment
from .views import ElevationViewState, MapViewState

__all__ = [
    "ElevationViewState",
    "GpxDocument",
    "GpxLoadError",
    "MapViewState",
    "Route",
    "Track",
    "TrackPoint",
    "TrackSegment",
    "TrackViewError",
    "UnsupportedMutationError",
]
