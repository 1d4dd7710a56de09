"""View state package.

Exports the elevation and map view states consumed by display surfaces.
"""

from .elevation import ElevationViewConfig, ElevationViewState
from .map import MapViewConfig, MapViewState
from .mutations import (
    SetDocument,
    SetMinElevationRange,
    SetPoints,
    SetRoute,
    SetTime,
    SetTimeWindow,
    SetTolerance,
    SetTrack,
    SetVisibility,
    SetWaypoints,
)

__all__ = [
    "ElevationViewConfig",
    "ElevationViewState",
    "MapViewConfig",
    "MapViewState",
    "SetDocument",
    "SetMinElevationRange",
    "SetPoints",
    "SetRoute",
    "SetTime",
    "SetTimeWindow",
    "SetTolerance",
    "SetTrack",
    "SetVisibility",
    "SetWaypoints",
]
