"""Point reduction and bounding utilities for GPS track display.

This module provides Douglas-Peucker reduction over a chosen projection of a
track, plus elevation-range and geographic bounding used to fit a display.
"""

from .bounds import (
    apply_range_floor,
    elevation_range,
    fallback_viewport,
    fit_viewport,
    geo_bounds,
    visible_points,
)
from .distance import (
    cross_track_distance,
    great_circle_distance_m,
    perpendicular_distances,
    point_distance,
)
from .simplify import (
    Projector,
    elevation_projector,
    location_projector,
    reduce_elevation_points,
    reduce_location_points,
    reduce_points,
)

__all__ = [
    "Projector",
    "apply_range_floor",
    "cross_track_distance",
    "elevation_projector",
    "elevation_range",
    "fallback_viewport",
    "fit_viewport",
    "geo_bounds",
    "great_circle_distance_m",
    "location_projector",
    "perpendicular_distances",
    "point_distance",
    "reduce_elevation_points",
    "reduce_location_points",
    "reduce_points",
    "visible_points",
]
