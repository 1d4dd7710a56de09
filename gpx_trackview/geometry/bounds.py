"""Elevation range and geographic bounding helpers for fitting a display."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

from ..models import (
    ElevationRange,
    GeoBounds,
    GpxDocument,
    TrackPoint,
    Viewport,
    ViewportDefaults,
)
from .distance import great_circle_distance_m

EMPTY_ELEVATION_RANGE = ElevationRange(0.0, 0.0, 0.0)


def elevation_range(points: Iterable[TrackPoint]) -> ElevationRange:
    """Return the elevation spread of ``points``.

    Points without a usable elevation are ignored; no elevation data at all
    yields a zero range at zero metres.
    """

    low = math.inf
    high = -math.inf
    for point in points:
        elevation = point.elevation
        if elevation is None or not math.isfinite(elevation):
            continue
        low = min(low, elevation)
        high = max(high, elevation)
    if low > high:
        return EMPTY_ELEVATION_RANGE
    return ElevationRange(high - low, low, high)


def apply_range_floor(value: ElevationRange, floor: float) -> ElevationRange:
    """Widen ``value`` to at least ``floor`` metres, keeping it centred."""

    spread = max(value.range, 0.0)
    low = value.low
    if spread < floor:
        low -= (floor - spread) / 2.0
        spread = float(floor)
    return ElevationRange(spread, low, low + spread)


def visible_points(
    document: Optional[GpxDocument],
    *,
    show_routes: bool = True,
    show_waypoints: bool = True,
    show_tracks: bool = True,
) -> Iterator[TrackPoint]:
    """Yield every point of the categories currently shown."""

    if document is None:
        return
    if show_routes:
        for route in document.routes:
            yield from route.points
    if show_waypoints:
        yield from document.waypoints
    if show_tracks:
        for track in document.tracks:
            yield from track.iter_points()


def geo_bounds(points: Iterable[TrackPoint]) -> Optional[GeoBounds]:
    """Return the lat/lon bounding box of ``points`` or ``None`` when empty."""

    min_lat = min_lon = math.inf
    max_lat = max_lon = -math.inf
    seen = False
    for point in points:
        seen = True
        if point.latitude < min_lat:
            min_lat = point.latitude
        if point.longitude < min_lon:
            min_lon = point.longitude
        if point.latitude > max_lat:
            max_lat = point.latitude
        if point.longitude > max_lon:
            max_lon = point.longitude
    return GeoBounds(min_lat, min_lon, max_lat, max_lon) if seen else None


def fallback_viewport(defaults: Optional[ViewportDefaults] = None) -> Viewport:
    defaults = defaults or ViewportDefaults()
    return Viewport(
        center_lat=defaults.fallback_latitude,
        center_lon=defaults.fallback_longitude,
        span_deg=defaults.fallback_span_deg,
    )


def fit_viewport(
    bounds: Optional[GeoBounds], defaults: Optional[ViewportDefaults] = None
) -> Viewport:
    """Frame ``bounds`` with a centre and a margin-padded radius.

    The radius in metres is half the geodesic min-max distance in kilometres
    times the configured multiplier, so the default 1500 frames the box with
    a 50% margin. Missing bounds give the fallback viewport.
    """

    defaults = defaults or ViewportDefaults()
    if bounds is None:
        return fallback_viewport(defaults)
    center_lat = (bounds.min_lat + bounds.max_lat) / 2.0
    center_lon = (bounds.min_lon + bounds.max_lon) / 2.0
    distance_km = great_circle_distance_m(bounds.min_point, bounds.max_point) / 1000.0
    return Viewport(
        center_lat=center_lat,
        center_lon=center_lon,
        radius_m=distance_km / 2.0 * defaults.radius_multiplier,
    )


__all__ = [
    "EMPTY_ELEVATION_RANGE",
    "apply_range_floor",
    "elevation_range",
    "fallback_viewport",
    "fit_viewport",
    "geo_bounds",
    "visible_points",
]
