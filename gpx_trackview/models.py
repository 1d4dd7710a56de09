"""Dataclasses describing GPS track inputs and derived display results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .config import (
    VIEWPORT_FALLBACK_LATITUDE,
    VIEWPORT_FALLBACK_LONGITUDE,
    VIEWPORT_FALLBACK_SPAN_DEG,
    VIEWPORT_RADIUS_MULTIPLIER,
)
from .utils import EPOCH_ZERO, to_utc_aware

LatLon = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class TrackPoint:
    """A single GPS fix. Naive timestamps are treated as UTC."""

    latitude: float
    longitude: float
    elevation: Optional[float] = None
    time: Optional[datetime] = None
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.time is not None and self.time.tzinfo is None:
            object.__setattr__(self, "time", to_utc_aware(self.time))

    @property
    def elevation_value(self) -> float:
        """Elevation in metres, 0.0 when missing or not a number."""
        if self.elevation is None or not math.isfinite(self.elevation):
            return 0.0
        return float(self.elevation)

    @property
    def time_value(self) -> datetime:
        return self.time if self.time is not None else EPOCH_ZERO

    @property
    def location(self) -> LatLon:
        return (self.latitude, self.longitude)


PointList = List[TrackPoint]


@dataclass(slots=True)
class TrackSegment:
    """A contiguous run of points recorded without a gap."""

    points: PointList = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start_time(self) -> datetime:
        for point in self.points:
            if point.time is not None:
                return point.time
        return EPOCH_ZERO

    @property
    def end_time(self) -> datetime:
        for point in reversed(self.points):
            if point.time is not None:
                return point.time
        return EPOCH_ZERO

    @property
    def has_times(self) -> bool:
        return any(point.time is not None for point in self.points)


@dataclass(slots=True)
class Track:
    """An ordered sequence of segments making up one recording."""

    name: Optional[str] = None
    segments: List[TrackSegment] = field(default_factory=list)

    def iter_points(self) -> Iterator[TrackPoint]:
        for segment in self.segments:
            yield from segment.points


@dataclass(slots=True)
class Route:
    """A planned, timeless ordered sequence of points."""

    name: Optional[str] = None
    points: PointList = field(default_factory=list)


@dataclass(slots=True)
class GpxDocument:
    """Composite source shown on the map: routes, waypoints and tracks."""

    routes: List[Route] = field(default_factory=list)
    waypoints: PointList = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.routes or self.waypoints or self.tracks)


class ElevationRange(NamedTuple):
    """Spread of elevations over a point collection."""

    range: float
    low: float
    high: float


class GeoBounds(NamedTuple):
    """Axis-aligned latitude/longitude bounding box."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def min_point(self) -> LatLon:
        return (self.min_lat, self.min_lon)

    @property
    def max_point(self) -> LatLon:
        return (self.max_lat, self.max_lon)

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min_lat <= latitude <= self.max_lat
            and self.min_lon <= longitude <= self.max_lon
        )


@dataclass(frozen=True, slots=True)
class ViewportDefaults:
    """Fallback framing and margin settings for the map viewport."""

    fallback_latitude: float = VIEWPORT_FALLBACK_LATITUDE
    fallback_longitude: float = VIEWPORT_FALLBACK_LONGITUDE
    fallback_span_deg: float = VIEWPORT_FALLBACK_SPAN_DEG
    radius_multiplier: float = VIEWPORT_RADIUS_MULTIPLIER


@dataclass(frozen=True, slots=True)
class Viewport:
    """Map framing: a centre plus either a radius or a fixed degree span."""

    center_lat: float
    center_lon: float
    radius_m: Optional[float] = None
    span_deg: Optional[float] = None

    @property
    def center(self) -> LatLon:
        return (self.center_lat, self.center_lon)

    @property
    def is_fallback(self) -> bool:
        return self.radius_m is None


@dataclass(frozen=True, slots=True)
class WaypointPin:
    """Display data for one waypoint marker."""

    label: str
    address: Optional[str]
    latitude: float
    longitude: float


@dataclass(slots=True)
class ElevationStyle:
    """Pass-through styling for an elevation graph surface."""

    background_color: str = "transparent"
    padding: int = 10
    line_width: int = 2
    line_color: str = "#ffff00"
    position_bar_color: str = "#ffff00"
    position_bar_end_width: int = 6


@dataclass(slots=True)
class MapStyle:
    """Pass-through styling for a map surface."""

    route_color: str = "#0000ff"
    track_color: str = "#ff0000"
