"""Distance primitives used by point reduction and viewport fitting."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from pyproj import Geod

from ..config import GEOD_ELLIPSOID
from ..models import LatLon

PlanarArray = NDArray[np.float64]


def point_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the planar distance between two projected points."""

    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def perpendicular_distances(
    points: PlanarArray, start: PlanarArray, end: PlanarArray
) -> PlanarArray:
    """Return the distance of each point to the infinite line through a chord.

    A zero-length chord degrades to the plain distance to ``start``.
    """

    if points.size == 0:
        return np.empty(0, dtype=float)
    chord = end - start
    length = float(np.hypot(chord[0], chord[1]))
    offsets = points - start
    if length == 0.0:
        return np.hypot(offsets[:, 0], offsets[:, 1])
    cross = offsets[:, 0] * chord[1] - offsets[:, 1] * chord[0]
    return np.abs(cross) / length


def cross_track_distance(
    point: Sequence[float], start: Sequence[float], end: Sequence[float]
) -> float:
    """Scalar form of :func:`perpendicular_distances` for a single point."""

    distances = perpendicular_distances(
        np.asarray([point], dtype=float),
        np.asarray(start, dtype=float),
        np.asarray(end, dtype=float),
    )
    return float(distances[0])


@lru_cache(maxsize=4)
def _geod(ellipsoid: str) -> Geod:
    return Geod(ellps=ellipsoid)


def great_circle_distance_m(
    a: LatLon, b: LatLon, *, ellipsoid: str = GEOD_ELLIPSOID
) -> float:
    """Return the geodesic distance in metres between two (lat, lon) pairs."""

    # pyproj expects lon/lat ordering.
    _, _, distance = _geod(ellipsoid).inv(a[1], a[0], b[1], b[0])
    return float(distance)


__all__ = [
    "PlanarArray",
    "cross_track_distance",
    "great_circle_distance_m",
    "perpendicular_distances",
    "point_distance",
]
