"""Douglas-Peucker point reduction over a chosen 2D projection of a track."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

import numpy as np

from ..models import TrackPoint
from ..utils import clamp
from .distance import PlanarArray, perpendicular_distances

Projector = Callable[[TrackPoint], Tuple[float, float]]


def location_projector(point: TrackPoint) -> Tuple[float, float]:
    """Project a point onto the (longitude, latitude) plane."""

    return (point.longitude, point.latitude)


def elevation_projector(points: Sequence[TrackPoint]) -> Projector:
    """Return a projector onto (seconds since the first fix, elevation).

    The time axis is anchored on the first point, or on the last one when the
    first has no timestamp; with neither, the time axis collapses to zero.
    Points without a timestamp sit at the anchor and points without an
    elevation at zero metres.
    """

    # Anchor on an endpoint; reduction always keeps both.
    origin = None
    if points:
        origin = points[0].time if points[0].time is not None else points[-1].time

    def _project(point: TrackPoint) -> Tuple[float, float]:
        if origin is None or point.time is None:
            seconds = 0.0
        else:
            seconds = (point.time - origin).total_seconds()
        return (seconds, point.elevation_value)

    return _project


def project_points(points: Sequence[TrackPoint], projector: Projector) -> PlanarArray:
    """Project points into a float64 array, zeroing non-finite coordinates."""

    if not points:
        return np.empty((0, 2), dtype=float)
    array = np.asarray([projector(point) for point in points], dtype=float)
    return np.nan_to_num(array, nan=0.0, posinf=0.0, neginf=0.0)


def reduction_threshold(projected: PlanarArray, tolerance: float) -> float:
    """Map a [0, 1] tolerance to an absolute distance in projected units.

    The tolerance is scaled by the larger axis extent of the projected input,
    so 1.0 flattens nearly everything and 0.0 is lossless. For elevation
    profiles that extent is usually the duration in seconds, so the useful
    range of the dial sits well below 0.1 on rides longer than a few minutes.
    """

    if projected.shape[0] == 0:
        return 0.0
    spread = float(np.max(np.ptp(projected, axis=0)))
    return clamp(tolerance, 0.0, 1.0) * spread


def reduce_points(
    points: Sequence[TrackPoint],
    tolerance: float,
    projector: Projector,
) -> List[TrackPoint]:
    """Reduce ``points`` with Douglas-Peucker on the projected coordinates.

    Returns a new list that is a subsequence of ``points`` keeping the first
    and last entries. Zero tolerance and inputs of two points or fewer come
    back unchanged.
    """

    tolerance = clamp(tolerance, 0.0, 1.0)
    count = len(points)
    if tolerance == 0.0 or count <= 2:
        return list(points)

    projected = project_points(points, projector)
    threshold = reduction_threshold(projected, tolerance)
    keep = _douglas_peucker_mask(projected, threshold)
    return [points[index] for index in np.flatnonzero(keep)]


def reduce_elevation_points(
    points: Sequence[TrackPoint], tolerance: float
) -> List[TrackPoint]:
    """Reduce points for an elevation profile (time x elevation)."""

    return reduce_points(points, tolerance, elevation_projector(points))


def reduce_location_points(
    points: Sequence[TrackPoint], tolerance: float
) -> List[TrackPoint]:
    """Reduce points for a map polyline (longitude x latitude)."""

    return reduce_points(points, tolerance, location_projector)


def _douglas_peucker_mask(projected: PlanarArray, threshold: float) -> np.ndarray:
    count = projected.shape[0]
    keep = np.zeros(count, dtype=bool)
    keep[0] = keep[-1] = True
    # Explicit stack of (first, last) spans; long tracks would exceed the
    # recursion limit on unfavourable shapes.
    spans = [(0, count - 1)]
    while spans:
        first, last = spans.pop()
        if last - first < 2:
            continue
        distances = perpendicular_distances(
            projected[first + 1 : last], projected[first], projected[last]
        )
        offset = int(np.argmax(distances))
        if distances[offset] <= threshold:
            continue
        pivot = first + 1 + offset
        keep[pivot] = True
        spans.append((pivot, last))
        spans.append((first, pivot))
    return keep


__all__ = [
    "Projector",
    "elevation_projector",
    "location_projector",
    "project_points",
    "reduce_elevation_points",
    "reduce_location_points",
    "reduce_points",
    "reduction_threshold",
]
