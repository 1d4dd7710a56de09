"""Elevation profile view state.

Owns the point source of an elevation graph (a flat point list or a track),
the reduction tolerance, the displayed time window and the time cursor.
Every mutation recomputes the reduced point lists before returning so reads
never observe stale data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
import logging
from typing import List, Optional, Sequence, Tuple

from ..config import (
    DEFAULT_MIN_ELEVATION_RANGE,
    DEFAULT_REDUCTION_TOLERANCE,
    DEFAULT_SHOW_POSITION_BAR,
)
from ..errors import UnsupportedMutationError
from ..geometry.bounds import apply_range_floor, elevation_range
from ..geometry.simplify import reduce_elevation_points
from ..models import ElevationStyle, PointList, Track, TrackPoint, TrackSegment
from ..utils import EPOCH_ZERO, clamp, to_utc_aware
from .mutations import (
    SetMinElevationRange,
    SetPoints,
    SetTime,
    SetTimeWindow,
    SetTolerance,
    SetTrack,
)

Fraction = Tuple[float, float]
ElevationMutation = (
    SetPoints | SetTrack | SetTolerance | SetTime | SetTimeWindow | SetMinElevationRange
)


@dataclass(slots=True)
class ElevationViewConfig:
    tolerance: float = DEFAULT_REDUCTION_TOLERANCE
    min_elevation_range: float = DEFAULT_MIN_ELEVATION_RANGE
    show_position_bar: bool = DEFAULT_SHOW_POSITION_BAR
    logger: logging.Logger | None = None


class ElevationViewState:
    def __init__(
        self,
        config: ElevationViewConfig | None = None,
        style: ElevationStyle | None = None,
    ) -> None:
        self.config = config or ElevationViewConfig()
        self.style = style or ElevationStyle()
        # Position bar visibility is pass-through display state.
        self.show_position_bar = self.config.show_position_bar
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)
        self._tolerance = clamp(self.config.tolerance, 0.0, 1.0)
        self._min_elevation_range = max(float(self.config.min_elevation_range), 0.0)
        self._points: Optional[PointList] = None
        self._track: Optional[Track] = None
        self._segments: List[TrackSegment] = []
        self._reduced: List[PointList] = []
        self._start_override: Optional[datetime] = None
        self._end_override: Optional[datetime] = None
        self._time = EPOCH_ZERO

    # ------------------------------------------------------------------
    # Mutation entry point
    # ------------------------------------------------------------------
    def apply(self, mutation: ElevationMutation) -> None:
        """Apply one mutation and synchronously recompute derived state."""

        if isinstance(mutation, SetPoints):
            self._assign_points(mutation.points)
        elif isinstance(mutation, SetTrack):
            self._assign_track(mutation.track)
        elif isinstance(mutation, SetTolerance):
            tolerance = clamp(mutation.tolerance, 0.0, 1.0)
            if tolerance == self._tolerance:
                return
            self._tolerance = tolerance
            self._recompute()
            self._time = self._clamp_time(self._time)
        elif isinstance(mutation, SetTime):
            self._time = self._clamp_time(to_utc_aware(mutation.time))
        elif isinstance(mutation, SetTimeWindow):
            self._assign_time_window(mutation.start, mutation.end)
        elif isinstance(mutation, SetMinElevationRange):
            self._min_elevation_range = max(float(mutation.floor), 0.0)
        else:
            raise UnsupportedMutationError(
                f"{type(mutation).__name__} cannot be applied to an elevation view"
            )

    def set_points(self, points: Optional[Sequence[TrackPoint]]) -> None:
        self.apply(SetPoints(points))

    def set_track(self, track: Optional[Track]) -> None:
        self.apply(SetTrack(track))

    def set_tolerance(self, tolerance: float) -> None:
        self.apply(SetTolerance(tolerance))

    def set_time(self, time: datetime) -> None:
        self.apply(SetTime(time))

    def set_time_window(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> None:
        self.apply(SetTimeWindow(start, end))

    def set_min_elevation_range(self, floor: float) -> None:
        self.apply(SetMinElevationRange(floor))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def points(self) -> Optional[PointList]:
        return self._points

    @property
    def track(self) -> Optional[Track]:
        return self._track

    @property
    def segments(self) -> List[TrackSegment]:
        return list(self._segments)

    @property
    def reduced_segments(self) -> List[PointList]:
        return [list(points) for points in self._reduced]

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def min_elevation_range(self) -> float:
        return self._min_elevation_range

    @property
    def has_points(self) -> bool:
        return any(segment.points for segment in self._segments)

    @property
    def num_points(self) -> int:
        return sum(len(segment.points) for segment in self._segments)

    @property
    def num_reduced_points(self) -> int:
        return sum(len(points) for points in self._reduced)

    @property
    def start_time(self) -> datetime:
        if self._start_override is not None:
            return self._start_override
        for segment in self._segments:
            if segment.has_times:
                return segment.start_time
        return EPOCH_ZERO

    @property
    def end_time(self) -> datetime:
        if self._end_override is not None:
            return self._end_override
        for segment in reversed(self._segments):
            if segment.has_times:
                return segment.end_time
        return EPOCH_ZERO

    @property
    def duration(self) -> timedelta:
        return max(self.end_time - self.start_time, timedelta(0))

    @property
    def time(self) -> datetime:
        """Current time cursor, always inside ``[start_time, end_time]``."""
        return self._time

    # ------------------------------------------------------------------
    # Render contract
    # ------------------------------------------------------------------
    def segment_fractions(self) -> List[List[Fraction]]:
        """Return ``(x, y)`` fractions of the reduced points for each segment.

        ``x`` runs from 0 at the window start to 1 at its end. ``y`` is 0 at
        the top of the elevation range and 1 at the bottom. Points outside
        the time window are skipped.
        """

        start = self.start_time
        end = self.end_time
        total_seconds = self.duration.total_seconds()
        result: List[List[Fraction]] = []
        for points in self._reduced:
            floored = apply_range_floor(
                elevation_range(points), self._min_elevation_range
            )
            fractions: List[Fraction] = []
            for point in points:
                moment = point.time_value
                if moment < start or moment > end:
                    continue
                if total_seconds > 0:
                    x = (moment - start).total_seconds() / total_seconds
                else:
                    x = 0.0
                if floored.range > 0:
                    y = 1.0 - (point.elevation_value - floored.low) / floored.range
                else:
                    y = 0.5
                fractions.append((x, y))
            result.append(fractions)
        return result

    def cursor_fraction(self) -> float:
        """Return the x fraction of the time cursor."""

        total_seconds = self.duration.total_seconds()
        if total_seconds <= 0:
            return 0.0
        return (self._time - self.start_time).total_seconds() / total_seconds

    def time_at_fraction(self, fraction: float) -> datetime:
        """Map an x fraction of the graph width back to a time in the window."""

        return self.start_time + self.duration * clamp(fraction, 0.0, 1.0)

    def scrub_to(self, fraction: float) -> bool:
        """Move the cursor to an x fraction; return True when it moved."""

        if not self.has_points:
            return False
        moment = self.time_at_fraction(fraction)
        if moment == self._time:
            return False
        self.set_time(moment)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _assign_points(self, points: Optional[Sequence[TrackPoint]]) -> None:
        self._start_override = None
        self._end_override = None
        self._track = None
        self._points = list(points) if points else None
        self._segments = [TrackSegment(list(self._points))] if self._points else []
        self._recompute()
        self._time = self.start_time

    def _assign_track(self, track: Optional[Track]) -> None:
        self._start_override = None
        self._end_override = None
        self._points = None
        self._track = track
        self._segments = list(track.segments) if track is not None else []
        self._recompute()
        self._time = self.start_time

    def _assign_time_window(
        self, start: Optional[datetime], end: Optional[datetime]
    ) -> None:
        start = to_utc_aware(start) if start is not None else None
        end = to_utc_aware(end) if end is not None else None
        if start is not None and end is not None and start > end:
            start, end = end, start
        self._start_override = start
        self._end_override = end
        self._time = self._clamp_time(self._time)

    def _recompute(self) -> None:
        if self._tolerance == 0.0:
            self._reduced = [list(segment.points) for segment in self._segments]
        else:
            self._reduced = [
                reduce_elevation_points(segment.points, self._tolerance)
                for segment in self._segments
            ]
        self._log.debug(
            "Elevation view: %d segments, %d points reduced to %d (tolerance=%.3f)",
            len(self._segments),
            self.num_points,
            self.num_reduced_points,
            self._tolerance,
        )

    def _clamp_time(self, moment: datetime) -> datetime:
        start = self.start_time
        end = self.end_time
        if moment < start:
            return start
        if moment > end:
            return max(end, start)
        return moment


__all__ = ["ElevationViewConfig", "ElevationViewState", "Fraction"]
