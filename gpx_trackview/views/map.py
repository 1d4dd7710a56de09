"""Map overlay view state.

Holds the routes, waypoints and tracks shown on a map together with their
visibility flags and the track reduction tolerance. Each mutation rebuilds the
reduced track polylines, the bounding box of the visible categories and the
viewport that frames them.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, Sequence

from ..config import (
    DEFAULT_REDUCTION_TOLERANCE,
    DEFAULT_SHOW_ROUTES,
    DEFAULT_SHOW_TRACKS,
    DEFAULT_SHOW_WAYPOINTS,
)
from ..errors import UnsupportedMutationError
from ..geometry.bounds import fit_viewport, geo_bounds, visible_points
from ..geometry.simplify import reduce_location_points
from ..models import (
    GeoBounds,
    GpxDocument,
    LatLon,
    MapStyle,
    PointList,
    Route,
    Track,
    TrackPoint,
    Viewport,
    ViewportDefaults,
    WaypointPin,
)
from ..utils import clamp
from .mutations import (
    SetDocument,
    SetRoute,
    SetTolerance,
    SetTrack,
    SetVisibility,
    SetWaypoints,
)

MapMutation = (
    SetDocument | SetRoute | SetWaypoints | SetTrack | SetVisibility | SetTolerance
)

UNKNOWN_WAYPOINT_LABEL = "Unknown"


@dataclass(slots=True)
class MapViewConfig:
    tolerance: float = DEFAULT_REDUCTION_TOLERANCE
    show_routes: bool = DEFAULT_SHOW_ROUTES
    show_waypoints: bool = DEFAULT_SHOW_WAYPOINTS
    show_tracks: bool = DEFAULT_SHOW_TRACKS
    viewport_defaults: ViewportDefaults | None = None
    logger: logging.Logger | None = None


def waypoint_label(point: TrackPoint) -> str:
    """Label a waypoint by name, then description, then a placeholder."""

    return point.name or point.description or UNKNOWN_WAYPOINT_LABEL


class MapViewState:
    def __init__(
        self,
        config: MapViewConfig | None = None,
        style: MapStyle | None = None,
    ) -> None:
        self.config = config or MapViewConfig()
        self.style = style or MapStyle()
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)
        self._defaults = self.config.viewport_defaults or ViewportDefaults()
        self._document = GpxDocument()
        self._show_routes = self.config.show_routes
        self._show_waypoints = self.config.show_waypoints
        self._show_tracks = self.config.show_tracks
        self._tolerance = clamp(self.config.tolerance, 0.0, 1.0)
        self._reduced_segments: List[PointList] = []
        self._num_track_points = 0
        self._num_reduced_track_points = 0
        self._bounds: Optional[GeoBounds] = None
        self._viewport = fit_viewport(None, self._defaults)

    # ------------------------------------------------------------------
    # Mutation entry point
    # ------------------------------------------------------------------
    def apply(self, mutation: MapMutation) -> None:
        """Apply one mutation and synchronously recompute derived state."""

        if isinstance(mutation, SetDocument):
            self._document = mutation.document or GpxDocument()
        elif isinstance(mutation, SetRoute):
            routes = [mutation.route] if mutation.route is not None else []
            self._document = GpxDocument(routes=routes)
        elif isinstance(mutation, SetWaypoints):
            self._document = GpxDocument(waypoints=list(mutation.waypoints or []))
        elif isinstance(mutation, SetTrack):
            tracks = [mutation.track] if mutation.track is not None else []
            self._document = GpxDocument(tracks=tracks)
        elif isinstance(mutation, SetVisibility):
            if not self._assign_visibility(mutation):
                return
        elif isinstance(mutation, SetTolerance):
            tolerance = clamp(mutation.tolerance, 0.0, 1.0)
            if tolerance == self._tolerance:
                return
            self._tolerance = tolerance
        else:
            raise UnsupportedMutationError(
                f"{type(mutation).__name__} cannot be applied to a map view"
            )
        self._recompute()

    def set_document(self, document: Optional[GpxDocument]) -> None:
        self.apply(SetDocument(document))

    def set_route(self, route: Optional[Route]) -> None:
        self.apply(SetRoute(route))

    def set_waypoints(self, waypoints: Optional[Sequence[TrackPoint]]) -> None:
        self.apply(SetWaypoints(waypoints))

    def set_track(self, track: Optional[Track]) -> None:
        self.apply(SetTrack(track))

    def set_visibility(
        self,
        *,
        routes: Optional[bool] = None,
        waypoints: Optional[bool] = None,
        tracks: Optional[bool] = None,
    ) -> None:
        self.apply(SetVisibility(routes=routes, waypoints=waypoints, tracks=tracks))

    def set_tolerance(self, tolerance: float) -> None:
        self.apply(SetTolerance(tolerance))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def document(self) -> GpxDocument:
        return self._document

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def show_routes(self) -> bool:
        return self._show_routes

    @property
    def show_waypoints(self) -> bool:
        return self._show_waypoints

    @property
    def show_tracks(self) -> bool:
        return self._show_tracks

    @property
    def num_track_points(self) -> int:
        return self._num_track_points

    @property
    def num_reduced_track_points(self) -> int:
        return self._num_reduced_track_points

    @property
    def bounds(self) -> Optional[GeoBounds]:
        return self._bounds

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def route_polylines(self) -> List[List[LatLon]]:
        if not self._show_routes:
            return []
        return [
            [point.location for point in route.points]
            for route in self._document.routes
        ]

    def track_polylines(self) -> List[List[LatLon]]:
        """Return the reduced polylines of every visible track segment."""
        return [[point.location for point in points] for points in self._reduced_segments]

    def waypoint_pins(self) -> List[WaypointPin]:
        if not self._show_waypoints:
            return []
        return [
            WaypointPin(
                label=waypoint_label(point),
                address=point.description,
                latitude=point.latitude,
                longitude=point.longitude,
            )
            for point in self._document.waypoints
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _assign_visibility(self, mutation: SetVisibility) -> bool:
        changed = False
        if mutation.routes is not None and mutation.routes != self._show_routes:
            self._show_routes = mutation.routes
            changed = True
        if (
            mutation.waypoints is not None
            and mutation.waypoints != self._show_waypoints
        ):
            self._show_waypoints = mutation.waypoints
            changed = True
        if mutation.tracks is not None and mutation.tracks != self._show_tracks:
            self._show_tracks = mutation.tracks
            changed = True
        return changed

    def _recompute(self) -> None:
        reduced: List[PointList] = []
        total = 0
        if self._show_tracks:
            for track in self._document.tracks:
                for segment in track.segments:
                    total += len(segment.points)
                    if self._tolerance == 0.0:
                        reduced.append(list(segment.points))
                    else:
                        reduced.append(
                            reduce_location_points(segment.points, self._tolerance)
                        )
        self._reduced_segments = reduced
        self._num_track_points = total
        self._num_reduced_track_points = sum(len(points) for points in reduced)

        self._bounds = geo_bounds(
            visible_points(
                self._document,
                show_routes=self._show_routes,
                show_waypoints=self._show_waypoints,
                show_tracks=self._show_tracks,
            )
        )
        self._viewport = fit_viewport(self._bounds, self._defaults)
        if self._viewport.is_fallback:
            self._log.debug("Map view: nothing visible, using fallback viewport")
        else:
            self._log.debug(
                "Map view: %d track points reduced to %d, radius %.0f m",
                self._num_track_points,
                self._num_reduced_track_points,
                self._viewport.radius_m,
            )


__all__ = ["MapViewConfig", "MapViewState", "waypoint_label"]
