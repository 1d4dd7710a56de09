#!/usr/bin/env python3
"""Summarise how a GPX file would be displayed by the track views.

Loads the file, feeds it through the map and elevation view states and logs
point counts before and after reduction, the elevation range and the map
viewport. Useful for picking a reduction tolerance for large tracks.

Usage examples:

    python -m gpx_trackview.tools.summarize_gpx ride.gpx

    python -m gpx_trackview.tools.summarize_gpx ride.gpx \
        --tolerance 0.01 \
        --min-elevation-range 50 \
        --hide-waypoints
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from gpx_trackview.config import (
    DEFAULT_MIN_ELEVATION_RANGE,
    DEFAULT_REDUCTION_TOLERANCE,
    LOG_FORMAT,
    LOG_LEVEL,
)
from gpx_trackview.errors import GpxLoadError
from gpx_trackview.geometry.bounds import apply_range_floor, elevation_range
from gpx_trackview.gpx_io import load_gpx
from gpx_trackview.models import GpxDocument
from gpx_trackview.utils import format_duration
from gpx_trackview.views import (
    ElevationViewConfig,
    ElevationViewState,
    MapViewConfig,
    MapViewState,
)

LOGGER = logging.getLogger("summarize_gpx")


def _ratio(reduced: int, total: int) -> float:
    return reduced / total if total else 1.0


def summarize(
    document: GpxDocument,
    *,
    tolerance: float,
    min_elevation_range: float,
    show_routes: bool = True,
    show_waypoints: bool = True,
    show_tracks: bool = True,
) -> List[str]:
    """Return human-readable summary lines for ``document``."""

    map_view = MapViewState(
        MapViewConfig(
            tolerance=tolerance,
            show_routes=show_routes,
            show_waypoints=show_waypoints,
            show_tracks=show_tracks,
        )
    )
    map_view.set_document(document)

    lines = [
        f"Routes: {len(map_view.route_polylines())}, "
        f"waypoints: {len(map_view.waypoint_pins())}, "
        f"track segments: {len(map_view.track_polylines())}",
        f"Map track points: {map_view.num_track_points} -> "
        f"{map_view.num_reduced_track_points} "
        f"({_ratio(map_view.num_reduced_track_points, map_view.num_track_points):.1%})",
    ]
    viewport = map_view.viewport
    if viewport.is_fallback:
        lines.append(
            f"Viewport: fallback centre ({viewport.center_lat:.6f}, "
            f"{viewport.center_lon:.6f}), span {viewport.span_deg} deg"
        )
    else:
        lines.append(
            f"Viewport: centre ({viewport.center_lat:.6f}, "
            f"{viewport.center_lon:.6f}), radius {viewport.radius_m:.0f} m"
        )

    for index, track in enumerate(document.tracks):
        elevation_view = ElevationViewState(
            ElevationViewConfig(
                tolerance=tolerance, min_elevation_range=min_elevation_range
            )
        )
        elevation_view.set_track(track)
        floored = apply_range_floor(
            elevation_range(track.iter_points()), min_elevation_range
        )
        label = track.name or f"#{index + 1}"
        lines.append(
            f"Track {label}: {elevation_view.num_points} -> "
            f"{elevation_view.num_reduced_points} elevation points, "
            f"duration {format_duration(elevation_view.duration)}, "
            f"elevation {floored.low:.0f}-{floored.high:.0f} m"
        )
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarise point reduction and framing for a GPX file"
    )
    parser.add_argument("gpx_file", help="Path of the GPX file to summarise")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_REDUCTION_TOLERANCE,
        help="Reduction tolerance in [0, 1] (default: %(default)s)",
    )
    parser.add_argument(
        "--min-elevation-range",
        type=float,
        default=DEFAULT_MIN_ELEVATION_RANGE,
        help="Minimum elevation range in metres (default: %(default)s)",
    )
    parser.add_argument("--hide-routes", action="store_true", help="Ignore routes")
    parser.add_argument(
        "--hide-waypoints", action="store_true", help="Ignore waypoints"
    )
    parser.add_argument("--hide-tracks", action="store_true", help="Ignore tracks")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Python logging level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the summarize_gpx tool."""
    args = _build_parser().parse_args(argv)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        document = load_gpx(args.gpx_file)
    except GpxLoadError as exc:
        LOGGER.error("%s", exc)
        return 1

    for line in summarize(
        document,
        tolerance=args.tolerance,
        min_elevation_range=args.min_elevation_range,
        show_routes=not args.hide_routes,
        show_waypoints=not args.hide_waypoints,
        show_tracks=not args.hide_tracks,
    ):
        LOGGER.info("%s", line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
