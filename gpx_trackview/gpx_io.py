"""Load GPX files into the track view data model.

Parsing is delegated to ``gpxpy``; this module only maps its objects onto
:class:`~gpx_trackview.models.GpxDocument` and friends.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Union

import gpxpy
import gpxpy.gpx

from .errors import GpxLoadError
from .models import GpxDocument, PointList, Route, Track, TrackPoint, TrackSegment

PathLike = Union[str, Path]

LOGGER = logging.getLogger(__name__)

_XML_DECLARATION = re.compile(rb"^\s*<\?xml[^>]*?\?>")
_DECLARED_ENCODING = re.compile(rb"""encoding\s*=\s*["']([A-Za-z0-9._-]+)["']""")


def _to_point(raw: Any) -> TrackPoint:
    return TrackPoint(
        latitude=float(raw.latitude),
        longitude=float(raw.longitude),
        elevation=None if raw.elevation is None else float(raw.elevation),
        time=raw.time,
        name=getattr(raw, "name", None) or None,
        description=getattr(raw, "description", None) or None,
    )


def _to_points(raw_points: Iterable[Any]) -> PointList:
    return [_to_point(raw) for raw in raw_points]


def document_from_gpx(gpx: gpxpy.gpx.GPX) -> GpxDocument:
    """Convert a parsed gpxpy document into a :class:`GpxDocument`."""

    routes = [Route(name=route.name, points=_to_points(route.points)) for route in gpx.routes]
    tracks: List[Track] = []
    for track in gpx.tracks:
        segments = [TrackSegment(_to_points(segment.points)) for segment in track.segments]
        tracks.append(Track(name=track.name, segments=segments))
    return GpxDocument(routes=routes, waypoints=_to_points(gpx.waypoints), tracks=tracks)


def parse_gpx(xml: str) -> GpxDocument:
    """Parse GPX XML text."""

    try:
        gpx = gpxpy.parse(xml)
    except gpxpy.gpx.GPXException as exc:
        raise GpxLoadError(f"Unable to parse GPX data: {exc}") from exc
    return document_from_gpx(gpx)


def _decode_gpx(raw: bytes) -> str:
    """Decode file bytes using the encoding named in the XML declaration.

    The declaration is dropped from the returned text since it no longer
    describes a ``str``. Files without one are read as UTF-8.
    """

    declaration = _XML_DECLARATION.match(raw)
    encoding = "utf-8-sig"
    if declaration is not None:
        declared = _DECLARED_ENCODING.search(declaration.group(0))
        if declared is not None:
            encoding = declared.group(1).decode("ascii")
        raw = raw[declaration.end() :]
    return raw.decode(encoding)


def load_gpx(path: PathLike) -> GpxDocument:
    """Read and parse a GPX file from disk."""

    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise GpxLoadError(f"Unable to read GPX file {file_path}: {exc}") from exc
    try:
        xml = _decode_gpx(raw)
    except (LookupError, UnicodeDecodeError) as exc:
        raise GpxLoadError(f"Unable to decode GPX file {file_path}: {exc}") from exc
    document = parse_gpx(xml)
    LOGGER.debug(
        "Loaded %s: %d routes, %d waypoints, %d tracks",
        file_path,
        len(document.routes),
        len(document.waypoints),
        len(document.tracks),
    )
    return document


__all__ = ["document_from_gpx", "load_gpx", "parse_gpx"]
