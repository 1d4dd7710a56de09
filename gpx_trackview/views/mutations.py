"""Mutation records accepted by the view states' ``apply`` entry point."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..models import GpxDocument, Route, Track, TrackPoint


@dataclass(frozen=True, slots=True)
class SetPoints:
    points: Optional[Sequence[TrackPoint]]


@dataclass(frozen=True, slots=True)
class SetTrack:
    track: Optional[Track]


@dataclass(frozen=True, slots=True)
class SetRoute:
    route: Optional[Route]


@dataclass(frozen=True, slots=True)
class SetWaypoints:
    waypoints: Optional[Sequence[TrackPoint]]


@dataclass(frozen=True, slots=True)
class SetDocument:
    document: Optional[GpxDocument]


@dataclass(frozen=True, slots=True)
class SetTolerance:
    tolerance: float


@dataclass(frozen=True, slots=True)
class SetTime:
    time: datetime


@dataclass(frozen=True, slots=True)
class SetTimeWindow:
    """Override the displayed time window; ``None`` restores the source bound."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class SetMinElevationRange:
    floor: float


@dataclass(frozen=True, slots=True)
class SetVisibility:
    """Change category visibility; ``None`` leaves a flag unchanged."""

    routes: Optional[bool] = None
    waypoints: Optional[bool] = None
    tracks: Optional[bool] = None


__all__ = [
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
