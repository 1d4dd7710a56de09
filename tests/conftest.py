"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable point, track and document
fixtures shared by the geometry and view state tests.
"""
from __future__ import annotations

import math
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from gpx_trackview.models import GpxDocument, Route, Track, TrackPoint, TrackSegment

START = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)


# --- Factory helpers -------------------------------------------------
def _make_point(
    seconds: Optional[float] = None,
    elevation: Optional[float] = None,
    lat: float = 45.0,
    lon: float = 6.0,
    **kwargs,
) -> TrackPoint:
    time = START + timedelta(seconds=seconds) if seconds is not None else None
    return TrackPoint(latitude=lat, longitude=lon, elevation=elevation, time=time, **kwargs)


def _make_profile(elevations: List[float], step_s: float = 10.0) -> List[TrackPoint]:
    return [
        _make_point(i * step_s, elevation, lat=45.0 + i * 1e-4, lon=6.0)
        for i, elevation in enumerate(elevations)
    ]


def _wavy_profile(count: int = 200) -> List[TrackPoint]:
    elevations = [
        100.0 + 20.0 * math.sin(i / 5.0) + 3.0 * math.sin(i * 1.7)
        for i in range(count)
    ]
    return _make_profile(elevations, step_s=5.0)


def _wavy_path(count: int = 200) -> List[TrackPoint]:
    return [
        _make_point(
            float(i),
            100.0,
            lat=45.0 + i * 1e-4,
            lon=6.0 + 5e-4 * math.sin(i / 7.0) + 1e-4 * math.cos(i * 1.3),
        )
        for i in range(count)
    ]


def _collinear_points() -> List[TrackPoint]:
    return [
        _make_point(float(i * 10), 100.0, lat=45.0 + i * 0.001, lon=6.0 + i * 0.001)
        for i in range(4)
    ]


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def bump_points() -> List[TrackPoint]:
    return _make_profile([100.0, 105.0, 100.0])


@pytest.fixture
def two_segment_track() -> Track:
    first = TrackSegment(_make_profile([100.0, 110.0, 120.0, 110.0]))
    second = TrackSegment(
        [
            _make_point(100.0, 130.0, lat=45.01, lon=6.01),
            _make_point(110.0, 125.0, lat=45.011, lon=6.012),
            _make_point(120.0, 140.0, lat=45.012, lon=6.013),
        ]
    )
    return Track(name="Morning ride", segments=[first, second])


@pytest.fixture
def sample_document() -> GpxDocument:
    route = Route(
        name="Planned",
        points=[
            TrackPoint(44.99, 5.99),
            TrackPoint(45.0005, 6.0005),
            TrackPoint(45.001, 6.001),
        ],
    )
    waypoints = [
        TrackPoint(45.02, 6.02, name="Summit", description="Top of the climb"),
        TrackPoint(44.98, 6.03, description="Water"),
        TrackPoint(45.0, 5.97),
    ]
    track = Track(name="Ride", segments=[TrackSegment(_collinear_points())])
    return GpxDocument(routes=[route], waypoints=waypoints, tracks=[track])


@pytest.fixture
def make_point():
    return _make_point


@pytest.fixture
def make_profile():
    return _make_profile


@pytest.fixture
def wavy_profile() -> List[TrackPoint]:
    return _wavy_profile()


@pytest.fixture
def wavy_path() -> List[TrackPoint]:
    return _wavy_path()


@pytest.fixture
def collinear_points() -> List[TrackPoint]:
    return _collinear_points()


SAMPLE_GPX = """<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="45.02" lon="6.02">
    <ele>1800</ele>
    <name>Summit</name>
    <desc>Top of the climb</desc>
  </wpt>
  <rte>
    <name>Planned</name>
    <rtept lat="45.0" lon="6.0"></rtept>
    <rtept lat="45.01" lon="6.01"></rtept>
  </rte>
  <trk>
    <name>Ride</name>
    <trkseg>
      <trkpt lat="45.0" lon="6.0"><ele>1000</ele><time>2024-05-01T10:00:00Z</time></trkpt>
      <trkpt lat="45.001" lon="6.001"><ele>1010</ele><time>2024-05-01T10:00:10Z</time></trkpt>
      <trkpt lat="45.002" lon="6.002"><time>2024-05-01T10:00:20Z</time></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="45.01" lon="6.01"><ele>1100</ele><time>2024-05-01T10:05:00Z</time></trkpt>
      <trkpt lat="45.011" lon="6.011"><ele>1105</ele><time>2024-05-01T10:05:10Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


@pytest.fixture
def sample_gpx() -> str:
    return SAMPLE_GPX


@pytest.fixture
def gpx_file(tmp_path: Path) -> Path:
    path = tmp_path / "ride.gpx"
    path.write_text(SAMPLE_GPX, encoding="utf-8")
    return path
