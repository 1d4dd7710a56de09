"""Tests for the elevation profile view state."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gpx_trackview.errors import UnsupportedMutationError
from gpx_trackview.models import Track, TrackSegment
from gpx_trackview.utils import EPOCH_ZERO
from gpx_trackview.views import (
    ElevationViewConfig,
    ElevationViewState,
    SetPoints,
    SetTolerance,
    SetVisibility,
)

START = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def view() -> ElevationViewState:
    return ElevationViewState()


def test_new_view_is_empty(view: ElevationViewState) -> None:
    assert not view.has_points
    assert view.num_points == 0
    assert view.num_reduced_points == 0
    assert view.start_time == view.end_time == EPOCH_ZERO
    assert view.time == EPOCH_ZERO
    assert view.segment_fractions() == []
    assert view.cursor_fraction() == 0.0


def test_set_points_builds_single_segment(view, bump_points) -> None:
    view.set_points(bump_points)
    assert view.has_points
    assert len(view.segments) == 1
    assert view.num_points == 3
    assert view.num_reduced_points == 3
    assert view.start_time == START
    assert view.end_time == START + timedelta(seconds=20)
    assert view.time == START
    assert view.points == bump_points
    assert view.track is None


def test_set_track_adopts_segments(view, two_segment_track) -> None:
    view.set_track(two_segment_track)
    assert view.track is two_segment_track
    assert view.points is None
    assert [s is t for s, t in zip(view.segments, two_segment_track.segments)] == [
        True,
        True,
    ]
    assert view.num_points == 7
    assert view.start_time == START
    assert view.end_time == START + timedelta(seconds=120)


@pytest.mark.parametrize("empty", [None, []])
def test_assigning_nothing_returns_to_empty(view, bump_points, empty) -> None:
    view.set_points(bump_points)
    view.set_points(empty)
    assert not view.has_points
    assert view.segments == []
    assert view.time == EPOCH_ZERO


def test_empty_track_is_empty(view) -> None:
    view.set_track(Track(name="nothing", segments=[TrackSegment([])]))
    assert not view.has_points
    assert view.num_points == 0


def test_tolerance_is_clamped(view) -> None:
    view.set_tolerance(2.5)
    assert view.tolerance == 1.0
    view.set_tolerance(-1.0)
    assert view.tolerance == 0.0


def test_tolerance_reduces_points_and_keeps_cursor(view, wavy_profile) -> None:
    view.set_points(wavy_profile)
    middle = wavy_profile[100].time
    view.set_time(middle)
    view.set_tolerance(0.05)
    assert view.num_points == len(wavy_profile)
    assert view.num_reduced_points < view.num_points
    assert view.time == middle
    view.set_tolerance(0.0)
    assert view.num_reduced_points == view.num_points


def test_reassigning_source_resets_cursor(view, wavy_profile) -> None:
    view.set_points(wavy_profile)
    view.set_time(wavy_profile[50].time)
    view.set_points(wavy_profile)
    assert view.time == view.start_time


def test_time_before_start_clamps_to_start(view, bump_points) -> None:
    view.set_points(bump_points)
    view.set_time(START - timedelta(hours=1))
    assert view.time == START


def test_time_after_end_clamps_to_end(view, bump_points) -> None:
    view.set_points(bump_points)
    view.set_time(START + timedelta(days=1))
    assert view.time == view.end_time


def test_set_time_on_empty_view_stays_at_sentinel(view) -> None:
    view.set_time(START)
    assert view.time == EPOCH_ZERO


def test_naive_times_are_treated_as_utc(view, bump_points) -> None:
    view.set_points(bump_points)
    naive = datetime(2024, 5, 1, 10, 0, 5)
    view.set_time(naive)
    assert view.time == START + timedelta(seconds=5)


def test_segment_fractions_map_time_and_elevation(view, bump_points) -> None:
    view.set_points(bump_points)
    assert view.segment_fractions() == [
        [
            (0.0, pytest.approx(1.0)),
            (0.5, pytest.approx(0.0)),
            (1.0, pytest.approx(1.0)),
        ]
    ]


def test_segment_fractions_apply_elevation_floor(bump_points) -> None:
    view = ElevationViewState(ElevationViewConfig(min_elevation_range=20))
    view.set_points(bump_points)
    (fractions,) = view.segment_fractions()
    ys = [y for _, y in fractions]
    assert ys == pytest.approx([0.625, 0.375, 0.625])


def test_flat_profile_draws_mid_line(view, make_profile) -> None:
    view.set_points(make_profile([50.0, 50.0, 50.0]))
    (fractions,) = view.segment_fractions()
    assert [y for _, y in fractions] == [0.5, 0.5, 0.5]


def test_zero_duration_maps_everything_to_origin(view, make_point) -> None:
    points = [make_point(0.0, 10.0), make_point(0.0, 20.0), make_point(0.0, 15.0)]
    view.set_points(points)
    assert view.duration == timedelta(0)
    (fractions,) = view.segment_fractions()
    assert [x for x, _ in fractions] == [0.0, 0.0, 0.0]
    assert view.cursor_fraction() == 0.0
    assert view.time_at_fraction(0.7) == START


def test_cursor_fraction_and_time_mapping(view, bump_points) -> None:
    view.set_points(bump_points)
    view.set_time(START + timedelta(seconds=5))
    assert view.cursor_fraction() == pytest.approx(0.25)
    assert view.time_at_fraction(0.5) == START + timedelta(seconds=10)
    assert view.time_at_fraction(3.0) == view.end_time
    assert view.time_at_fraction(-1.0) == view.start_time


def test_scrub_moves_cursor_once(view, bump_points) -> None:
    assert not view.scrub_to(0.5)
    view.set_points(bump_points)
    assert view.scrub_to(0.5)
    assert view.time == START + timedelta(seconds=10)
    assert not view.scrub_to(0.5)


def test_time_window_override(view, two_segment_track) -> None:
    view.set_track(two_segment_track)
    view.set_time_window(START + timedelta(seconds=100), None)
    assert view.start_time == START + timedelta(seconds=100)
    assert view.end_time == START + timedelta(seconds=120)
    assert view.time == view.start_time
    first, second = view.segment_fractions()
    assert first == []
    assert [x for x, _ in second] == pytest.approx([0.0, 0.5, 1.0])
    view.set_time_window(None, None)
    assert view.start_time == START


def test_inverted_time_window_is_swapped(view, bump_points) -> None:
    view.set_points(bump_points)
    later = START + timedelta(seconds=15)
    earlier = START + timedelta(seconds=5)
    view.set_time_window(later, earlier)
    assert view.start_time == earlier
    assert view.end_time == later


def test_new_source_clears_time_window(view, bump_points) -> None:
    view.set_points(bump_points)
    view.set_time_window(START + timedelta(seconds=5), START + timedelta(seconds=6))
    view.set_points(bump_points)
    assert view.end_time == START + timedelta(seconds=20)


def test_min_elevation_range_never_negative(view) -> None:
    view.set_min_elevation_range(-5)
    assert view.min_elevation_range == 0.0


def test_apply_accepts_mutation_records(view, bump_points) -> None:
    view.apply(SetPoints(bump_points))
    view.apply(SetTolerance(0.5))
    assert view.num_reduced_points == 2


def test_apply_rejects_unknown_mutations(view) -> None:
    with pytest.raises(UnsupportedMutationError):
        view.apply(SetVisibility(routes=False))
    with pytest.raises(TypeError):
        view.apply("tolerance=0.5")  # type: ignore[arg-type]
