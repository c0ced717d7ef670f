"""Tests for edge gaps and mergeable distance bounds between segments."""

from __future__ import annotations

import pytest

from locomotion_timeline.errors import UnsupportedSegmentError
from locomotion_timeline.timeline import (
    Path,
    distance_between,
    maximum_mergeable_distance,
    within_mergeable_distance,
)

from conftest import make_path, make_visit


@pytest.fixture
def five_and_three():
    """Paths at 5 m/s and 3 m/s, 30 s apart, with a 500 m edge gap."""

    first = make_path([(0, 0.0, 5.0, "cycling"), (10, 50.0, 5.0, "cycling")])
    second = make_path([(40, 550.0, 3.0, "walking"), (50, 580.0, 3.0, "walking")])
    return first, second


def test_distance_uses_near_edges_by_start_order(walking_path, driving_rows) -> None:
    driving = make_path(driving_rows)
    assert distance_between(walking_path, driving) == pytest.approx(15.0, abs=1e-6)
    assert distance_between(driving, walking_path) == pytest.approx(15.0, abs=1e-6)
    assert walking_path.distance_from(driving) == pytest.approx(15.0, abs=1e-6)


def test_distance_skips_unlocated_edge_samples(walking_path) -> None:
    later = make_path([(50, None, -1.0, None), (60, 100.0, -1.0, None)])
    assert distance_between(walking_path, later) == pytest.approx(40.0, abs=1e-6)


def test_distance_absent_without_located_samples(walking_path) -> None:
    unlocated = make_path([(50, None, -1.0, None), (60, None, -1.0, None)])
    assert distance_between(walking_path, unlocated) is None
    assert distance_between(unlocated, walking_path) is None


def test_distance_absent_for_empty_path(walking_path) -> None:
    assert distance_between(walking_path, Path()) is None
    assert not within_mergeable_distance(walking_path, Path())


def test_mergeable_distance_scenario(five_and_three) -> None:
    first, second = five_and_three
    assert first.metres_per_second == pytest.approx(5.0, abs=1e-6)
    assert second.metres_per_second == pytest.approx(3.0, abs=1e-6)
    bound = maximum_mergeable_distance(first, second)
    assert bound == pytest.approx(480.0, abs=1e-4)
    assert distance_between(first, second) == pytest.approx(500.0, abs=1e-6)
    assert within_mergeable_distance(first, second) is False


def test_mergeable_distance_is_symmetric(five_and_three, walking_path, driving_rows) -> None:
    first, second = five_and_three
    assert maximum_mergeable_distance(first, second) == maximum_mergeable_distance(second, first)
    driving = make_path(driving_rows)
    assert walking_path.maximum_mergeable_distance_from(
        driving
    ) == driving.maximum_mergeable_distance_from(walking_path)


def test_mergeable_distance_zero_without_positive_speeds() -> None:
    still = make_path([(0, 0.0, -1.0, None), (10, 0.0, -1.0, None)])
    also_still = make_path([(40, 0.0, -1.0, None), (50, 0.0, -1.0, None)])
    assert still.metres_per_second == 0.0
    assert maximum_mergeable_distance(still, also_still) == 0.0


def test_mergeable_distance_ignores_non_positive_speed_in_mean() -> None:
    moving = make_path([(0, 0.0, -1.0, None), (10, 40.0, -1.0, None)])
    still = make_path([(20, 40.0, -1.0, None), (30, 40.0, -1.0, None)])
    # Only the 4 m/s path contributes: 4 * 10 s * 4.
    assert maximum_mergeable_distance(moving, still) == pytest.approx(160.0, abs=1e-4)


def test_mergeable_distance_zero_without_time_separation(walking_path) -> None:
    assert maximum_mergeable_distance(walking_path, Path()) == 0.0


def test_overlapping_paths_have_zero_separation(walking_path) -> None:
    overlapping = make_path([(20, 0.0, -1.0, None), (60, 100.0, -1.0, None)])
    assert walking_path.time_interval_from(overlapping) == 0.0
    assert maximum_mergeable_distance(walking_path, overlapping) == 0.0


def test_path_visit_dispatch_is_symmetric(walking_path) -> None:
    visit = make_visit([(200.0, 0.0), (205.0, 0.0), (200.0, 5.0)], start_s=100.0)
    assert distance_between(walking_path, visit) == distance_between(visit, walking_path)
    assert distance_between(walking_path, visit) == visit.distance_from(walking_path)
    assert maximum_mergeable_distance(walking_path, visit) == maximum_mergeable_distance(
        visit, walking_path
    )


def test_visit_visit_pairs_are_not_resolved_here() -> None:
    a = make_visit([(0.0, 0.0), (1.0, 0.0)])
    b = make_visit([(500.0, 0.0), (501.0, 0.0)], start_s=600.0)
    assert distance_between(a, b) is None
    assert maximum_mergeable_distance(a, b) == 0.0


def test_non_segments_are_rejected(walking_path) -> None:
    with pytest.raises(UnsupportedSegmentError):
        distance_between(walking_path, "not a segment")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        maximum_mergeable_distance(object(), walking_path)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "b_rows",
    [
        [(0, 100.0, 1.5, "walking"), (10, 130.0, 1.5, "walking")],
        [(0, 100.0, 1.5, "walking"), (20, 130.0, 1.5, "walking")],
    ],
    ids=["shorter", "identical-range"],
)
def test_equal_start_times_pick_one_consistent_edge_pair(b_rows) -> None:
    a = make_path([(0, 0.0, 1.5, "walking"), (20, 30.0, 1.5, "walking")])
    b = make_path(b_rows)

    assert a.starts_before(b) is not b.starts_before(a)
    assert distance_between(a, b) == pytest.approx(distance_between(b, a))

    first, second = (a, b) if a.starts_before(b) else (b, a)
    assert first.edge_sample_with(second) is first.samples[-1]
    assert second.edge_sample_with(first) is second.samples[0]
    expected = first.samples[-1].distance_from(second.samples[0])
    assert distance_between(a, b) == pytest.approx(expected)
