"""Tests for the journey distance calculator."""

import math

import pytest

from journey_stats.application.services.distance_calculator import (
    DistanceCalculator,
    DistanceMetric,
    calculate_distance,
    flatten_path,
    haversine_km,
)
from journey_stats.domain.errors import InvalidCoordinateError
from tests.factories import TWO_SECTION_PATH, make_journey


def test_two_section_example_yields_eight() -> None:
    """Given (0,0)->(3,4) | (3,4)->(3,7), when calculating distance, then 5 + 0 + 3 = 8."""
    journey = make_journey(sections=TWO_SECTION_PATH)

    assert calculate_distance(journey.sections) == pytest.approx(8.0)


@pytest.mark.parametrize(
    "sections",
    [
        [],
        [[]],
        [[], []],
        [[(1, 1)]],
        [[], [(5, 5)], []],
    ],
)
def test_fewer_than_two_passes_yield_zero(sections: list) -> None:
    """Given zero or one pass in total, when calculating distance, then it is zero."""
    journey = make_journey(sections=sections)

    assert calculate_distance(journey.sections) == 0.0


def test_empty_section_does_not_break_adjacency() -> None:
    """Given an empty section between two others, then the passes around it stay adjacent."""
    journey = make_journey(sections=[[(0, 0)], [], [(3, 4)]])

    assert calculate_distance(journey.sections) == pytest.approx(5.0)


def test_section_boundary_passes_are_adjacent() -> None:
    """Given two single-pass sections, then the distance spans the section boundary."""
    journey = make_journey(sections=[[(0, 0)], [(0, 2)]])

    assert calculate_distance(journey.sections) == pytest.approx(2.0)


def test_distance_is_order_sensitive() -> None:
    """Given the same passes in another order, when calculating distance, then the result changes."""
    in_order = make_journey(sections=[[(0, 0), (1, 0), (2, 0)]])
    reordered = make_journey(sections=[[(0, 0), (2, 0), (1, 0)]])

    assert calculate_distance(in_order.sections) == pytest.approx(2.0)
    assert calculate_distance(reordered.sections) == pytest.approx(3.0)


def test_distance_equals_sum_of_consecutive_pairs() -> None:
    """Given N passes, then the distance is the sum of the N-1 consecutive pair distances."""
    points = [(0.0, 0.0), (1.0, 1.0), (4.0, 5.0), (4.0, 5.0), (-2.0, 5.0)]
    journey = make_journey(sections=[points[:2], points[2:]])

    expected = sum(math.dist(a, b) for a, b in zip(points, points[1:], strict=False))

    assert calculate_distance(journey.sections) == pytest.approx(expected)
    assert calculate_distance(journey.sections) >= 0


def test_coincident_points_have_zero_distance() -> None:
    """Given repeated passes at one point, then the distance is zero."""
    journey = make_journey(sections=[[(2, 2), (2, 2)], [(2, 2)]])

    assert calculate_distance(journey.sections) == 0.0


def test_missing_coordinate_raises() -> None:
    """Given a pass without a coordinate, when calculating distance, then InvalidCoordinateError is raised."""
    journey = make_journey(sections=[[(0, 0), (None, 4)]])

    with pytest.raises(InvalidCoordinateError, match="has no coordinate"):
        calculate_distance(journey.sections)


def test_flatten_path_keeps_travel_order() -> None:
    """Given sections, when flattening, then coordinates follow section then pass order."""
    journey = make_journey(sections=TWO_SECTION_PATH)

    assert flatten_path(journey.sections) == [(0, 0), (3, 4), (3, 4), (3, 7)]


def test_haversine_one_degree_of_latitude() -> None:
    """Given points one degree of latitude apart, then the distance is about 111.2 km."""
    assert haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111.195, abs=0.01)


def test_haversine_metric_is_used_by_calculator() -> None:
    """Given the haversine metric, when calculating, then the result is in kilometres."""
    # Munich Marienplatz -> Munich Hauptbahnhof, roughly 1.3 km
    journey = make_journey(sections=[[(48.13743, 11.57549), (48.14016, 11.55848)]])

    calculator = DistanceCalculator(DistanceMetric.HAVERSINE)

    assert calculator(journey.sections) == pytest.approx(1.3, abs=0.1)


def test_calculator_accepts_metric_name() -> None:
    """Given a metric name string, when creating a calculator, then the enum is resolved."""
    assert DistanceCalculator("haversine").metric is DistanceMetric.HAVERSINE
    assert DistanceCalculator().metric is DistanceMetric.EUCLIDEAN


def test_calculator_rejects_unknown_metric() -> None:
    """Given an unknown metric name, when creating a calculator, then ValueError is raised."""
    with pytest.raises(ValueError):
        DistanceCalculator("manhattan")


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinate_raises(bad: float) -> None:
    """Given a pass at NaN or infinity, when calculating distance, then InvalidCoordinateError is raised."""
    journey = make_journey(sections=[[(0, 0), (bad, 1)]])

    with pytest.raises(InvalidCoordinateError, match="non-finite coordinate"):
        calculate_distance(journey.sections)
