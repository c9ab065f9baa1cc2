"""Tests for domain models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from journey_stats.domain.errors import InvalidPeriodError
from journey_stats.domain.models import (
    Journey,
    JourneyPathData,
    JourneyReport,
    Pass,
    Period,
    Section,
    SummaryReport,
)
from tests.factories import TWO_SECTION_PATH, make_journey


def test_pass_coordinate_requires_both_values() -> None:
    """Given a pass missing one value, when reading its coordinate, then None is returned."""
    assert Pass(station_name="A", x=1.0, y=2.0).coordinate == (1.0, 2.0)
    assert Pass(station_name="B", x=1.0, y=None).coordinate is None
    assert Pass(station_name="C", x=None, y=2.0).coordinate is None


def test_journey_flattens_passes_in_section_order() -> None:
    """Given a journey with two sections, when flattening, then passes keep section then pass order."""
    journey = make_journey(sections=TWO_SECTION_PATH)

    assert [p.coordinate for p in journey.passes] == [(0, 0), (3, 4), (3, 4), (3, 7)]
    assert journey.pass_count == 4


def test_journey_without_sections_has_no_passes() -> None:
    """Given a journey without sections, when counting passes, then zero is returned."""
    journey = Journey(
        id="j", owner_id="alice", duration=10, created_at=datetime(2024, 1, 1, tzinfo=UTC)
    )

    assert journey.passes == []
    assert journey.pass_count == 0


def test_journey_ownership() -> None:
    """Given a journey, when checking ownership, then only the owner matches."""
    journey = make_journey(owner_id="alice")

    assert journey.is_owned_by("alice")
    assert not journey.is_owned_by("bob")


def test_journey_is_frozen() -> None:
    """Given a journey, when trying to modify it, then raises AttributeError."""
    journey = make_journey()

    with pytest.raises(AttributeError):
        journey.duration = 5  # type: ignore[misc]


@pytest.mark.parametrize("value", ["all", "week", "month", "year", Period.MONTH])
def test_period_parse_accepts_known_values(value: str) -> None:
    """Given a known period, when parsing, then the enum member is returned."""
    assert Period.parse(value).value == str(getattr(value, "value", value))


@pytest.mark.parametrize("value", ["WEEK", "day", "", None, 7])
def test_period_parse_rejects_unknown_values(value: object) -> None:
    """Given an unknown period, when parsing, then InvalidPeriodError is raised."""
    with pytest.raises(InvalidPeriodError):
        Period.parse(value)  # type: ignore[arg-type]


def test_invalid_period_error_is_value_error() -> None:
    """Given an invalid period error, then it can be handled as a ValueError."""
    assert issubclass(InvalidPeriodError, ValueError)


def test_journey_path_data_mirrors_sections() -> None:
    """Given a journey, when building path data, then sections and passes are kept in order."""
    journey = make_journey(sections=TWO_SECTION_PATH)

    data = JourneyPathData.from_journey(journey)

    assert len(data.sections) == 2
    first = data.sections[0].passes[1]
    assert first.station_coordinate_x == 3
    assert first.station_coordinate_y == 4
    assert first.station_name == "Station 0.1"


def test_journey_report_count_is_stop_count() -> None:
    """Given a journey report, when reading count, then the stop count is returned."""
    report = JourneyReport(journey_id="j", distance=8.0, stop_count=3, duration=42)

    assert report.count == 3
    assert report.duration_unit == "minutes"
    assert "count" not in report.model_dump()


def test_summary_report_count_is_journey_count() -> None:
    """Given a summary report, when reading count, then the journey count is returned."""
    report = SummaryReport(distance=1.5, journey_count=4, duration=2.5)

    assert report.count == 4
    assert report.duration_unit == "hours"
    assert report.coordinates == []


def test_reports_reject_negative_counts() -> None:
    """Given a negative count, when building a report, then validation fails."""
    with pytest.raises(ValidationError):
        JourneyReport(journey_id="j", distance=0, stop_count=-1, duration=0)
    with pytest.raises(ValidationError):
        SummaryReport(distance=0, journey_count=-1, duration=0)


def test_section_defaults_to_no_passes() -> None:
    """Given a section without passes, then its passes tuple is empty."""
    assert Section(order=0).passes == ()


def test_journey_path_lists_coordinates_in_travel_order() -> None:
    """Given a journey with a pass lacking a coordinate, when reading its path, then None marks that pass."""
    journey = make_journey(sections=[[(0, 0), (3, 4)], [(None, 1)]])

    assert journey.path == [(0, 0), (3, 4), None]
