"""Statistics report domain models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from journey_stats.domain.models.journey import Journey, Section


class PassData(BaseModel):
    """Raw pass data forwarded for path rendering."""

    model_config = ConfigDict(frozen=True)

    station_name: str
    station_coordinate_x: float | None
    station_coordinate_y: float | None


class SectionData(BaseModel):
    """Raw section data forwarded for path rendering."""

    model_config = ConfigDict(frozen=True)

    passes: list[PassData]

    @classmethod
    def from_section(cls, section: Section) -> "SectionData":
        return cls(
            passes=[
                PassData(
                    station_name=p.station_name,
                    station_coordinate_x=p.x,
                    station_coordinate_y=p.y,
                )
                for p in section.passes
            ]
        )


class JourneyPathData(BaseModel):
    """Sections and passes of one journey, in travel order."""

    model_config = ConfigDict(frozen=True)

    sections: list[SectionData]

    @classmethod
    def from_journey(cls, journey: Journey) -> "JourneyPathData":
        return cls(sections=[SectionData.from_section(s) for s in journey.sections])


class JourneyReport(BaseModel):
    """Statistics for a single journey.

    ``stop_count`` is the number of stops travelled between passes, not a
    number of journeys. ``duration`` is the stored value in minutes.
    """

    model_config = ConfigDict(frozen=True)

    journey_id: str
    distance: float
    stop_count: int = Field(ge=0)
    duration: float
    duration_unit: Literal["minutes"] = "minutes"
    coordinates: list[JourneyPathData] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Generic report count; for a single journey this is the stop count."""
        return self.stop_count


class SummaryReport(BaseModel):
    """Aggregate statistics over the journeys of one user.

    ``journey_count`` is the number of journeys, ``duration`` the summed
    duration in hours.
    """

    model_config = ConfigDict(frozen=True)

    period: str = "all"
    distance: float
    journey_count: int = Field(ge=0)
    duration: float
    duration_unit: Literal["hours"] = "hours"
    coordinates: list[JourneyPathData] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Generic report count; for a summary this is the journey count."""
        return self.journey_count
