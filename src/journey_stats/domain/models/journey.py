"""Journey, section and pass domain models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Pass:
    """A single station visit within a section."""

    station_name: str
    x: float | None  # stationCoordinateX (latitude for geodesic data)
    y: float | None  # stationCoordinateY (longitude for geodesic data)
    station_id: str | None = None

    @property
    def coordinate(self) -> tuple[float, float] | None:
        """Return the (x, y) pair, or None if either value is missing."""
        if self.x is None or self.y is None:
            return None
        return (self.x, self.y)


@dataclass(frozen=True)
class Section:
    """A contiguous leg of a journey, passes kept in travel order."""

    order: int
    passes: tuple[Pass, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Journey:
    """A user's recorded trip.

    Sections are expected in travel order. Duration is stored in minutes.
    """

    id: str
    owner_id: str
    duration: int
    created_at: datetime
    sections: tuple[Section, ...] = field(default_factory=tuple)

    @property
    def passes(self) -> list[Pass]:
        """All passes, section by section, in travel order."""
        return [p for section in self.sections for p in section.passes]

    @property
    def path(self) -> list[tuple[float, float] | None]:
        """Pass coordinates in travel order; None where a pass has no coordinate."""
        return [p.coordinate for p in self.passes]

    @property
    def pass_count(self) -> int:
        return sum(len(section.passes) for section in self.sections)

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id
