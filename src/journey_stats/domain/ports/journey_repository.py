"""Journey repository port."""

from datetime import datetime
from typing import Protocol

from journey_stats.domain.models.journey import Journey


class JourneyRepository(Protocol):
    """Port for read-only access to stored journeys.

    Implementations raise DataUnavailableError when the store cannot answer.
    """

    async def find_journey_by_id_and_owner(self, journey_id: str, owner_id: str) -> Journey | None:
        """Find a journey with its sections and passes, scoped to its owner."""
        ...

    async def find_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> list[Journey]:
        """Find all journeys of an owner, optionally created at or after a bound."""
        ...

    async def count_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> int:
        """Count the journeys of an owner."""
        ...

    async def sum_duration_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> float | None:
        """Sum stored durations of an owner's journeys; None if there are none."""
        ...
