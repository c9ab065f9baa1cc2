"""In-memory journey repository."""

from collections.abc import Iterable
from datetime import datetime

from journey_stats.domain.models.journey import Journey
from journey_stats.domain.ports.journey_repository import JourneyRepository


class InMemoryJourneyRepository(JourneyRepository):
    """Journey repository over a fixed collection of journeys.

    Every port call is appended to ``calls`` as ``(method_name, args)``.
    """

    def __init__(self, journeys: Iterable[Journey] = ()) -> None:
        self._journeys: dict[str, Journey] = {j.id: j for j in journeys}
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def add(self, journey: Journey) -> None:
        self._journeys[journey.id] = journey

    async def find_journey_by_id_and_owner(self, journey_id: str, owner_id: str) -> Journey | None:
        self.calls.append(("find_journey_by_id_and_owner", (journey_id, owner_id)))
        journey = self._journeys.get(journey_id)
        if journey is None or journey.owner_id != owner_id:
            return None
        return journey

    async def find_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> list[Journey]:
        self.calls.append(("find_journeys_by_owner", (owner_id, created_after)))
        return self._select(owner_id, created_after)

    async def count_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> int:
        self.calls.append(("count_journeys_by_owner", (owner_id, created_after)))
        return len(self._select(owner_id, created_after))

    async def sum_duration_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> float | None:
        self.calls.append(("sum_duration_by_owner", (owner_id, created_after)))
        journeys = self._select(owner_id, created_after)
        if not journeys:
            return None
        return float(sum(j.duration for j in journeys))

    def _select(self, owner_id: str, created_after: datetime | None) -> list[Journey]:
        selected = [
            j
            for j in self._journeys.values()
            if j.owner_id == owner_id and (created_after is None or j.created_at >= created_after)
        ]
        return sorted(selected, key=lambda j: j.created_at)
