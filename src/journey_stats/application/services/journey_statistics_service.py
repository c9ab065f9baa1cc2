"""Journey statistics service."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from journey_stats.application.services.distance_calculator import DistanceCalculator
from journey_stats.application.services.period_window import period_start
from journey_stats.application.services.rounding import minutes_to_hours, round_to_one_decimal
from journey_stats.domain.errors import InvalidCoordinateError, JourneyNotFoundError
from journey_stats.domain.models import (
    Journey,
    JourneyPathData,
    JourneyReport,
    Period,
    RequestContext,
    SummaryReport,
)
from journey_stats.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


class JourneyStatisticsService:
    """Builds distance, count and duration reports over a user's journeys.

    Holds no per-request state; every call fetches fresh data scoped to the
    identity in the given RequestContext.
    """

    def __init__(
        self,
        journey_repository: JourneyRepository,
        distance_calculator: DistanceCalculator | None = None,
        timezone: str = "UTC",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize with a journey repository.

        Args:
            journey_repository: Read-only store of journeys.
            distance_calculator: Metric used for path length. Defaults to planar.
            timezone: IANA timezone that defines "start of today" for periods.
            clock: Returns the current aware datetime. Defaults to UTC now.
        """
        self._journey_repository = journey_repository
        self._distance_calculator = distance_calculator or DistanceCalculator()
        self._timezone = ZoneInfo(timezone)
        self._clock = clock or (lambda: datetime.now(UTC))

    async def get_one(self, context: RequestContext, journey_id: str) -> JourneyReport:
        """Report distance, stop count and duration of a single journey.

        Raises:
            JourneyNotFoundError: If the journey is missing or owned by someone else.
        """
        journey = await self._journey_repository.find_journey_by_id_and_owner(
            journey_id, context.user_id
        )
        # A store that ignores the owner filter must not leak foreign journeys.
        if journey is None or not journey.is_owned_by(context.user_id):
            raise JourneyNotFoundError(journey_id)

        return JourneyReport(
            journey_id=journey.id,
            distance=round_to_one_decimal(self._journey_distance(journey)),
            stop_count=max(journey.pass_count - 1, 0),
            duration=journey.duration,
            coordinates=[JourneyPathData.from_journey(journey)],
        )

    async def get_all(self, context: RequestContext) -> SummaryReport:
        """Report totals over every journey of the caller."""
        return await self._summarize(context, Period.ALL, created_after=None)

    async def get_period(self, context: RequestContext, period: Period | str) -> SummaryReport:
        """Report totals over the caller's journeys created within a period.

        Raises:
            InvalidPeriodError: Before any query, if period is not all|week|month|year.
        """
        period = Period.parse(period)
        created_after = period_start(period, now=self._clock(), tz=self._timezone)
        return await self._summarize(context, period, created_after)

    async def _summarize(
        self, context: RequestContext, period: Period, created_after: datetime | None
    ) -> SummaryReport:
        owner_id = context.user_id
        journeys, journey_count, duration_sum = await asyncio.gather(
            self._journey_repository.find_journeys_by_owner(owner_id, created_after),
            self._journey_repository.count_journeys_by_owner(owner_id, created_after),
            self._journey_repository.sum_duration_by_owner(owner_id, created_after),
        )
        logger.debug(
            f"Summarizing {len(journeys)} journeys (count={journey_count}) for period {period.value}"
        )

        distance = self._total_distance(journeys)
        duration_minutes = duration_sum if duration_sum is not None else 0

        return SummaryReport(
            period=period.value,
            distance=round_to_one_decimal(distance),
            journey_count=journey_count,
            duration=round_to_one_decimal(minutes_to_hours(duration_minutes)),
            coordinates=[JourneyPathData.from_journey(j) for j in journeys],
        )

    def _total_distance(self, journeys: Sequence[Journey]) -> float:
        return sum(self._journey_distance(journey) for journey in journeys)

    def _journey_distance(self, journey: Journey) -> float:
        try:
            return self._distance_calculator(journey.sections)
        except InvalidCoordinateError as e:
            logger.warning(f"Skipping distance of journey {journey.id}: {e}")
            return 0.0
