"""SQLAlchemy-backed journey repository."""

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, TypeVar

from sqlalchemy import Engine, Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from journey_stats.adapters.persistence.orm_models import JourneyRecord, SectionRecord
from journey_stats.domain.errors import DataUnavailableError
from journey_stats.domain.models.journey import Journey, Pass, Section
from journey_stats.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyJourneyRepository(JourneyRepository):
    """Journey repository reading from a relational store through SQLAlchemy.

    Queries run in synchronous sessions on worker threads, so independent
    queries of one request can be awaited concurrently.
    """

    def __init__(self, engine: Engine, timeout_seconds: float = 10.0) -> None:
        """Initialize with an engine and a per-query timeout."""
        self._engine = engine
        self._timeout_seconds = timeout_seconds

    async def find_journey_by_id_and_owner(self, journey_id: str, owner_id: str) -> Journey | None:
        """Find a journey with its sections and passes, scoped to its owner."""
        statement = _with_path(
            select(JourneyRecord).where(
                JourneyRecord.uuid == journey_id,
                JourneyRecord.user_id == owner_id,
            )
        )

        def query(session: Session) -> Journey | None:
            record = session.scalars(statement).first()
            return _to_domain(record) if record is not None else None

        return await self._run("find_journey_by_id_and_owner", query)

    async def find_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> list[Journey]:
        """Find all journeys of an owner with their sections and passes."""
        statement = _with_path(
            _filter_owner(select(JourneyRecord), owner_id, created_after).order_by(
                JourneyRecord.created_at
            )
        )

        def query(session: Session) -> list[Journey]:
            return [_to_domain(record) for record in session.scalars(statement)]

        return await self._run("find_journeys_by_owner", query)

    async def count_journeys_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> int:
        """Count the journeys of an owner."""
        statement = _filter_owner(
            select(func.count()).select_from(JourneyRecord), owner_id, created_after
        )

        def query(session: Session) -> int:
            return int(session.scalar(statement) or 0)

        return await self._run("count_journeys_by_owner", query)

    async def sum_duration_by_owner(
        self, owner_id: str, created_after: datetime | None = None
    ) -> float | None:
        """Sum stored durations with a single aggregate query."""
        statement = _filter_owner(
            select(func.sum(JourneyRecord.duration)), owner_id, created_after
        )

        def query(session: Session) -> float | None:
            return _as_number(session.scalar(statement))

        return await self._run("sum_duration_by_owner", query)

    async def _run(self, name: str, query: Callable[[Session], T]) -> T:
        def in_session() -> T:
            with Session(self._engine) as session:
                return query(session)

        try:
            return await asyncio.wait_for(asyncio.to_thread(in_session), self._timeout_seconds)
        except TimeoutError as e:
            logger.error(f"Journey store query {name} timed out after {self._timeout_seconds}s")
            raise DataUnavailableError(f"Journey store query {name} timed out") from e
        except SQLAlchemyError as e:
            logger.error(f"Journey store query {name} failed: {e}")
            raise DataUnavailableError(f"Journey store query {name} failed") from e


def _filter_owner(
    statement: Select[Any], owner_id: str, created_after: datetime | None
) -> Select[Any]:
    statement = statement.where(JourneyRecord.user_id == owner_id)
    if created_after is not None:
        # Stored timestamps are UTC.
        if created_after.tzinfo is not None:
            created_after = created_after.astimezone(UTC)
        statement = statement.where(JourneyRecord.created_at >= created_after)
    return statement


def _with_path(statement: Select[tuple[JourneyRecord]]) -> Select[tuple[JourneyRecord]]:
    return statement.options(
        selectinload(JourneyRecord.sections).selectinload(SectionRecord.passes)
    )


def _as_number(value: object) -> float | None:
    """Convert an aggregate result to float; None stays None."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise DataUnavailableError(f"Malformed duration aggregate: {value!r}")
    return float(value)


def _to_domain(record: JourneyRecord) -> Journey:
    created_at = record.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; values are written in UTC.
        created_at = created_at.replace(tzinfo=UTC)
    return Journey(
        id=record.uuid,
        owner_id=record.user_id,
        duration=record.duration,
        created_at=created_at,
        sections=tuple(
            Section(
                order=section.order,
                passes=tuple(
                    Pass(
                        station_name=p.station_name,
                        x=p.station_coordinate_x,
                        y=p.station_coordinate_y,
                        station_id=p.station_id,
                    )
                    for p in section.passes
                ),
            )
            for section in record.sections
        ),
    )
