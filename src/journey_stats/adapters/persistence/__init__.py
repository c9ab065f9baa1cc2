"""Journey store adapters."""

from journey_stats.adapters.persistence.engine import create_journey_engine
from journey_stats.adapters.persistence.in_memory_journey_repository import (
    InMemoryJourneyRepository,
)
from journey_stats.adapters.persistence.sqlalchemy_journey_repository import (
    SqlAlchemyJourneyRepository,
)

__all__ = [
    "InMemoryJourneyRepository",
    "SqlAlchemyJourneyRepository",
    "create_journey_engine",
]
