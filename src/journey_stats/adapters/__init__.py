"""Adapters layer - external system integrations."""

from journey_stats.adapters.config import AppConfig
from journey_stats.adapters.persistence import (
    InMemoryJourneyRepository,
    SqlAlchemyJourneyRepository,
)

__all__ = [
    "AppConfig",
    "InMemoryJourneyRepository",
    "SqlAlchemyJourneyRepository",
]
