"""Domain layer - core business logic and models."""

from journey_stats.domain.errors import (
    DataUnavailableError,
    InvalidCoordinateError,
    InvalidPeriodError,
    JourneyNotFoundError,
    JourneyStatsError,
)
from journey_stats.domain.models import (
    Journey,
    JourneyReport,
    Pass,
    Period,
    RequestContext,
    Section,
    SummaryReport,
)
from journey_stats.domain.ports import JourneyRepository

__all__ = [
    "DataUnavailableError",
    "InvalidCoordinateError",
    "InvalidPeriodError",
    "Journey",
    "JourneyNotFoundError",
    "JourneyReport",
    "JourneyRepository",
    "JourneyStatsError",
    "Pass",
    "Period",
    "RequestContext",
    "Section",
    "SummaryReport",
]
