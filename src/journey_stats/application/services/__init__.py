"""Application services (use cases) for journey statistics."""

from journey_stats.application.services.distance_calculator import (
    DistanceCalculator,
    DistanceMetric,
    calculate_distance,
)
from journey_stats.application.services.journey_statistics_service import (
    JourneyStatisticsService,
)
from journey_stats.application.services.period_window import period_start
from journey_stats.application.services.rounding import minutes_to_hours, round_to_one_decimal

__all__ = [
    "DistanceCalculator",
    "DistanceMetric",
    "JourneyStatisticsService",
    "calculate_distance",
    "minutes_to_hours",
    "period_start",
    "round_to_one_decimal",
]
