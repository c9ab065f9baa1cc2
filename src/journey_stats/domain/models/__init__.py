"""Domain models for journey statistics."""

from journey_stats.domain.models.distance_metric import DistanceMetric
from journey_stats.domain.models.journey import Journey, Pass, Section
from journey_stats.domain.models.period import Period
from journey_stats.domain.models.report import (
    JourneyPathData,
    JourneyReport,
    PassData,
    SectionData,
    SummaryReport,
)
from journey_stats.domain.models.request_context import RequestContext

__all__ = [
    "DistanceMetric",
    "Journey",
    "JourneyPathData",
    "JourneyReport",
    "Pass",
    "PassData",
    "Period",
    "RequestContext",
    "Section",
    "SectionData",
    "SummaryReport",
]
