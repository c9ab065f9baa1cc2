"""Distance metric domain model."""

from enum import Enum


class DistanceMetric(str, Enum):
    """Metric applied to every pair of consecutive passes."""

    EUCLIDEAN = "euclidean"
    HAVERSINE = "haversine"
