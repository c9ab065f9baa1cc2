"""Path length of a journey from its ordered station passes."""

import math
from collections.abc import Iterable, Sequence
from itertools import pairwise

from journey_stats.domain.errors import InvalidCoordinateError
from journey_stats.domain.models.distance_metric import DistanceMetric
from journey_stats.domain.models.journey import Pass, Section

EARTH_RADIUS_KM = 6371.0


def euclidean(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Planar distance in the units of the stored coordinates."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def haversine_km(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Great-circle distance in kilometres between two (lat, lon) points."""
    lat1, lon1, lat2, lon2 = map(math.radians, (a[0], a[1], b[0], b[1]))
    dlat, dlon = lat2 - lat1, lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


_METRICS = {
    DistanceMetric.EUCLIDEAN: euclidean,
    DistanceMetric.HAVERSINE: haversine_km,
}


def flatten_path(sections: Iterable[Section]) -> list[tuple[float, float]]:
    """Concatenate pass coordinates across sections, keeping travel order.

    Empty sections contribute nothing, so the last pass of one section stays
    adjacent to the first pass of the next non-empty one.
    """
    path: list[tuple[float, float]] = []
    for section in sections:
        for station_pass in section.passes:
            path.append(_coordinate_of(station_pass))
    return path


def _coordinate_of(station_pass: Pass) -> tuple[float, float]:
    coordinate = station_pass.coordinate
    if coordinate is None:
        raise InvalidCoordinateError(f"Pass at {station_pass.station_name!r} has no coordinate")
    if not (math.isfinite(coordinate[0]) and math.isfinite(coordinate[1])):
        raise InvalidCoordinateError(
            f"Pass at {station_pass.station_name!r} has a non-finite coordinate {coordinate}"
        )
    return coordinate


def calculate_distance(
    sections: Sequence[Section], metric: DistanceMetric = DistanceMetric.EUCLIDEAN
) -> float:
    """Sum the distances between consecutive passes of one journey.

    Fewer than two passes yield 0.0. Passes are never reordered.
    """
    measure = _METRICS[DistanceMetric(metric)]
    return math.fsum(measure(a, b) for a, b in pairwise(flatten_path(sections)))


class DistanceCalculator:
    """Distance calculator bound to one metric."""

    def __init__(self, metric: DistanceMetric | str = DistanceMetric.EUCLIDEAN) -> None:
        self.metric = DistanceMetric(metric)

    def __call__(self, sections: Sequence[Section]) -> float:
        return calculate_distance(sections, self.metric)
