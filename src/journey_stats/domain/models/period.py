"""Period selector domain model."""

from enum import Enum

from journey_stats.domain.errors import InvalidPeriodError


class Period(str, Enum):
    """Time window used to filter journeys by creation time."""

    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: "Period | str") -> "Period":
        """Return the matching period or raise InvalidPeriodError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidPeriodError(value) from e
