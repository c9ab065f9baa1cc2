"""Domain errors raised by the statistics engine and its adapters."""


class JourneyStatsError(Exception):
    """Base class for all journey statistics errors."""


class JourneyNotFoundError(JourneyStatsError):
    """The journey does not exist or belongs to another user.

    Both cases carry the same message so callers cannot probe for
    journeys owned by someone else.
    """

    message = "Journey not found"

    def __init__(self, journey_id: str) -> None:
        super().__init__(self.message)
        self.journey_id = journey_id


class InvalidPeriodError(JourneyStatsError, ValueError):
    """A period selector outside all|week|month|year."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid period: {value!r}")
        self.value = value


class DataUnavailableError(JourneyStatsError):
    """The journey store failed, timed out or returned a malformed result."""


class InvalidCoordinateError(JourneyStatsError, ValueError):
    """A station pass has no usable coordinate."""
