"""Journey statistics: distance, stop count and duration reports over a user's journeys."""

__version__ = "0.1.0"
