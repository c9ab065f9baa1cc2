"""Ports (interfaces) for the ports-and-adapters architecture."""

from journey_stats.domain.ports.journey_repository import JourneyRepository

__all__ = ["JourneyRepository"]
