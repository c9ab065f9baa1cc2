"""Shared fixtures."""

import pytest

from journey_stats.adapters.persistence import InMemoryJourneyRepository
from journey_stats.application.services import JourneyStatisticsService
from journey_stats.domain.models import RequestContext
from tests.factories import FIXED_NOW


@pytest.fixture
def alice() -> RequestContext:
    """Request context of the journey owner used in most tests."""
    return RequestContext(user_id="alice")


@pytest.fixture
def bob() -> RequestContext:
    """Request context of a second, unrelated user."""
    return RequestContext(user_id="bob")


@pytest.fixture
def repository() -> InMemoryJourneyRepository:
    """Empty in-memory repository."""
    return InMemoryJourneyRepository()


@pytest.fixture
def service(repository: InMemoryJourneyRepository) -> JourneyStatisticsService:
    """Statistics service over the in-memory repository with a fixed clock."""
    return JourneyStatisticsService(repository, clock=lambda: FIXED_NOW)
