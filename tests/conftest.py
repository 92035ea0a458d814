"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.services import EventInput, EventService, ParticipationService
from events.stores.memory_store import InMemoryEventStore, InMemoryParticipationStore

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def make_event_input(**overrides) -> EventInput:
    fields = {
        "title": "Cleanup",
        "description": "Pick up litter along the river bank.",
        "event_type": "Cleanup",
        "thumbnail": "https://placehold.co/600x400?text=Cleanup",
        "location": "Riverside Park",
        "event_date": NOW + timedelta(days=3),
    }
    fields.update(overrides)
    return EventInput(**fields)


@pytest.fixture
def event_input():
    """Factory for valid EventInput values dated three days after NOW."""
    return make_event_input


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def participation_store() -> InMemoryParticipationStore:
    return InMemoryParticipationStore()


@pytest.fixture
def event_service(event_store, clock) -> EventService:
    return EventService(event_store, clock=clock)


@pytest.fixture
def participation_service(event_store, participation_store, clock) -> ParticipationService:
    return ParticipationService(event_store, participation_store, clock=clock)
