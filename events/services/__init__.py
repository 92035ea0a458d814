from dataclasses import dataclass

from events.services.event_service import EventService
from events.services.inputs import EventInput
from events.services.participation_service import ParticipationService


@dataclass(frozen=True)
class Services:
    """Process-scoped service registry shared by all handlers."""

    events: EventService
    participations: ParticipationService


def get_services() -> Services:
    """Return the registry built by EventsConfig.ready()."""
    from django.apps import apps

    return apps.get_app_config("events").services


def build_services() -> Services:
    """Wire the services to the Django ORM stores.

    Must be called after the app registry is ready.
    """
    from events.stores.django_store import DjangoEventStore, DjangoParticipationStore

    event_store = DjangoEventStore()
    return Services(
        events=EventService(event_store),
        participations=ParticipationService(event_store, DjangoParticipationStore()),
    )


__all__ = [
    "EventInput",
    "EventService",
    "ParticipationService",
    "Services",
    "build_services",
    "get_services",
]
