"""In-memory stores for tests and local experiments.

Same contract as the Django stores, including the (event, user)
uniqueness rule on participations.
"""

from dataclasses import asdict, replace
from datetime import datetime

from events.domain import (
    Event,
    EventDetails,
    EventId,
    EventSnapshot,
    Participation,
    ParticipationId,
)
from events.domain.errors import AlreadyJoinedError
from events.stores.interfaces import EventStore, ParticipationStore


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    def insert_event(
        self, details: EventDetails, creator_email: str, created_at: datetime
    ) -> EventId:
        event_id = EventId.generate()
        self._events[event_id] = Event(
            id=event_id,
            creator_email=creator_email,
            created_at=created_at,
            **asdict(details),
        )
        return event_id

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def update_event(self, event_id: EventId, details: EventDetails) -> int:
        event = self._events.get(event_id)
        if event is None:
            return 0
        self._events[event_id] = replace(event, **asdict(details))
        return 1

    def list_events(self) -> list[Event]:
        return self._sorted(self._events.values())

    def list_events_after(self, instant: datetime) -> list[Event]:
        return self._sorted(e for e in self._events.values() if e.event_date > instant)

    def list_events_by_creator(self, creator_email: str) -> list[Event]:
        return self._sorted(
            e for e in self._events.values() if e.creator_email == creator_email
        )

    def count_events(self) -> int:
        return len(self._events)

    @staticmethod
    def _sorted(events) -> list[Event]:
        return sorted(events, key=lambda e: e.event_date)


class InMemoryParticipationStore(ParticipationStore):
    def __init__(self) -> None:
        self._participations: dict[tuple[EventId, str], Participation] = {}

    def find_participation(
        self, event_id: EventId, user_email: str
    ) -> Participation | None:
        return self._participations.get((event_id, user_email))

    def add_participation(
        self,
        event_id: EventId,
        user_email: str,
        joined_at: datetime,
        snapshot: EventSnapshot,
    ) -> ParticipationId:
        key = (event_id, user_email)
        if key in self._participations:
            raise AlreadyJoinedError(str(event_id), user_email)
        participation = Participation(
            id=ParticipationId.generate(),
            event_id=event_id,
            user_email=user_email,
            joined_at=joined_at,
            snapshot=snapshot,
        )
        self._participations[key] = participation
        return participation.id

    def list_participations_for_user(self, user_email: str) -> list[Participation]:
        return sorted(
            (p for p in self._participations.values() if p.user_email == user_email),
            key=lambda p: (p.snapshot.event_date, p.joined_at),
        )
