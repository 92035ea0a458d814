"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, ParticipationId


@dataclass(frozen=True)
class EventDetails:
    """The mutable fields of an Event, replaced as a whole on update."""

    title: str
    description: str
    event_type: str
    thumbnail: str
    location: str
    event_date: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    event_type: str
    thumbnail: str
    location: str
    event_date: datetime
    creator_email: str
    created_at: datetime

    @property
    def details(self) -> EventDetails:
        return EventDetails(
            title=self.title,
            description=self.description,
            event_type=self.event_type,
            thumbnail=self.thumbnail,
            location=self.location,
            event_date=self.event_date,
        )


@dataclass(frozen=True)
class EventSnapshot:
    """Event fields copied into a Participation at join time.

    Never re-synchronized when the source Event changes.
    """

    title: str
    event_type: str
    thumbnail: str
    location: str
    event_date: datetime
    creator_email: str

    @classmethod
    def of(cls, event: Event) -> "EventSnapshot":
        return cls(
            title=event.title,
            event_type=event.event_type,
            thumbnail=event.thumbnail,
            location=event.location,
            event_date=event.event_date,
            creator_email=event.creator_email,
        )


@dataclass(frozen=True)
class Participation:
    """Domain representation of a user's join record for an Event."""

    id: ParticipationId
    event_id: EventId
    user_email: str
    joined_at: datetime
    snapshot: EventSnapshot
