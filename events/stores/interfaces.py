"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import (
    Event,
    EventDetails,
    EventId,
    EventSnapshot,
    Participation,
    ParticipationId,
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def insert_event(
        self, details: EventDetails, creator_email: str, created_at: datetime
    ) -> EventId:
        """Persist a new event and return its generated ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, details: EventDetails) -> int:
        """Replace the mutable fields of an event. Return rows updated."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by event_date ascending."""
        ...

    @abstractmethod
    def list_events_after(self, instant: datetime) -> list[Event]:
        """Return events strictly later than instant, event_date ascending."""
        ...

    @abstractmethod
    def list_events_by_creator(self, creator_email: str) -> list[Event]:
        """Return events created by creator_email, event_date ascending."""
        ...

    @abstractmethod
    def count_events(self) -> int:
        """Return the total number of stored events."""
        ...


class ParticipationStore(ABC):
    """Interface for participation (joined event) persistence."""

    @abstractmethod
    def find_participation(
        self, event_id: EventId, user_email: str
    ) -> Participation | None:
        """Return the participation for (event, user), or None."""
        ...

    @abstractmethod
    def add_participation(
        self,
        event_id: EventId,
        user_email: str,
        joined_at: datetime,
        snapshot: EventSnapshot,
    ) -> ParticipationId:
        """Persist a participation and return its generated ID.

        Raises:
            AlreadyJoinedError: If (event_id, user_email) is already stored.
        """
        ...

    @abstractmethod
    def list_participations_for_user(self, user_email: str) -> list[Participation]:
        """Return a user's participations ordered by snapshot event_date."""
        ...
