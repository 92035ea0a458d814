"""Participation service - joining events and listing a user's joins.

The duplicate pre-check is a read-then-write; the store's uniqueness
rule on (event, user) is what actually guarantees one join per pair.
"""

import logging

from django.utils import timezone

from events.domain import EventId, EventSnapshot, Participation, ParticipationId
from events.domain.errors import (
    AlreadyJoinedError,
    EventNotFoundError,
    InvalidEventIdError,
    MissingFieldsError,
)
from events.domain.value_objects import is_blank, is_valid_identifier
from events.services.event_service import Clock
from events.stores.interfaces import EventStore, ParticipationStore

logger = logging.getLogger(__name__)


class ParticipationService:
    """Service for joining events."""

    def __init__(
        self,
        events: EventStore,
        participations: ParticipationStore,
        clock: Clock = timezone.now,
    ) -> None:
        self._events = events
        self._participations = participations
        self._clock = clock

    def join_event(self, event_id: str, user_email: str) -> ParticipationId:
        """Record that user_email joins the event, with a snapshot of it.

        Raises:
            MissingFieldsError: If event_id or user_email is blank.
            InvalidEventIdError: If event_id is not a valid identifier.
            EventNotFoundError: If the event does not exist.
            AlreadyJoinedError: If the user already joined this event.
        """
        missing = [
            name
            for name, value in (("event_id", event_id), ("user_email", user_email))
            if is_blank(value)
        ]
        if missing:
            raise MissingFieldsError(missing)

        if not is_valid_identifier(event_id):
            raise InvalidEventIdError()

        event = self._events.get_event(EventId.from_string(event_id))
        if event is None:
            raise EventNotFoundError(event_id)

        if self._participations.find_participation(event.id, user_email) is not None:
            logger.warning("%s already joined event %s", user_email, event.id)
            raise AlreadyJoinedError(event_id, user_email)

        participation_id = self._participations.add_participation(
            event.id,
            user_email,
            joined_at=self._clock(),
            snapshot=EventSnapshot.of(event),
        )
        logger.info("%s joined event %s", user_email, event.id)
        return participation_id

    def list_joined_events(self, user_email: str) -> list[Participation]:
        """Return the user's participations ordered by event date.

        Raises:
            MissingFieldsError: If user_email is blank.
        """
        if is_blank(user_email):
            raise MissingFieldsError(["email"])
        return self._participations.list_participations_for_user(user_email)
