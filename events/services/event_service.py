"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Update checks run in a fixed order: identifier, existence, creator,
then fields.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import Event, EventDetails, EventId
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventDateError,
    MissingFieldsError,
    NotEventCreatorError,
    PastEventDateError,
)
from events.domain.value_objects import is_blank, is_valid_identifier, parse_instant
from events.services.inputs import EventInput
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

EVENT_FIELDS = (
    "title",
    "description",
    "event_type",
    "thumbnail",
    "location",
    "event_date",
)


def validate_event_input(
    fields: EventInput, now: datetime, **extra: str | None
) -> EventDetails:
    """Check an EventInput against the event rules and build EventDetails.

    Keyword arguments in extra are additional required values, such as
    creator_email on create.

    Raises:
        MissingFieldsError: If any required value is blank.
        InvalidEventDateError: If event_date cannot be parsed.
        PastEventDateError: If event_date is not strictly after now.
    """
    missing = [name for name in EVENT_FIELDS if is_blank(getattr(fields, name))]
    missing.extend(name for name, value in extra.items() if is_blank(value))
    if missing:
        raise MissingFieldsError(missing)

    try:
        event_date = parse_instant(fields.event_date)
    except ValueError:
        raise InvalidEventDateError() from None

    if event_date <= now:
        raise PastEventDateError()

    return EventDetails(
        title=fields.title,
        description=fields.description,
        event_type=fields.event_type,
        thumbnail=fields.thumbnail,
        location=fields.location,
        event_date=event_date,
    )


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Clock = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, fields: EventInput, creator_email: str) -> EventId:
        """Create an event owned by creator_email.

        Raises:
            MissingFieldsError, InvalidEventDateError, PastEventDateError
        """
        now = self._clock()
        details = validate_event_input(fields, now, creator_email=creator_email)
        event_id = self._store.insert_event(details, creator_email, created_at=now)
        logger.info("Event %s created by %s", event_id, creator_email)
        return event_id

    def update_event(
        self, event_id: str, requestor_email: str, fields: EventInput
    ) -> int:
        """Replace an event's mutable fields. Only the creator may do this.

        Returns the number of modified events: 0 when nothing changed.

        Raises:
            EventNotFoundError: If the ID is malformed or the event does not exist.
            NotEventCreatorError: If requestor_email is not the creator.
            MissingFieldsError, InvalidEventDateError, PastEventDateError
        """
        existing = self.get_event(event_id)

        if is_blank(requestor_email) or requestor_email != existing.creator_email:
            logger.warning(
                "Rejected update of event %s by non-creator %s",
                existing.id,
                requestor_email,
            )
            raise NotEventCreatorError()

        details = validate_event_input(fields, self._clock())
        if details == existing.details:
            return 0

        modified = self._store.update_event(existing.id, details)
        logger.info("Event %s updated by %s", existing.id, requestor_email)
        return modified

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the ID is malformed or the event does not exist.
        """
        if not is_valid_identifier(event_id):
            raise EventNotFoundError(str(event_id))

        event = self._store.get_event(EventId.from_string(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_events(self) -> list[Event]:
        """Return all events, soonest first."""
        return self._store.list_events()

    def list_upcoming_events(self, now: datetime | None = None) -> list[Event]:
        """Return events strictly after now (default: the service clock)."""
        if now is None:
            now = self._clock()
        return self._store.list_events_after(now)

    def list_events_by_creator(self, creator_email: str) -> list[Event]:
        """Return events created by creator_email, soonest first.

        Raises:
            MissingFieldsError: If creator_email is blank.
        """
        if is_blank(creator_email):
            raise MissingFieldsError(["email"])
        return self._store.list_events_by_creator(creator_email)

    def count_events(self) -> int:
        return self._store.count_events()
