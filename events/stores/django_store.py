"""Django ORM implementation of the event and participation stores.

Database failures are wrapped in StoreUnavailableError so callers never
see driver exceptions.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from datetime import datetime

from django.db import DatabaseError, IntegrityError, transaction

from events import models
from events.domain import (
    Event,
    EventDetails,
    EventId,
    EventSnapshot,
    Participation,
    ParticipationId,
)
from events.domain.errors import AlreadyJoinedError, StoreUnavailableError
from events.stores.interfaces import EventStore, ParticipationStore

logger = logging.getLogger(__name__)


@contextmanager
def _database_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Store operation %s failed", operation)
        raise StoreUnavailableError(operation) from exc


def _event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        event_type=row.event_type,
        thumbnail=row.thumbnail,
        location=row.location,
        event_date=row.event_date,
        creator_email=row.creator_email,
        created_at=row.created_at,
    )


def _participation_to_domain(row: models.Participation) -> Participation:
    return Participation(
        id=ParticipationId(row.id),
        event_id=EventId(row.event_id),
        user_email=row.user_email,
        joined_at=row.joined_at,
        snapshot=EventSnapshot(
            title=row.event_title,
            event_type=row.event_type,
            thumbnail=row.thumbnail,
            location=row.location,
            event_date=row.event_date,
            creator_email=row.creator_email,
        ),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def insert_event(
        self, details: EventDetails, creator_email: str, created_at: datetime
    ) -> EventId:
        with _database_errors("insert_event"):
            row = models.Event.objects.create(
                **asdict(details),
                creator_email=creator_email,
                created_at=created_at,
            )
        return EventId(row.id)

    def get_event(self, event_id: EventId) -> Event | None:
        with _database_errors("get_event"):
            row = models.Event.objects.filter(id=event_id.value).first()
        return _event_to_domain(row) if row is not None else None

    def update_event(self, event_id: EventId, details: EventDetails) -> int:
        with _database_errors("update_event"):
            return models.Event.objects.filter(id=event_id.value).update(
                **asdict(details)
            )

    def list_events(self) -> list[Event]:
        with _database_errors("list_events"):
            rows = list(models.Event.objects.order_by("event_date"))
        return [_event_to_domain(row) for row in rows]

    def list_events_after(self, instant: datetime) -> list[Event]:
        with _database_errors("list_events_after"):
            rows = list(
                models.Event.objects.filter(event_date__gt=instant).order_by(
                    "event_date"
                )
            )
        return [_event_to_domain(row) for row in rows]

    def list_events_by_creator(self, creator_email: str) -> list[Event]:
        with _database_errors("list_events_by_creator"):
            rows = list(
                models.Event.objects.filter(creator_email=creator_email).order_by(
                    "event_date"
                )
            )
        return [_event_to_domain(row) for row in rows]

    def count_events(self) -> int:
        with _database_errors("count_events"):
            return models.Event.objects.count()


class DjangoParticipationStore(ParticipationStore):
    """Relational participation store using Django ORM.

    The uq_joined_event_user constraint is the authority on duplicates;
    find_participation is only a fast pre-check.
    """

    def find_participation(
        self, event_id: EventId, user_email: str
    ) -> Participation | None:
        with _database_errors("find_participation"):
            row = models.Participation.objects.filter(
                event_id=event_id.value, user_email=user_email
            ).first()
        return _participation_to_domain(row) if row is not None else None

    def add_participation(
        self,
        event_id: EventId,
        user_email: str,
        joined_at: datetime,
        snapshot: EventSnapshot,
    ) -> ParticipationId:
        with _database_errors("add_participation"):
            try:
                # Savepoint so a constraint violation leaves any enclosing
                # transaction usable.
                with transaction.atomic():
                    row = models.Participation.objects.create(
                        event_id=event_id.value,
                        user_email=user_email,
                        joined_at=joined_at,
                        event_title=snapshot.title,
                        event_type=snapshot.event_type,
                        thumbnail=snapshot.thumbnail,
                        location=snapshot.location,
                        event_date=snapshot.event_date,
                        creator_email=snapshot.creator_email,
                    )
            except IntegrityError:
                logger.warning(
                    "%s already joined event %s (rejected by uq_joined_event_user)",
                    user_email,
                    event_id,
                )
                raise AlreadyJoinedError(str(event_id), user_email) from None
        return ParticipationId(row.id)

    def list_participations_for_user(self, user_email: str) -> list[Participation]:
        with _database_errors("list_participations_for_user"):
            rows = list(
                models.Participation.objects.filter(user_email=user_email).order_by(
                    "event_date", "joined_at"
                )
            )
        return [_participation_to_domain(row) for row in rows]
