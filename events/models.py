"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for community events.

    Caller-supplied text columns are unbounded TextFields: no length limit
    is part of the event contract.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    description = models.TextField()
    event_type = models.TextField()
    thumbnail = models.TextField()
    location = models.TextField()
    event_date = models.DateTimeField()
    creator_email = models.TextField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = "events"
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["event_date"], name="idx_event_date"),
            models.Index(
                fields=["creator_email", "event_date"], name="idx_event_creator_date"
            ),
        ]

    def __str__(self) -> str:
        return self.title


class Participation(models.Model):
    """Persistence model for joined events.

    event_id is a weak reference: no foreign key, no cascade.
    The event fields below are a snapshot taken at join time.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.UUIDField()
    user_email = models.TextField()
    joined_at = models.DateTimeField()
    event_title = models.TextField()
    event_type = models.TextField()
    thumbnail = models.TextField()
    location = models.TextField()
    event_date = models.DateTimeField()
    creator_email = models.TextField()

    class Meta:
        db_table = "joined_events"
        ordering = ["event_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["event_id", "user_email"], name="uq_joined_event_user"
            ),
        ]
        indexes = [
            models.Index(
                fields=["user_email", "event_date"], name="idx_joined_user_date"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user_email} - {self.event_title}"
