"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime, time
from datetime import timezone as dt_timezone
from typing import Any, Self
from uuid import UUID, uuid4

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ParticipationId:
    """Unique identifier for a Participation."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


def is_valid_identifier(value: Any) -> bool:
    """Return True if value is a string that parses as an entity identifier."""
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def is_blank(value: Any) -> bool:
    """Return True for None and for empty or whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_instant(value: str | datetime) -> datetime:
    """Parse an ISO-8601 date or datetime into an aware instant.

    Naive values are interpreted as UTC. A bare date means midnight UTC.
    The result is always expressed in UTC.

    Raises:
        ValueError: If value is not a datetime or a parseable string, or
            if it falls outside the representable UTC range.
    """
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, str):
        text = value.strip()
        # parse_* return None for unrecognised formats and raise ValueError
        # for well-formed but impossible values such as month 13.
        instant = parse_datetime(text)
        if instant is None:
            day = parse_date(text)
            if day is None:
                raise ValueError(f"Unrecognised date format: {value!r}")
            instant = datetime.combine(day, time.min)
    else:
        raise ValueError(f"Expected a date string, got {type(value).__name__}")

    if timezone.is_naive(instant):
        return timezone.make_aware(instant, dt_timezone.utc)
    try:
        return instant.astimezone(dt_timezone.utc)
    except OverflowError:
        raise ValueError(f"Date is outside the supported range: {value!r}") from None
