"""Explicit input structs for service operations.

Values arrive as parsed by the handlers and are not yet validated;
services decide whether they are acceptable.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EventInput:
    """Caller-supplied fields for creating or updating an event."""

    title: str | None = None
    description: str | None = None
    event_type: str | None = None
    thumbnail: str | None = None
    location: str | None = None
    event_date: str | datetime | None = None
