from events.domain.models import Event, EventDetails, EventSnapshot, Participation
from events.domain.value_objects import EventId, ParticipationId

__all__ = [
    "Event",
    "EventDetails",
    "EventSnapshot",
    "Participation",
    "EventId",
    "ParticipationId",
]
