from events.handlers.views import (
    CreatorEventListView,
    EventDetailView,
    EventListView,
    HealthView,
    JoinedEventListView,
    JoinEventView,
    UpcomingEventListView,
)

__all__ = [
    "CreatorEventListView",
    "EventDetailView",
    "EventListView",
    "HealthView",
    "JoinedEventListView",
    "JoinEventView",
    "UpcomingEventListView",
]
