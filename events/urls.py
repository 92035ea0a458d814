from django.urls import path

from events.handlers import (
    CreatorEventListView,
    EventDetailView,
    EventListView,
    HealthView,
    JoinedEventListView,
    JoinEventView,
    UpcomingEventListView,
)

# Literal event routes are listed before the event_id route that would
# otherwise capture them.
urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventListView.as_view(), name="event-upcoming"),
    path("events/user", CreatorEventListView.as_view(), name="event-by-creator"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("join-event", JoinEventView.as_view(), name="join-event"),
    path("joined", JoinedEventListView.as_view(), name="joined-events"),
]
