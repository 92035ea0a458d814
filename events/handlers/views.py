"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to events.handlers.errors
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import (
    CreateEventSerializer,
    EventSerializer,
    JoinEventSerializer,
    ParticipationSerializer,
    UpdateEventSerializer,
)
from events.services import get_services


def _event_list(events) -> Response:
    return Response(
        {
            "ok": True,
            "count": len(events),
            "events": EventSerializer(events, many=True).data,
        }
    )


class HealthView(APIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        total = get_services().events.count_events()
        return Response(
            {"ok": True, "message": "Event store is reachable", "totalEvents": total}
        )


class EventListView(APIView):
    """Handler for GET and POST /events"""

    def get(self, request: Request) -> Response:
        return _event_list(get_services().events.list_events())

    def post(self, request: Request) -> Response:
        serializer = CreateEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event_id = get_services().events.create_event(
            serializer.to_event_input(),
            creator_email=serializer.validated_data.get("creator_email"),
        )
        return Response(
            {
                "ok": True,
                "message": "Event created successfully",
                "eventId": str(event_id),
            },
            status=status.HTTP_201_CREATED,
        )


class UpcomingEventListView(APIView):
    """Handler for GET /events/upcoming"""

    def get(self, request: Request) -> Response:
        return _event_list(get_services().events.list_upcoming_events())


class CreatorEventListView(APIView):
    """Handler for GET /events/user?email=..."""

    def get(self, request: Request) -> Response:
        email = request.query_params.get("email")
        return _event_list(get_services().events.list_events_by_creator(email))


class EventDetailView(APIView):
    """Handler for GET and PUT /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_services().events.get_event(event_id)
        return Response({"ok": True, "event": EventSerializer(event).data})

    def put(self, request: Request, event_id: str) -> Response:
        serializer = UpdateEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        modified = get_services().events.update_event(
            event_id,
            requestor_email=serializer.validated_data.get("requestor_email"),
            fields=serializer.to_event_input(),
        )
        return Response(
            {
                "ok": True,
                "message": "Event updated successfully",
                "modifiedCount": modified,
            }
        )


class JoinEventView(APIView):
    """Handler for POST /join-event"""

    def post(self, request: Request) -> Response:
        serializer = JoinEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        join_id = get_services().participations.join_event(
            serializer.validated_data.get("event_id"),
            serializer.validated_data.get("user_email"),
        )
        return Response(
            {
                "ok": True,
                "message": "You have successfully joined this event",
                "joinId": str(join_id),
            },
            status=status.HTTP_201_CREATED,
        )


class JoinedEventListView(APIView):
    """Handler for GET /joined?email=..."""

    def get(self, request: Request) -> Response:
        email = request.query_params.get("email")
        joined = get_services().participations.list_joined_events(email)
        return Response(
            {
                "ok": True,
                "count": len(joined),
                "joinedEvents": ParticipationSerializer(joined, many=True).data,
            }
        )
