"""Serializers for request bodies and domain model responses.

Input serializers only coerce types. Required-field and date rules live
in the services so that errors come out in the same order for every
combination of bad input.
"""

from rest_framework import serializers

from events.services.inputs import EventInput


def _text(source: str | None = None) -> serializers.CharField:
    kwargs = {"source": source} if source else {}
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, **kwargs
    )


class EventInputSerializer(serializers.Serializer):
    """Fields shared by create and update requests."""

    title = _text()
    description = _text()
    eventType = _text("event_type")
    thumbnail = _text()
    location = _text()
    eventDate = _text("event_date")

    def to_event_input(self) -> EventInput:
        data = self.validated_data
        return EventInput(
            title=data.get("title"),
            description=data.get("description"),
            event_type=data.get("event_type"),
            thumbnail=data.get("thumbnail"),
            location=data.get("location"),
            event_date=data.get("event_date"),
        )


class CreateEventSerializer(EventInputSerializer):
    creatorEmail = _text("creator_email")


class UpdateEventSerializer(EventInputSerializer):
    requestorEmail = _text("requestor_email")


class JoinEventSerializer(serializers.Serializer):
    eventId = _text("event_id")
    userEmail = _text("user_email")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    eventType = serializers.CharField(source="event_type")
    thumbnail = serializers.CharField()
    location = serializers.CharField()
    eventDate = serializers.DateTimeField(source="event_date")
    creatorEmail = serializers.CharField(source="creator_email")
    createdAt = serializers.DateTimeField(source="created_at")


class ParticipationSerializer(serializers.Serializer):
    """Serializer for Participation domain model, flattened as stored."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    userEmail = serializers.CharField(source="user_email")
    joinedAt = serializers.DateTimeField(source="joined_at")
    eventTitle = serializers.CharField(source="snapshot.title")
    eventType = serializers.CharField(source="snapshot.event_type")
    thumbnail = serializers.CharField(source="snapshot.thumbnail")
    location = serializers.CharField(source="snapshot.location")
    eventDate = serializers.DateTimeField(source="snapshot.event_date")
    creatorEmail = serializers.CharField(source="snapshot.creator_email")
