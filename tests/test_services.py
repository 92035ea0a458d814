"""Unit tests for EventService and ParticipationService.

These test business rules and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import timedelta

import pytest

from events.domain.errors import (
    AlreadyJoinedError,
    EventNotFoundError,
    InvalidEventDateError,
    InvalidEventIdError,
    MissingFieldsError,
    NotEventCreatorError,
    PastEventDateError,
)
from events.services import ParticipationService
from events.stores.memory_store import InMemoryParticipationStore

UNKNOWN_ID = "6f1c2a4e-3b7d-4c1a-9e2f-0a1b2c3d4e5f"


class TestCreateEvent:
    def test_create_then_get_returns_same_fields(self, event_service, event_input, clock):
        fields = event_input()

        event_id = event_service.create_event(fields, creator_email="a@x.com")
        event = event_service.get_event(str(event_id))

        assert event.id == event_id
        assert event.title == fields.title
        assert event.description == fields.description
        assert event.event_type == fields.event_type
        assert event.thumbnail == fields.thumbnail
        assert event.location == fields.location
        assert event.event_date == fields.event_date
        assert event.creator_email == "a@x.com"
        assert event.created_at == clock.now

    def test_create_parses_iso_date_string(self, event_service, event_input):
        event_id = event_service.create_event(
            event_input(event_date="2030-06-10T09:00:00Z"), creator_email="a@x.com"
        )
        assert event_service.get_event(str(event_id)).event_date.day == 10

    @pytest.mark.parametrize(
        "field", ["title", "description", "event_type", "thumbnail", "location", "event_date"]
    )
    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_create_rejects_blank_field(self, event_service, event_input, field, blank):
        with pytest.raises(MissingFieldsError) as excinfo:
            event_service.create_event(event_input(**{field: blank}), creator_email="a@x.com")
        assert excinfo.value.fields == (field,)

    def test_create_requires_creator_email(self, event_service, event_input):
        with pytest.raises(MissingFieldsError) as excinfo:
            event_service.create_event(event_input(), creator_email="")
        assert excinfo.value.fields == ("creator_email",)

    def test_create_reports_all_missing_fields(self, event_service, event_input):
        with pytest.raises(MissingFieldsError) as excinfo:
            event_service.create_event(event_input(title="", location=None), creator_email=None)
        assert excinfo.value.fields == ("title", "location", "creator_email")

    def test_create_rejects_unparseable_date(self, event_service, event_input):
        with pytest.raises(InvalidEventDateError):
            event_service.create_event(event_input(event_date="next friday"), creator_email="a@x.com")

    def test_create_rejects_date_equal_to_now(self, event_service, event_input, clock):
        with pytest.raises(PastEventDateError):
            event_service.create_event(event_input(event_date=clock.now), creator_email="a@x.com")

    def test_create_rejects_past_date(self, event_service, event_input, clock):
        with pytest.raises(PastEventDateError):
            event_service.create_event(
                event_input(event_date=clock.now - timedelta(seconds=1)),
                creator_email="a@x.com",
            )

    def test_failed_create_stores_nothing(self, event_service, event_input, clock):
        with pytest.raises(PastEventDateError):
            event_service.create_event(event_input(event_date=clock.now), creator_email="a@x.com")
        assert event_service.count_events() == 0


class TestUpdateEvent:
    @pytest.fixture
    def event_id(self, event_service, event_input) -> str:
        return str(event_service.create_event(event_input(), creator_email="a@x.com"))

    def test_creator_can_update(self, event_service, event_input, event_id, clock):
        new_date = clock.now + timedelta(days=5)

        modified = event_service.update_event(
            event_id, "a@x.com", event_input(title="Big Cleanup", event_date=new_date)
        )

        event = event_service.get_event(event_id)
        assert modified == 1
        assert event.title == "Big Cleanup"
        assert event.event_date == new_date

    def test_update_keeps_creator_and_created_at(self, event_service, event_input, event_id, clock):
        before = event_service.get_event(event_id)
        clock.advance(timedelta(hours=1))

        event_service.update_event(event_id, "a@x.com", event_input(title="Renamed"))

        after = event_service.get_event(event_id)
        assert after.id == before.id
        assert after.creator_email == before.creator_email
        assert after.created_at == before.created_at

    def test_unchanged_update_modifies_nothing(self, event_service, event_input, event_id):
        assert event_service.update_event(event_id, "a@x.com", event_input()) == 0

    def test_non_creator_is_rejected_and_event_unchanged(self, event_service, event_input, event_id):
        before = event_service.get_event(event_id)

        with pytest.raises(NotEventCreatorError):
            event_service.update_event(event_id, "b@x.com", event_input(title="Hijacked"))

        assert event_service.get_event(event_id) == before

    def test_blank_requestor_is_rejected(self, event_service, event_input, event_id):
        with pytest.raises(NotEventCreatorError):
            event_service.update_event(event_id, "", event_input())

    def test_malformed_id_is_not_found(self, event_service, event_input):
        with pytest.raises(EventNotFoundError):
            event_service.update_event("not-an-id", "a@x.com", event_input())

    def test_unknown_id_is_not_found(self, event_service, event_input):
        with pytest.raises(EventNotFoundError):
            event_service.update_event(UNKNOWN_ID, "a@x.com", event_input())

    def test_unknown_id_wins_over_invalid_fields(self, event_service, event_input):
        with pytest.raises(EventNotFoundError):
            event_service.update_event(UNKNOWN_ID, "b@x.com", event_input(title=""))

    def test_authorization_checked_before_fields(self, event_service, event_input, event_id, clock):
        with pytest.raises(NotEventCreatorError):
            event_service.update_event(event_id, "b@x.com", event_input(event_date=clock.now))

    def test_update_rejects_blank_field(self, event_service, event_input, event_id):
        with pytest.raises(MissingFieldsError):
            event_service.update_event(event_id, "a@x.com", event_input(location=""))

    def test_update_rejects_unparseable_date(self, event_service, event_input, event_id):
        with pytest.raises(InvalidEventDateError):
            event_service.update_event(event_id, "a@x.com", event_input(event_date="soon"))

    def test_update_rejects_date_no_longer_in_future(self, event_service, event_input, event_id, clock):
        original = event_service.get_event(event_id)
        clock.advance(timedelta(days=4))

        with pytest.raises(PastEventDateError):
            event_service.update_event(
                event_id, "a@x.com", event_input(event_date=original.event_date)
            )


class TestQueries:
    def test_get_malformed_id_is_not_found(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.get_event("upcoming")

    def test_get_unknown_id_is_not_found(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.get_event(UNKNOWN_ID)

    def test_list_events_sorted_by_event_date(self, event_service, event_input, clock):
        for days in (9, 2, 5):
            event_service.create_event(
                event_input(title=f"in {days}", event_date=clock.now + timedelta(days=days)),
                creator_email="a@x.com",
            )

        titles = [e.title for e in event_service.list_events()]

        assert titles == ["in 2", "in 5", "in 9"]

    def test_list_upcoming_excludes_event_at_now(self, event_service, event_input, clock):
        for days in (1, 2, 3):
            event_service.create_event(
                event_input(title=f"day {days}", event_date=clock.now + timedelta(days=days)),
                creator_email="a@x.com",
            )

        boundary = clock.now + timedelta(days=2)
        titles = [e.title for e in event_service.list_upcoming_events(now=boundary)]

        assert titles == ["day 3"]

    def test_list_upcoming_defaults_to_clock(self, event_service, event_input, clock):
        event_service.create_event(event_input(), creator_email="a@x.com")
        clock.advance(timedelta(days=30))

        assert event_service.list_upcoming_events() == []

    def test_list_by_creator(self, event_service, event_input, clock):
        event_service.create_event(
            event_input(title="later", event_date=clock.now + timedelta(days=8)),
            creator_email="a@x.com",
        )
        event_service.create_event(
            event_input(title="sooner", event_date=clock.now + timedelta(days=1)),
            creator_email="a@x.com",
        )
        event_service.create_event(event_input(title="other"), creator_email="b@x.com")

        titles = [e.title for e in event_service.list_events_by_creator("a@x.com")]

        assert titles == ["sooner", "later"]

    def test_list_by_creator_requires_email(self, event_service):
        with pytest.raises(MissingFieldsError):
            event_service.list_events_by_creator("")


class TestJoinEvent:
    @pytest.fixture
    def event_id(self, event_service, event_input) -> str:
        return str(event_service.create_event(event_input(), creator_email="a@x.com"))

    def test_join_records_snapshot(self, participation_service, event_id, clock):
        participation_service.join_event(event_id, "c@x.com")

        [joined] = participation_service.list_joined_events("c@x.com")
        assert str(joined.event_id) == event_id
        assert joined.user_email == "c@x.com"
        assert joined.joined_at == clock.now
        assert joined.snapshot.title == "Cleanup"
        assert joined.snapshot.creator_email == "a@x.com"

    def test_second_join_conflicts(self, participation_service, event_id):
        participation_service.join_event(event_id, "c@x.com")

        with pytest.raises(AlreadyJoinedError):
            participation_service.join_event(event_id, "c@x.com")

        assert len(participation_service.list_joined_events("c@x.com")) == 1

    def test_different_users_can_join_same_event(self, participation_service, event_id):
        first = participation_service.join_event(event_id, "c@x.com")
        second = participation_service.join_event(event_id, "d@x.com")
        assert first != second

    @pytest.mark.parametrize(
        "event_id, user_email, missing",
        [
            ("", "c@x.com", ("event_id",)),
            (UNKNOWN_ID, None, ("user_email",)),
            (None, " ", ("event_id", "user_email")),
        ],
    )
    def test_join_requires_both_fields(self, participation_service, event_id, user_email, missing):
        with pytest.raises(MissingFieldsError) as excinfo:
            participation_service.join_event(event_id, user_email)
        assert excinfo.value.fields == missing

    def test_join_malformed_id_is_validation_error(self, participation_service):
        with pytest.raises(InvalidEventIdError):
            participation_service.join_event("not-an-id", "c@x.com")

    def test_join_unknown_id_is_not_found(self, participation_service):
        with pytest.raises(EventNotFoundError):
            participation_service.join_event(UNKNOWN_ID, "c@x.com")

    def test_snapshot_is_not_resynchronized(self, event_service, participation_service, event_input, event_id):
        participation_service.join_event(event_id, "c@x.com")

        event_service.update_event(event_id, "a@x.com", event_input(title="Renamed"))

        [joined] = participation_service.list_joined_events("c@x.com")
        assert joined.snapshot.title == "Cleanup"

    def test_store_uniqueness_catches_racing_join(self, event_store, event_id, clock):
        class StalePrecheckStore(InMemoryParticipationStore):
            """Pre-check never sees the other writer's row."""

            def find_participation(self, event_id, user_email):
                return None

        stale = StalePrecheckStore()
        service = ParticipationService(event_store, stale, clock=clock)

        service.join_event(event_id, "c@x.com")
        with pytest.raises(AlreadyJoinedError):
            service.join_event(event_id, "c@x.com")

        assert len(stale.list_participations_for_user("c@x.com")) == 1


class TestListJoinedEvents:
    def test_sorted_by_snapshot_event_date(self, event_service, participation_service, event_input, clock):
        later = event_service.create_event(
            event_input(title="later", event_date=clock.now + timedelta(days=9)),
            creator_email="a@x.com",
        )
        sooner = event_service.create_event(
            event_input(title="sooner", event_date=clock.now + timedelta(days=1)),
            creator_email="a@x.com",
        )
        participation_service.join_event(str(later), "c@x.com")
        participation_service.join_event(str(sooner), "c@x.com")

        titles = [p.snapshot.title for p in participation_service.list_joined_events("c@x.com")]

        assert titles == ["sooner", "later"]

    def test_only_the_users_participations(self, event_service, participation_service, event_input):
        event_id = str(event_service.create_event(event_input(), creator_email="a@x.com"))
        participation_service.join_event(event_id, "c@x.com")

        assert participation_service.list_joined_events("d@x.com") == []

    def test_requires_email(self, participation_service):
        with pytest.raises(MissingFieldsError):
            participation_service.list_joined_events(None)


def test_worked_example(event_service, participation_service, event_input, clock):
    event_id = str(
        event_service.create_event(
            event_input(title="Cleanup", event_date=clock.now + timedelta(days=3)),
            creator_email="a@x.com",
        )
    )

    with pytest.raises(NotEventCreatorError):
        event_service.update_event(event_id, "b@x.com", event_input())

    participation_id = participation_service.join_event(event_id, "c@x.com")
    [joined] = participation_service.list_joined_events("c@x.com")
    assert joined.id == participation_id
    assert joined.snapshot.title == "Cleanup"

    with pytest.raises(AlreadyJoinedError):
        participation_service.join_event(event_id, "c@x.com")
