"""Insert a handful of upcoming demo events for local development."""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from events.services import EventInput, get_services

DEMO_EVENTS = (
    {
        "title": "City Park Cleanup Drive",
        "description": "Join us to clean up the city park and make it a cleaner space for everyone.",
        "event_type": "Cleanup",
        "thumbnail": "https://placehold.co/600x400?text=Park+Cleanup",
        "location": "City Park, Main Gate",
        "days_ahead": 3,
        "creator_email": "demo1@example.com",
    },
    {
        "title": "Tree Plantation Day",
        "description": "Plant trees in the community area and help us make the city greener.",
        "event_type": "Plantation",
        "thumbnail": "https://placehold.co/600x400?text=Tree+Plantation",
        "location": "Community Ground, Sector 5",
        "days_ahead": 7,
        "creator_email": "demo2@example.com",
    },
    {
        "title": "Food Donation for Street Children",
        "description": "Distribute food packs and clothes to underprivileged children.",
        "event_type": "Donation",
        "thumbnail": "https://placehold.co/600x400?text=Food+Donation",
        "location": "Central Bus Stand Area",
        "days_ahead": 10,
        "creator_email": "demo3@example.com",
    },
    {
        "title": "Road Safety Awareness Campaign",
        "description": "Raise awareness about road safety rules among drivers and pedestrians.",
        "event_type": "Awareness",
        "thumbnail": "https://placehold.co/600x400?text=Road+Safety",
        "location": "City Square, Near Traffic Signal",
        "days_ahead": 5,
        "creator_email": "demo4@example.com",
    },
    {
        "title": "Free Health Checkup Camp",
        "description": "Free basic health checkup and consultation for low-income families.",
        "event_type": "Health Camp",
        "thumbnail": "https://placehold.co/600x400?text=Health+Camp",
        "location": "Community Clinic, Block C",
        "days_ahead": 14,
        "creator_email": "demo5@example.com",
    },
)


class Command(BaseCommand):
    help = "Create demo community events dated a few days from now."

    def handle(self, *args, **options):
        service = get_services().events
        now = timezone.now()
        for demo in DEMO_EVENTS:
            fields = EventInput(
                title=demo["title"],
                description=demo["description"],
                event_type=demo["event_type"],
                thumbnail=demo["thumbnail"],
                location=demo["location"],
                event_date=now + timedelta(days=demo["days_ahead"]),
            )
            service.create_event(fields, creator_email=demo["creator_email"])

        self.stdout.write(
            self.style.SUCCESS(f"Inserted {len(DEMO_EVENTS)} demo events.")
        )
