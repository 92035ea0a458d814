from django.apps import AppConfig


class EventsConfig(AppConfig):
    name = "events"
    verbose_name = "Community Events"

    def ready(self) -> None:
        from events.services import build_services

        self.services = build_services()
