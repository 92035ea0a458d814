"""WSGI entry point for the social events API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "social_events.settings")

application = get_wsgi_application()
