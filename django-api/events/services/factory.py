"""Wiring for the production calendar service."""

from django.conf import settings

from events.services.calendar_service import CalendarService
from events.stores import EventStore
from events.stores.django_store import DjangoSlotStorage


def build_calendar_service() -> CalendarService:
    """Return a service whose store has been loaded from the database slot."""
    store = EventStore(DjangoSlotStorage(), key=settings.CALENDAR_STORAGE_KEY)
    store.load()
    return CalendarService(store)
