"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, time

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventId
from events.services import CalendarService
from events.stores import EventStore, SlotStorage, SlotStorageError
from events.stores.memory_store import InMemorySlotStorage

NOW = datetime(2024, 6, 15, 8, 0)


class FailingSlotStorage(SlotStorage):
    """Slot storage whose reads and writes always fail."""

    def read(self, key: str) -> str | None:
        raise SlotStorageError("disk unavailable")

    def write(self, key: str, payload: str) -> None:
        raise SlotStorageError("disk full")


def make_event(
    name: str = "Standup",
    day: date = date(2024, 6, 20),
    at: time = time(9, 0),
    description: str = "",
) -> Event:
    return Event(id=EventId.generate(), name=name, description=description, date=day, time=at)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def slot_storage() -> InMemorySlotStorage:
    return InMemorySlotStorage()


@pytest.fixture
def store(slot_storage: InMemorySlotStorage) -> EventStore:
    return EventStore(slot_storage)


@pytest.fixture
def service(store: EventStore) -> CalendarService:
    return CalendarService(store, clock=lambda: NOW)
