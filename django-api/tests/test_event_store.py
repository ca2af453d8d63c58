"""Unit tests for EventStore.

These test loading, persistence, and the per-day query.
Run with: pytest tests/test_event_store.py -v
"""

import json
from datetime import date, time

import pytest

from events.domain import StorageIssueCode
from events.stores import EventStore
from events.stores.memory_store import InMemorySlotStorage

from .conftest import FailingSlotStorage, make_event


class TestLoad:
    """Tests for EventStore.load"""

    def test_missing_slot_loads_empty(self, store: EventStore):
        assert store.load() == []
        assert store.issues == []

    def test_empty_list_loads_empty(self):
        store = EventStore(InMemorySlotStorage({"events": "[]"}))
        assert store.load() == []
        assert store.issues == []

    @pytest.mark.parametrize(
        "payload",
        [
            "{not json",
            '{"id": "x"}',
            '[{"id": "not-a-uuid", "name": "A", "description": "", "date": "2024-06-20", "time": "09:00"}]',
            '[{"id": "12345678-1234-5678-1234-567812345678", "name": "A", "date": "20/06/2024", "time": "09:00"}]',
            '[{"id": "12345678-1234-5678-1234-567812345678", "name": "", "date": "2024-06-20", "time": "09:00"}]',
            '["just a string"]',
            '[{"id": "12345678-1234-5678-1234-567812345678", "name": "A", "date": "2024-06-20", "time": "9:5"}]',
        ],
    )
    def test_corrupt_slot_loads_empty_and_reports(self, payload):
        """Malformed storage is treated as an empty store, never an error."""
        store = EventStore(InMemorySlotStorage({"events": payload}))

        assert store.load() == []
        assert len(store) == 0
        assert [issue.code for issue in store.issues] == [StorageIssueCode.CORRUPT_STORAGE]

    def test_deeply_nested_payload_is_corrupt(self):
        """JSON nested too deep to decode is reported like any other corruption."""
        store = EventStore(InMemorySlotStorage({"events": "[" * 100000}))

        assert store.load() == []
        assert [issue.code for issue in store.issues] == [StorageIssueCode.CORRUPT_STORAGE]

    def test_duplicate_ids_are_corrupt(self):
        record = {
            "id": "12345678-1234-5678-1234-567812345678",
            "name": "A",
            "description": "",
            "date": "2024-06-20",
            "time": "09:00",
        }
        store = EventStore(InMemorySlotStorage({"events": json.dumps([record, {**record, "time": "10:00"}])}))

        assert store.load() == []
        assert store.issues[0].code is StorageIssueCode.CORRUPT_STORAGE

    def test_duplicate_instants_are_corrupt(self):
        """Two stored events at the same date and time cannot both be loaded."""
        first = {
            "id": "12345678-1234-5678-1234-567812345678",
            "name": "A",
            "description": "",
            "date": "2024-06-20",
            "time": "09:00",
        }
        second = {**first, "id": "87654321-4321-8765-4321-876543218765", "name": "B"}
        store = EventStore(InMemorySlotStorage({"events": json.dumps([first, second])}))

        assert store.load() == []
        assert [issue.code for issue in store.issues] == [StorageIssueCode.CORRUPT_STORAGE]

    def test_unreadable_slot_loads_empty_and_reports(self):
        store = EventStore(FailingSlotStorage())
        assert store.load() == []
        assert store.issues[0].code is StorageIssueCode.CORRUPT_STORAGE

    def test_record_without_description_defaults_to_empty(self):
        payload = '[{"id": "12345678-1234-5678-1234-567812345678", "name": "A", "date": "2024-06-20", "time": "09:00"}]'
        store = EventStore(InMemorySlotStorage({"events": payload}))

        (event,) = store.load()

        assert event.description == ""
        assert event.time == time(9, 0)


class TestAppend:
    """Tests for EventStore.append"""

    def test_append_writes_full_sequence(self, store: EventStore, slot_storage: InMemorySlotStorage):
        first = make_event(name="Standup", at=time(9, 0))
        second = make_event(name="Lunch", at=time(12, 30), description="Tacos")

        assert store.append(first) is None
        assert store.append(second) is None

        records = json.loads(slot_storage.read("events"))
        assert records == [
            {"id": str(first.id), "name": "Standup", "description": "", "date": "2024-06-20", "time": "09:00"},
            {"id": str(second.id), "name": "Lunch", "description": "Tacos", "date": "2024-06-20", "time": "12:30"},
        ]

    def test_round_trip_in_a_fresh_session(self, store: EventStore, slot_storage: InMemorySlotStorage):
        first = make_event(name="Standup", at=time(9, 0))
        second = make_event(name="Review", day=date(2024, 7, 1), at=time(15, 45))
        store.append(first)
        store.append(second)

        fresh = EventStore(slot_storage)

        assert set(fresh.load()) == {first, second}

    def test_custom_slot_key(self, slot_storage: InMemorySlotStorage):
        store = EventStore(slot_storage, key="calendar")
        store.append(make_event())

        assert slot_storage.read("events") is None
        assert slot_storage.read("calendar") is not None

    def test_write_failure_keeps_event_in_memory(self):
        """A failed write is reported but the session keeps the event."""
        store = EventStore(FailingSlotStorage())
        event = make_event()

        issue = store.append(event)

        assert issue is not None
        assert issue.code is StorageIssueCode.PERSISTENCE_FAILURE
        assert store.list_events() == [event]
        assert store.issues == [issue]


class TestEventsOn:
    """Tests for EventStore.events_on"""

    def test_returns_only_that_day_in_insertion_order(self, store: EventStore):
        late = make_event(name="Late", day=date(2024, 6, 20), at=time(18, 0))
        other = make_event(name="Other", day=date(2024, 6, 21), at=time(9, 0))
        early = make_event(name="Early", day=date(2024, 6, 20), at=time(8, 0))
        for event in (late, other, early):
            store.append(event)

        assert store.events_on(date(2024, 6, 20)) == [late, early]
        assert store.events_on(date(2024, 6, 21)) == [other]
        assert store.events_on(date(2024, 6, 22)) == []

    def test_list_events_is_a_copy(self, store: EventStore):
        store.append(make_event())
        store.list_events().clear()
        assert len(store) == 1
