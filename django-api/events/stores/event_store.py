"""Ordered in-memory event collection mirrored to a durable slot."""

import json
import logging
from datetime import date

from events.domain import Event, StorageIssue, StorageIssueCode
from events.stores.interfaces import SlotStorage, SlotStorageError
from events.stores.records import EventRecordSerializer

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "events"


class EventStore:
    """Owns the canonical list of events and its durable mirror.

    The in-memory sequence is the source of truth for the session. A failed
    write is reported but never rolls back an append.
    """

    def __init__(self, storage: SlotStorage, key: str = DEFAULT_SLOT_KEY) -> None:
        self._storage = storage
        self._key = key
        self._events: list[Event] = []
        self.issues: list[StorageIssue] = []

    def __len__(self) -> int:
        return len(self._events)

    def load(self) -> list[Event]:
        """Replace the in-memory sequence with the slot contents.

        Missing or corrupt data yields an empty store.
        """
        self._events = []
        try:
            payload = self._storage.read(self._key)
        except SlotStorageError as exc:
            self._report(StorageIssueCode.CORRUPT_STORAGE, f"Stored events could not be read: {exc}")
            return []
        if payload is None:
            return []

        events = self._decode(payload)
        if events is None:
            self._report(StorageIssueCode.CORRUPT_STORAGE, "Stored events are malformed and were ignored")
            return []

        self._events = events
        logger.debug("Loaded %d events from slot %r", len(events), self._key)
        return list(self._events)

    def append(self, event: Event) -> StorageIssue | None:
        """Add an event and persist the whole sequence.

        Returns the storage issue if the write failed, otherwise None.
        """
        self._events.append(event)
        payload = json.dumps(EventRecordSerializer(self._events, many=True).data)
        try:
            self._storage.write(self._key, payload)
        except SlotStorageError as exc:
            return self._report(StorageIssueCode.PERSISTENCE_FAILURE, f"Events could not be saved: {exc}")
        return None

    def events_on(self, day: date) -> list[Event]:
        return [event for event in self._events if event.date == day]

    def list_events(self) -> list[Event]:
        return list(self._events)

    def _decode(self, payload: str) -> list[Event] | None:
        try:
            records = json.loads(payload)
        except (ValueError, RecursionError):
            return None
        serializer = EventRecordSerializer(data=records, many=True)
        if not serializer.is_valid():
            return None
        events = serializer.save()
        if len({event.id for event in events}) != len(events):
            return None
        if len({event.instant for event in events}) != len(events):
            return None
        return events

    def _report(self, code: StorageIssueCode, message: str) -> StorageIssue:
        issue = StorageIssue(code=code, message=message)
        self.issues.append(issue)
        logger.warning("%s: %s", code.value, message)
        return issue
