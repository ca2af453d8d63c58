from events.stores.event_store import DEFAULT_SLOT_KEY, EventStore
from events.stores.interfaces import SlotStorage, SlotStorageError

__all__ = ["DEFAULT_SLOT_KEY", "EventStore", "SlotStorage", "SlotStorageError"]
