"""In-memory slot storage for tests and embedding."""

from events.stores.interfaces import SlotStorage


class InMemorySlotStorage(SlotStorage):
    """Dict-backed slot storage. Contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._slots.get(key)

    def write(self, key: str, payload: str) -> None:
        self._slots[key] = payload
