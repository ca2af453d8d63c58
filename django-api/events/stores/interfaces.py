"""Store interfaces (repository pattern).

Stores must be swappable. The durable side of the calendar is a single
key-value slot holding the whole serialized event list.
"""

from abc import ABC, abstractmethod


class SlotStorageError(Exception):
    """Raised when a storage slot cannot be read or written."""


class SlotStorage(ABC):
    """Interface for a named key-value slot."""

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the payload stored under key, or None if the slot is empty.

        Raises:
            SlotStorageError: If the slot cannot be read.
        """
        ...

    @abstractmethod
    def write(self, key: str, payload: str) -> None:
        """Overwrite the payload stored under key.

        Raises:
            SlotStorageError: If the slot cannot be written.
        """
        ...
