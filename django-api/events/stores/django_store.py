"""Django ORM implementation of the storage slot."""

from django.db import DatabaseError

from events.models import StorageSlot
from events.stores.interfaces import SlotStorage, SlotStorageError


class DjangoSlotStorage(SlotStorage):
    """Database-backed slot storage using Django ORM."""

    def read(self, key: str) -> str | None:
        try:
            slot = StorageSlot.objects.filter(key=key).first()
        except DatabaseError as exc:
            raise SlotStorageError(f"could not read slot {key!r}") from exc
        return slot.payload if slot is not None else None

    def write(self, key: str, payload: str) -> None:
        try:
            StorageSlot.objects.update_or_create(key=key, defaults={"payload": payload})
        except DatabaseError as exc:
            raise SlotStorageError(f"could not write slot {key!r}") from exc
