"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class StorageSlot(models.Model):
    """A named slot holding one serialized payload."""

    key = models.CharField(primary_key=True, max_length=100)
    payload = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.key
