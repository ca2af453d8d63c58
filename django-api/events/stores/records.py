"""Serializers for the durable record format.

Each event is stored as ``{id, name, description, date, time}`` with
``date`` as ``YYYY-MM-DD`` and ``time`` as ``HH:MM``.
"""

from rest_framework import serializers

from events.domain import Event, EventId
from events.domain.value_objects import DATE_FORMAT, TIME_FORMAT, parse_wall_time


class EventIdField(serializers.UUIDField):
    """UUID field that reads and produces EventId values."""

    def to_representation(self, value: EventId) -> str:
        return super().to_representation(value.value)

    def to_internal_value(self, data) -> EventId:
        return EventId(value=super().to_internal_value(data))


class WallTimeField(serializers.TimeField):
    """Time field that only reads H:MM or HH:MM."""

    def to_internal_value(self, value):
        if not isinstance(value, str):
            self.fail("invalid", format=TIME_FORMAT)
        try:
            return parse_wall_time(value)
        except ValueError:
            self.fail("invalid", format=TIME_FORMAT)


class EventRecordSerializer(serializers.Serializer):
    """Serializer for the stored form of an Event."""

    id = EventIdField()
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True, default="")
    date = serializers.DateField(format=DATE_FORMAT, input_formats=[DATE_FORMAT])
    time = WallTimeField(format=TIME_FORMAT)

    def create(self, validated_data) -> Event:
        return Event(**validated_data)
