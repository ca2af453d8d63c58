"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain.value_objects import DATE_FORMAT
from events.stores.records import EventRecordSerializer


class EventSerializer(EventRecordSerializer):
    """Serializer for Event domain model.

    Same shape as the stored record, plus the marker label shown in a day cell.
    """

    label = serializers.CharField(read_only=True)


class DaySummarySerializer(serializers.Serializer):
    """Serializer for one day of the calendar grid."""

    date = serializers.DateField(format=DATE_FORMAT)
    selectable = serializers.BooleanField()
    events = EventSerializer(many=True)


class StorageIssueSerializer(serializers.Serializer):
    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
