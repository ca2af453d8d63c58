"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Self
from uuid import UUID, uuid4

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
WALL_TIME_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


def parse_wall_time(value: str) -> time:
    """Parse an ``HH:MM`` wall-clock time.

    Raises:
        ValueError: If the value is not a 24h hour:minute time.
    """
    if not WALL_TIME_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not an H:MM or HH:MM time")
    return datetime.strptime(value, TIME_FORMAT).time()


def parse_calendar_date(value: date | str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date.

    A ``date`` passes through unchanged and a ``datetime`` is truncated to its date.

    Raises:
        ValueError: If the value is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def is_selectable(day: date, today: date) -> bool:
    """Return whether a day can be opened for event creation.

    Both sides are compared as dates, so the time of day never matters.
    """
    return parse_calendar_date(day) >= parse_calendar_date(today)
