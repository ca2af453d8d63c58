"""Event validation - decides whether a candidate may become an Event.

The check is pure: the caller supplies the current time and the existing
events, and nothing is mutated. Outcomes are returned, never raised.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime

from events.domain import (
    Accepted,
    Candidate,
    Event,
    EventId,
    Rejected,
    RejectionReason,
    ValidationResult,
    parse_calendar_date,
    parse_wall_time,
)


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _local_naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def validate(
    candidate: Candidate,
    existing: Iterable[Event],
    now: datetime,
    id_factory: Callable[[], EventId] = EventId.generate,
) -> ValidationResult:
    """Validate a candidate against the wall clock and the existing events.

    Checks run in order and stop at the first failure: required fields,
    time/date format, past instant, then an exact instant collision.
    A candidate falling exactly on ``now`` is accepted.
    """
    name = _text(candidate.name)
    raw_time = _text(candidate.time)
    raw_date = candidate.date if isinstance(candidate.date, date) else _text(candidate.date)
    if not name or not raw_time or not raw_date:
        return Rejected(RejectionReason.MISSING_FIELD, "Please fill out all required fields.")

    try:
        event_time = parse_wall_time(raw_time)
        event_date = parse_calendar_date(raw_date)
    except ValueError:
        return Rejected(RejectionReason.INVALID_FORMAT, "Use HH:MM for the time and YYYY-MM-DD for the date.")

    instant = datetime.combine(event_date, event_time)
    if instant < _local_naive(now):
        return Rejected(RejectionReason.IN_PAST, "You cannot create an event in the past!")

    if any(event.instant == instant for event in existing):
        return Rejected(RejectionReason.CONFLICT, "An event already exists at this date and time.")

    return Accepted(
        Event(
            id=id_factory(),
            name=name,
            description=_text(candidate.description),
            date=event_date,
            time=event_time,
        )
    )
