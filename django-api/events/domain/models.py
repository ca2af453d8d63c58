"""Domain models representing persisted state and submission outcomes.

These are pure domain objects with no API input rules.
The durable record format lives in stores/records.py.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time

from events.domain.errors import RejectionReason, StorageIssue
from events.domain.value_objects import TIME_FORMAT, EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of a calendar Event."""

    id: EventId
    name: str
    description: str
    date: date
    time: time

    @property
    def instant(self) -> datetime:
        """The event's date and time as a single local wall-clock point."""
        return datetime.combine(self.date, self.time)

    @property
    def label(self) -> str:
        return f"{self.time.strftime(TIME_FORMAT)} - {self.name}"


@dataclass(frozen=True)
class Candidate:
    """User-submitted event data that has not been validated yet."""

    name: str | None = None
    time: str | None = None
    date: date | str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Accepted:
    event: Event


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    message: str


ValidationResult = Accepted | Rejected


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of a submission plus any storage issue raised while persisting it."""

    result: ValidationResult
    issue: StorageIssue | None = None

    @property
    def accepted(self) -> bool:
        return isinstance(self.result, Accepted)


@dataclass(frozen=True)
class DaySummary:
    """One cell of the month grid."""

    date: date
    selectable: bool
    events: tuple[Event, ...] = field(default_factory=tuple)
