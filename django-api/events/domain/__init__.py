from events.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidDateError,
    RejectionReason,
    StorageIssue,
    StorageIssueCode,
)
from events.domain.models import (
    Accepted,
    Candidate,
    DaySummary,
    Event,
    Rejected,
    SubmitOutcome,
    ValidationResult,
)
from events.domain.value_objects import (
    EventId,
    is_selectable,
    parse_calendar_date,
    parse_wall_time,
)

__all__ = [
    "Accepted",
    "Candidate",
    "DaySummary",
    "DomainError",
    "ErrorCode",
    "Event",
    "EventId",
    "InvalidDateError",
    "Rejected",
    "RejectionReason",
    "StorageIssue",
    "StorageIssueCode",
    "SubmitOutcome",
    "ValidationResult",
    "is_selectable",
    "parse_calendar_date",
    "parse_wall_time",
]
