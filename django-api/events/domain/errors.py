"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class RejectionReason(Enum):
    """Why a candidate event was not accepted."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    IN_PAST = "IN_PAST"
    CONFLICT = "CONFLICT"


class StorageIssueCode(Enum):
    """Non-fatal problems with the durable storage slot."""

    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    CORRUPT_STORAGE = "CORRUPT_STORAGE"


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_DATE = "INVALID_DATE"


@dataclass(frozen=True)
class StorageIssue:
    """Informational report about the storage slot, surfaced to the caller."""

    code: StorageIssueCode
    message: str


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidDateError(DomainError):
    """Raised when a date or month cannot be understood."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date",
        )
        object.__setattr__(self, "value", value)
