"""Calendar service - the single state container for a calendar session.

Services:
- Depend only on interfaces (stores)
- Own the selected date and the event store
- Run validation before anything reaches the store
- Return domain models, outcomes, or domain errors
"""

import calendar
import dataclasses
import logging
from collections.abc import Callable
from datetime import date, datetime

from events.domain import (
    Accepted,
    Candidate,
    DaySummary,
    Event,
    InvalidDateError,
    SubmitOutcome,
    is_selectable,
)
from events.services.validator import validate
from events.stores import EventStore

logger = logging.getLogger(__name__)


class CalendarService:
    """Service for picking days and creating events on them."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = datetime.now) -> None:
        self._store = store
        self._clock = clock
        self._selected_date: date | None = None

    @property
    def selected_date(self) -> date | None:
        return self._selected_date

    def select(self, day: date) -> bool:
        """Select a day for event creation.

        Days before today are not selectable and leave the selection unchanged.
        """
        if not is_selectable(day, self._clock().date()):
            return False
        self._selected_date = day
        return True

    def submit(self, candidate: Candidate) -> SubmitOutcome:
        """Validate a candidate and store it when accepted.

        A candidate without a date is placed on the selected date.
        """
        if candidate.date is None and self._selected_date is not None:
            candidate = dataclasses.replace(candidate, date=self._selected_date)

        result = validate(candidate, self._store.list_events(), now=self._clock())
        if not isinstance(result, Accepted):
            logger.debug("Rejected event candidate: %s", result.reason.value)
            return SubmitOutcome(result=result)

        issue = self._store.append(result.event)
        self._selected_date = None
        logger.info("Created event %s on %s", result.event.id, result.event.instant.isoformat())
        return SubmitOutcome(result=result, issue=issue)

    def events_on(self, day: date) -> list[Event]:
        """Return events on a day in insertion order."""
        return self._store.events_on(day)

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def month_overview(self, year: int, month: int) -> list[DaySummary]:
        """Return one summary per day of the month, for rendering the grid.

        Raises:
            InvalidDateError: If year and month do not name a calendar month.
        """
        try:
            _, days_in_month = calendar.monthrange(year, month)
            days = [date(year, month, day) for day in range(1, days_in_month + 1)]
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(f"{year}-{month}") from exc

        today = self._clock().date()
        return [
            DaySummary(
                date=day,
                selectable=is_selectable(day, today),
                events=tuple(self._store.events_on(day)),
            )
            for day in days
        ]
