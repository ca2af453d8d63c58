"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map rejections and domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from datetime import date

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import (
    Candidate,
    DomainError,
    InvalidDateError,
    Rejected,
    RejectionReason,
    is_selectable,
    parse_calendar_date,
)
from events.handlers.serializers import (
    DaySummarySerializer,
    EventSerializer,
    StorageIssueSerializer,
)
from events.services.factory import build_calendar_service

REJECTION_STATUS = {
    RejectionReason.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    RejectionReason.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    RejectionReason.IN_PAST: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RejectionReason.CONFLICT: status.HTTP_409_CONFLICT,
}


def _error_response(code: str, message: str, status_code: int) -> Response:
    return Response({"code": code, "message": message}, status=status_code)


def _domain_error_response(error: DomainError) -> Response:
    return _error_response(error.code.value, error.message, status.HTTP_400_BAD_REQUEST)


def _parse_day(value: str) -> date:
    try:
        return parse_calendar_date(value)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        service = build_calendar_service()
        day = request.query_params.get("date")
        if day is None:
            events = service.list_events()
        else:
            try:
                events = service.events_on(_parse_day(day))
            except DomainError as error:
                return _domain_error_response(error)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        data = request.data if isinstance(request.data, dict) else {}
        candidate = Candidate(
            name=data.get("name"),
            time=data.get("time"),
            date=data.get("date"),
            description=data.get("description"),
        )
        outcome = build_calendar_service().submit(candidate)
        if isinstance(outcome.result, Rejected):
            return _error_response(
                outcome.result.reason.value,
                outcome.result.message,
                REJECTION_STATUS[outcome.result.reason],
            )

        body = {"event": EventSerializer(outcome.result.event).data, "warnings": []}
        if outcome.issue is not None:
            body["warnings"].append(StorageIssueSerializer(outcome.issue).data)
        return Response(body, status=status.HTTP_201_CREATED)


class DayDetailView(APIView):
    """Handler for GET /api/days/{day}"""

    def get(self, request: Request, day: str) -> Response:
        service = build_calendar_service()
        try:
            parsed = _parse_day(day)
        except DomainError as error:
            return _domain_error_response(error)
        body = {
            "date": parsed.isoformat(),
            "selectable": is_selectable(parsed, date.today()),
            "events": EventSerializer(service.events_on(parsed), many=True).data,
        }
        return Response(body)


class MonthView(APIView):
    """Handler for GET /api/months/{year}/{month}"""

    def get(self, request: Request, year: int, month: int) -> Response:
        try:
            days = build_calendar_service().month_overview(year, month)
        except DomainError as error:
            return _domain_error_response(error)
        return Response(DaySummarySerializer(days, many=True).data)
