from events.services.calendar_service import CalendarService
from events.services.validator import validate

__all__ = ["CalendarService", "validate"]
