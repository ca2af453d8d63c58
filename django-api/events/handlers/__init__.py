from events.handlers.views import DayDetailView, EventListView, MonthView

__all__ = ["DayDetailView", "EventListView", "MonthView"]
