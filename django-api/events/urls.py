from django.urls import path

from events.handlers import DayDetailView, EventListView, MonthView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("days/<str:day>", DayDetailView.as_view(), name="day-detail"),
    path("months/<int:year>/<int:month>", MonthView.as_view(), name="month-detail"),
]
