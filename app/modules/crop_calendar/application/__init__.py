# 📄 File: app/modules/crop_calendar/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes what the calendar screen can ask for: loading, day lookups, adding and deleting entries
# 🧪 Purpose (Technical Summary):
# Application layer package exporting the CalendarService facade and display mapping
# 🔗 Dependencies:
# Domain layer
# 🔄 Connected Modules / Calls From:
# app.main, presentation code

"""
Crop Calendar Application Layer

- CalendarService: query surface for presentation code
- categories_of: icon/colour metadata for an event
"""

from .calendar_service import CalendarService
from .event_display import EventDisplay, activity_display, categories_of

__all__ = [
    "CalendarService",
    "EventDisplay",
    "activity_display",
    "categories_of",
]
