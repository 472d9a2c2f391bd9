# 📄 File: app/modules/crop_calendar/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core calendar data models - crop plans, calendar entries and action outcomes
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models: templates, CalendarEvent with its enums, OperationResult
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, infrastructure layer

"""
Crop Calendar Domain Models

Models:
- ActivitySchedule / CropSchedule: yearly templates from the catalog
- FarmingTip: general advice shown with the calendar
- CalendarEvent: a dated entry on the calendar
- OperationResult: outcome of a calendar operation
"""

from .schedule import (
    ActivitySchedule,
    CropSchedule,
    FarmingTip
)

from .calendar_event import (
    CalendarEvent,
    EventType,
    EventStatus
)

from .result import (
    OperationResult,
    ResultStatus
)

__all__ = [
    "ActivitySchedule",
    "CropSchedule",
    "FarmingTip",
    "CalendarEvent",
    "EventType",
    "EventStatus",
    "OperationResult",
    "ResultStatus",
]
