# 📄 File: app/modules/crop_calendar/domain/models/calendar_event.py
# 🧭 Purpose (Layman Explanation):
# Defines what a calendar entry is - a farming task from a crop plan or something the farmer added -
# with its date, whether it should remind the farmer, and whether it's done
# 🧪 Purpose (Technical Summary):
# CalendarEvent domain model with a closed EventType variant set, validation rules,
# id generation for farmer-authored events and derived status views
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# event_materializer.py, event_store.py, reminder_coordinator.py, event repositories, calendar_service.py

import uuid
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EventType(str, Enum):
    """Closed set of calendar event kinds"""
    CROP_ACTIVITY = "crop_activity"  # Materialized from a crop schedule
    CUSTOM = "custom"
    REMINDER = "reminder"
    WEATHER = "weather"


class EventStatus(str, Enum):
    """Human-readable event status"""
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    TODAY = "Today"
    UPCOMING = "Upcoming"
    SCHEDULED = "Scheduled"


class CalendarEvent(BaseModel):
    """
    A dated entry on the crop calendar.

    Events materialized from a crop schedule carry a deterministic id
    (crop_activity_year) and a crop_name back-reference. Farmer-authored
    events get a random id from `CalendarEvent.new`.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str
    description: str = ""
    date: datetime
    type: EventType = EventType.CUSTOM
    is_reminder: bool = False
    crop_name: Optional[str] = None

    category: str = "custom"
    is_completed: bool = False
    reminder_at: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @field_validator('date', 'end_date', 'reminder_at', mode='before')
    @classmethod
    def coerce_plain_date(cls, v):
        """Accept a bare date as midnight of that day."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time())
        return v

    @field_validator('date', 'end_date', 'reminder_at')
    @classmethod
    def to_naive_local(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Calendar times are naive local time; aware values are converted."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Event title cannot be empty')
        return v.strip()

    @field_validator('category')
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return (v or "custom").strip().lower() or "custom"

    @model_validator(mode='after')
    def validate_end_date(self) -> "CalendarEvent":
        if self.end_date is not None and self.end_date < self.date:
            raise ValueError('End date cannot be before start date')
        return self

    @classmethod
    def new(
        cls,
        title: str,
        date: datetime,
        description: str = "",
        type: EventType = EventType.CUSTOM,
        is_reminder: bool = False,
        **kwargs: Any
    ) -> "CalendarEvent":
        """
        Create a farmer-authored event with a fresh unique id.

        Args:
            title: Display title
            date: Day (and optionally time) of the event
            description: Display text
            type: Event kind
            is_reminder: Whether a notification should fire for it
            **kwargs: Optional fields (category, reminder_at, location...)

        Returns:
            New CalendarEvent instance
        """
        return cls(
            id=uuid.uuid4().hex,
            title=title,
            date=date,
            description=description,
            type=type,
            is_reminder=is_reminder,
            **kwargs
        )

    # Derived views

    @property
    def day(self) -> date:
        return self.date.date()

    @property
    def notify_at(self) -> datetime:
        """Instant the reminder fires: the explicit reminder time, else the event date."""
        return self.reminder_at or self.date

    @property
    def is_materialized(self) -> bool:
        return self.type == EventType.CROP_ACTIVITY and self.crop_name is not None

    def occurs_on(self, day: date) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return self.day == day

    def is_overdue(self, now: datetime) -> bool:
        if self.is_completed:
            return False
        return now > self.date

    def is_today(self, now: datetime) -> bool:
        return self.day == now.date()

    def is_upcoming(self, now: datetime, days: int = 7) -> bool:
        return now < self.date < now + timedelta(days=days)

    def status(self, now: datetime) -> EventStatus:
        if self.is_completed:
            return EventStatus.COMPLETED
        if self.is_overdue(now):
            return EventStatus.OVERDUE
        if self.is_today(now):
            return EventStatus.TODAY
        if self.is_upcoming(now):
            return EventStatus.UPCOMING
        return EventStatus.SCHEDULED

    def to_record(self) -> Dict[str, Any]:
        """Serialize for persistence."""
        return self.model_dump(mode='json')

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        return cls.model_validate(record)
