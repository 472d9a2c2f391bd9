# 📄 File: app/modules/crop_calendar/infrastructure/storage/in_memory_event_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps saved calendar entries only while the program runs - handy for demos and tests
# 🧪 Purpose (Technical Summary):
# Process-local EventRepository holding a copy of the last saved collection
# 🔗 Dependencies:
# typing, CalendarEvent, EventRepository
# 🔄 Connected Modules / Calls From:
# app.main (when no events path is configured), tests

from typing import List, Optional, Sequence

from ...domain.models.calendar_event import CalendarEvent
from ...domain.repositories.event_repository import EventRepository


class InMemoryEventRepository(EventRepository):
    """EventRepository that keeps the saved collection in memory."""

    def __init__(self, events: Optional[Sequence[CalendarEvent]] = None):
        self._events: List[CalendarEvent] = list(events or [])
        self.save_count = 0

    async def load_events(self) -> List[CalendarEvent]:
        return list(self._events)

    async def save_events(self, events: Sequence[CalendarEvent]) -> None:
        self._events = list(events)
        self.save_count += 1
