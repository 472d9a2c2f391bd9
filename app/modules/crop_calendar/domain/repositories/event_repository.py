# 📄 File: app/modules/crop_calendar/domain/repositories/event_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving and loading the farmer's own calendar entries between app sessions
# 🧪 Purpose (Technical Summary):
# Repository interface with whole-collection semantics for CalendarEvent persistence
# 🔗 Dependencies:
# Domain models (CalendarEvent), typing, abc
# 🔄 Connected Modules / Calls From:
# event_store.py, infrastructure storage implementations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models.calendar_event import CalendarEvent


class EventRepository(ABC):
    """
    Repository interface for stored calendar events.

    Implementation Notes:
    - save_events replaces the whole stored collection
    - load_events after save_events must return the latest saved set
    - Only the EventStore writes through this interface
    """

    @abstractmethod
    async def load_events(self) -> List[CalendarEvent]:
        """
        Load the stored events.

        Returns:
            Stored events, empty if nothing was saved yet

        Raises:
            PersistenceError: If the stored data cannot be read
        """
        pass

    @abstractmethod
    async def save_events(self, events: Sequence[CalendarEvent]) -> None:
        """
        Replace the stored events.

        Args:
            events: Full collection to store

        Raises:
            PersistenceError: If the write fails
        """
        pass
