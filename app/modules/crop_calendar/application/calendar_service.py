# 📄 File: app/modules/crop_calendar/application/calendar_service.py
# 🧭 Purpose (Layman Explanation):
# The single entry point the calendar screen talks to: load the calendar, see what's on a day,
# add or delete an entry, and get friendly messages when something didn't fully work
# 🧪 Purpose (Technical Summary):
# Calendar Query Surface facade over EventStore and TemplateCatalog; turns precondition failures into
# rejected OperationResults, passes recovered collaborator errors through, and offers derived views
# 🔗 Dependencies:
# pydantic, domain models and services, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main (composition root), presentation code

from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.shared.core.exceptions import (
    CalendarNotLoadedError,
    CatalogLoadError,
    CropCalendarException,
    DuplicateEventError,
    ProtectedEventError,
    ValidationError,
)
from app.shared.utils.logging import get_logger

from ..domain.models.calendar_event import CalendarEvent, EventType
from ..domain.models.result import OperationResult
from ..domain.models.schedule import CropSchedule, FarmingTip
from ..domain.repositories.template_catalog import TemplateCatalog
from ..domain.services.event_store import EventStore
from .event_display import EventDisplay, categories_of

logger = get_logger(__name__)

DEFAULT_UPCOMING_WINDOW_DAYS = 7


class CalendarService:
    """
    Facade consumed by presentation code.

    Every operation except `load` requires the calendar to be loaded and
    raises CalendarNotLoadedError otherwise. Mutations never raise for
    recoverable failures; inspect the returned OperationResult instead.
    """

    def __init__(
        self,
        event_store: EventStore,
        template_catalog: TemplateCatalog,
        upcoming_window_days: int = DEFAULT_UPCOMING_WINDOW_DAYS,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.event_store = event_store
        self.template_catalog = template_catalog
        self.upcoming_window_days = upcoming_window_days
        self.clock = clock
        self._farming_tips: List[FarmingTip] = []

    @property
    def is_loaded(self) -> bool:
        return self.event_store.is_loaded

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def load(self, now: Optional[datetime] = None) -> OperationResult:
        """
        Load templates, stored events and farming tips.

        Safe to call again; a repeat call refreshes the crop schedule events.
        """
        result = await self.event_store.load_all(now or self.clock())

        tips_error = await self._load_farming_tips()
        if tips_error is not None:
            result = OperationResult.applied(events=result.events, errors=result.errors + [tips_error])

        if result.errors:
            logger.warning(f"Calendar loaded with {len(result.errors)} recovered errors", notice=result.message)
        return result

    async def refresh(self, now: Optional[datetime] = None) -> OperationResult:
        return await self.load(now)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    async def add(self, event: CalendarEvent) -> OperationResult:
        """Add an event; a duplicate id is rejected without touching the calendar."""
        try:
            return await self.event_store.add(event)
        except DuplicateEventError as e:
            logger.warning(f"Rejected event add: {e.message}")
            return OperationResult.rejected(e)

    async def add_event(
        self,
        title: str,
        date: datetime,
        description: str = "",
        type: EventType = EventType.CUSTOM,
        is_reminder: bool = False,
        **kwargs: Any
    ) -> OperationResult:
        """
        Build a farmer-authored event with a fresh id and add it.

        Invalid input (empty title, end before start...) is rejected.
        """
        try:
            event = CalendarEvent.new(
                title=title,
                date=date,
                description=description,
                type=type,
                is_reminder=is_reminder,
                **kwargs
            )
        except PydanticValidationError as e:
            errors = e.errors()
            field = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
            error = ValidationError(
                errors[0]["msg"] if errors else "Invalid event",
                field=field or None,
            )
            logger.warning(f"Rejected invalid event: {error.message}", details=error.details)
            return OperationResult.rejected(error)

        return await self.add(event)

    async def remove(self, event_id: str) -> OperationResult:
        """Delete an event; crop schedule events are rejected, unknown ids succeed."""
        try:
            return await self.event_store.remove(event_id)
        except ProtectedEventError as e:
            logger.warning(f"Rejected event removal: {e.message}")
            return OperationResult.rejected(e)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def events_for_day(self, day) -> List[CalendarEvent]:
        return self.event_store.events_for_day(day)

    def events_between(self, start, end) -> List[CalendarEvent]:
        return self.event_store.events_between(start, end)

    def get_event(self, event_id: str) -> Optional[CalendarEvent]:
        return self.event_store.get(event_id)

    def upcoming_events(self, now: Optional[datetime] = None, days: Optional[int] = None) -> List[CalendarEvent]:
        """Events after `now` within the upcoming window, ordered by date."""
        now = now or self.clock()
        days = days or self.upcoming_window_days
        horizon = now + timedelta(days=days)
        events = [e for e in self.event_store.all_events() if now < e.date < horizon]
        return sorted(events, key=lambda e: e.date)

    def overdue_events(self, now: Optional[datetime] = None) -> List[CalendarEvent]:
        now = now or self.clock()
        events = [e for e in self.event_store.all_events() if e.is_overdue(now)]
        return sorted(events, key=lambda e: e.date)

    def crop_schedules(self) -> List[CropSchedule]:
        return self.event_store.schedules

    def farming_tips(self, season: Optional[str] = None) -> List[FarmingTip]:
        if not self.is_loaded:
            raise CalendarNotLoadedError("farming_tips")
        return [tip for tip in self._farming_tips if tip.matches_season(season)]

    @staticmethod
    def categories_of(event: CalendarEvent) -> EventDisplay:
        return categories_of(event)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    async def _load_farming_tips(self) -> Optional[CropCalendarException]:
        try:
            self._farming_tips = list(await self.template_catalog.load_farming_tips())
        except CatalogLoadError as e:
            logger.error(f"Farming tips failed to load: {e.message}", details=e.details)
            return e
        except Exception as e:
            logger.error(f"Farming tips failed to load: {e}", exc_info=True)
            return CatalogLoadError("Failed to load farming tips", original_error=e)
        return None
