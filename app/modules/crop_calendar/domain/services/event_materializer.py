# 📄 File: app/modules/crop_calendar/domain/services/event_materializer.py
# 🧭 Purpose (Layman Explanation):
# Turns each crop's yearly plan ("fertilize wheat on 15 March") into real dated calendar entries for this year,
# hiding tasks that are long past but keeping ones the farmer only just missed
# 🧪 Purpose (Technical Summary):
# Deterministic template expansion with a configurable recency window and year rollover;
# loads the catalog and converts catalog failures into an empty result plus a CatalogLoadError
# 🔗 Dependencies:
# Domain models, TemplateCatalog, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# event_store.py (load_all), calendar_service.py

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Iterable, Iterator, List, Optional

from app.shared.core.exceptions import CatalogLoadError
from app.shared.utils.logging import get_logger

from ..models.calendar_event import CalendarEvent, EventType
from ..models.schedule import ActivitySchedule, CropSchedule
from ..repositories.template_catalog import TemplateCatalog

logger = get_logger(__name__)

DEFAULT_RECENCY_WINDOW_DAYS = 30


def materialized_event_id(crop_name: str, activity: str, year: int) -> str:
    return f"{crop_name}_{activity}_{year}"


@dataclass
class MaterializationResult:
    """Events produced from the catalog, with the schedules they came from."""
    events: List[CalendarEvent] = field(default_factory=list)
    schedules: List[CropSchedule] = field(default_factory=list)
    error: Optional[CatalogLoadError] = None


class EventMaterializer:
    """
    Expands crop schedules into dated calendar events.

    A candidate date is kept when it falls on or after the day
    `recency_window_days` before `now`; every later date is kept regardless
    of distance. With `roll_over_year` the previous year is also considered
    (early January still shows late-December tasks) and an activity already
    out of the window this year is moved to next year.
    """

    def __init__(
        self,
        template_catalog: TemplateCatalog,
        recency_window_days: int = DEFAULT_RECENCY_WINDOW_DAYS,
        roll_over_year: bool = True
    ):
        if recency_window_days <= 0:
            raise ValueError("recency_window_days must be positive")
        self.template_catalog = template_catalog
        self.recency_window_days = recency_window_days
        self.roll_over_year = roll_over_year

    async def load(self, now: datetime) -> MaterializationResult:
        """
        Load the catalog and materialize it for `now`.

        Catalog failures are not retried; they yield an empty result
        carrying the CatalogLoadError.
        """
        try:
            schedules = await self.template_catalog.load_crop_schedules()
        except CatalogLoadError as e:
            logger.error(f"Crop schedule catalog failed to load: {e.message}", details=e.details)
            return MaterializationResult(error=e)
        except Exception as e:
            logger.error(f"Crop schedule catalog failed to load: {e}", exc_info=True)
            return MaterializationResult(error=CatalogLoadError(original_error=e))

        events = self.materialize(schedules, now)
        logger.info(
            f"Materialized {len(events)} events from {len(schedules)} crop schedules",
            schedule_count=len(schedules),
            event_count=len(events),
        )
        return MaterializationResult(events=events, schedules=list(schedules))

    def materialize(self, schedules: Iterable[CropSchedule], now: datetime) -> List[CalendarEvent]:
        """
        Produce the dated events for every activity of every schedule.

        Pure: the same schedules and `now` always give the same events in
        the same order.
        """
        cutoff = (now - timedelta(days=self.recency_window_days)).date()
        events: List[CalendarEvent] = []
        seen_ids = set()

        for schedule in schedules:
            for activity in schedule.activities:
                for event_date in self._candidate_dates(activity, now.year, cutoff):
                    event = self._build_event(schedule, activity, event_date)
                    if event.id in seen_ids:
                        logger.warning(
                            f"Skipping duplicate activity {event.id}",
                            crop_name=schedule.crop_name,
                            activity=activity.activity,
                        )
                        continue
                    seen_ids.add(event.id)
                    events.append(event)

        return events

    def _candidate_dates(self, activity: ActivitySchedule, year: int, cutoff: date) -> Iterator[date]:
        current = activity.resolve_date(year)

        if not self.roll_over_year:
            if current >= cutoff:
                yield current
            return

        previous = activity.resolve_date(year - 1)
        if previous >= cutoff:
            yield previous

        if current >= cutoff:
            yield current
        else:
            yield activity.resolve_date(year + 1)

    @staticmethod
    def _build_event(schedule: CropSchedule, activity: ActivitySchedule, event_date: date) -> CalendarEvent:
        return CalendarEvent(
            id=materialized_event_id(schedule.crop_name, activity.activity, event_date.year),
            title=f"{activity.activity} - {schedule.crop_name}",
            description=activity.description,
            date=datetime.combine(event_date, time()),
            type=EventType.CROP_ACTIVITY,
            is_reminder=True,
            crop_name=schedule.crop_name,
            category=activity.activity.lower(),
        )
