# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The control center that connects all the calendar parts together - crop plans, saved entries
# and reminders - so the calendar screen gets one ready-to-use object.
#
# 🧪 Purpose (Technical Summary):
# Composition root: builds the CalendarService from settings, wiring the JSON catalog,
# event storage and notifier into the materializer, reminder coordinator and event store.
#
# 🔗 Dependencies:
# - app.shared.config.settings
# - app.shared.utils.logging
# - Crop calendar domain, application and infrastructure layers
#
# 🔄 Connected Modules / Calls From:
# - Presentation code creating the calendar at screen initialization
# - Tests exercising the wired system

from datetime import datetime
from typing import Callable, Optional

from app import __version__
from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger, log_startup_event, setup_logging
from app.modules.crop_calendar.application.calendar_service import CalendarService
from app.modules.crop_calendar.domain.repositories.event_repository import EventRepository
from app.modules.crop_calendar.domain.repositories.template_catalog import TemplateCatalog
from app.modules.crop_calendar.domain.services.event_materializer import EventMaterializer
from app.modules.crop_calendar.domain.services.event_store import EventStore
from app.modules.crop_calendar.domain.services.notifier import Notifier
from app.modules.crop_calendar.domain.services.reminder_coordinator import ReminderCoordinator
from app.modules.crop_calendar.infrastructure.catalog.json_template_catalog import JsonTemplateCatalog
from app.modules.crop_calendar.infrastructure.notifications.in_memory_notifier import InMemoryNotifier
from app.modules.crop_calendar.infrastructure.storage.json_event_repository import JsonFileEventRepository

logger = get_logger(__name__)


def create_calendar_service(
    settings: Optional[Settings] = None,
    template_catalog: Optional[TemplateCatalog] = None,
    event_repository: Optional[EventRepository] = None,
    notifier: Optional[Notifier] = None,
    clock: Callable[[], datetime] = datetime.now
) -> CalendarService:
    """
    Build a CalendarService.

    Collaborators not passed in are created from settings: the bundled
    (or CALENDAR_CATALOG_PATH) JSON catalog, a JSON file at
    CALENDAR_EVENTS_PATH and an in-memory notifier.

    Args:
        settings: Application settings, defaults to get_settings()
        template_catalog: Crop schedule source
        event_repository: Storage for farmer-authored events
        notifier: Reminder delivery backend
        clock: Source of the current time

    Returns:
        CalendarService in the Uninitialized state; call `load()` next
    """
    settings = settings or get_settings()

    template_catalog = template_catalog or JsonTemplateCatalog(settings.CALENDAR_CATALOG_PATH)
    event_repository = event_repository or JsonFileEventRepository(settings.CALENDAR_EVENTS_PATH)
    notifier = notifier or InMemoryNotifier(clock=clock)

    materializer = EventMaterializer(
        template_catalog,
        recency_window_days=settings.CALENDAR_RECENCY_WINDOW_DAYS,
        roll_over_year=settings.CALENDAR_ROLL_OVER_YEAR,
    )
    reminder_coordinator = ReminderCoordinator(
        notifier,
        timeout_seconds=settings.NOTIFICATION_TIMEOUT_SECONDS,
    )
    event_store = EventStore(
        event_repository,
        materializer,
        reminder_coordinator,
        persistence_timeout_seconds=settings.PERSISTENCE_TIMEOUT_SECONDS,
        clock=clock,
    )

    logger.debug(
        "Calendar service created",
        catalog=type(template_catalog).__name__,
        repository=type(event_repository).__name__,
        notifier=type(notifier).__name__,
    )
    return CalendarService(
        event_store,
        template_catalog,
        upcoming_window_days=settings.CALENDAR_UPCOMING_WINDOW_DAYS,
        clock=clock,
    )


def bootstrap(settings: Optional[Settings] = None) -> CalendarService:
    """Configure logging and build the calendar service."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)
    log_startup_event(settings.APP_NAME, __version__, extra={"environment": settings.ENVIRONMENT})
    return create_calendar_service(settings)
