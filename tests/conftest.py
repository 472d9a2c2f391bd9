"""
Pytest configuration and shared fakes for crop calendar tests.
"""

import asyncio
from datetime import datetime
from typing import List, Optional, Sequence

import pytest

from app.shared.core.exceptions import CatalogLoadError, PersistenceError
from app.modules.crop_calendar.application.calendar_service import CalendarService
from app.modules.crop_calendar.domain.models.calendar_event import CalendarEvent
from app.modules.crop_calendar.domain.models.schedule import ActivitySchedule, CropSchedule, FarmingTip
from app.modules.crop_calendar.domain.repositories.event_repository import EventRepository
from app.modules.crop_calendar.domain.repositories.template_catalog import TemplateCatalog
from app.modules.crop_calendar.domain.services.event_materializer import EventMaterializer
from app.modules.crop_calendar.domain.services.event_store import EventStore
from app.modules.crop_calendar.domain.services.notifier import Notifier
from app.modules.crop_calendar.domain.services.reminder_coordinator import ReminderCoordinator
from app.modules.crop_calendar.infrastructure.storage.in_memory_event_repository import InMemoryEventRepository


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class StaticCatalog(TemplateCatalog):
    """Catalog serving fixed schedules; can be switched to fail."""

    def __init__(self, schedules=None, tips=None, fail=False, fail_tips=False):
        self.schedules = list(schedules or [])
        self.tips = list(tips or [])
        self.fail = fail
        self.fail_tips = fail_tips
        self.load_count = 0

    async def load_crop_schedules(self) -> List[CropSchedule]:
        self.load_count += 1
        if self.fail:
            raise CatalogLoadError("catalog offline", source="test")
        return list(self.schedules)

    async def load_farming_tips(self) -> List[FarmingTip]:
        if self.fail_tips:
            raise CatalogLoadError("tips offline", source="test")
        return list(self.tips)


class RecordingNotifier(Notifier):
    """Keyed notifier that records every call it receives."""

    def __init__(self, fail_schedule=False, fail_cancel=False, delay: float = 0):
        self.calls = []
        self.pending = {}
        self.fail_schedule = fail_schedule
        self.fail_cancel = fail_cancel
        self.delay = delay

    async def schedule(self, key, title, body, at):
        if self.delay:
            await asyncio.sleep(self.delay)
        self.calls.append(("schedule", key))
        if self.fail_schedule:
            raise RuntimeError("notification channel unavailable")
        self.pending[key] = (title, body, at)

    async def cancel(self, key):
        self.calls.append(("cancel", key))
        if self.fail_cancel:
            raise RuntimeError("notification channel unavailable")
        self.pending.pop(key, None)

    def keys(self, operation):
        return [key for op, key in self.calls if op == operation]


class FlakyEventRepository(EventRepository):
    """In-memory repository whose reads or writes can be made to fail or stall."""

    def __init__(self, events: Optional[Sequence[CalendarEvent]] = None, fail_load=False, fail_save=False, delay: float = 0):
        self.events = list(events or [])
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.delay = delay
        self.saved: List[List[CalendarEvent]] = []

    async def load_events(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_load:
            raise PersistenceError("disk unreadable", operation="load")
        return list(self.events)

    async def save_events(self, events):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_save:
            raise OSError("disk full")
        self.events = list(events)
        self.saved.append(list(events))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def now():
    return datetime(2025, 6, 30)


@pytest.fixture
def wheat():
    return CropSchedule(
        crop_name="Wheat",
        activities=(
            ActivitySchedule(activity="Harvest", description="Cut and thresh", month=5, day=31),
            ActivitySchedule(activity="Irrigation", description="Second irrigation", month=7, day=4),
            ActivitySchedule(activity="Sowing", description="Sow certified seed", month=11, day=10),
            ActivitySchedule(activity="Soil Preparation", description="Plough twice", month=5, day=30),
        ),
    )


@pytest.fixture
def catalog(wheat):
    return StaticCatalog(
        schedules=[wheat],
        tips=[
            FarmingTip(title="Mulch", description="Keep soil cool", category="water", season="summer"),
            FarmingTip(title="Rotate", description="Legumes after cereals", category="planning"),
        ],
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def repository():
    return InMemoryEventRepository()


def build_store(catalog, repository, notifier, now, roll_over_year=False, **kwargs):
    materializer = EventMaterializer(catalog, recency_window_days=30, roll_over_year=roll_over_year)
    coordinator = ReminderCoordinator(notifier, timeout_seconds=kwargs.pop("notification_timeout", 1.0))
    return EventStore(
        repository,
        materializer,
        coordinator,
        persistence_timeout_seconds=kwargs.pop("persistence_timeout", 1.0),
        clock=lambda: now,
    )


@pytest.fixture
def store(catalog, repository, notifier, now):
    return build_store(catalog, repository, notifier, now)


@pytest.fixture
def service(store, catalog, now):
    return CalendarService(store, catalog, upcoming_window_days=7, clock=lambda: now)


def custom_event(event_id, day, title="Market day", is_reminder=False, **kwargs):
    return CalendarEvent(id=event_id, title=title, date=day, is_reminder=is_reminder, **kwargs)
