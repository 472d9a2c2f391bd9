# 📄 File: app/modules/crop_calendar/domain/services/event_store.py
# 🧭 Purpose (Layman Explanation):
# Keeps the one true list of everything on the farmer's calendar - crop plan tasks and the farmer's own entries -
# saves the farmer's entries, and tells the reminder helper when entries come and go
# 🧪 Purpose (Technical Summary):
# In-memory event collection keyed by id with serialized mutations (asyncio.Lock), whole-collection
# persistence of farmer-authored events, Uninitialized -> Loaded lifecycle, and recovery of
# persistence/notification failures into OperationResult errors
# 🔗 Dependencies:
# asyncio, domain models, EventRepository, EventMaterializer, ReminderCoordinator,
# app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# calendar_service.py

import asyncio
import uuid
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Set

from app.shared.core.exceptions import (
    CalendarNotLoadedError,
    CropCalendarException,
    DuplicateEventError,
    NotificationError,
    PersistenceError,
    ProtectedEventError,
)
from app.shared.utils.logging import get_logger

from ..models.calendar_event import CalendarEvent
from ..models.result import OperationResult
from ..models.schedule import CropSchedule
from ..repositories.event_repository import EventRepository
from .event_materializer import EventMaterializer
from .reminder_coordinator import ReminderCoordinator

logger = get_logger(__name__)

DEFAULT_PERSISTENCE_TIMEOUT_SECONDS = 5.0


def _as_day(value) -> date:
    return value.date() if isinstance(value, datetime) else value


class EventStore:
    """
    Single source of truth for the events on the calendar.

    Mutations (load_all, add, remove) run one at a time under a lock,
    including their storage write and notifier calls, so operations on the
    same event id are observed in the order they were issued. Queries read
    the in-memory collection and are synchronous.

    Only farmer-authored events are persisted; materialized events are
    rebuilt by every load_all.
    """

    def __init__(
        self,
        event_repository: EventRepository,
        materializer: EventMaterializer,
        reminder_coordinator: ReminderCoordinator,
        persistence_timeout_seconds: float = DEFAULT_PERSISTENCE_TIMEOUT_SECONDS,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.event_repository = event_repository
        self.materializer = materializer
        self.reminder_coordinator = reminder_coordinator
        self.persistence_timeout_seconds = persistence_timeout_seconds
        self.clock = clock

        self._events: Dict[str, CalendarEvent] = {}
        self._materialized_ids: Set[str] = set()
        self._schedules: List[CropSchedule] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def schedules(self) -> List[CropSchedule]:
        self._ensure_loaded("schedules")
        return list(self._schedules)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def load_all(self, now: Optional[datetime] = None) -> OperationResult:
        """
        Populate the store from the catalog and from storage.

        The first call reads stored events; later calls (refresh) keep the
        in-memory farmer-authored events, which are authoritative for the
        session, and only rebuild the materialized set. If the catalog fails
        on a refresh the previous materialized events are kept.

        Returns:
            OperationResult with all events and any recovered errors
        """
        async with self._lock:
            now = now or self.clock()
            errors: List[CropCalendarException] = []

            materialized = await self.materializer.load(now)
            catalog_failed = materialized.error is not None
            if catalog_failed:
                errors.append(materialized.error)

            if self._loaded:
                if catalog_failed:
                    logger.warning("Keeping previous crop schedule events after catalog failure")
                    return OperationResult.applied(events=list(self._events.values()), errors=errors)
                events = {
                    event_id: event for event_id, event in self._events.items()
                    if event_id not in self._materialized_ids
                }
            else:
                events = {}
                try:
                    stored = await self._load_stored()
                except PersistenceError as e:
                    logger.error(f"Stored events unavailable: {e.message}", details=e.details)
                    errors.append(e)
                    stored = []
                for event in stored:
                    if event.id in events:
                        logger.warning(f"Dropping duplicate stored event {event.id}")
                        continue
                    events[event.id] = event

            previous_materialized = self._materialized_ids
            materialized_ids: Set[str] = set()
            new_reminders: List[CalendarEvent] = []
            for event in materialized.events:
                if event.id in events:
                    # The farmer's copy wins and stays deletable and persisted
                    logger.warning(f"Stored event {event.id} shadows a crop schedule event")
                    continue
                events[event.id] = event
                materialized_ids.add(event.id)
                new_reminders.append(event)

            self._events = events
            self._materialized_ids = materialized_ids
            if not catalog_failed:
                self._schedules = list(materialized.schedules)
            self._loaded = True

            for event_id in sorted(previous_materialized - materialized_ids):
                await self._cancel_reminder(event_id, errors)
            for event in new_reminders:
                await self._schedule_reminder(event, errors)

            logger.info(
                f"Calendar loaded with {len(self._events)} events",
                event_count=len(self._events),
                materialized_count=len(materialized_ids),
                error_count=len(errors),
            )
            return OperationResult.applied(events=list(self._events.values()), errors=errors)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    async def add(self, event: CalendarEvent) -> OperationResult:
        """
        Insert a new event.

        An event without id gets a fresh one. The in-memory insert stands even
        if the storage write or the reminder fails; those failures come back
        as errors on the result.

        Raises:
            CalendarNotLoadedError: If load_all has not run
            DuplicateEventError: If the id is already present
        """
        async with self._lock:
            self._ensure_loaded("add")

            if not event.id:
                event = event.model_copy(update={"id": uuid.uuid4().hex})
            if event.id in self._events:
                raise DuplicateEventError(event.id)

            self._events[event.id] = event
            errors: List[CropCalendarException] = []
            try:
                await self._persist(errors)
                await self._schedule_reminder(event, errors)
            except BaseException:
                self._events.pop(event.id, None)
                raise

            logger.log_business_event(
                "calendar_event.added",
                f"Calendar event added: {event.id}",
                entity_id=event.id,
                entity_type=event.type.value,
                extra={"is_reminder": event.is_reminder, "error_count": len(errors)},
            )
            return OperationResult.applied(event=event, errors=errors)

    async def remove(self, event_id: str) -> OperationResult:
        """
        Delete an event by id; a missing id is not an error.

        The reminder is cancelled first, unconditionally, then the event
        leaves the collection and storage is updated.

        Raises:
            CalendarNotLoadedError: If load_all has not run
            ProtectedEventError: If the event was materialized from a crop schedule
        """
        async with self._lock:
            self._ensure_loaded("remove")

            if event_id in self._materialized_ids:
                raise ProtectedEventError(event_id)

            errors: List[CropCalendarException] = []
            await self._cancel_reminder(event_id, errors)

            removed = self._events.pop(event_id, None)
            if removed is None:
                logger.debug(f"Remove of unknown event {event_id} ignored")
                return OperationResult.applied(errors=errors)

            await self._persist(errors)

            logger.log_business_event(
                "calendar_event.removed",
                f"Calendar event removed: {event_id}",
                entity_id=event_id,
                entity_type=removed.type.value,
                extra={"error_count": len(errors)},
            )
            return OperationResult.applied(event=removed, errors=errors)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        self._ensure_loaded("get")
        return self._events.get(event_id)

    def all_events(self) -> List[CalendarEvent]:
        self._ensure_loaded("all_events")
        return list(self._events.values())

    def events_for_day(self, day) -> List[CalendarEvent]:
        """Events on the same calendar day, in insertion order."""
        self._ensure_loaded("events_for_day")
        day = _as_day(day)
        return [event for event in self._events.values() if event.day == day]

    def events_between(self, start, end) -> List[CalendarEvent]:
        """Events from day `start` through day `end` inclusive, ordered by date."""
        self._ensure_loaded("events_between")
        start, end = _as_day(start), _as_day(end)
        matches = [event for event in self._events.values() if start <= event.day <= end]
        return sorted(matches, key=lambda event: event.date)

    def is_materialized(self, event_id: str) -> bool:
        return event_id in self._materialized_ids

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _ensure_loaded(self, operation: str) -> None:
        if not self._loaded:
            raise CalendarNotLoadedError(operation)

    def _stored_snapshot(self) -> List[CalendarEvent]:
        return [
            event for event_id, event in self._events.items()
            if event_id not in self._materialized_ids
        ]

    async def _load_stored(self) -> List[CalendarEvent]:
        try:
            return await asyncio.wait_for(
                self.event_repository.load_events(),
                timeout=self.persistence_timeout_seconds,
            )
        except PersistenceError:
            raise
        except asyncio.TimeoutError as e:
            raise PersistenceError(
                f"Loading events timed out after {self.persistence_timeout_seconds}s",
                operation="load",
                original_error=e,
            ) from e
        except Exception as e:
            raise PersistenceError(f"Loading events failed: {e}", operation="load", original_error=e) from e

    async def _persist(self, errors: List[CropCalendarException]) -> None:
        snapshot = self._stored_snapshot()
        try:
            await asyncio.wait_for(
                self.event_repository.save_events(snapshot),
                timeout=self.persistence_timeout_seconds,
            )
        except PersistenceError as e:
            error = e
        except asyncio.TimeoutError as e:
            error = PersistenceError(
                f"Saving events timed out after {self.persistence_timeout_seconds}s",
                operation="save",
                original_error=e,
            )
        except Exception as e:
            error = PersistenceError(f"Saving events failed: {e}", operation="save", original_error=e)
        else:
            logger.debug(f"Persisted {len(snapshot)} events")
            return

        logger.error(f"Failed to save events: {error.message}", details=error.details)
        errors.append(error)

    async def _schedule_reminder(self, event: CalendarEvent, errors: List[CropCalendarException]) -> None:
        try:
            await self.reminder_coordinator.on_event_added(event)
        except NotificationError as e:
            logger.warning(f"Failed to schedule reminder for {event.id}: {e.message}", details=e.details)
            errors.append(e)

    async def _cancel_reminder(self, event_id: str, errors: List[CropCalendarException]) -> None:
        try:
            await self.reminder_coordinator.on_event_removed(event_id)
        except NotificationError as e:
            logger.warning(f"Failed to cancel reminder for {event_id}: {e.message}", details=e.details)
            errors.append(e)
