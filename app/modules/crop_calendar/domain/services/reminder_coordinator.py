# 📄 File: app/modules/crop_calendar/domain/services/reminder_coordinator.py
# 🧭 Purpose (Layman Explanation):
# Makes sure every calendar entry that should remind the farmer has exactly one reminder on the phone,
# and that the reminder goes away when the entry is deleted
# 🧪 Purpose (Technical Summary):
# Keeps one keyed notification per reminder event: schedules on add, cancels on remove,
# with a timeout on every notifier call and failures surfaced as NotificationError
# 🔗 Dependencies:
# asyncio, Notifier port, CalendarEvent, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# event_store.py

import asyncio
from typing import Awaitable

from app.shared.core.exceptions import NotificationError
from app.shared.utils.logging import get_logger

from ..models.calendar_event import CalendarEvent
from .notifier import Notifier, notification_key

logger = get_logger(__name__)

DEFAULT_NOTIFICATION_TIMEOUT_SECONDS = 5.0


class ReminderCoordinator:
    """
    Domain service tying reminder notifications to the event lifecycle.

    The notifier is keyed by the event id, so scheduling an event twice
    replaces the first notification instead of adding a second one.
    Past-dated requests are passed through; dropping them is the
    notifier's decision.
    """

    def __init__(
        self,
        notifier: Notifier,
        timeout_seconds: float = DEFAULT_NOTIFICATION_TIMEOUT_SECONDS
    ):
        self.notifier = notifier
        self.timeout_seconds = timeout_seconds

    async def on_event_added(self, event: CalendarEvent) -> bool:
        """
        Schedule the reminder for an event.

        Args:
            event: Event that was added

        Returns:
            True if a notification was requested, False for non-reminder events

        Raises:
            NotificationError: If the notifier failed or timed out
        """
        if not event.is_reminder:
            return False

        key = notification_key(event.id)
        await self._call(
            self.notifier.schedule(key, event.title, event.description, event.notify_at),
            key=key,
            operation="schedule",
        )
        logger.debug(f"Reminder scheduled for {event.id}", key=key, at=event.notify_at.isoformat())
        return True

    async def on_event_removed(self, event_id: str) -> None:
        """
        Cancel the reminder for an event id.

        Always issued, whether or not the event had a reminder; cancelling
        an unknown key is a no-op for the notifier.

        Raises:
            NotificationError: If the notifier failed or timed out
        """
        key = notification_key(event_id)
        await self._call(self.notifier.cancel(key), key=key, operation="cancel")
        logger.debug(f"Reminder cancelled for {event_id}", key=key)

    async def _call(self, call: Awaitable[None], key: str, operation: str) -> None:
        try:
            await asyncio.wait_for(call, timeout=self.timeout_seconds)
        except NotificationError:
            raise
        except asyncio.TimeoutError as e:
            raise NotificationError(
                f"Notification {operation} timed out after {self.timeout_seconds}s",
                key=key,
                operation=operation,
                original_error=e,
            ) from e
        except Exception as e:
            raise NotificationError(
                f"Notification {operation} failed: {e}",
                key=key,
                operation=operation,
                original_error=e,
            ) from e
