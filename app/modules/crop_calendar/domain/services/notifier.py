# 📄 File: app/modules/crop_calendar/domain/services/notifier.py
# 🧭 Purpose (Layman Explanation):
# Defines how the calendar asks the phone to show a reminder later, or to forget one
# 🧪 Purpose (Technical Summary):
# Notifier port used by the ReminderCoordinator; implementations handle delivery
# 🔗 Dependencies:
# abc, datetime
# 🔄 Connected Modules / Calls From:
# reminder_coordinator.py, infrastructure notification implementations

import zlib
from abc import ABC, abstractmethod
from datetime import datetime


def notification_key(event_id: str) -> str:
    """Notification key for an event; the event id itself, so cancel finds it."""
    return event_id


def numeric_notification_id(key: str) -> int:
    """Stable 31-bit id for platforms that address notifications by integer."""
    return zlib.crc32(key.encode('utf-8')) & 0x7FFFFFFF


class Notifier(ABC):
    """
    Keyed notification scheduler.

    Scheduling the same key twice replaces the first request. Implementations
    may ignore requests for instants already in the past.
    """

    @abstractmethod
    async def schedule(self, key: str, title: str, body: str, at: datetime) -> None:
        """
        Schedule a notification.

        Raises:
            NotificationError: If the request could not be scheduled
        """
        pass

    @abstractmethod
    async def cancel(self, key: str) -> None:
        """Cancel a notification. Unknown keys are a no-op."""
        pass
