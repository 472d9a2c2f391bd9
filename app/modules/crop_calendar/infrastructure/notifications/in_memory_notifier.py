# 📄 File: app/modules/crop_calendar/infrastructure/notifications/in_memory_notifier.py
# 🧭 Purpose (Layman Explanation):
# A stand-in for the phone's reminder system that remembers which reminders are waiting to go off
# 🧪 Purpose (Technical Summary):
# Keyed Notifier implementation: schedule replaces by key and skips past instants, cancel is idempotent;
# due() lists the notifications that should have fired by a given instant
# 🔗 Dependencies:
# dataclasses, datetime, typing, Notifier port, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main (composition root), tests

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from app.shared.utils.logging import get_logger

from ...domain.services.notifier import Notifier, numeric_notification_id

logger = get_logger(__name__)


@dataclass(frozen=True)
class PendingNotification:
    key: str
    title: str
    body: str
    at: datetime

    @property
    def numeric_id(self) -> int:
        return numeric_notification_id(self.key)


class InMemoryNotifier(Notifier):
    """
    Notifier that keeps pending notifications in a dict keyed by notification key.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self._pending: Dict[str, PendingNotification] = {}

    async def schedule(self, key: str, title: str, body: str, at: datetime) -> None:
        if at <= self.clock():
            # Past instants would fire immediately; drop them
            self._pending.pop(key, None)
            logger.debug(f"Skipping past-dated notification {key}", at=at.isoformat())
            return
        self._pending[key] = PendingNotification(key=key, title=title, body=body, at=at)
        logger.debug(f"Notification {key} scheduled", at=at.isoformat())

    async def cancel(self, key: str) -> None:
        if self._pending.pop(key, None) is not None:
            logger.debug(f"Notification {key} cancelled")

    def get(self, key: str) -> Optional[PendingNotification]:
        return self._pending.get(key)

    @property
    def pending(self) -> List[PendingNotification]:
        return sorted(self._pending.values(), key=lambda n: n.at)

    def due(self, now: datetime) -> List[PendingNotification]:
        return [n for n in self.pending if n.at <= now]
