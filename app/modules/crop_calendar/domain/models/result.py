# 📄 File: app/modules/crop_calendar/domain/models/result.py
# 🧭 Purpose (Layman Explanation):
# Packs up the outcome of a calendar action - it worked, it worked but something on the side failed,
# or it was refused - so the screen can show a short, friendly message
# 🧪 Purpose (Technical Summary):
# OperationResult value object carrying status, affected events and recovered collaborator errors
# 🔗 Dependencies:
# dataclasses, enum, typing, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# event_store.py, calendar_service.py, presentation code

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from app.shared.core.exceptions import (
    CatalogLoadError,
    CropCalendarException,
    NotificationError,
    PersistenceError,
)

from .calendar_event import CalendarEvent


class ResultStatus(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"  # Applied in memory, a collaborator failed
    REJECTED = "rejected"  # Nothing applied


@dataclass
class OperationResult:
    """Outcome of a calendar operation."""

    status: ResultStatus = ResultStatus.OK
    event: Optional[CalendarEvent] = None
    events: List[CalendarEvent] = field(default_factory=list)
    errors: List[CropCalendarException] = field(default_factory=list)

    @classmethod
    def applied(
        cls,
        event: Optional[CalendarEvent] = None,
        events: Optional[List[CalendarEvent]] = None,
        errors: Optional[List[CropCalendarException]] = None
    ) -> "OperationResult":
        """Result for a change that took effect, degraded when errors were recovered."""
        errors = list(errors or [])
        return cls(
            status=ResultStatus.DEGRADED if errors else ResultStatus.OK,
            event=event,
            events=list(events or []),
            errors=errors,
        )

    @classmethod
    def rejected(cls, error: CropCalendarException) -> "OperationResult":
        return cls(status=ResultStatus.REJECTED, errors=[error])

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def succeeded(self) -> bool:
        """True when the change is reflected in memory (ok or degraded)."""
        return self.status != ResultStatus.REJECTED

    @property
    def persistence_failed(self) -> bool:
        return any(isinstance(e, PersistenceError) for e in self.errors)

    @property
    def notification_failed(self) -> bool:
        return any(isinstance(e, NotificationError) for e in self.errors)

    @property
    def catalog_failed(self) -> bool:
        return any(isinstance(e, CatalogLoadError) for e in self.errors)

    @property
    def message(self) -> Optional[str]:
        """Short non-blocking notice for the farmer, None when all went well."""
        if self.status == ResultStatus.REJECTED:
            return self.errors[0].message
        notices = []
        if self.catalog_failed:
            notices.append("Crop schedules could not be loaded. Pull to retry.")
        if self.persistence_failed:
            notices.append("Changes may not be saved after the app restarts.")
        if self.notification_failed:
            notices.append("A reminder could not be updated.")
        return " ".join(notices) or None
