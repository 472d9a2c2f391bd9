# 📄 File: app/modules/crop_calendar/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the calendar's business logic - building dated tasks from crop plans, keeping the event list,
# and managing reminders
# 🧪 Purpose (Technical Summary):
# Package initialization for domain services and the Notifier port
# 🔗 Dependencies:
# Domain models, repository interfaces
# 🔄 Connected Modules / Calls From:
# Application layer (calendar_service.py), app.main

"""
Crop Calendar Domain Services

- EventMaterializer: expands crop schedules into dated events
- EventStore: owns the event collection and its persistence
- ReminderCoordinator: one keyed notification per reminder event
- Notifier: port implemented by notification delivery backends
"""

from .notifier import Notifier, notification_key, numeric_notification_id
from .event_materializer import (
    EventMaterializer,
    MaterializationResult,
    materialized_event_id
)
from .reminder_coordinator import ReminderCoordinator
from .event_store import EventStore

__all__ = [
    "Notifier",
    "notification_key",
    "numeric_notification_id",
    "EventMaterializer",
    "MaterializationResult",
    "materialized_event_id",
    "ReminderCoordinator",
    "EventStore",
]
