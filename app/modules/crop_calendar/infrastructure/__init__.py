# 📄 File: app/modules/crop_calendar/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the pieces that actually read files, save entries and hold reminders
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package: implementations of TemplateCatalog, EventRepository and Notifier
# 🔗 Dependencies:
# Domain interfaces
# 🔄 Connected Modules / Calls From:
# app.main (composition root), tests

"""
Crop Calendar Infrastructure Layer

- catalog: JsonTemplateCatalog (bundled crop schedules and farming tips)
- storage: JsonFileEventRepository, InMemoryEventRepository
- notifications: InMemoryNotifier
"""

from .catalog import JsonTemplateCatalog
from .storage import JsonFileEventRepository, InMemoryEventRepository
from .notifications import InMemoryNotifier, PendingNotification

__all__ = [
    "JsonTemplateCatalog",
    "JsonFileEventRepository",
    "InMemoryEventRepository",
    "InMemoryNotifier",
    "PendingNotification",
]
