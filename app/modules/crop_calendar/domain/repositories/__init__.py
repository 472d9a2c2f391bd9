# 📄 File: app/modules/crop_calendar/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access contracts for crop plans and saved calendar entries
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces following the Repository pattern
# 🔗 Dependencies:
# Repository interface classes, domain models, typing
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations, application layer

"""
Crop Calendar Domain Repositories

Repository Interfaces:
- TemplateCatalog: read-only crop schedule and farming tip source
- EventRepository: whole-collection storage for farmer-authored events

Concrete implementations are in the infrastructure layer.
"""

from .template_catalog import TemplateCatalog
from .event_repository import EventRepository

__all__ = [
    "TemplateCatalog",
    "EventRepository"
]
