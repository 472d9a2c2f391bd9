"""
Core utilities package for the crop calendar.
Provides the exception hierarchy shared by every layer.
"""

from .exceptions import (
    CropCalendarException,
    ValidationError,
    NotFoundError,
    DuplicateEventError,
    ProtectedEventError,
    CalendarNotLoadedError,
    CatalogLoadError,
    PersistenceError,
    NotificationError,
    RECOVERABLE_ERRORS,
    exception_to_dict,
    is_recoverable,
)

__all__ = [
    "CropCalendarException",
    "ValidationError",
    "NotFoundError",
    "DuplicateEventError",
    "ProtectedEventError",
    "CalendarNotLoadedError",
    "CatalogLoadError",
    "PersistenceError",
    "NotificationError",
    "RECOVERABLE_ERRORS",
    "exception_to_dict",
    "is_recoverable",
]
