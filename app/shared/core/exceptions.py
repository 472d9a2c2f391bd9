# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the crop calendar uses to say
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with error codes,
# details and serialization, split into precondition failures and recoverable
# collaborator failures (catalog, persistence, notification).
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# Calendar domain services, infrastructure collaborators, application service

from typing import Any, Dict, Optional


class CropCalendarException(Exception):
    """
    Base exception class for the crop calendar.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# VALIDATION & STATE EXCEPTIONS
# =============================================================================

class ValidationError(CropCalendarException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(CropCalendarException):
    """
    Exception raised when a requested event is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateEventError(CropCalendarException):
    """
    Exception raised when an event id is already present in the store.
    """

    def __init__(
        self,
        event_id: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        details["event_id"] = event_id

        super().__init__(
            message=message or f"Event with ID {event_id} already exists",
            details=details,
            error_code="DUPLICATE_EVENT"
        )
        self.event_id = event_id


class ProtectedEventError(CropCalendarException):
    """
    Exception raised when deleting an event generated from a crop template.
    Those events are regenerated every session and cannot be removed by the user.
    """

    def __init__(
        self,
        event_id: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        details["event_id"] = event_id

        super().__init__(
            message=message or f"Event {event_id} comes from a crop schedule and cannot be deleted",
            details=details,
            error_code="PROTECTED_EVENT"
        )
        self.event_id = event_id


class CalendarNotLoadedError(CropCalendarException):
    """
    Exception raised when the calendar is used before its first load.
    """

    def __init__(self, operation: str):
        super().__init__(
            message=f"Calendar must be loaded before '{operation}'",
            details={"operation": operation},
            error_code="CALENDAR_NOT_LOADED"
        )
        self.operation = operation


# =============================================================================
# RECOVERABLE COLLABORATOR EXCEPTIONS
# =============================================================================

class CatalogLoadError(CropCalendarException):
    """
    Exception raised when the crop schedule catalog is unreachable or corrupt.
    The calendar continues without template events.
    """

    def __init__(
        self,
        message: str = "Failed to load crop schedule catalog",
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if source:
            details["source"] = source
        if original_error is not None:
            details["original_error"] = str(original_error)

        super().__init__(
            message=message,
            details=details,
            error_code="CATALOG_LOAD_ERROR"
        )
        self.original_error = original_error


class PersistenceError(CropCalendarException):
    """
    Exception raised when reading or writing stored events fails.
    In-memory state stays authoritative for the session.
    """

    def __init__(
        self,
        message: str = "Event storage operation failed",
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if original_error is not None:
            details["original_error"] = str(original_error)

        super().__init__(
            message=message,
            details=details,
            error_code="PERSISTENCE_ERROR"
        )
        self.operation = operation
        self.original_error = original_error


class NotificationError(CropCalendarException):
    """
    Exception raised when scheduling or cancelling a reminder fails.
    Reminder delivery is best-effort; the event change still stands.
    """

    def __init__(
        self,
        message: str = "Notification operation failed",
        key: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation
        if original_error is not None:
            details["original_error"] = str(original_error)

        super().__init__(
            message=message,
            details=details,
            error_code="NOTIFICATION_ERROR"
        )
        self.key = key
        self.operation = operation
        self.original_error = original_error


RECOVERABLE_ERRORS = (CatalogLoadError, PersistenceError, NotificationError)


# =============================================================================
# HELPERS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, CropCalendarException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
        }
    }


def is_recoverable(exception: Exception) -> bool:
    """
    Check if exception is a collaborator failure the calendar recovers from.

    Args:
        exception: Exception to check

    Returns:
        bool: True for catalog, persistence and notification failures
    """
    return isinstance(exception, RECOVERABLE_ERRORS)
