# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the helper tools other parts of the calendar use,
# mainly the logging utilities.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: All calendar modules for logging

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Session-scoped logging context
"""

from .logging import (
    StructuredLogger,
    get_logger,
    log_context,
    log_startup_event,
    setup_logging,
)

__all__ = [
    "StructuredLogger",
    "get_logger",
    "log_context",
    "log_startup_event",
    "setup_logging",
]
