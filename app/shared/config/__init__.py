# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the calendar where its files live,
# how long to wait on storage and notifications, and how much to log.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (composition root)
# - app.shared.utils.logging

"""
Configuration Management Package
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
