# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools
# that every part of the calendar can use, like settings, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, the exception hierarchy and
# structured logging used by the crop calendar module.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.modules.crop_calendar (all layers)
# - app.main

"""
Shared Kernel - Common Utilities

- Configuration management
- Exception hierarchy
- Logging utilities
"""

__all__ = []
