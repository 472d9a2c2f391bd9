# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our crop calendar code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version info and package-level metadata for the
# crop activity calendar and reminder scheduler library.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (composition root)
# - Package imports throughout the application

"""
Crop Calendar - Farming Activity Calendar & Reminder Scheduler

Turns yearly crop-care templates into dated calendar events, merges them with
farmer-authored events, and keeps one reminder notification per reminder event.
"""

__version__ = "1.0.0"
__title__ = "Crop Calendar"
__description__ = "Crop activity calendar and reminder scheduler"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
