# 📄 File: app/modules/crop_calendar/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the crop calendar: yearly crop plans become dated tasks, farmers add their own entries,
# and reminders are kept in step with the calendar
# 🧪 Purpose (Technical Summary):
# Package initialization for the crop calendar module following a layered domain-driven layout
# 🔗 Dependencies:
# pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.main, presentation code

"""
Crop Calendar Module

Architecture:
- Domain: models, repository interfaces, materializer, store, reminder coordinator
- Application: CalendarService facade and display metadata
- Infrastructure: JSON catalog, event storage, notification backends
"""

__version__ = "1.0.0"
__module_name__ = "crop_calendar"
__description__ = "Crop activity calendar and reminder scheduler"
