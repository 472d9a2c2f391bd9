# 📄 File: app/modules/crop_calendar/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of the crop calendar: what events and crop plans are, and the rules for turning plans into reminders
# 🧪 Purpose (Technical Summary):
# Domain layer package: models, repository interfaces and domain services; no infrastructure imports
# 🔗 Dependencies:
# models, repositories, services subpackages
# 🔄 Connected Modules / Calls From:
# Application and infrastructure layers

"""
Crop Calendar Domain Layer

- models: templates, CalendarEvent, OperationResult
- repositories: TemplateCatalog and EventRepository interfaces
- services: materializer, store, reminder coordinator, Notifier port
"""
