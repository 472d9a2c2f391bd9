from .in_memory_notifier import InMemoryNotifier, PendingNotification

__all__ = ["InMemoryNotifier", "PendingNotification"]
