from .json_event_repository import JsonFileEventRepository
from .in_memory_event_repository import InMemoryEventRepository

__all__ = ["JsonFileEventRepository", "InMemoryEventRepository"]
