# 📄 File: app/modules/crop_calendar/domain/repositories/template_catalog.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for reading the built-in crop plans and farming tips without saying where they are stored
# 🧪 Purpose (Technical Summary):
# Read-only repository interface for the static template catalog following the Repository pattern
# 🔗 Dependencies:
# Domain models (CropSchedule, FarmingTip), typing, abc
# 🔄 Connected Modules / Calls From:
# event_materializer.py, calendar_service.py, infrastructure catalog implementations

from abc import ABC, abstractmethod
from typing import List

from ..models.schedule import CropSchedule, FarmingTip


class TemplateCatalog(ABC):
    """
    Repository interface for the crop schedule catalog.

    The catalog is read-only; implementations may read a bundled file,
    a remote document or a fixed list.
    """

    @abstractmethod
    async def load_crop_schedules(self) -> List[CropSchedule]:
        """
        Load every crop schedule.

        Returns:
            One CropSchedule per distinct crop

        Raises:
            CatalogLoadError: If the source is unreachable or corrupt
        """
        pass

    @abstractmethod
    async def load_farming_tips(self) -> List[FarmingTip]:
        """
        Load the farming tips shown with the calendar.

        Raises:
            CatalogLoadError: If the source is unreachable or corrupt
        """
        pass
