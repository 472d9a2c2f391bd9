# 📄 File: app/modules/crop_calendar/infrastructure/catalog/json_template_catalog.py
# 🧭 Purpose (Layman Explanation):
# Reads the built-in crop plans and farming tips that ship with the app from JSON files
# 🧪 Purpose (Technical Summary):
# File-backed TemplateCatalog implementation; reads off the event loop, validates with pydantic,
# and turns any I/O, JSON or validation failure into CatalogLoadError
# 🔗 Dependencies:
# asyncio, json, pathlib, pydantic, domain models, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main (composition root)

import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from app.shared.core.exceptions import CatalogLoadError
from app.shared.utils.logging import get_logger

from ...domain.models.schedule import CropSchedule, FarmingTip
from ...domain.repositories.template_catalog import TemplateCatalog

logger = get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "crop_calendar.json"
DEFAULT_TIPS_PATH = DATA_DIR / "farming_tips.json"


class JsonTemplateCatalog(TemplateCatalog):
    """
    Template catalog stored as JSON documents.

    The schedule document has the shape
    {"crop_schedules": [{"crop_name": ..., "activities": [{"activity", "description", "month", "day"}]}]};
    the tips document is a list of {"title", "description", "category", "season"?}.
    """

    def __init__(
        self,
        catalog_path: Optional[Union[str, Path]] = None,
        tips_path: Optional[Union[str, Path]] = None
    ):
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self.tips_path = Path(tips_path) if tips_path else DEFAULT_TIPS_PATH

    async def load_crop_schedules(self) -> List[CropSchedule]:
        document = await self._read(self.catalog_path)
        try:
            schedules = [CropSchedule.model_validate(item) for item in document["crop_schedules"]]
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise CatalogLoadError(
                "Crop schedule catalog is malformed",
                source=str(self.catalog_path),
                original_error=e,
            ) from e

        logger.info(f"Loaded {len(schedules)} crop schedules", source=str(self.catalog_path))
        return schedules

    async def load_farming_tips(self) -> List[FarmingTip]:
        document = await self._read(self.tips_path)
        try:
            tips = [FarmingTip.model_validate(item) for item in document]
        except (TypeError, PydanticValidationError) as e:
            raise CatalogLoadError(
                "Farming tips document is malformed",
                source=str(self.tips_path),
                original_error=e,
            ) from e

        logger.info(f"Loaded {len(tips)} farming tips", source=str(self.tips_path))
        return tips

    async def _read(self, path: Path) -> Any:
        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
            return json.loads(raw)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                f"Could not read catalog file {path.name}",
                source=str(path),
                original_error=e,
            ) from e
