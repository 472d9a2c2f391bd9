# 📄 File: app/modules/crop_calendar/infrastructure/storage/json_event_repository.py
# 🧭 Purpose (Layman Explanation):
# Saves the farmer's own calendar entries to a file on the device so they are still there next time the app opens
# 🧪 Purpose (Technical Summary):
# Whole-collection EventRepository backed by a JSON file with atomic replace on write;
# blocking file I/O runs in a worker thread, failures surface as PersistenceError
# 🔗 Dependencies:
# asyncio, json, os, pathlib, tempfile, pydantic, CalendarEvent, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main (composition root), event_store.py through EventRepository

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from app.shared.core.exceptions import PersistenceError
from app.shared.utils.logging import get_logger

from ...domain.models.calendar_event import CalendarEvent
from ...domain.repositories.event_repository import EventRepository

logger = get_logger(__name__)


class JsonFileEventRepository(EventRepository):
    """
    Stores events as a JSON list in a single file.

    A missing file reads as an empty collection. Writes go to a temporary
    file in the same directory which then replaces the target, so a crash
    mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def load_events(self) -> List[CalendarEvent]:
        try:
            return await asyncio.to_thread(self._read)
        except PersistenceError:
            raise
        except (OSError, json.JSONDecodeError, TypeError, PydanticValidationError) as e:
            raise PersistenceError(
                f"Failed to load calendar events from {self.path}",
                operation="load",
                original_error=e,
            ) from e

    async def save_events(self, events: Sequence[CalendarEvent]) -> None:
        records = [event.to_record() for event in events]
        try:
            await asyncio.to_thread(self._write, records)
        except OSError as e:
            raise PersistenceError(
                f"Failed to save calendar events to {self.path}",
                operation="save",
                original_error=e,
            ) from e
        logger.debug(f"Wrote {len(records)} events", path=str(self.path))

    def _read(self) -> List[CalendarEvent]:
        if not self.path.exists():
            return []
        raw = self.path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        records = json.loads(raw)
        if not isinstance(records, list):
            raise PersistenceError(
                f"Calendar events file {self.path} does not hold a list",
                operation="load",
            )
        return [CalendarEvent.from_record(record) for record in records]

    def _write(self, records: List[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(records, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
