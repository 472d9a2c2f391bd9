"""Tests for the JSON catalog, JSON event storage and in-memory notifier."""

import json
from datetime import datetime

import pytest

from app.shared.core.exceptions import CatalogLoadError, PersistenceError
from app.modules.crop_calendar.infrastructure.catalog.json_template_catalog import JsonTemplateCatalog
from app.modules.crop_calendar.infrastructure.notifications.in_memory_notifier import InMemoryNotifier
from app.modules.crop_calendar.infrastructure.storage.json_event_repository import JsonFileEventRepository

from conftest import custom_event


# ---------------------------------------------------------------------------
# JsonTemplateCatalog
# ---------------------------------------------------------------------------

class TestJsonTemplateCatalog:
    async def test_bundled_catalog_loads(self):
        catalog = JsonTemplateCatalog()

        schedules = await catalog.load_crop_schedules()
        tips = await catalog.load_farming_tips()

        assert {s.crop_name for s in schedules} >= {"Wheat", "Rice", "Maize"}
        assert all(s.activities for s in schedules)
        assert any(tip.season is None for tip in tips)

    async def test_custom_catalog_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "crop_schedules": [
                        {
                            "crop_name": "Millet",
                            "activities": [
                                {"activity": "Sowing", "description": "Line sowing", "month": 7, "day": 1}
                            ],
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )

        schedules = await JsonTemplateCatalog(path).load_crop_schedules()

        assert [s.crop_name for s in schedules] == ["Millet"]
        assert schedules[0].activities[0].month == 7

    async def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            await JsonTemplateCatalog(tmp_path / "absent.json").load_crop_schedules()
        assert exc_info.value.details["source"].endswith("absent.json")

    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            await JsonTemplateCatalog(path).load_crop_schedules()

    async def test_wrong_shape(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"crops": []}), encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="malformed"):
            await JsonTemplateCatalog(path).load_crop_schedules()

    async def test_invalid_month(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {"crop_schedules": [{"crop_name": "Millet", "activities": [{"activity": "Sowing", "month": 14, "day": 1}]}]}
            ),
            encoding="utf-8",
        )
        with pytest.raises(CatalogLoadError):
            await JsonTemplateCatalog(path).load_crop_schedules()


# ---------------------------------------------------------------------------
# JsonFileEventRepository
# ---------------------------------------------------------------------------

class TestJsonFileEventRepository:
    async def test_missing_file_is_empty(self, tmp_path):
        assert await JsonFileEventRepository(tmp_path / "events.json").load_events() == []

    async def test_blank_file_is_empty(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("  \n", encoding="utf-8")
        assert await JsonFileEventRepository(path).load_events() == []

    async def test_save_then_load(self, tmp_path):
        repository = JsonFileEventRepository(tmp_path / "nested" / "events.json")
        events = [
            custom_event("a", datetime(2025, 7, 1, 8), is_reminder=True, location="Well"),
            custom_event("b", datetime(2025, 7, 2), metadata={"crop": "Okra"}),
        ]

        await repository.save_events(events)

        assert await repository.load_events() == events
        assert list((tmp_path / "nested").iterdir()) == [tmp_path / "nested" / "events.json"]

    async def test_save_replaces_whole_collection(self, tmp_path):
        repository = JsonFileEventRepository(tmp_path / "events.json")
        await repository.save_events([custom_event("a", datetime(2025, 7, 1))])
        await repository.save_events([custom_event("b", datetime(2025, 7, 2))])

        assert [e.id for e in await repository.load_events()] == ["b"]

    async def test_corrupt_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(PersistenceError) as exc_info:
            await JsonFileEventRepository(path).load_events()
        assert exc_info.value.details["operation"] == "load"

    async def test_non_list_document(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": []}), encoding="utf-8")
        with pytest.raises(PersistenceError, match="does not hold a list"):
            await JsonFileEventRepository(path).load_events()

    async def test_invalid_record(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps([{"id": "a", "title": "", "date": "2025-07-01T00:00:00"}]), encoding="utf-8")
        with pytest.raises(PersistenceError):
            await JsonFileEventRepository(path).load_events()

    async def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repository = JsonFileEventRepository(blocker / "events.json")

        with pytest.raises(PersistenceError) as exc_info:
            await repository.save_events([custom_event("a", datetime(2025, 7, 1))])
        assert exc_info.value.details["operation"] == "save"


# ---------------------------------------------------------------------------
# InMemoryNotifier
# ---------------------------------------------------------------------------

class TestInMemoryNotifier:
    async def test_schedule_and_replace(self, now):
        notifier = InMemoryNotifier(clock=lambda: now)

        await notifier.schedule("x", "Spray", "Neem", datetime(2025, 7, 2))
        await notifier.schedule("x", "Spray again", "Neem", datetime(2025, 7, 3))

        assert len(notifier.pending) == 1
        assert notifier.get("x").title == "Spray again"
        assert notifier.get("x").numeric_id >= 0

    async def test_past_instant_is_dropped(self, now):
        notifier = InMemoryNotifier(clock=lambda: now)

        await notifier.schedule("x", "Spray", "", datetime(2025, 7, 2))
        await notifier.schedule("x", "Spray", "", datetime(2025, 6, 1))

        assert notifier.get("x") is None

    async def test_cancel_is_idempotent(self, now):
        notifier = InMemoryNotifier(clock=lambda: now)
        await notifier.schedule("x", "Spray", "", datetime(2025, 7, 2))

        await notifier.cancel("x")
        await notifier.cancel("x")
        await notifier.cancel("unknown")

        assert notifier.pending == []

    async def test_due(self, now):
        notifier = InMemoryNotifier(clock=lambda: now)
        await notifier.schedule("late", "Late", "", datetime(2025, 7, 10))
        await notifier.schedule("soon", "Soon", "", datetime(2025, 7, 1))

        assert [n.key for n in notifier.pending] == ["soon", "late"]
        assert [n.key for n in notifier.due(datetime(2025, 7, 5))] == ["soon"]
