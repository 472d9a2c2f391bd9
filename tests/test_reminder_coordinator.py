"""Tests for the reminder coordinator and the notification key helpers."""

from datetime import datetime

import pytest

from app.shared.core.exceptions import NotificationError
from app.modules.crop_calendar.domain.services.notifier import notification_key, numeric_notification_id
from app.modules.crop_calendar.domain.services.reminder_coordinator import ReminderCoordinator

from conftest import RecordingNotifier, custom_event


async def test_reminder_event_schedules_at_event_date(notifier):
    coordinator = ReminderCoordinator(notifier)
    event = custom_event("x", datetime(2025, 7, 15, 6), title="Spray", is_reminder=True, description="Neem oil")

    assert await coordinator.on_event_added(event) is True
    assert notifier.pending["x"] == ("Spray", "Neem oil", datetime(2025, 7, 15, 6))


async def test_explicit_reminder_time_wins(notifier):
    coordinator = ReminderCoordinator(notifier)
    event = custom_event(
        "x",
        datetime(2025, 7, 15),
        is_reminder=True,
        reminder_at=datetime(2025, 7, 14, 18),
    )

    await coordinator.on_event_added(event)

    assert notifier.pending["x"][2] == datetime(2025, 7, 14, 18)


async def test_non_reminder_event_is_ignored(notifier):
    coordinator = ReminderCoordinator(notifier)
    assert await coordinator.on_event_added(custom_event("x", datetime(2025, 7, 15))) is False
    assert notifier.calls == []


async def test_scheduling_same_event_twice_replaces(notifier):
    coordinator = ReminderCoordinator(notifier)
    await coordinator.on_event_added(custom_event("x", datetime(2025, 7, 15), is_reminder=True))
    await coordinator.on_event_added(custom_event("x", datetime(2025, 7, 16), is_reminder=True))

    assert list(notifier.pending) == ["x"]
    assert notifier.pending["x"][2] == datetime(2025, 7, 16)


async def test_remove_always_cancels(notifier):
    coordinator = ReminderCoordinator(notifier)
    await coordinator.on_event_removed("never-scheduled")
    assert notifier.calls == [("cancel", "never-scheduled")]


async def test_notifier_failure_is_wrapped():
    coordinator = ReminderCoordinator(RecordingNotifier(fail_schedule=True))

    with pytest.raises(NotificationError) as exc_info:
        await coordinator.on_event_added(custom_event("x", datetime(2025, 7, 15), is_reminder=True))

    assert exc_info.value.details["key"] == "x"
    assert exc_info.value.details["operation"] == "schedule"


async def test_slow_notifier_times_out():
    coordinator = ReminderCoordinator(RecordingNotifier(delay=0.2), timeout_seconds=0.05)

    with pytest.raises(NotificationError, match="timed out"):
        await coordinator.on_event_added(custom_event("x", datetime(2025, 7, 15), is_reminder=True))


def test_notification_key_is_event_id():
    assert notification_key("Wheat_Sowing_2025") == "Wheat_Sowing_2025"


def test_numeric_notification_id_is_stable_and_positive():
    first = numeric_notification_id("Wheat_Sowing_2025")
    assert first == numeric_notification_id("Wheat_Sowing_2025")
    assert 0 <= first < 2 ** 31
    assert first != numeric_notification_id("Wheat_Harvest_2025")
