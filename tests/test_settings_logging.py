"""Tests for settings validation, structured logging and exception helpers."""

import io
import json
import logging

import pytest
from pydantic import ValidationError

from app.shared.config.settings import Settings
from app.shared.core.exceptions import (
    CatalogLoadError,
    DuplicateEventError,
    PersistenceError,
    exception_to_dict,
    is_recoverable,
)
from app.shared.utils.logging import ContextualFormatter, JSONFormatter, get_logger, log_context


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.CALENDAR_RECENCY_WINDOW_DAYS == 30
        assert settings.CALENDAR_ROLL_OVER_YEAR is True
        assert settings.CALENDAR_UPCOMING_WINDOW_DAYS == 7
        assert not settings.is_production

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_RECENCY_WINDOW_DAYS", "45")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.CALENDAR_RECENCY_WINDOW_DAYS == 45
        assert settings.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"LOG_LEVEL": "verbose"},
            {"LOG_FORMAT": "xml"},
            {"CALENDAR_RECENCY_WINDOW_DAYS": 0},
            {"NOTIFICATION_TIMEOUT_SECONDS": -1},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def json_stream():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter('%(message)s'))

    logger = get_logger("tests.structured")
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.DEBUG)
    logger.logger.propagate = False
    yield logger, stream
    logger.logger.removeHandler(handler)


def test_json_log_carries_structured_fields(json_stream):
    logger, stream = json_stream

    with log_context("session-1"):
        logger.info("Calendar loaded", event_count=3)

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "Calendar loaded"
    assert payload["level"] == "INFO"
    assert payload["service"] == "crop-calendar"
    assert payload["session_id"] == "session-1"
    assert payload["extra"] == {"event_count": 3}


def test_business_event_log(json_stream):
    logger, stream = json_stream

    logger.log_business_event("calendar_event.added", "Calendar event added: x", entity_id="x")

    payload = json.loads(stream.getvalue().strip())
    assert payload["extra"]["business_event_type"] == "calendar_event.added"
    assert payload["extra"]["entity_id"] == "x"
    assert "session_id" not in payload


def test_get_logger_is_cached():
    assert get_logger("tests.cached") is get_logger("tests.cached")


def test_text_log_appends_context():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ContextualFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    logger = get_logger("tests.text")
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.DEBUG)
    logger.logger.propagate = False
    try:
        with log_context("session-2"):
            logger.warning("Reminder failed", key="x")
        logger.info("Plain line")
    finally:
        logger.logger.removeHandler(handler)

    first, second = stream.getvalue().splitlines()
    assert first.endswith("tests.text - WARNING - Reminder failed | session_id=session-2 key=x")
    assert second.endswith("tests.text - INFO - Plain line")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

def test_exception_to_dict():
    error = DuplicateEventError("x")
    assert exception_to_dict(error) == {
        "error": {
            "code": "DUPLICATE_EVENT",
            "message": "Event with ID x already exists",
            "details": {"event_id": "x"},
        }
    }
    assert exception_to_dict(ValueError("boom"))["error"]["code"] == "VALUEERROR"


def test_recoverable_errors():
    assert is_recoverable(CatalogLoadError())
    assert is_recoverable(PersistenceError("disk full"))
    assert not is_recoverable(DuplicateEventError("x"))
