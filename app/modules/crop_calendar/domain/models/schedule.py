# 📄 File: app/modules/crop_calendar/domain/models/schedule.py
# 🧭 Purpose (Layman Explanation):
# Describes the yearly farming plan for each crop - which task happens on which month and day -
# plus the general farming tips shown next to the calendar
# 🧪 Purpose (Technical Summary):
# Immutable template models (CropSchedule -> ActivitySchedule) loaded from the static catalog,
# with date resolution for a concrete year, and the FarmingTip read model
# 🔗 Dependencies:
# pydantic, calendar, datetime, typing
# 🔄 Connected Modules / Calls From:
# template_catalog.py, event_materializer.py, json_template_catalog.py, calendar_service.py

import calendar
from datetime import date
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActivitySchedule(BaseModel):
    """
    Template row for a recurring, year-agnostic farming task.

    The day is validated against 1..31 only; a day the month does not have
    (30 February) resolves to the last day of that month.
    """

    model_config = ConfigDict(frozen=True)

    activity: str
    description: str = ""
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @field_validator('activity')
    @classmethod
    def validate_activity(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Activity name is required')
        return v.strip()

    def resolve_date(self, year: int) -> date:
        """Bind the template to a concrete year."""
        last_day = calendar.monthrange(year, self.month)[1]
        return date(year, self.month, min(self.day, last_day))


class CropSchedule(BaseModel):
    """Yearly activity plan for one crop."""

    model_config = ConfigDict(frozen=True)

    crop_name: str
    activities: Tuple[ActivitySchedule, ...] = ()

    @field_validator('crop_name')
    @classmethod
    def validate_crop_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Crop name is required')
        return v.strip()


class FarmingTip(BaseModel):
    """General farming advice shown alongside the calendar."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    category: str
    season: Optional[str] = None

    def matches_season(self, season: Optional[str]) -> bool:
        # Tips without a season apply all year
        if season is None or self.season is None:
            return True
        return self.season.lower() == season.lower()
