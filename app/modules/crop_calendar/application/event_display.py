# 📄 File: app/modules/crop_calendar/application/event_display.py
# 🧭 Purpose (Layman Explanation):
# Picks the little picture and colour shown next to each calendar entry - a drop for watering,
# a tractor for harvesting - based on what kind of task it is
# 🧪 Purpose (Technical Summary):
# Pure mapping from event type and activity name to display metadata (icon name, colour name)
# using lower-cased keyword matching with a default fallback
# 🔗 Dependencies:
# typing, CalendarEvent, EventType
# 🔄 Connected Modules / Calls From:
# calendar_service.py, presentation code

from typing import NamedTuple, Tuple

from ..domain.models.calendar_event import CalendarEvent, EventType


class EventDisplay(NamedTuple):
    icon: str
    color: str


DEFAULT_DISPLAY = EventDisplay(icon="task_alt", color="grey")

# First match wins; keywords are matched against the lower-cased activity name
ACTIVITY_KEYWORDS: Tuple[Tuple[Tuple[str, ...], EventDisplay], ...] = (
    (("plant", "sow", "seed"), EventDisplay(icon="eco", color="green")),
    (("harvest",), EventDisplay(icon="agriculture", color="orange")),
    (("fertiliz", "fertilis", "manur", "compost"), EventDisplay(icon="scatter_plot", color="brown")),
    (("water", "irrigat"), EventDisplay(icon="water_drop", color="blue")),
    (("pest", "spray", "insect"), EventDisplay(icon="bug_report", color="red")),
    (("prun",), EventDisplay(icon="content_cut", color="grey")),
    (("weed",), EventDisplay(icon="grass", color="grey")),
)

TYPE_DISPLAY = {
    EventType.CUSTOM: EventDisplay(icon="event", color="purple"),
    EventType.REMINDER: EventDisplay(icon="notifications", color="orange"),
    EventType.WEATHER: EventDisplay(icon="wb_sunny", color="blue"),
    EventType.CROP_ACTIVITY: DEFAULT_DISPLAY,
}


def activity_display(activity: str) -> EventDisplay:
    """Display metadata for an activity name, DEFAULT_DISPLAY when unrecognized."""
    name = (activity or "").lower()
    for keywords, display in ACTIVITY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return display
    return DEFAULT_DISPLAY


def categories_of(event: CalendarEvent) -> EventDisplay:
    """
    Icon and colour for an event.

    The activity name (the event category) is tried first; events whose
    category names no known activity fall back to their type.
    """
    display = activity_display(event.category)
    if display is not DEFAULT_DISPLAY:
        return display
    return TYPE_DISPLAY.get(event.type, DEFAULT_DISPLAY)
