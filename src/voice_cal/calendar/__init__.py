"""Google Calendar integration for voice-cal."""

from __future__ import annotations

from voice_cal.calendar.auth import authorize, get_calendar_credentials
from voice_cal.calendar.client import GoogleCalendarClient
from voice_cal.calendar.event_mapper import event_title, map_to_google_event
from voice_cal.calendar.exceptions import CalendarAuthError, CalendarError

__all__ = [
    "CalendarAuthError",
    "CalendarError",
    "GoogleCalendarClient",
    "authorize",
    "event_title",
    "get_calendar_credentials",
    "map_to_google_event",
]
