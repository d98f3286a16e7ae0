"""Map an event proposal to the Google Calendar API body format.

Combines the raw :class:`~voice_cal.models.event.EventProposal` (title and
description) with its :class:`~voice_cal.models.event.NormalizedEvent`
(times and timezone) into a ``dict`` for ``events().insert()``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from voice_cal.calendar.exceptions import CalendarError
from voice_cal.models.event import EventProposal, NormalizedEvent

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Voice note"
DEFAULT_DESCRIPTION = "Created from Telegram voice message"


def event_title(proposal: EventProposal) -> str:
    """Return the calendar summary for *proposal*, falling back to ``"Voice note"``."""
    return proposal.title or DEFAULT_SUMMARY


def map_to_google_event(proposal: EventProposal, event: NormalizedEvent) -> dict:
    """Convert a proposal and its normalized times into an event body.

    Args:
        proposal: The decoded language model output.
        event: The normalized time range for *proposal*.

    Returns:
        A ``dict`` conforming to the Google Calendar Event resource schema.

    Raises:
        CalendarError: If the end is not strictly after the start.
    """
    if datetime.fromisoformat(event.end) <= datetime.fromisoformat(event.start):
        raise CalendarError(
            f"Event end ({event.end}) must be after start ({event.start})"
        )

    body = {
        "summary": event_title(proposal),
        "description": proposal.description or DEFAULT_DESCRIPTION,
        "start": {"dateTime": event.start, "timeZone": event.timezone},
        "end": {"dateTime": event.end, "timeZone": event.timezone},
    }

    logger.info(
        "Mapped event '%s' (%s -> %s, %s) to Google Calendar body",
        body["summary"],
        event.start,
        event.end,
        event.timezone,
    )
    return body
