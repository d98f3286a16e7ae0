"""Google Calendar writer for voice-derived events.

Provides :class:`GoogleCalendarClient`, which normalizes an
:class:`~voice_cal.models.event.EventProposal`, authorizes the service
account and inserts the event into the configured calendar.

There is no duplicate detection: processing the same transcript twice
creates two events.  API failures are translated by
:func:`~voice_cal.calendar.exceptions.translate_http_errors` and never
retried.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build

from voice_cal.calendar.auth import authorize
from voice_cal.calendar.event_mapper import map_to_google_event
from voice_cal.calendar.exceptions import translate_http_errors
from voice_cal.models.event import EventProposal
from voice_cal.normalizer import normalize_event_times

logger = logging.getLogger(__name__)

PRIMARY_CALENDAR = "primary"


class GoogleCalendarClient:
    """Writes events to one Google Calendar.

    Args:
        credentials: Service-account credentials with the calendar scope.
        calendar_id: Target calendar identifier.  Defaults to
            ``"primary"``.
        service: Optional pre-built ``googleapiclient`` service resource.
            If ``None``, one is built from *credentials*.  Pass a mock here
            in tests.
    """

    def __init__(
        self,
        credentials: service_account.Credentials,
        calendar_id: str = PRIMARY_CALENDAR,
        service: Any | None = None,
    ) -> None:
        self._credentials = credentials
        self._calendar_id = calendar_id
        self._service = service or build(
            "calendar", "v3", credentials=credentials, cache_discovery=False
        )

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    @translate_http_errors
    def create_event(
        self,
        proposal: EventProposal,
        now: datetime | None = None,
    ) -> dict:
        """Normalize *proposal* and insert it as a new calendar event.

        Args:
            proposal: The decoded language model output.
            now: Override for the current time, used when the proposal has
                no start.

        Returns:
            The API response ``dict`` for the created event.

        Raises:
            ExtractionError: If a proposed time cannot be parsed.
            CalendarError: If the range is inverted or the API rejects the
                insert.
            CalendarAuthError: If the service account cannot authorize.
        """
        event = normalize_event_times(proposal, now=now)
        body = map_to_google_event(proposal, event)

        authorize(self._credentials)
        result = (
            self._service.events()
            .insert(calendarId=self._calendar_id, body=body)
            .execute()
        )
        logger.info(
            "Created event '%s' in calendar %s (id=%s)",
            body["summary"],
            self._calendar_id,
            result.get("id", "?"),
        )
        return result
