"""Time normalization for event proposals.

Fills in whatever the language model left out so the calendar always
receives a complete range:

- **timezone** defaults to ``"UTC"``.
- **start** defaults to the next whole hour after *now*.
- **end** defaults to one hour after start.

Supplied times are parsed with :meth:`datetime.fromisoformat`; naive values
are read as UTC.  The timezone field is a label for the calendar and never
shifts the instant.  An inverted range supplied by the model is passed
through unchanged; the calendar mapper rejects it.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from voice_cal.exceptions import ExtractionError
from voice_cal.models.event import DEFAULT_TIMEZONE, EventProposal, NormalizedEvent

logger = logging.getLogger(__name__)

DEFAULT_DURATION = timedelta(hours=1)


def normalize_event_times(
    proposal: EventProposal,
    now: datetime | None = None,
) -> NormalizedEvent:
    """Produce a complete UTC time range from an event proposal.

    Args:
        proposal: The decoded language model output.
        now: Override for the current time, used only when the proposal has
            no start.  Defaults to ``datetime.now(UTC)``.

    Returns:
        A :class:`NormalizedEvent` with ``Z``-suffixed ISO 8601 instants.

    Raises:
        ExtractionError: If ``start`` or ``end`` is present but cannot be
            parsed as a date.
    """
    timezone = proposal.timezone or DEFAULT_TIMEZONE

    if proposal.start:
        start = _parse_instant(proposal.start, "start")
    else:
        start = next_full_hour(now or datetime.now(UTC))
        logger.info("No start time proposed, defaulting to %s", format_instant(start))

    if proposal.end:
        end = _parse_instant(proposal.end, "end")
    else:
        end = start + DEFAULT_DURATION

    return NormalizedEvent(
        start=format_instant(start),
        end=format_instant(end),
        timezone=timezone,
    )


def next_full_hour(moment: datetime) -> datetime:
    """Return the start of the hour that follows *moment*.

    Minutes, seconds and microseconds are dropped and one hour is added,
    so ``10:00:00`` and ``10:59:59`` both map to ``11:00:00``.
    """
    moment = _as_utc(moment)
    return moment.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)


def format_instant(moment: datetime) -> str:
    """Serialize *moment* as ISO 8601 in UTC with a ``Z`` suffix.

    Whole-second instants render as ``YYYY-MM-DDTHH:MM:SSZ``; sub-second
    precision is kept as a fractional part rather than truncated.
    """
    return _as_utc(moment).isoformat().replace("+00:00", "Z")


def _parse_instant(value: str, field_name: str) -> datetime:
    """Parse an ISO 8601 string into an aware UTC datetime."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ExtractionError(
            f"Proposed {field_name} time is not a valid date: {value!r}"
        ) from exc
    return _as_utc(parsed)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
