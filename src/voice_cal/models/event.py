"""Event models for the voice-to-calendar pipeline.

Defines the two shapes an event passes through:

- :class:`EventProposal` -- the language model's JSON output, decoded into
  an explicit all-optional structure (pydantic).
- :class:`NormalizedEvent` -- the complete time range produced by
  :func:`~voice_cal.normalizer.normalize_event_times`.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

DEFAULT_TIMEZONE = "UTC"


class EventProposal(BaseModel):
    """A candidate calendar event extracted from a transcript.

    Every field is optional because the model may omit any of them.  Times
    are kept as the strings the model produced; they are parsed only during
    normalization.

    Attributes:
        title: Short event title.
        description: Longer free-text description.
        start: Event start, normally ISO 8601.
        end: Event end, normally ISO 8601.
        timezone: IANA timezone name the user mentioned, if any.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    start: str | None = None
    end: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class NormalizedEvent:
    """A fully specified event time range.

    Attributes:
        start: Start instant, ISO 8601 UTC with a ``Z`` suffix.
        end: End instant in the same form.
        timezone: Timezone label sent alongside the instants; never empty.
    """

    start: str
    end: str
    timezone: str = DEFAULT_TIMEZONE
