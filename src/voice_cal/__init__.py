"""voice-cal: Telegram voice messages to Google Calendar events.

Transcribes voice messages, extracts a calendar event with a language
model, and inserts it into Google Calendar.
"""

from __future__ import annotations

from voice_cal.exceptions import (
    ExtractionError,
    MalformedResponseError,
    RetrievalError,
    TelegramAPIError,
    TranscriptionError,
    VoiceCalError,
)
from voice_cal.models.event import EventProposal, NormalizedEvent
from voice_cal.models.telegram import sender_name
from voice_cal.normalizer import normalize_event_times

__version__ = "0.1.0"

__all__ = [
    "EventProposal",
    "ExtractionError",
    "MalformedResponseError",
    "NormalizedEvent",
    "RetrievalError",
    "TelegramAPIError",
    "TranscriptionError",
    "VoiceCalError",
    "normalize_event_times",
    "sender_name",
]
