"""Data models for voice-cal."""

from __future__ import annotations

from voice_cal.models.audio import AudioPayload
from voice_cal.models.event import EventProposal, NormalizedEvent
from voice_cal.models.telegram import (
    Chat,
    Message,
    TelegramUser,
    Update,
    Voice,
    sender_name,
)

__all__ = [
    "AudioPayload",
    "Chat",
    "EventProposal",
    "Message",
    "NormalizedEvent",
    "TelegramUser",
    "Update",
    "Voice",
    "sender_name",
]
