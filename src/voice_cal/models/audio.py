"""Audio payload passed from voice retrieval to transcription."""

from __future__ import annotations

from dataclasses import dataclass

VOICE_MIME_TYPE = "audio/ogg"
VOICE_FILENAME = "voice-message.ogg"


@dataclass(frozen=True)
class AudioPayload:
    """Raw bytes of a downloaded voice message.

    Attributes:
        content: The audio bytes as served by Telegram.
        mime_type: Content type sent to the speech-to-text service.
        filename: File name used in the multipart upload.
    """

    content: bytes
    mime_type: str = VOICE_MIME_TYPE
    filename: str = VOICE_FILENAME
