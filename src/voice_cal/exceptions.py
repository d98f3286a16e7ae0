"""Custom exceptions for the voice-cal message pipeline.

Every stage of the voice pipeline raises one of these; the update
dispatcher is the single place that catches them, logs them and turns
them into the user-facing apology.

Exception hierarchy::

    VoiceCalError
    +-- TelegramAPIError        (Bot API call failed)
    +-- RetrievalError          (voice file lookup or download failed)
    +-- TranscriptionError      (speech-to-text service rejected the call)
    +-- ExtractionError         (language model call or time parsing failed)
    |   +-- MalformedResponseError
    +-- CalendarError           (see :mod:`voice_cal.calendar.exceptions`)
"""

from __future__ import annotations


class VoiceCalError(Exception):
    """Base class for every failure raised inside the voice pipeline."""


class TelegramAPIError(VoiceCalError):
    """Raised when a Telegram Bot API call fails or answers ``ok: false``.

    Attributes:
        method: Bot API method name, e.g. ``"getFile"``.
    """

    def __init__(self, message: str, method: str = "") -> None:
        super().__init__(message)
        self.method = method


class RetrievalError(VoiceCalError):
    """Raised when a voice message cannot be resolved or downloaded."""


class TranscriptionError(VoiceCalError):
    """Raised when the speech-to-text service returns a non-success response.

    Attributes:
        status_code: HTTP status returned by the provider, or ``None``
            when the request never produced a response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(VoiceCalError):
    """Raised when an event proposal cannot be obtained from the transcript.

    Covers non-success responses from the language model service and
    proposal times that cannot be parsed as dates.
    """


class MalformedResponseError(ExtractionError):
    """Raised when the language model output cannot be decoded.

    This covers JSON parse failures, non-object JSON values and fields of
    the wrong type.

    Attributes:
        raw_response: The raw model output that failed to decode.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response
