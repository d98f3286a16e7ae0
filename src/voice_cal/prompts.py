"""Prompt builders for the event-extraction call.

The system instruction is fixed: it asks the model for a single JSON object
describing one calendar event and tells it how to fill in missing timing.
The transcript is passed through verbatim as the user message.
"""

from __future__ import annotations

EXTRACTION_SYSTEM_PROMPT = (
    "You extract Google Calendar event details from user transcripts. "
    "Return JSON with title, start, end (ISO 8601), optional description, "
    "and timezone. If timing is missing, use the current day at the next "
    "full hour in the user's timezone or UTC."
)


def build_messages(transcript: str) -> list[dict[str, str]]:
    """Build the chat-completion ``messages`` array for a transcript.

    Args:
        transcript: Plain text returned by the speech-to-text service.

    Returns:
        A two-element list: the fixed system instruction followed by the
        transcript as the user turn.
    """
    return [
        {"role": "system", "content": EXTRACTION_SYSTEM_PROMPT},
        {"role": "user", "content": transcript},
    ]
