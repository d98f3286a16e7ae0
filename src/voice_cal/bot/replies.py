"""User-facing reply texts."""

from __future__ import annotations

APOLOGY_TEXT = (
    "Sorry, I couldn't process that voice message. "
    "Please try again or check my configuration."
)

FALLBACK_TEXT = "Send me a voice message describing your event, and I'll schedule it."


def greeting_text(sender: str) -> str:
    return f"Hello {sender}! Send me a voice message and I'll add it to your calendar."


def confirmation_text(sender: str, transcript: str, title: str) -> str:
    """Confirm a created event, echoing the transcript and the event title."""
    return (
        f"Got it, {sender}! I transcribed your message as:\n"
        f'"{transcript}"\n'
        f'I\'ve added it to your calendar as "{title}".'
    )
