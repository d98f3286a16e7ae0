"""Routes inbound Telegram messages to the matching handler.

Each message ends in exactly one of three outcomes, independent of any
earlier message:

- **greeting** -- ``/start`` gets a welcome addressed to the sender.
- **voice** -- a voice attachment runs the full
  :class:`~voice_cal.pipeline.VoicePipeline`; the sender gets either a
  confirmation or a single fixed apology.
- **fallback** -- anything else gets a prompt to send a voice message.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum

from voice_cal.bot.api import TelegramClient
from voice_cal.bot.replies import (
    APOLOGY_TEXT,
    FALLBACK_TEXT,
    confirmation_text,
    greeting_text,
)
from voice_cal.exceptions import TelegramAPIError
from voice_cal.models.telegram import Message, Update, Voice, sender_name
from voice_cal.pipeline import VoicePipeline

logger = logging.getLogger(__name__)

START_COMMAND = "/start"


class Outcome(str, Enum):
    """Which handler an update was routed to."""

    GREETING = "greeting"
    VOICE_SUCCESS = "voice_success"
    VOICE_FAILURE = "voice_failure"
    FALLBACK = "fallback"
    IGNORED = "ignored"


class UpdateDispatcher:
    """Dispatches decoded updates and sends the replies.

    Args:
        telegram: Client used for replies and chat actions.
        pipeline: The voice-to-calendar pipeline.
    """

    def __init__(self, telegram: TelegramClient, pipeline: VoicePipeline) -> None:
        self._telegram = telegram
        self._pipeline = pipeline

    def handle_update(self, update: Update, now: datetime | None = None) -> Outcome:
        """Handle one update and return the outcome.

        Updates without a message (edits, channel posts) are ignored.

        Args:
            update: The decoded Telegram update.
            now: Override for the current time, forwarded to the pipeline.

        Returns:
            The :class:`Outcome` of the update.

        Raises:
            TelegramAPIError: If sending a greeting, fallback or
                apology reply fails.
        """
        message = update.message
        if message is None:
            logger.debug("Ignoring update %d without a message", update.update_id)
            return Outcome.IGNORED

        if message.voice is not None:
            return self._handle_voice(message, message.voice, now)
        if _is_start_command(message.text):
            return self._handle_start(message)
        return self._handle_fallback(message)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_start(self, message: Message) -> Outcome:
        sender = sender_name(message.from_user)
        logger.info("Greeting %s in chat %d", sender, message.chat.id)
        self._reply(message, greeting_text(sender))
        return Outcome.GREETING

    def _handle_fallback(self, message: Message) -> Outcome:
        logger.info("Non-voice message in chat %d, prompting for voice", message.chat.id)
        self._reply(message, FALLBACK_TEXT)
        return Outcome.FALLBACK

    def _handle_voice(self, message: Message, voice: Voice, now: datetime | None) -> Outcome:
        """Run the pipeline for a voice message and reply with the result.

        Any exception from any stage, including a failed confirmation
        reply, is logged and answered with the same apology; the user
        cannot tell which stage failed.
        """
        sender = sender_name(message.from_user)
        logger.info(
            "Voice message from %s in chat %d (file_id=%s)",
            sender,
            message.chat.id,
            voice.file_id,
        )

        try:
            self._telegram.send_chat_action(message.chat.id, "typing")
        except TelegramAPIError as exc:
            logger.warning("Could not send typing indicator: %s", exc)

        try:
            result = self._pipeline.run(voice.file_id, now=now)
            self._reply(message, confirmation_text(sender, result.transcript, result.title))
        except Exception:
            logger.exception("Failed to process voice message in chat %d", message.chat.id)
            self._reply(message, APOLOGY_TEXT)
            return Outcome.VOICE_FAILURE

        return Outcome.VOICE_SUCCESS

    def _reply(self, message: Message, text: str) -> None:
        self._telegram.send_message(
            message.chat.id, text, reply_to_message_id=message.message_id
        )


def _is_start_command(text: str | None) -> bool:
    """Match ``/start``, ``/start payload`` and ``/start@BotName``."""
    parts = (text or "").split(maxsplit=1)
    if not parts:
        return False
    return parts[0].split("@", 1)[0] == START_COMMAND
