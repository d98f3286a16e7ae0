"""Entry point for ``python -m voice_cal``.

Loads configuration, builds every service handle once and starts the
Telegram long-polling listener.  The process takes no arguments and runs
until interrupted.

Exit codes:
    0 -- Stopped by the user (Ctrl+C).
    1 -- Configuration or credential error at startup.
"""

from __future__ import annotations

import logging
import sys

import httpx

from voice_cal.bot.api import TelegramClient
from voice_cal.bot.dispatcher import UpdateDispatcher
from voice_cal.bot.poller import UpdatePoller
from voice_cal.calendar.auth import get_calendar_credentials
from voice_cal.calendar.client import GoogleCalendarClient
from voice_cal.calendar.exceptions import CalendarError
from voice_cal.config import ConfigError, Settings, load_settings
from voice_cal.llm import OpenAIEventClient
from voice_cal.log import setup_logging
from voice_cal.pipeline import VoicePipeline
from voice_cal.speech import WhisperClient

logger = logging.getLogger(__name__)


def build_poller(settings: Settings, http_client: httpx.Client) -> UpdatePoller:
    """Wire the service handles into a ready-to-run poller.

    Args:
        settings: Validated application settings.
        http_client: Shared HTTP client for Telegram and OpenAI calls.

    Returns:
        An :class:`UpdatePoller` that has not started polling yet.

    Raises:
        CalendarError: If the service account key cannot be loaded.
    """
    telegram = TelegramClient(settings.telegram_bot_token, http_client)
    transcriber = WhisperClient(
        api_key=settings.openai_api_key,
        http_client=http_client,
        model=settings.transcription_model,
        base_url=settings.openai_base_url,
    )
    extractor = OpenAIEventClient(
        api_key=settings.openai_api_key,
        http_client=http_client,
        model=settings.extraction_model,
        base_url=settings.openai_base_url,
    )
    credentials = get_calendar_credentials(
        service_account_email=settings.service_account_email,
        private_key=settings.service_account_private_key,
    )
    calendar = GoogleCalendarClient(credentials, calendar_id=settings.calendar_id)

    pipeline = VoicePipeline(telegram, transcriber, extractor, calendar)
    dispatcher = UpdateDispatcher(telegram, pipeline)
    return UpdatePoller(telegram, dispatcher, poll_timeout=settings.poll_timeout_seconds)


def main() -> int:
    """Run the voice-cal listener.

    Returns:
        Exit code: ``0`` after a clean stop, ``1`` on a startup error.
    """
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        setup_logging(settings.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Loaded %r", settings)

    with httpx.Client(timeout=settings.http_timeout_seconds) as http_client:
        try:
            poller = build_poller(settings, http_client)
        except CalendarError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        logger.info("Telegram calendar assistant is running...")
        try:
            poller.run_forever()
        except KeyboardInterrupt:
            logger.info("Stopped by user")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
