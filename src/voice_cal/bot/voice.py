"""Voice message retrieval from Telegram."""

from __future__ import annotations

import logging

import httpx

from voice_cal.bot.api import TelegramClient
from voice_cal.exceptions import RetrievalError, TelegramAPIError
from voice_cal.models.audio import AudioPayload

logger = logging.getLogger(__name__)


def retrieve_voice(api: TelegramClient, file_id: str) -> AudioPayload:
    """Resolve *file_id* to a download path and fetch the audio bytes.

    Args:
        api: Telegram client used for ``getFile`` and the download.
        file_id: ``file_id`` of the message's voice attachment.

    Returns:
        The downloaded audio tagged as ``audio/ogg``.

    Raises:
        RetrievalError: If Telegram returns no ``file_path``, the lookup
            fails, or the download answers with a non-success status.
    """
    try:
        file_info = api.get_file(file_id)
    except TelegramAPIError as exc:
        raise RetrievalError(f"Voice file lookup failed: {exc}") from exc

    file_path = file_info.get("file_path")
    if not file_path:
        raise RetrievalError("Voice file path is missing")

    try:
        response = api.download(file_path)
    except httpx.HTTPError as exc:
        raise RetrievalError(
            f"Failed to download voice message: {type(exc).__name__}"
        ) from None

    if not response.is_success:
        raise RetrievalError(
            f"Failed to download voice message: {response.status_code}"
        )

    logger.info("Downloaded voice message %s (%d bytes)", file_path, len(response.content))
    return AudioPayload(content=response.content)
