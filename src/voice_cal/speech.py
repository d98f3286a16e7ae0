"""Speech-to-text client for voice messages.

Sends the downloaded audio to an OpenAI-compatible
``/audio/transcriptions`` endpoint through the ``openai`` SDK and returns
the plain transcript.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, OpenAI

from voice_cal._openai_http import DEFAULT_BASE_URL, provider_error_text
from voice_cal.exceptions import TranscriptionError
from voice_cal.models.audio import AudioPayload

logger = logging.getLogger(__name__)


class WhisperClient:
    """Client for the speech-to-text service.

    Args:
        api_key: Bearer token for the service.
        http_client: Shared :class:`httpx.Client`; its transport and timeout
            are reused by the SDK.
        model: Transcription model identifier.  Defaults to ``"whisper-1"``.
        base_url: API base URL without a trailing slash.
        client: Optional pre-built :class:`openai.OpenAI` client.  If
            ``None``, one is built on top of *http_client* with retries
            disabled.
    """

    def __init__(
        self,
        api_key: str,
        http_client: httpx.Client,
        model: str = "whisper-1",
        base_url: str = DEFAULT_BASE_URL,
        client: OpenAI | None = None,
    ) -> None:
        self._model = model
        self._client = client or OpenAI(
            api_key=api_key,
            base_url=base_url,
            http_client=http_client,
            timeout=http_client.timeout,
            max_retries=0,
        )

    def transcribe(self, audio: AudioPayload) -> str:
        """Transcribe *audio* and return the recognised text.

        The ``text`` field of the response is returned without further
        checks; an empty transcript is a valid result.

        Args:
            audio: The raw voice message payload.

        Returns:
            The transcript text.

        Raises:
            TranscriptionError: If the request fails or the service returns
                a non-success status.  The message carries the provider's
                error text.
        """
        logger.info(
            "Transcribing %d byte(s) of %s with %s",
            len(audio.content),
            audio.mime_type,
            self._model,
        )
        try:
            response = self._client.audio.transcriptions.create(
                model=self._model,
                file=(audio.filename, audio.content, audio.mime_type),
            )
        except APIStatusError as exc:
            error_text = provider_error_text(exc.response)
            logger.error("Transcription failed (HTTP %s): %s", exc.status_code, error_text)
            raise TranscriptionError(
                f"Transcription failed: {error_text}",
                status_code=exc.status_code,
            ) from exc
        except APIConnectionError as exc:
            raise TranscriptionError(f"Transcription request failed: {exc}") from exc

        transcript = _transcript_text(response)
        logger.info("Transcript: %r", transcript)
        return transcript


def _transcript_text(response: Any) -> str:
    # Non-JSON bodies come back from the SDK as the raw text.
    if isinstance(response, str):
        return response
    text = getattr(response, "text", None)
    return text if isinstance(text, str) else ""
