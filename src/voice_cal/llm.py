"""Language model client for calendar event extraction.

Sends a transcript to an OpenAI-compatible ``/chat/completions`` endpoint
in JSON mode and decodes the first choice into an
:class:`~voice_cal.models.event.EventProposal`.  There is exactly one
attempt per transcript.
"""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from voice_cal._openai_http import DEFAULT_BASE_URL, auth_headers, provider_error_text
from voice_cal.exceptions import ExtractionError, MalformedResponseError
from voice_cal.models.event import EventProposal
from voice_cal.prompts import build_messages

logger = logging.getLogger(__name__)


class OpenAIEventClient:
    """Client for extracting an event proposal from a transcript.

    Args:
        api_key: Bearer token for the language model service.
        http_client: Shared :class:`httpx.Client`; its timeout applies.
        model: Chat model identifier.  Defaults to ``"gpt-4o-mini"``.
        base_url: API base URL without a trailing slash.
    """

    def __init__(
        self,
        api_key: str,
        http_client: httpx.Client,
        model: str = "gpt-4o-mini",
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._http = http_client
        self._model = model
        self._url = f"{base_url}/chat/completions"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def propose_event(self, transcript: str) -> EventProposal:
        """Ask the model to turn *transcript* into an event proposal.

        Args:
            transcript: The voice message transcript.

        Returns:
            The decoded :class:`EventProposal`.  Any field may be ``None``.

        Raises:
            ExtractionError: If the request fails or the service returns a
                non-success status.
            MalformedResponseError: If the model output is not a JSON
                object with string-valued fields.
        """
        payload = {
            "model": self._model,
            "response_format": {"type": "json_object"},
            "messages": build_messages(transcript),
        }
        logger.debug("Extraction request payload: %s", payload)

        raw_content = self._call_api(payload)
        logger.debug("Raw LLM response:\n%s", raw_content)

        proposal = self._parse_response(raw_content)
        logger.info(
            "Proposed event: title=%r start=%r end=%r timezone=%r",
            proposal.title,
            proposal.start,
            proposal.end,
            proposal.timezone,
        )
        return proposal

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _call_api(self, payload: dict) -> str:
        """Post *payload* and return the first choice's message content.

        Missing choices or content yield ``"{}"`` so the proposal decodes
        to an all-default event.

        Raises:
            ExtractionError: On transport failures or non-success status.
        """
        try:
            response = self._http.post(
                self._url,
                headers=auth_headers(self._api_key),
                json=payload,
            )
        except httpx.HTTPError as exc:
            raise ExtractionError(f"Event proposal request failed: {exc}") from exc

        if not response.is_success:
            error_text = provider_error_text(response)
            logger.error(
                "Event proposal failed (HTTP %s): %s", response.status_code, error_text
            )
            raise ExtractionError(f"Event proposal failed: {error_text}")

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Chat completion response is not JSON: {exc}",
                raw_response=response.text,
            ) from exc

        return _first_choice_content(data)

    @staticmethod
    def _parse_response(raw_content: str) -> EventProposal:
        """Decode the model's JSON content into an :class:`EventProposal`.

        Raises:
            MalformedResponseError: If the content is not valid JSON, is not
                a JSON object, or has fields of the wrong type.
        """
        try:
            data = json.loads(raw_content)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Invalid JSON: {exc}", raw_response=raw_content
            ) from exc

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(data).__name__}",
                raw_response=raw_content,
            )

        try:
            return EventProposal.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Schema validation failed: {exc}", raw_response=raw_content
            ) from exc


def _first_choice_content(data: object) -> str:
    if not isinstance(data, dict):
        return "{}"
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return "{}"
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) and content else "{}"
