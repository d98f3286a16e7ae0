"""Tests for the speech-to-text client.

Requests go through the ``openai`` SDK on top of an in-process
``httpx.MockTransport``; the handler records each request so the multipart
body and headers can be inspected.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from voice_cal.exceptions import TranscriptionError
from voice_cal.models.audio import AudioPayload
from voice_cal.speech import WhisperClient

AUDIO = AudioPayload(content=b"OggS\x00fake-opus-bytes")


def _client(
    make_http_client: Callable[..., httpx.Client],
    response: httpx.Response | Exception,
    seen: list[httpx.Request],
    **kwargs: str,
) -> WhisperClient:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if isinstance(response, Exception):
            raise response
        return response

    return WhisperClient(api_key="sk-test", http_client=make_http_client(handler), **kwargs)


class TestTranscribe:
    def test_returns_text(self, make_http_client: Callable[..., httpx.Client]) -> None:
        seen: list[httpx.Request] = []
        client = _client(
            make_http_client,
            httpx.Response(200, json={"text": "Lunch with Bob tomorrow at noon"}),
            seen,
        )

        assert client.transcribe(AUDIO) == "Lunch with Bob tomorrow at noon"
        assert len(seen) == 1

    def test_request_shape(self, make_http_client: Callable[..., httpx.Client]) -> None:
        """POST multipart with model and the ogg file, bearer-authenticated."""
        seen: list[httpx.Request] = []
        client = _client(make_http_client, httpx.Response(200, json={"text": "hi"}), seen)

        client.transcribe(AUDIO)

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.openai.com/v1/audio/transcriptions"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="model"' in body
        assert b"whisper-1" in body
        assert b'filename="voice-message.ogg"' in body
        assert b"Content-Type: audio/ogg" in body
        assert AUDIO.content in body

    def test_custom_base_url_and_model(
        self, make_http_client: Callable[..., httpx.Client]
    ) -> None:
        seen: list[httpx.Request] = []
        client = _client(
            make_http_client,
            httpx.Response(200, json={"text": "hi"}),
            seen,
            model="whisper-large-v3",
            base_url="http://localhost:9000/v1",
        )

        client.transcribe(AUDIO)

        assert str(seen[0].url) == "http://localhost:9000/v1/audio/transcriptions"
        assert b"whisper-large-v3" in seen[0].read()

    def test_missing_text_is_empty(self, make_http_client: Callable[..., httpx.Client]) -> None:
        client = _client(make_http_client, httpx.Response(200, json={}), [])

        assert client.transcribe(AUDIO) == ""


class TestTranscribeErrors:
    def test_http_500_raises_with_provider_message(
        self, make_http_client: Callable[..., httpx.Client]
    ) -> None:
        response = httpx.Response(500, json={"error": {"message": "The server had an error"}})
        client = _client(make_http_client, response, [])

        with pytest.raises(TranscriptionError, match="The server had an error") as exc_info:
            client.transcribe(AUDIO)

        assert exc_info.value.status_code == 500

    def test_non_json_error_body_used_verbatim(
        self, make_http_client: Callable[..., httpx.Client]
    ) -> None:
        client = _client(make_http_client, httpx.Response(502, text="Bad Gateway"), [])

        with pytest.raises(TranscriptionError, match="Bad Gateway"):
            client.transcribe(AUDIO)

    def test_transport_error(self, make_http_client: Callable[..., httpx.Client]) -> None:
        client = _client(make_http_client, httpx.ConnectError("connection refused"), [])

        with pytest.raises(TranscriptionError, match="request failed") as exc_info:
            client.transcribe(AUDIO)

        assert exc_info.value.status_code is None

    def test_single_attempt_on_server_error(
        self, make_http_client: Callable[..., httpx.Client]
    ) -> None:
        """The SDK's own retries are disabled."""
        seen: list[httpx.Request] = []
        client = _client(make_http_client, httpx.Response(503, text="overloaded"), seen)

        with pytest.raises(TranscriptionError):
            client.transcribe(AUDIO)

        assert len(seen) == 1


class TestInjectedClient:
    def test_injected_client_used(self, make_http_client: Callable[..., httpx.Client]) -> None:
        sdk = MagicMock()
        sdk.audio.transcriptions.create.return_value = MagicMock(text="hello there")
        client = WhisperClient(
            api_key="sk-test", http_client=make_http_client(_unreachable), client=sdk
        )

        assert client.transcribe(AUDIO) == "hello there"
        sdk.audio.transcriptions.create.assert_called_once_with(
            model="whisper-1",
            file=("voice-message.ogg", AUDIO.content, "audio/ogg"),
        )

    def test_plain_text_response_returned_as_is(
        self, make_http_client: Callable[..., httpx.Client]
    ) -> None:
        sdk = MagicMock()
        sdk.audio.transcriptions.create.return_value = "plain text"
        client = WhisperClient(
            api_key="sk-test", http_client=make_http_client(_unreachable), client=sdk
        )

        assert client.transcribe(AUDIO) == "plain text"


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")
