"""Minimal Telegram Bot API client over HTTP.

Wraps the handful of Bot API methods the bot uses (``getUpdates``,
``getFile``, ``sendMessage``, ``sendChatAction``) plus the file download
endpoint.  Every call goes through one shared :class:`httpx.Client`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from voice_cal.exceptions import TelegramAPIError

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class TelegramClient:
    """Synchronous client for the Telegram Bot API.

    Args:
        token: Bot token issued by BotFather.
        http_client: Shared :class:`httpx.Client`.
        api_base: Bot API host, overridable for a self-hosted server.
    """

    def __init__(
        self,
        token: str,
        http_client: httpx.Client,
        api_base: str = TELEGRAM_API_BASE,
    ) -> None:
        self._token = token
        self._http = http_client
        self._api_base = api_base.rstrip("/")

    # ------------------------------------------------------------------
    # Bot API methods
    # ------------------------------------------------------------------

    def get_updates(self, offset: int | None = None, timeout: int = 30) -> list[dict[str, Any]]:
        """Long-poll for new updates.

        Args:
            offset: Identifier of the first update to return; pass the last
                seen ``update_id + 1`` to acknowledge earlier ones.
            timeout: Seconds the server may hold the request open.

        Returns:
            The raw update dicts, oldest first.
        """
        params: dict[str, Any] = {"timeout": timeout, "allowed_updates": ["message"]}
        if offset is not None:
            params["offset"] = offset
        # The HTTP timeout must outlast the server-side long poll.
        http_timeout = self._http.timeout.read
        if http_timeout is not None:
            http_timeout = http_timeout + timeout
        result = self._call("getUpdates", params, timeout=http_timeout)
        return list(result or [])

    def get_file(self, file_id: str) -> dict[str, Any]:
        """Return the ``File`` object for *file_id* (may lack ``file_path``)."""
        result = self._call("getFile", {"file_id": file_id})
        return result if isinstance(result, dict) else {}

    def send_message(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: int | None = None,
    ) -> dict[str, Any]:
        """Send *text* to *chat_id*, optionally as a reply."""
        params: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_to_message_id is not None:
            params["reply_to_message_id"] = reply_to_message_id
        return self._call("sendMessage", params)

    def send_chat_action(self, chat_id: int, action: str = "typing") -> None:
        """Show a chat action such as ``"typing"`` to the user."""
        self._call("sendChatAction", {"chat_id": chat_id, "action": action})

    # ------------------------------------------------------------------
    # File download
    # ------------------------------------------------------------------

    def file_url(self, file_path: str) -> str:
        """Return the temporary download URL for a ``getFile`` path."""
        return f"{self._api_base}/file/bot{self._token}/{file_path}"

    def download(self, file_path: str) -> httpx.Response:
        """GET the file at *file_path*; the caller checks the status."""
        return self._http.get(self.file_url(file_path))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _method_url(self, method: str) -> str:
        return f"{self._api_base}/bot{self._token}/{method}"

    def _call(
        self,
        method: str,
        params: dict[str, Any],
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> Any:
        """POST a Bot API method and return its ``result``.

        Raises:
            TelegramAPIError: On transport errors, non-JSON bodies or an
                ``ok: false`` answer.  The bot token never appears in the
                message.
        """
        try:
            response = self._http.post(self._method_url(method), json=params, timeout=timeout)
        except httpx.HTTPError as exc:
            # Request URLs embed the bot token; keep them out of the chain.
            raise TelegramAPIError(
                f"Telegram {method} request failed: {type(exc).__name__}", method=method
            ) from None

        try:
            data = response.json()
        except ValueError:
            raise TelegramAPIError(
                f"Telegram {method} returned a non-JSON body (HTTP {response.status_code})",
                method=method,
            ) from None

        if not isinstance(data, dict) or not data.get("ok"):
            description = data.get("description") if isinstance(data, dict) else None
            raise TelegramAPIError(
                f"Telegram {method} failed (HTTP {response.status_code}): "
                f"{description or 'no description'}",
                method=method,
            )

        logger.debug("Telegram %s ok", method)
        return data.get("result")
