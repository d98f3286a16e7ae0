"""Long-polling loop that feeds Telegram updates to the dispatcher."""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import ValidationError

from voice_cal.bot.api import TelegramClient
from voice_cal.bot.dispatcher import UpdateDispatcher
from voice_cal.exceptions import TelegramAPIError
from voice_cal.models.telegram import Update

logger = logging.getLogger(__name__)

# Pause after a failed getUpdates call so a dead network does not spin.
_ERROR_BACKOFF_SECONDS = 5.0


class UpdatePoller:
    """Polls ``getUpdates`` and handles each update in order.

    Updates are acknowledged by advancing the offset past the last one seen,
    whether or not its handler succeeded, so a failing update is never
    redelivered.

    Args:
        telegram: Client used for ``getUpdates``.
        dispatcher: Handler for decoded updates.
        poll_timeout: Long-poll timeout in seconds.
    """

    def __init__(
        self,
        telegram: TelegramClient,
        dispatcher: UpdateDispatcher,
        poll_timeout: int = 30,
    ) -> None:
        self._telegram = telegram
        self._dispatcher = dispatcher
        self._poll_timeout = poll_timeout
        self._offset: int | None = None

    @property
    def offset(self) -> int | None:
        """The next ``offset`` sent to ``getUpdates``."""
        return self._offset

    def poll_once(self) -> int:
        """Fetch one batch of updates and dispatch them.

        Returns:
            The number of updates received.

        Raises:
            TelegramAPIError: If ``getUpdates`` itself fails.
        """
        updates = self._telegram.get_updates(offset=self._offset, timeout=self._poll_timeout)
        if updates:
            logger.info("Polled %d Telegram update(s)", len(updates))

        for raw in updates:
            update_id = raw.get("update_id")
            if isinstance(update_id, int):
                self._offset = update_id + 1
            self._dispatch(raw)

        return len(updates)

    def run_forever(self) -> None:
        """Poll until interrupted.

        Errors from ``getUpdates`` are logged and polling resumes after a
        short pause.  ``KeyboardInterrupt`` stops the loop.
        """
        logger.info("Listening for Telegram updates")
        while True:
            try:
                self.poll_once()
            except TelegramAPIError as exc:
                logger.error("Error polling Telegram updates: %s", exc)
                time.sleep(_ERROR_BACKOFF_SECONDS)

    def _dispatch(self, raw: dict[str, Any]) -> None:
        """Decode and handle one update, logging any failure."""
        try:
            update = Update.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Skipping undecodable update %s: %s", raw.get("update_id"), exc)
            return

        try:
            outcome = self._dispatcher.handle_update(update)
        except Exception:
            logger.exception("Unhandled error for update %d", update.update_id)
            return

        logger.info("Update %d handled: %s", update.update_id, outcome.value)
