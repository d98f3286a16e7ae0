"""Telegram Bot API objects read by the bot.

Only the fields the dispatcher needs are modelled; everything else in the
update payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_SENDER_NAME = "there"


class TelegramUser(BaseModel):
    """The ``from`` user of a message."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None


class Chat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int


class Voice(BaseModel):
    """A voice note attachment."""

    model_config = ConfigDict(extra="ignore")

    file_id: str
    duration: int | None = None
    mime_type: str | None = None


class Message(BaseModel):
    """An inbound chat message.

    ``from`` is a Python keyword, so the sender lives on :attr:`from_user`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_id: int
    chat: Chat
    from_user: TelegramUser | None = Field(default=None, alias="from")
    text: str | None = None
    voice: Voice | None = None


class Update(BaseModel):
    """A single entry from ``getUpdates``."""

    model_config = ConfigDict(extra="ignore")

    update_id: int
    message: Message | None = None


def sender_name(user: TelegramUser | None) -> str:
    """Derive a display name for greeting the sender.

    Uses ``"First Last"`` when a first name is present (the last name is
    optional), then the username, then the literal ``"there"``.

    Args:
        user: The message's ``from`` user, or ``None``.

    Returns:
        A non-empty display name.
    """
    if user is None:
        return FALLBACK_SENDER_NAME
    if user.first_name:
        if user.last_name:
            return f"{user.first_name} {user.last_name}"
        return user.first_name
    return user.username or FALLBACK_SENDER_NAME
