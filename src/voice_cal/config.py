"""Configuration loading for voice-cal.

Reads settings from environment variables (with .env support via python-dotenv)
and validates that all required values are present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        telegram_bot_token: Telegram Bot API token.
        openai_api_key: API key for the speech-to-text and language model
            services.
        service_account_email: Google service account email.
        service_account_private_key: PEM private key of the service account,
            with escaped ``\\n`` sequences already turned into newlines.
        calendar_id: Target Google Calendar id (default ``"primary"``).
        openai_base_url: Base URL of the OpenAI-compatible API.
        transcription_model: Speech-to-text model identifier.
        extraction_model: Chat completion model identifier.
        http_timeout_seconds: Timeout applied to every outbound HTTP call.
        poll_timeout_seconds: Long-poll timeout passed to ``getUpdates``.
        log_level: Logging level (default ``"INFO"``).
    """

    telegram_bot_token: str
    openai_api_key: str
    service_account_email: str
    service_account_private_key: str
    calendar_id: str = "primary"
    openai_base_url: str = "https://api.openai.com/v1"
    transcription_model: str = "whisper-1"
    extraction_model: str = "gpt-4o-mini"
    http_timeout_seconds: float = 60.0
    poll_timeout_seconds: int = 30
    log_level: str = "INFO"

    def __repr__(self) -> str:
        return (
            f"Settings(telegram_bot_token='***', "
            f"openai_api_key='***', "
            f"service_account_email={self.service_account_email!r}, "
            f"service_account_private_key='***', "
            f"calendar_id={self.calendar_id!r}, "
            f"openai_base_url={self.openai_base_url!r}, "
            f"transcription_model={self.transcription_model!r}, "
            f"extraction_model={self.extraction_model!r}, "
            f"http_timeout_seconds={self.http_timeout_seconds!r}, "
            f"poll_timeout_seconds={self.poll_timeout_seconds!r}, "
            f"log_level={self.log_level!r})"
        )


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any required environment variable is missing,
            empty, or whitespace-only (the message names **all** of them),
            or if a numeric setting cannot be parsed.
    """
    load_dotenv()

    required = {
        "TELEGRAM_BOT_TOKEN": "telegram_bot_token",
        "OPENAI_API_KEY": "openai_api_key",
        "GOOGLE_SERVICE_ACCOUNT_EMAIL": "service_account_email",
        "GOOGLE_SERVICE_ACCOUNT_PRIVATE_KEY": "service_account_private_key",
    }

    values: dict[str, object] = {}
    missing: list[str] = []

    for env_var, field_name in required.items():
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            missing.append(env_var)
        else:
            values[field_name] = raw

    if missing:
        names = ", ".join(missing)
        raise ConfigError(f"Missing required environment variables: {names}")

    # Keys pasted into a single-line env var carry literal "\n" sequences.
    values["service_account_private_key"] = str(
        values["service_account_private_key"]
    ).replace("\\n", "\n")

    optional = {
        "GOOGLE_CALENDAR_ID": "calendar_id",
        "OPENAI_BASE_URL": "openai_base_url",
        "TRANSCRIPTION_MODEL": "transcription_model",
        "EXTRACTION_MODEL": "extraction_model",
        "LOG_LEVEL": "log_level",
    }
    for env_var, field_name in optional.items():
        raw = os.environ.get(env_var, "").strip()
        if raw:
            values[field_name] = raw

    if "openai_base_url" in values:
        values["openai_base_url"] = str(values["openai_base_url"]).rstrip("/")

    http_timeout = os.environ.get("HTTP_TIMEOUT_SECONDS", "").strip()
    if http_timeout:
        values["http_timeout_seconds"] = _parse_number(
            "HTTP_TIMEOUT_SECONDS", http_timeout, float
        )

    poll_timeout = os.environ.get("POLL_TIMEOUT_SECONDS", "").strip()
    if poll_timeout:
        values["poll_timeout_seconds"] = _parse_number(
            "POLL_TIMEOUT_SECONDS", poll_timeout, int
        )

    return Settings(**values)  # type: ignore[arg-type]


def _parse_number(env_var: str, raw: str, kind: type[float] | type[int]) -> float | int:
    """Parse a positive numeric setting, raising :class:`ConfigError` on failure."""
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigError(f"{env_var} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{env_var} must be positive, got {raw!r}")
    return value
