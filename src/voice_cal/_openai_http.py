"""Helpers shared by the OpenAI-compatible HTTP clients."""

from __future__ import annotations

import httpx

DEFAULT_BASE_URL = "https://api.openai.com/v1"


def auth_headers(api_key: str) -> dict[str, str]:
    """Return the bearer-token header for *api_key*."""
    return {"Authorization": f"Bearer {api_key}"}


def provider_error_text(response: httpx.Response) -> str:
    """Return the provider's error message for a failed response.

    OpenAI wraps errors as ``{"error": {"message": ...}}``; anything else
    falls back to the raw body text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text
