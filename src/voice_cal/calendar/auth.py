"""Service-account authentication for the Google Calendar API.

Builds JWT credentials from a service account email and private key using
``google-auth``, and authorizes them on demand before each write.

Usage::

    from voice_cal.calendar.auth import get_calendar_credentials

    creds = get_calendar_credentials(
        service_account_email="bot@project.iam.gserviceaccount.com",
        private_key=settings.service_account_private_key,
    )
"""

from __future__ import annotations

import logging

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from voice_cal.calendar.exceptions import CalendarAuthError

logger = logging.getLogger(__name__)

SCOPES: list[str] = ["https://www.googleapis.com/auth/calendar"]
"""OAuth 2.0 scopes required to insert calendar events."""

_TOKEN_URI = "https://oauth2.googleapis.com/token"


def get_calendar_credentials(
    service_account_email: str,
    private_key: str,
) -> service_account.Credentials:
    """Build service-account credentials with the calendar scope.

    No network call is made here; the token is fetched by
    :func:`authorize`.

    Args:
        service_account_email: The service account's client email.
        private_key: The PEM-encoded private key, with real newlines.

    Returns:
        Unauthorized :class:`google.oauth2.service_account.Credentials`.

    Raises:
        CalendarAuthError: If the private key cannot be loaded.
    """
    info = {
        "client_email": service_account_email,
        "private_key": private_key,
        "token_uri": _TOKEN_URI,
    }
    try:
        creds = service_account.Credentials.from_service_account_info(
            info, scopes=SCOPES
        )
    except (ValueError, GoogleAuthError) as exc:
        msg = f"Invalid service account credentials: {exc}"
        logger.error(msg)
        raise CalendarAuthError(msg, status_code=None) from exc

    logger.info("Service account credentials loaded for %s", service_account_email)
    return creds


def authorize(credentials: service_account.Credentials) -> None:
    """Make sure *credentials* carry a valid access token.

    Performs the JWT grant when the credentials have no token yet or the
    token has expired; otherwise does nothing.

    Args:
        credentials: Service-account credentials to authorize.

    Raises:
        CalendarAuthError: If the token request fails.
    """
    if credentials.valid:
        return

    try:
        credentials.refresh(Request())
    except GoogleAuthError as exc:
        msg = f"Service account authorization failed: {exc}"
        logger.error(msg)
        raise CalendarAuthError(msg, status_code=None) from exc

    logger.info("Service account authorized")
