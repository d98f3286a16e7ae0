"""Shared fixtures for Google Calendar unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock, create_autospec

import pytest
from google.oauth2 import service_account

from voice_cal.calendar.auth import SCOPES


@pytest.fixture()
def mock_credentials() -> MagicMock:
    """Return mock service-account credentials that report as valid."""
    creds = create_autospec(service_account.Credentials, instance=True)
    creds.valid = True
    creds.expired = False
    return creds


@pytest.fixture()
def mock_unauthorized_credentials() -> MagicMock:
    """Return mock service-account credentials that have no token yet."""
    creds = create_autospec(service_account.Credentials, instance=True)
    creds.valid = False
    creds.expired = False
    return creds


@pytest.fixture()
def mock_service() -> MagicMock:
    """Return a mock Calendar API service whose insert() echoes an event id."""
    service = MagicMock()
    service.events.return_value.insert.return_value.execute.return_value = {
        "id": "evt-123",
        "htmlLink": "https://calendar.google.com/event?eid=evt-123",
    }
    return service


@pytest.fixture()
def scopes() -> list[str]:
    """Return the expected OAuth 2.0 scopes."""
    return SCOPES
