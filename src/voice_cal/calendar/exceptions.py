"""Exceptions and error translation for Google Calendar API operations.

Defines the calendar-specific exceptions and a ``@translate_http_errors``
decorator that converts ``googleapiclient`` errors into them.  Calls are
made once; nothing here retries.

Exception hierarchy::

    CalendarError             (base for all Calendar API errors)
    +-- CalendarAuthError     (401/403 responses and failed token refresh)
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from googleapiclient.errors import HttpError

from voice_cal.exceptions import VoiceCalError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------


class CalendarError(VoiceCalError):
    """Base exception for Google Calendar failures.

    Attributes:
        status_code: HTTP status code from the API, or ``None`` if the
            error did not originate from an HTTP response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CalendarAuthError(CalendarError):
    """Raised when the service account cannot authenticate or is not allowed.

    Covers HTTP 401/403 responses and JWT token refresh failures.
    """

    def __init__(
        self,
        message: str = "Calendar authentication failed",
        status_code: int | None = 401,
    ) -> None:
        super().__init__(message, status_code=status_code)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


def _classify_http_error(error: HttpError) -> CalendarError:
    """Map an ``HttpError`` to the appropriate calendar exception.

    Args:
        error: The ``googleapiclient.errors.HttpError`` to classify.

    Returns:
        A :class:`CalendarError` subclass matching the HTTP status code.
    """
    status = error.resp.status

    if status in (401, 403):
        return CalendarAuthError(str(error), status_code=status)
    return CalendarError(str(error), status_code=status)


def translate_http_errors(func: F) -> F:
    """Decorator that converts Calendar API failures into :class:`CalendarError`.

    - ``HttpError`` becomes :class:`CalendarAuthError` for 401/403 and
      :class:`CalendarError` otherwise.
    - Network errors (``OSError``, ``TimeoutError``) become
      :class:`CalendarError`.
    - :class:`CalendarError` raised inside the call passes through.

    Args:
        func: The calendar method to wrap.

    Returns:
        The wrapped function.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HttpError as exc:
            cal_error = _classify_http_error(exc)
            logger.error("Calendar API error (HTTP %s): %s", cal_error.status_code, exc)
            raise cal_error from exc
        except (OSError, TimeoutError) as exc:
            logger.error("Calendar network error: %s", exc)
            raise CalendarError(f"Network error: {exc}") from exc

    return wrapper  # type: ignore[return-value]
