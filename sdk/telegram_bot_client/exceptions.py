"""Errors raised by the SDK when a Bot API call fails.

Two independent kinds exist:

- ``TelegramAPIError``: the Bot API was reached and answered ``ok: false``.
- ``TelegramHTTPError``: the HTTP round trip itself failed (network error,
  or an exception raised by a request/response transformer).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class TelegramAPIError(Exception):
    """
    The Telegram Bot API responded with an error envelope.

    Holds what the Telegram backend returned, together with the method and
    payload of the call that failed.
    """

    def __init__(
        self,
        message: str,
        err: Mapping[str, Any],
        method: str,
        payload: Mapping[str, Any],
    ):
        error_code = err["error_code"]
        description = err["description"]
        parameters = err.get("parameters")
        if parameters is None:
            parameters = {}

        self._message = f"{message} ({error_code}: {description})"
        super().__init__(self._message)
        self._summary = message
        self._error_code = error_code
        self._description = description
        self._parameters = parameters
        self._method = method
        self._payload = payload

    @property
    def ok(self) -> bool:
        """Always ``False``, mirrors the ``ok`` field of the envelope."""
        return False

    @property
    def message(self) -> str:
        return self._message

    @property
    def error_code(self) -> int:
        """Telegram's error code. Subject to change."""
        return self._error_code

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> Mapping[str, Any]:
        """Hints that may help to handle the error automatically."""
        return self._parameters

    @property
    def method(self) -> str:
        """Bot API method whose call caused this error."""
        return self._method

    @property
    def payload(self) -> Mapping[str, Any]:
        """Arguments that were sent with the failed call."""
        return self._payload

    @property
    def retry_after(self) -> int | None:
        return self._parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> int | None:
        return self._parameters.get("migrate_to_chat_id")

    def __reduce__(self):
        envelope = {
            "error_code": self._error_code,
            "description": self._description,
            "parameters": self._parameters,
        }
        return (
            self.__class__,
            (self._summary, envelope, self._method, self._payload),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(method={self._method!r}, "
            f"error_code={self._error_code!r}, description={self._description!r})"
        )


class TelegramHTTPError(Exception):
    """
    The HTTP call to the Telegram Bot API failed.

    ``error`` holds whatever was raised: a network error from httpx, or the
    exception thrown by a request/response transformer. It is kept as-is and
    never inspected.
    """

    def __init__(self, message: str, error: Any):
        super().__init__(message)
        self._message = message
        self._error = error

    @property
    def message(self) -> str:
        return self._message

    @property
    def error(self) -> Any:
        """The thrown error object."""
        return self._error

    def __reduce__(self):
        return (self.__class__, (self._message, self._error))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._message!r}, error={self._error!r})"
