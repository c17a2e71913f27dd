"""
Async HTTP client for the Telegram Bot API.

Features:
- One httpx.AsyncClient per bot, created lazily
- Request/response transformers (sync or async callables)
- Retry policy for 429 (``retry_after``) and 5xx envelopes
- ``TelegramAPIError`` for ``ok: false`` answers, ``TelegramHTTPError`` for
  everything that prevented an answer
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from .config import Settings, get_settings
from .exceptions import TelegramAPIError, TelegramHTTPError

logger = logging.getLogger(__name__)

Payload = dict[str, Any]
RequestTransformer = Callable[[str, Payload], Payload | Awaitable[Payload]]
ResponseTransformer = Callable[[str, Payload, Payload], Payload | Awaitable[Payload]]


def _token_hint(token: str | None) -> str:
    if not token:
        return "unknown"
    suffix = token[-6:] if len(token) >= 6 else token
    return f"*{suffix}"


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class TelegramBotClient:
    """
    Bot API client bound to a single bot token.

    Example:
        async with TelegramBotClient("123:ABC") as bot:
            me = await bot.get_me()
            await bot.send_message(chat_id=-100123, text="Hello!", parse_mode="HTML")
    """

    def __init__(
        self,
        token: str,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token = token
        self._settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_transformers: list[RequestTransformer] = []
        self._response_transformers: list[ResponseTransformer] = []

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._settings.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> TelegramBotClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def add_request_transformer(self, transformer: RequestTransformer) -> None:
        """Register ``transformer(method, payload) -> payload``, run before sending."""
        self._request_transformers.append(transformer)

    def add_response_transformer(self, transformer: ResponseTransformer) -> None:
        """Register ``transformer(method, payload, response) -> response``, run on the decoded body."""
        self._response_transformers.append(transformer)

    # --- Internal methods ---

    def _build_url(self, method: str) -> str:
        base = self._settings.api_base.rstrip("/")
        return f"{base}/bot{self._token}/{method}"

    async def _fetch(self, method: str, payload: Payload) -> tuple[Payload, Payload]:
        """One round trip. Returns the payload actually sent and the decoded body."""
        summary = f"Network request for '{method}' failed!"

        try:
            for transformer in self._request_transformers:
                payload = await _resolve(transformer(method, payload))
        except Exception as exc:
            raise TelegramHTTPError(summary, exc) from exc

        client = await self._get_client()
        try:
            resp = await client.post(self._build_url(method), json=payload)
        except (httpx.HTTPError, OSError) as exc:
            raise TelegramHTTPError(summary, exc) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise TelegramHTTPError(summary, exc) from exc
        if not isinstance(data, dict):
            exc = ValueError(f"unexpected Telegram response body (HTTP {resp.status_code})")
            raise TelegramHTTPError(summary, exc) from exc

        try:
            for transformer in self._response_transformers:
                data = await _resolve(transformer(method, payload, data))
        except Exception as exc:
            raise TelegramHTTPError(summary, exc) from exc

        # A failure without error_code/description is not a Bot API answer (proxy, gateway).
        if not isinstance(data, dict) or (
            not data.get("ok") and not {"error_code", "description"} <= data.keys()
        ):
            exc = ValueError(f"not a Telegram response envelope (HTTP {resp.status_code})")
            raise TelegramHTTPError(summary, exc) from exc

        return payload, data

    @staticmethod
    def _retry_delay(error: TelegramAPIError, attempt: int) -> float | None:
        if error.retry_after is not None:
            return max(1, int(error.retry_after))
        if error.error_code == 429:
            return 1
        if error.error_code >= 500:
            return 2 ** (attempt - 1)
        return None

    # --- Public API ---

    async def call(self, method: str, payload: Payload | None = None) -> Any:
        """
        Call a Bot API method and return its ``result``.

        Raises:
            TelegramAPIError: Telegram answered ``ok: false`` (after retries).
            TelegramHTTPError: no answer could be obtained.
        """
        payload = dict(payload or {})
        max_attempts = self._settings.max_retries
        hint = _token_hint(self._token)
        started = time.perf_counter()
        status = "error"

        logger.info("telegram.call method=%s chat_id=%s bot=%s", method, payload.get("chat_id"), hint)
        try:
            for attempt in range(1, max_attempts + 1):
                sent, data = await self._fetch(method, payload)
                if data.get("ok"):
                    status = "success"
                    return data.get("result")

                error = TelegramAPIError(f"Call to '{method}' failed!", data, method, sent)
                delay = self._retry_delay(error, attempt)
                if delay is None or attempt >= max_attempts:
                    raise error

                logger.warning(
                    "Telegram %s, retry in %ss (attempt %d/%d) for %s",
                    error.error_code,
                    delay,
                    attempt,
                    max_attempts,
                    method,
                )
                await asyncio.sleep(delay)

            raise RuntimeError("retry loop ended unexpectedly")
        finally:
            duration_ms = int((time.perf_counter() - started) * 1000)
            logger.info(
                "telegram.result method=%s status=%s ms=%s bot=%s",
                method,
                status,
                duration_ms,
                hint,
            )

    async def get_me(self) -> dict[str, Any]:
        """getMe."""
        return await self.call("getMe")

    async def send_message(self, chat_id: int | str, text: str, **kwargs: Any) -> dict[str, Any]:
        """sendMessage. Extra keyword arguments set to ``None`` are dropped."""
        payload: Payload = {"chat_id": chat_id, "text": text}
        payload.update({key: value for key, value in kwargs.items() if value is not None})
        return await self.call("sendMessage", payload)
