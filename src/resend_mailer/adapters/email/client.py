"""Resend HTTP client returning SendResult values instead of raising.

Exactly one ``POST /emails`` per :meth:`ResendClient.send`. Network faults,
non-JSON bodies and API rejections all come back as :class:`SendFailure`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

import httpx
import orjson

from resend_mailer import __init__conf__
from resend_mailer.domain.results import SendFailure, SendResult, SendSuccess

from .config import DEFAULT_API_URL

logger = logging.getLogger(__name__)

_SEND_PATH = "/emails"


def interpret_response(status_code: int, content: bytes) -> SendResult:
    """Map a raw API response onto a SendResult.

    A JSON object with a non-empty string ``id`` is a success regardless of
    status. Otherwise the body's ``message`` is used, falling back to a
    description of the status code.

    Example:
        >>> interpret_response(200, b'{"id": "abc"}')
        SendSuccess(id='abc')
        >>> interpret_response(422, b'{"statusCode": 422, "message": "Missing `to` field."}')
        SendFailure(message='Missing `to` field.')
        >>> interpret_response(200, b'{}')
        SendFailure(message='Resend API returned HTTP 200 without a message id')
    """
    try:
        body: Any = orjson.loads(content)
    except orjson.JSONDecodeError:
        return SendFailure(f"Resend API returned HTTP {status_code} with a non-JSON body")

    if isinstance(body, dict):
        data = cast(dict[str, Any], body)
        message_id = data.get("id")
        if isinstance(message_id, str) and message_id:
            return SendSuccess(id=message_id)
        message = data.get("message")
        if isinstance(message, str) and message:
            return SendFailure(message)
    return SendFailure(f"Resend API returned HTTP {status_code} without a message id")


class ResendClient:
    """Send-API client bound to one API key.

    Args:
        api_key: Bearer token sent with every request. Not validated.
        base_url: API root, ``https://api.resend.com`` unless overridden.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport; tests pass ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"ResendClient(base_url={self._base_url!r}, timeout={self._timeout!r})"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": f"{__init__conf__.name}/{__init__conf__.version}",
        }

    def send(self, payload: Mapping[str, Any]) -> SendResult:
        """Issue one synchronous send request and interpret the response."""
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers=self._headers(),
            ) as client:
                response = client.post(_SEND_PATH, content=orjson.dumps(dict(payload)))
        except httpx.HTTPError as exc:
            logger.debug("Resend request failed", exc_info=True)
            return SendFailure(str(exc) or type(exc).__name__)

        result = interpret_response(response.status_code, response.content)
        logger.debug(
            "Resend responded",
            extra={"status_code": response.status_code, "accepted": isinstance(result, SendSuccess)},
        )
        return result


__all__ = ["ResendClient", "interpret_response"]
