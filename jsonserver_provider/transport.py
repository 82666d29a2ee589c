import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import ApiConnectionError, ApiTimeoutError, ApiResponseError

logger = logging.getLogger(__name__)

Client = Callable[[str, Dict[str, Any]], Awaitable["ClientResponse"]]


class ClientResponse:
    """
    Transport response handed back to the request engine.

    Exposes the success flag, numeric status, status text and an awaitable
    JSON decoder, independent of the HTTP library underneath.
    """
    def __init__(self, response: requests.Response):
        self._response = response
        self.ok = response.ok
        self.status = response.status_code
        self.status_text = response.reason or ""

    async def json(self) -> Any:
        if not self._response.content:
            return None
        try:
            return self._response.json()
        except ValueError as e:
            raise ApiResponseError(
                f"Failed to deserialize response: {str(e)}",
                self.status,
                {"raw": self._response.text},
                url=self._response.url,
            )


def should_serialize_body(content_type: Optional[str]) -> bool:
    """A missing, JSON or text/* content type means the body goes out as a JSON string."""
    return (
        not content_type
        or content_type.startswith("application/json")
        or content_type.startswith("text/")
    )


def serialize_body(body: Any, headers: Optional[Dict[str, Any]]) -> Any:
    content_type = CaseInsensitiveDict(headers or {}).get("Content-Type")
    if body is not None and not isinstance(body, (str, bytes)) and should_serialize_body(content_type):
        return json.dumps(body)
    return body


def _send(method: str, url: str, body: Any, headers: Dict[str, Any], timeout: Optional[float]) -> requests.Response:
    try:
        return requests.request(
            method=method.upper(),
            url=url,
            data=body,
            headers=headers,
            timeout=timeout,
        )
    except requests.exceptions.Timeout as e:
        raise ApiTimeoutError(f"Request timed out: {str(e)}", url=url)
    except requests.exceptions.ConnectionError as e:
        raise ApiConnectionError(f"Connection error: {str(e)}", url=url)


async def default_client(url: str, options: Dict[str, Any]) -> ClientResponse:
    """
    JSON-aware transport built on requests.

    Args:
        url: Fully built request URL.
        options: 'method', 'timeout' (milliseconds), optional 'headers' and 'body'.

    Headers whose value is None are left out of the request. The blocking call
    runs in a worker thread so other requests on the event loop keep going.
    """
    headers = options.get("headers") or {}
    body = serialize_body(options.get("body"), headers)
    timeout_ms = options.get("timeout")
    timeout = timeout_ms / 1000 if timeout_ms else None
    method = options.get("method", "GET")
    logger.debug("%s %s", method, url)
    response = await asyncio.to_thread(
        _send,
        method,
        url,
        body,
        {k: v for k, v in headers.items() if v is not None},
        timeout,
    )
    return ClientResponse(response)
