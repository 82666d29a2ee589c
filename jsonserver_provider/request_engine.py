import asyncio
import logging
from typing import Any, Dict, Optional

from .config import ProviderConfig
from .exceptions import ApiResponseError

RETRY_CODES = frozenset({408, 500, 502, 503, 504, 522, 524})

CONTENT_TYPE = "application/json; charset=UTF-8"

logger = logging.getLogger(__name__)


class RequestEngine:
    """
    Executes one logical HTTP operation against a json-server style API.

    Each attempt resolves the bearer token, merges headers and calls the
    configured transport. Responses with a status in RETRY_CODES are retried
    with exponential backoff while more than one attempt remains; any other
    failure raises ApiResponseError carrying the transport's status text.
    Exceptions raised by the transport or the token getter propagate as-is
    and are never retried.

    The engine holds no per-request state, so one instance can serve any
    number of concurrent operations.
    """
    def __init__(self, config: ProviderConfig):
        self.config = config

    async def build_headers(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Default JSON content type and bearer token, overridden by `extra`."""
        token = await self.config.token_getter()
        headers = {
            "Content-Type": CONTENT_TYPE,
            # key kept even without a token; the transport drops None values
            "Authorization": f"Bearer {token}" if token else None,
        }
        if extra:
            headers.update(extra)
        return headers

    async def perform_request(self, url: str, options: Dict[str, Any], retries: int, backoff: Optional[float] = None) -> Any:
        """
        Send the request, retrying transient failures, and return the decoded JSON body.

        Args:
            url: Fully built request URL.
            options: Request options ('method', optional 'body' and 'headers');
                anything besides 'headers' reaches the transport untouched.
            retries: Total number of attempts allowed for this operation.
            backoff: Delay in milliseconds before the first retry; defaults to
                the configured backoff. Doubles after every retry.

        Raises:
            ApiResponseError: On a non-retryable status or when retries run out.
        """
        backoff = backoff or self.config.backoff
        method = options.get("method", "GET")
        while True:
            headers = await self.build_headers(options.get("headers"))
            logger.debug("%s %s (attempts left: %d)", method, url, retries)
            response = await self.config.client(url, {**options, "timeout": self.config.timeout, "headers": headers})
            if response.ok:
                return await response.json()
            if retries > 1 and response.status in RETRY_CODES:
                logger.warning(
                    "%s %s failed with %s %s; retrying in %sms (%d attempts left)",
                    method, url, response.status, response.status_text, backoff, retries - 1,
                )
                await asyncio.sleep(backoff / 1000)
                retries -= 1
                backoff *= 2
                continue
            logger.warning("%s %s failed with %s %s", method, url, response.status, response.status_text)
            raise ApiResponseError(response.status_text, response.status, url=url, method=method)
