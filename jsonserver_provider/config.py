from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .auth import StaticTokenGetter, TokenGetter, no_token
from .exceptions import ConfigError
from .querystring import render_querystring
from .transport import Client, default_client

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_RETRIES = 3
DEFAULT_BACKOFF_MS = 300


def default_response_parser(body: Any) -> Any:
    """Unwrap a {'data': ...} envelope, otherwise return the body as-is."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _env_int(name: str) -> Optional[int]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"'{name}' must be an integer, got {raw!r}")


@dataclass(frozen=True)
class ProviderConfig:
    """Settings shared by every request a provider issues.

    Timeout and backoff are in milliseconds. Falsy timeout, retries or backoff
    fall back to the defaults (5000, 3, 300).
    """

    api_url: str
    timeout: int = DEFAULT_TIMEOUT_MS
    retries: int = DEFAULT_RETRIES
    backoff: int = DEFAULT_BACKOFF_MS
    token_getter: TokenGetter = field(default=no_token, repr=False)
    response_parser: Callable[[Any], Any] = field(default=default_response_parser, repr=False)
    querystring_renderer: Callable[..., str] = field(default=render_querystring, repr=False)
    client: Client = field(default=default_client, repr=False)

    def __post_init__(self) -> None:
        if not self.api_url or not isinstance(self.api_url, str):
            raise ConfigError("api_url is required")
        # frozen: defaults for falsy values go through object.__setattr__
        object.__setattr__(self, "timeout", self.timeout or DEFAULT_TIMEOUT_MS)
        object.__setattr__(self, "retries", self.retries or DEFAULT_RETRIES)
        object.__setattr__(self, "backoff", self.backoff or DEFAULT_BACKOFF_MS)
        object.__setattr__(self, "token_getter", self.token_getter or no_token)
        object.__setattr__(self, "response_parser", self.response_parser or default_response_parser)
        object.__setattr__(self, "querystring_renderer", self.querystring_renderer or render_querystring)
        object.__setattr__(self, "client", self.client or default_client)
        if self.timeout < 0:
            raise ConfigError("timeout must not be negative")
        if self.retries < 1:
            raise ConfigError("retries must be at least 1")
        if self.backoff < 0:
            raise ConfigError("backoff must not be negative")

    @staticmethod
    def from_env(prefix: str = "JSON_SERVER_", **overrides: Any) -> Optional["ProviderConfig"]:
        """Create a config from environment variables.

        Reads <prefix>API_URL, <prefix>TIMEOUT_MS, <prefix>RETRIES,
        <prefix>BACKOFF_MS and <prefix>TOKEN. Returns None when no API URL is set.
        Keyword overrides (e.g. client, response_parser) are passed through.
        """
        base = (os.getenv(f"{prefix}API_URL") or "").strip()
        if not base:
            return None
        settings: Dict[str, Any] = {"api_url": base.rstrip("/")}
        for key, env in (("timeout", "TIMEOUT_MS"), ("retries", "RETRIES"), ("backoff", "BACKOFF_MS")):
            value = _env_int(f"{prefix}{env}")
            if value is not None:
                settings[key] = value
        token = (os.getenv(f"{prefix}TOKEN") or "").strip()
        if token:
            settings["token_getter"] = StaticTokenGetter(token)
        settings.update(overrides)
        return ProviderConfig(**settings)

    def as_dict(self) -> Dict[str, Any]:
        """Return the scalar settings as a dictionary."""
        return {
            "api_url": self.api_url,
            "timeout": self.timeout,
            "retries": self.retries,
            "backoff": self.backoff,
        }
