import logging
from typing import Any, Callable, Dict, Optional

from .auth import TokenGetter
from .config import ProviderConfig
from .data_provider import DataProvider
from .exceptions import ConfigError
from .request_engine import RequestEngine
from .transport import Client


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k != "id"}


class JsonServerDataProvider(DataProvider):
    """
    Data provider for json-server style REST APIs.

    Configuration options:
    - api_url: Base URL of the API, without a trailing slash.
    - timeout: Per-attempt timeout in milliseconds (default 5000).
    - retries: Attempts per operation (default 3).
    - backoff: Delay before the first retry in milliseconds (default 300), doubled after each retry.
    - token_getter: Async callable returning a bearer token or None.
    - response_parser: Extracts the payload from a decoded body (default: unwrap 'data' if present).
    - querystring_renderer: Builds the list query string (default: render_querystring).
    - client: Async transport callable (default: requests-backed default_client).

    Example usage:
        from jsonserver_provider import create_provider

        provider = create_provider("http://localhost:3000")
        posts = await provider.list_many("posts", {"filters": {"author": "ann"}, "sort": "title", "limit": 10})
        print(posts["data"])
    """
    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[int] = None,
        retries: Optional[int] = None,
        backoff: Optional[int] = None,
        client: Optional[Client] = None,
        token_getter: Optional[TokenGetter] = None,
        response_parser: Optional[Callable[[Any], Any]] = None,
        querystring_renderer: Optional[Callable[..., str]] = None,
        config: Optional[ProviderConfig] = None,
    ):
        options = {
            "api_url": api_url,
            "timeout": timeout,
            "retries": retries,
            "backoff": backoff,
            "client": client,
            "token_getter": token_getter,
            "response_parser": response_parser,
            "querystring_renderer": querystring_renderer,
        }
        if config is None:
            config = ProviderConfig(**options)
        elif any(value is not None for value in options.values()):
            raise ConfigError("Pass either keyword options or a config, not both")
        self.config = config
        self.engine = RequestEngine(config)
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "JsonServerDataProvider":
        return cls(config=config)

    @property
    def api_url(self) -> str:
        return self.config.api_url

    def get_config(self) -> Dict[str, Any]:
        """Return the current configuration as a dictionary."""
        return self.config.as_dict()

    async def _request(self, url: str, options: Dict[str, Any]) -> Any:
        return await self.engine.perform_request(url, options, self.config.retries)

    def _envelope(self, body: Any) -> Dict[str, Any]:
        return {"data": self.config.response_parser(body)}

    async def list_many(self, resource: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params = params or {}
        base = f"{self.api_url}/{resource}"
        qs = self.config.querystring_renderer(
            params.get("filters", {}),
            params.get("sort", ""),
            params.get("order", ""),
            params.get("offset", 0),
            params.get("limit"),
        )
        url = f"{base}?{qs}" if qs else base
        res = await self._request(url, {"method": "GET"})
        return self._envelope(res)

    async def get_one(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/{resource}/{params['id']}"
        res = await self._request(url, {"method": "GET"})
        return self._envelope(res)

    async def create_one(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/{resource}"
        res = await self._request(url, {"method": "POST", "body": _without_id(data)})
        return self._envelope(res)

    async def update_one(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/{resource}/{data['id']}"
        res = await self._request(url, {"method": "PATCH", "body": _without_id(data)})
        return self._envelope(res)

    async def update_many(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/{resource}"
        res = await self._request(url, {"method": "PATCH", "body": data})
        return self._envelope(res)

    async def delete_one(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        resource_id = params["id"]
        url = f"{self.api_url}/{resource}/{resource_id}"
        await self._request(url, {"method": "DELETE"})
        self.logger.debug("Deleted %s/%s", resource, resource_id)
        return {"data": {"id": resource_id}}


def create_provider(api_url: str, **options: Any) -> JsonServerDataProvider:
    """Build a JsonServerDataProvider; keyword options as for its constructor."""
    return JsonServerDataProvider(api_url, **options)
