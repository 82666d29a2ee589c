"""
json-server Data Provider
=========================

This package adapts a generic async CRUD data-provider contract to the REST
dialect of json-server style APIs: resources addressed by path, pagination,
sorting and filtering as query parameters, and conventional HTTP verbs for
mutations. Requests carry an optional bearer token and transient failures are
retried with exponential backoff.
"""

from .auth import StaticTokenGetter, no_token
from .config import ProviderConfig, default_response_parser
from .data_provider import DataProvider
from .exceptions import ApiError, ApiConnectionError, ApiTimeoutError, ApiResponseError, ConfigError, TransportError
from .provider import JsonServerDataProvider, create_provider
from .querystring import render_querystring
from .request_engine import RETRY_CODES, RequestEngine
from .transport import ClientResponse, default_client

__version__ = '0.1.0'
