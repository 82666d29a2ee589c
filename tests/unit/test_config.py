import asyncio

import pytest

from jsonserver_provider.auth import StaticTokenGetter, no_token
from jsonserver_provider.config import ProviderConfig, default_response_parser
from jsonserver_provider.exceptions import ConfigError
from jsonserver_provider.querystring import render_querystring
from jsonserver_provider.transport import default_client

def test_defaults():
    config = ProviderConfig(api_url="http://test")
    assert (config.timeout, config.retries, config.backoff) == (5000, 3, 300)
    assert config.token_getter is no_token
    assert config.response_parser is default_response_parser
    assert config.querystring_renderer is render_querystring
    assert config.client is default_client

def test_falsy_values_fall_back_to_defaults():
    config = ProviderConfig(api_url="http://test", timeout=0, retries=0, backoff=None, client=None)
    assert (config.timeout, config.retries, config.backoff) == (5000, 3, 300)
    assert config.client is default_client

def test_config_is_immutable():
    config = ProviderConfig(api_url="http://test")
    with pytest.raises(AttributeError):
        config.retries = 10

def test_invalid_values_rejected():
    with pytest.raises(ConfigError):
        ProviderConfig(api_url="")
    with pytest.raises(ConfigError):
        ProviderConfig(api_url="http://test", retries=-1)
    with pytest.raises(ValueError):
        ProviderConfig(api_url="http://test", backoff=-5)

def test_default_response_parser():
    assert default_response_parser({"data": [1]}) == [1]
    assert default_response_parser({"data": None}) is None
    assert default_response_parser({"id": 1}) == {"id": 1}
    assert default_response_parser([1, 2]) == [1, 2]
    assert default_response_parser(None) is None

def test_from_env(monkeypatch):
    monkeypatch.setenv("JSON_SERVER_API_URL", "http://localhost:3000/ ")
    monkeypatch.setenv("JSON_SERVER_TIMEOUT_MS", "2500")
    monkeypatch.setenv("JSON_SERVER_RETRIES", "5")
    monkeypatch.setenv("JSON_SERVER_BACKOFF_MS", "100")
    monkeypatch.setenv("JSON_SERVER_TOKEN", "secret")
    config = ProviderConfig.from_env()
    assert config.as_dict() == {"api_url": "http://localhost:3000", "timeout": 2500, "retries": 5, "backoff": 100}
    assert isinstance(config.token_getter, StaticTokenGetter)
    assert asyncio.run(config.token_getter()) == "secret"

def test_from_env_without_url_returns_none(monkeypatch):
    monkeypatch.delenv("JSON_SERVER_API_URL", raising=False)
    assert ProviderConfig.from_env() is None

def test_from_env_custom_prefix_and_overrides(monkeypatch):
    monkeypatch.setenv("BLOG_API_URL", "http://blog")
    parser = lambda body: body
    config = ProviderConfig.from_env(prefix="BLOG_", response_parser=parser)
    assert config.api_url == "http://blog"
    assert config.response_parser is parser
    assert config.token_getter is no_token

def test_from_env_rejects_bad_integers(monkeypatch):
    monkeypatch.setenv("JSON_SERVER_API_URL", "http://test")
    monkeypatch.setenv("JSON_SERVER_RETRIES", "lots")
    with pytest.raises(ConfigError):
        ProviderConfig.from_env()

def test_static_token_getter():
    assert asyncio.run(StaticTokenGetter("abc")()) == "abc"
    assert asyncio.run(StaticTokenGetter("")()) is None
    assert "abc" not in repr(StaticTokenGetter("abc"))
    assert asyncio.run(no_token()) is None
