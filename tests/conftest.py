"""
conftest.py

Shared pytest fixtures and test helpers for the json-server data provider.
"""

import pytest


class FakeResponse:
    """Stand-in for transport responses: ok flag, status, status text, JSON body."""
    def __init__(self, status=200, body=None, status_text=None):
        self.status = status
        self.ok = 200 <= status < 300
        self.status_text = status_text if status_text is not None else ("OK" if self.ok else "Error")
        self._body = body

    async def json(self):
        return self._body


class FakeClient:
    """Async transport that records calls and replays queued responses (last one repeats)."""
    def __init__(self, *responses):
        self.responses = list(responses) or [FakeResponse()]
        self.calls = []

    async def __call__(self, url, options):
        self.calls.append((url, options))
        if len(self.responses) > 1:
            response = self.responses.pop(0)
        else:
            response = self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_client():
    """Factory fixture: fake_client(FakeResponse(...), ...) -> FakeClient."""
    return FakeClient


@pytest.fixture
def response():
    """Factory fixture for FakeResponse."""
    return FakeResponse
