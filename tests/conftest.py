import json
from types import SimpleNamespace

import pytest

from gameroom import config
from gameroom.signing import signer_for_user


class FakeResponse:
    def __init__(self, status_code=200, body=b"", json_body=None):
        self.status_code = status_code
        if json_body is not None:
            body = json.dumps(json_body).encode()
        self.content = body
        self.text = body.decode()

    def json(self):
        return json.loads(self.text)


class FakeContext:
    """In-memory stand-in for the validator's transaction context."""

    def __init__(self, state=None):
        self.state = dict(state or {})
        self.reads = []

    def get_state(self, addresses, timeout=None):
        self.reads.extend(addresses)
        return [SimpleNamespace(address=a, data=self.state[a])
                for a in addresses if a in self.state]

    def set_state(self, entries, timeout=None):
        self.state.update(entries)
        return list(entries)

    def delete_state(self, addresses, timeout=None):
        for address in addresses:
            self.state.pop(address, None)
        return list(addresses)


@pytest.fixture
def alice():
    return signer_for_user(config.DEMO_USERS["alice"])


@pytest.fixture
def bob():
    return signer_for_user(config.DEMO_USERS["bob"])


@pytest.fixture
def context():
    return FakeContext()


@pytest.fixture
def requests_calls(monkeypatch):
    """Record outgoing requests and answer them from ``responses``."""
    calls = []
    responses = []

    def fake(method):
        def send(url, **kwargs):
            calls.append(SimpleNamespace(method=method, url=url, **kwargs))
            response = responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return send

    def fake_request(method, url, **kwargs):
        return fake(method)(url, **kwargs)

    import requests
    monkeypatch.setattr(requests, "request", fake_request)
    monkeypatch.setattr(requests, "post", fake("POST"))
    monkeypatch.setattr(requests, "get", fake("GET"))
    return SimpleNamespace(calls=calls, responses=responses)
