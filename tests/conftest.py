"""Shared fixtures: settings without env files, a replaying transport, a client."""

import json
from collections import deque

import pytest

from trellolib import defaults
from trellolib.client import Client
from trellolib.configuration import TrelloSettings
from trellolib.logging import configure_logging
from trellolib.net.request import Response


class FakeTransport:
    """Transport recording every request and replaying queued responses."""

    name = "fake"

    def __init__(self):
        self.requests = []
        self.responses = deque()
        self.closed = False

    def queue(self, body=None, code=200):
        if body is None:
            text = ""
        elif isinstance(body, str):
            text = body
        else:
            text = json.dumps(body)
        self.responses.append(Response(code=code, body=text))
        return self

    def send(self, request):
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.verb} {request.url}")
        return self.responses.popleft()

    def close(self):
        self.closed = True

    @property
    def last_request(self):
        return self.requests[-1]


def make_settings(**overrides):
    values = {
        "developer_public_key": "test-key",
        "member_token": "test-token",
    }
    values.update(overrides)
    return TrelloSettings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def oauth_settings():
    return TrelloSettings(
        _env_file=None,
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        oauth_token="oauth-token",
        oauth_token_secret="oauth-token-secret",
    )


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def transport_factory():
    return FakeTransport


@pytest.fixture
def client(settings, transport):
    return Client(settings, transport=transport)


@pytest.fixture(scope="session", autouse=True)
def suppress_logging():
    configure_logging()


@pytest.fixture(autouse=True)
def reset_default_client():
    defaults.reset()
    yield
    defaults.reset()
