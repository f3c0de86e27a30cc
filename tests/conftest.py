"""Shared fixtures: a transport spy standing in for the GDAX API."""

import base64

import httpx
import pytest

from gdax_api import AgentConfig, Credentials, RequestAgent

SECRET_B64 = base64.b64encode(b"secret").decode()


class TransportSpy:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json = {}
        self.content = None
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def spy():
    return TransportSpy()


@pytest.fixture
def credentials():
    return Credentials(public_key="k", private_key=SECRET_B64, passphrase="p")


@pytest.fixture
def make_agent(spy):
    def factory(credentials=None, config=None):
        return RequestAgent(
            credentials=credentials,
            config=config or AgentConfig(),
            transport=httpx.MockTransport(spy),
        )

    return factory
