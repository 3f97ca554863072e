"""
Shared fixtures for restub unit tests.

HTTP is never touched: every client is built with an httpx.MockTransport
that records the requests it receives.
"""

from collections.abc import Callable

import httpx
import pytest


class RecordingHandler:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200)

    def respond_with(self, response: Callable[[httpx.Request], httpx.Response]) -> None:
        self.response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def client_factory(handler: RecordingHandler) -> Callable[[], httpx.Client]:
    return lambda: httpx.Client(transport=httpx.MockTransport(handler))
