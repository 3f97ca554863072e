"""
Fixtures for end-to-end tests.

A small in-process user API served through httpx.MockTransport stands in
for the remote service, so the tests run the whole stack offline.
"""

import json
import re
from collections.abc import Callable

import httpx
import pytest



class FakeUserAPI:
    """Tiny user API: /users, /users/{id}, /echo, /plain, /bare."""

    def __init__(self) -> None:
        self.users: dict[int, dict] = {7: {"id": 7, "name": "Ada"}}
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        path = request.url.path
        match = re.fullmatch(r"/users/(\d+)", path)
        if match and request.method == "GET":
            user = self.users.get(int(match.group(1)))
            if user is None:
                return httpx.Response(404, json={"detail": "not found"})
            return httpx.Response(200, json=user)
        if path == "/users" and request.method == "POST":
            user = json.loads(request.content)
            self.users[user["id"]] = user
            return httpx.Response(201)
        if path == "/echo":
            return httpx.Response(
                200,
                content=request.content,
                headers={"Content-Type": request.headers["Content-Type"]},
            )
        if path == "/plain":
            return httpx.Response(200, text="hello", headers={"Content-Type": "text/plain"})
        if path == "/bare":
            return httpx.Response(200, content=b'{"id": 3, "name": "Bare"}')
        return httpx.Response(404)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api() -> FakeUserAPI:
    return FakeUserAPI()


@pytest.fixture
def client_factory(api: FakeUserAPI) -> Callable[[], httpx.Client]:
    return lambda: httpx.Client(transport=httpx.MockTransport(api))
