# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the pre-dispatch customization hook."""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class BeforeHook(Protocol):
    """
    Callable invoked just before every request is sent.

    The hook may mutate the request (headers, URL, body) and the freshly
    created transport client (auth, timeout, default headers). Retries,
    timeouts and authentication are configured here rather than in the core.

    Example:
        def add_token(request: httpx.Request, client: httpx.Client) -> None:
            request.headers["Authorization"] = f"Bearer {token}"
            client.timeout = httpx.Timeout(5.0)
    """

    def __call__(self, request: httpx.Request, client: httpx.Client) -> None: ...
