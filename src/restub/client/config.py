# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for restub.

All values are fixed when the client is constructed and are only read
afterwards, which is what makes synthesized stubs safe to call from many
threads at once.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import urlsplit

import httpx

from ..codecs.base import CodecRegistry, default_registry
from ..exceptions import ConfigurationError
from ..protocols.hook import BeforeHook


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration shared by every stub a client synthesizes.
    """

    # === Target ===

    root: str
    """Base URL prefixed verbatim to every substituted path."""

    # === Dispatch ===

    before: BeforeHook | None = None
    """Hook called with (request, client) right before each send."""

    client_factory: Callable[[], httpx.Client] = httpx.Client
    """Creates the fresh transport client used by a single call."""

    raise_for_status: bool = False
    """Report non-2xx responses as HTTPStatusError instead of decoding them."""

    # === Codecs ===

    codecs: CodecRegistry = field(default_factory=default_registry)
    """Media type -> codec registry used for request and response bodies."""

    # === Validation ===

    strict: bool = False
    """Reject endpoints that declare no error output at scan time."""

    # === Metrics ===

    metrics_enabled: bool = True
    """Record per-endpoint call metrics."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.root:
            raise ConfigurationError("root must not be empty")
        parts = urlsplit(self.root)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"root must be an absolute http(s) URL, got {self.root!r}"
            )
        if not callable(self.client_factory):
            raise ConfigurationError("client_factory must be callable")
        if self.before is not None and not callable(self.before):
            raise ConfigurationError("before must be callable")


__all__ = ["ClientConfig"]
