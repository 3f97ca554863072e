# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Response envelope produced by the transport for a single call."""

from dataclasses import dataclass


@dataclass
class ResponseEnvelope:
    """
    The parts of an HTTP response the result builder needs.

    Attributes:
        body: Raw response bytes, or None if no body was read
        content_type: Value of the response ``Content-Type`` header, if any
        status_code: HTTP status code, if a response was received
    """

    body: bytes | None = None
    content_type: str | None = None
    status_code: int | None = None


__all__ = ["ResponseEnvelope"]
