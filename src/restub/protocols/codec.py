# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for body codecs."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CodecProtocol(Protocol):
    """
    Protocol for request/response body codecs.

    A codec is registered for one or more media types in a CodecRegistry
    and selected by the endpoint's content type.
    """

    def encode(self, value: Any) -> bytes:
        """
        Serialize a structured value to request body bytes.

        Raises:
            EncodingError: If the value cannot be represented
        """
        ...

    def decode(self, data: bytes, target: Any) -> Any:
        """
        Parse response body bytes into an instance of ``target``.

        Raises:
            DecodingError: If the bytes do not describe a ``target`` value
        """
        ...
