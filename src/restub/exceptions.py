# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the restub library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from RestubError, making it easy to catch every
restub-related exception with a single except clause.

Two families exist:

- Setup errors (DescriptorError, ConfigurationError, NotBoundError) are
  raised to the caller when a descriptor is scanned or misused.
- Call errors (EncodingError, RequestConstructionError, TransportError,
  DecodingError) are never raised by a synthesized stub. They are placed in
  the stub's declared error slot instead.
"""

from typing import Any


class RestubError(Exception):
    """Base exception for all restub errors.

    Example:
        try:
            client.create(service)
        except RestubError as e:
            logger.error(f"restub error: {e}")
    """

    pass


class ConfigurationError(RestubError):
    """Raised when client configuration is invalid.

    Common causes include:
    - An empty root URL
    - A root URL without an http or https scheme
    - A client factory that is not callable
    """

    pass


class DescriptorError(RestubError):
    """Raised when a service descriptor fails validation at scan time.

    Validation rejects descriptors whose endpoints could not be called
    unambiguously: more than one error output, more than one payload output,
    more than one structured (body) parameter, or a path placeholder that
    names no parameter.

    Attributes:
        field: Name of the offending descriptor field. May be None if the
            error concerns the descriptor as a whole.

    Example:
        try:
            client.create(UserService())
        except DescriptorError as e:
            raise SystemExit(f"bad endpoint {e.field}: {e}")
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotBoundError(RestubError):
    """Raised when an endpoint stub is called before it was synthesized.

    Decorated stubs have no behaviour of their own; Client.create() replaces
    them on the descriptor instance.
    """

    def __init__(self, field: str):
        super().__init__(
            f"Endpoint '{field}' is not bound; pass the descriptor to Client.create()"
        )
        self.field = field


class EncodingError(RestubError):
    """The request body could not be serialized.

    Returned before any network access takes place.
    """

    pass


class ContentTypeUnsupportedError(EncodingError):
    """No codec is registered for the request content type.

    Attributes:
        content_type: The normalized media type that had no codec.
    """

    def __init__(self, content_type: str):
        super().__init__(f"ContentType ({content_type}) not supported.")
        self.content_type = content_type


class RequestConstructionError(RestubError):
    """The outbound request could not be built (bad URL, path or arguments)."""

    pass


class TransportError(RestubError):
    """The transport failed to deliver the request or read the response.

    Attributes:
        request: The request that was being sent, if it was built.
    """

    def __init__(self, message: str, request: Any | None = None):
        super().__init__(message)
        self.request = request


class HTTPStatusError(TransportError):
    """The server answered with a non-2xx status.

    Only produced when ClientConfig.raise_for_status is enabled.

    Attributes:
        status_code: The HTTP status code of the response.
        response: The response object.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        request: Any | None = None,
        response: Any | None = None,
    ):
        super().__init__(message, request=request)
        self.status_code = status_code
        self.response = response


class DecodingError(RestubError):
    """The response body could not be parsed into the declared payload type.

    Attributes:
        content_type: The media type the body was decoded as.
    """

    def __init__(self, message: str, content_type: str | None = None):
        super().__init__(message)
        self.content_type = content_type


__all__ = [
    "ConfigurationError",
    "ContentTypeUnsupportedError",
    "DecodingError",
    "DescriptorError",
    "EncodingError",
    "HTTPStatusError",
    "NotBoundError",
    "RequestConstructionError",
    "RestubError",
    "TransportError",
]
