# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""restub - Declarative HTTP clients from annotated service descriptors.

Describe a remote API as a class of typed, decorated method stubs; restub
scans the class once and installs a working implementation of every stub.

Key Features:
    - Path templates with positional ({0}) or named ({user_id}) placeholders
    - JSON and XML request/response bodies, pluggable codecs
    - Results shaped by the stub's return annotation: (payload, error)
    - Build-time validation of descriptors
    - Pre-dispatch hook for auth, headers and timeouts
    - Optional Prometheus metrics

Quick Start:
    >>> from pydantic import BaseModel
    >>> from restub import Client, endpoint
    >>>
    >>> class User(BaseModel):
    ...     id: int = 0
    ...     name: str = ""
    >>>
    >>> class UserService:
    ...     @endpoint("/users/{0}")
    ...     def get_user(self, user_id: int) -> tuple[User, Exception | None]: ...
    ...
    ...     @endpoint("/users", method="POST")
    ...     def create_user(self, user: User) -> Exception | None: ...
    >>>
    >>> users = Client("https://api.example.com").create(UserService())
    >>> user, err = users.get_user(7)

Main Exports:
    - Client, ClientConfig: Client and its configuration
    - endpoint (and get/post/put/patch/delete): Stub decorators
    - CodecRegistry, JSONCodec, XMLCodec: Content negotiation
    - Endpoint, ResultShape: Derived endpoint metadata
    - RestubError and subclasses: Error taxonomy

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import Client, ClientConfig, ResultBuilder, StubSynthesizer
from .codecs import CodecRegistry, JSONCodec, XMLCodec, default_registry
from .descriptor import (
    EndpointBinding,
    delete,
    endpoint,
    get,
    patch,
    post,
    put,
    scan,
)
from .exceptions import (
    ConfigurationError,
    ContentTypeUnsupportedError,
    DecodingError,
    DescriptorError,
    EncodingError,
    HTTPStatusError,
    NotBoundError,
    RequestConstructionError,
    RestubError,
    TransportError,
)
from .protocols import BeforeHook, CodecProtocol
from .types import Endpoint, ResponseEnvelope, ResultShape

__all__ = [
    "BeforeHook",
    # Client
    "Client",
    "ClientConfig",
    "CodecProtocol",
    # Codecs
    "CodecRegistry",
    "ConfigurationError",
    "ContentTypeUnsupportedError",
    "DecodingError",
    "DescriptorError",
    "EncodingError",
    # Types
    "Endpoint",
    "EndpointBinding",
    "HTTPStatusError",
    "JSONCodec",
    "NotBoundError",
    "RequestConstructionError",
    "ResponseEnvelope",
    # Exceptions
    "RestubError",
    "ResultBuilder",
    "ResultShape",
    "StubSynthesizer",
    "TransportError",
    "XMLCodec",
    "default_registry",
    "delete",
    # Descriptor
    "endpoint",
    "get",
    "patch",
    "post",
    "put",
    "scan",
]
