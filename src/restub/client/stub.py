# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Stub synthesis.

Turns an EndpointBinding into a callable with the stub's declared signature.
Each call runs one full request cycle:

1. Bind arguments; capture the structured one as the body, substitute the
   others into the path template.
2. Encode the body with the codec for the endpoint's content type.
3. Build the httpx request.
4. Create a fresh transport client, run the before hook, send.
5. Hand the outcome to the ResultBuilder.

Failures in steps 1-4 short-circuit straight to step 5 and end up in the
declared error slot; nothing is raised to the caller.
"""

import enum
import functools
import logging
import time
from collections.abc import Callable, Sequence
from typing import Any
from urllib.parse import quote

import httpx

from ..codecs.base import normalize_media_type
from ..descriptor.scanner import EndpointBinding, StubParameter
from ..exceptions import (
    ContentTypeUnsupportedError,
    EncodingError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
)
from ..observability.metrics import EndpointMetrics
from ..types.introspection import is_structured_value
from ..types.response import ResponseEnvelope
from .config import ClientConfig
from .result import ResultBuilder

logger = logging.getLogger(__name__)


def format_path_value(value: Any) -> str:
    """String form of a path argument, before percent-escaping."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def resolve_path(
    template: str, parameters: Sequence[StubParameter], values: Sequence[Any]
) -> tuple[str, Any]:
    """
    Substitute scalar arguments into a path template.

    ``{index}`` and ``{name}`` tokens are replaced by the percent-escaped
    argument (``"a b"`` -> ``a%20b``). Structured arguments are not
    substituted; the single one allowed is returned as the body.

    Returns:
        Tuple of (resolved path, body or None)

    Raises:
        RequestConstructionError: If more than one structured value is passed
    """
    path = template
    body = None
    for param, value in zip(parameters, values):
        if is_structured_value(value):
            if body is not None:
                raise RequestConstructionError(
                    f"More than one structured argument; '{param.name}' would replace the body"
                )
            body = value
            continue
        segment = quote(format_path_value(value), safe="")
        path = path.replace(f"{{{param.index}}}", segment)
        path = path.replace(f"{{{param.name}}}", segment)
    return path, body


def _chain(error: BaseException, cause: BaseException) -> BaseException:
    error.__cause__ = cause
    return error


class StubSynthesizer:
    """
    Produces stubs for the endpoints of one client.

    The synthesizer only reads its configuration; the stubs it returns
    share no mutable state apart from the metrics collector.
    """

    def __init__(
        self,
        config: ClientConfig,
        metrics: EndpointMetrics | None = None,
    ) -> None:
        self.config = config
        self.metrics = metrics
        self.results = ResultBuilder(config.codecs)

    def synthesize(self, binding: EndpointBinding) -> Callable[..., Any]:
        """Return the callable implementing ``binding``."""

        @functools.wraps(binding.function)
        def stub(*args: Any, **kwargs: Any) -> Any:
            bound = binding.signature.bind(*args, **kwargs)
            bound.apply_defaults()
            values = [bound.arguments[p.name] for p in binding.parameters]
            return self.invoke(binding, values)

        stub.__signature__ = binding.signature  # type: ignore[attr-defined]
        return stub

    def invoke(self, binding: EndpointBinding, values: Sequence[Any]) -> Any:
        """Run one request cycle for ``binding`` with positional ``values``."""
        started = time.perf_counter()
        error, envelope = self._dispatch(binding, values)

        content_type = binding.endpoint.accept or envelope.content_type
        result = self.results.build(
            binding.shape, error, envelope.body, content_type, field_name=binding.name
        )

        if self.metrics is not None:
            shape = binding.shape
            reported = result[shape.error_index] if shape.has_error_slot else error
            self.metrics.record_call(
                binding.name,
                time.perf_counter() - started,
                reported,
                len(envelope.body or b""),
            )
        return binding.shape.pack(result)

    def _dispatch(
        self, binding: EndpointBinding, values: Sequence[Any]
    ) -> tuple[BaseException | None, ResponseEnvelope]:
        endpoint = binding.endpoint
        empty = ResponseEnvelope()

        try:
            path, body = resolve_path(endpoint.path_template, binding.parameters, values)
        except RequestConstructionError as e:
            return e, empty

        content = b""
        if endpoint.sends_body and body is not None:
            codec = self.config.codecs.lookup(endpoint.content_type)
            if codec is None:
                return ContentTypeUnsupportedError(
                    normalize_media_type(endpoint.content_type)
                ), empty
            try:
                content = codec.encode(body)
            except EncodingError as e:
                return e, empty

        headers = {"Content-Type": endpoint.content_type}
        if endpoint.accept:
            headers["Accept"] = endpoint.accept
        url = self.config.root + path
        try:
            request = httpx.Request(endpoint.method, url, content=content, headers=headers)
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            return _chain(RequestConstructionError(f"Cannot build request for {url!r}: {e}"), e), empty

        with self.config.client_factory() as client:
            if self.config.before is not None:
                self.config.before(request, client)
            self._apply_client_defaults(request, client)

            logger.debug(f"{binding.name}: {request.method} {request.url}")
            try:
                response = client.send(request)
            except httpx.HTTPError as e:
                error = TransportError(f"{request.method} {request.url} failed: {e}", request=request)
                return _chain(error, e), empty

        logger.debug(f"{binding.name}: {response.status_code} ({len(response.content)} bytes)")
        if self.config.raise_for_status and not response.is_success:
            return HTTPStatusError(
                f"{request.method} {request.url} returned {response.status_code}",
                status_code=response.status_code,
                request=request,
                response=response,
            ), ResponseEnvelope(status_code=response.status_code)

        return None, ResponseEnvelope(
            body=response.content,
            content_type=response.headers.get("Content-Type"),
            status_code=response.status_code,
        )

    @staticmethod
    def _apply_client_defaults(request: httpx.Request, client: httpx.Client) -> None:
        # The request was built outside the client, so its defaults are not merged yet
        for name, value in client.headers.items():
            if name not in request.headers:
                request.headers[name] = value
        request.extensions.setdefault("timeout", client.timeout.as_dict())


__all__ = ["StubSynthesizer", "format_path_value", "resolve_path"]
