# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Descriptor scanning and validation.

Walks a descriptor class once, derives an Endpoint and a ResultShape for
every decorated stub and validates them. Scanning never mutates the
descriptor; installation is the client's job.
"""

import inspect
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..exceptions import DescriptorError
from ..types.endpoint import Endpoint
from ..types.introspection import is_structured_type
from ..types.shape import ResultShape
from .decorators import get_endpoint

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class StubParameter:
    """One declared stub parameter (``self`` excluded)."""

    name: str
    index: int
    annotation: Any
    structured: bool


@dataclass(frozen=True)
class EndpointBinding:
    """
    Everything the synthesizer needs for one descriptor field.

    Attributes:
        name: Attribute name of the stub on the descriptor
        endpoint: HTTP metadata from the decorator
        shape: Layout of the declared outputs
        parameters: Declared parameters in positional order
        signature: Stub signature without ``self``
        function: The decorated stub (used for ``functools.wraps``)
    """

    name: str
    endpoint: Endpoint
    shape: ResultShape
    parameters: tuple[StubParameter, ...]
    signature: inspect.Signature
    function: Callable[..., Any]

    @property
    def body_parameter(self) -> StubParameter | None:
        return next((p for p in self.parameters if p.structured), None)


def scan(descriptor: Any, *, strict: bool = False) -> list[EndpointBinding]:
    """
    Scan a descriptor (instance or class) for endpoint stubs.

    Subclasses may override a base-class stub; the most derived definition
    wins, and a plain (undecorated) override removes the endpoint.

    Args:
        descriptor: Descriptor instance or class
        strict: Reject endpoints that declare no error output instead of
            warning about them

    Returns:
        One EndpointBinding per endpoint, in definition order

    Raises:
        DescriptorError: If any endpoint fails validation
    """
    cls = descriptor if isinstance(descriptor, type) else type(descriptor)
    seen: set[str] = set()
    bindings: list[EndpointBinding] = []

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            meta = get_endpoint(attr)
            if meta is None:
                continue
            bindings.append(_bind(name, attr, meta, strict))

    logger.debug(f"Scanned {cls.__name__}: {len(bindings)} endpoint(s)")
    return bindings


def _bind(name: str, func: Callable[..., Any], meta: Endpoint, strict: bool) -> EndpointBinding:
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError) as e:
        raise DescriptorError(f"Cannot resolve type hints of '{name}': {e}", field=name) from e

    signature = inspect.signature(func)
    declared = list(signature.parameters.values())[1:]  # drop self

    parameters = []
    for index, param in enumerate(declared):
        if param.kind not in _POSITIONAL_KINDS:
            raise DescriptorError(
                f"Endpoint '{name}' parameter '{param.name}' must be positional",
                field=name,
            )
        annotation = hints.get(param.name, Any)
        parameters.append(
            StubParameter(
                name=param.name,
                index=index,
                annotation=annotation,
                structured=is_structured_type(annotation),
            )
        )

    if sum(p.structured for p in parameters) > 1:
        raise DescriptorError(
            f"Endpoint '{name}' declares more than one structured (body) parameter",
            field=name,
        )

    _check_placeholders(name, meta, parameters)

    shape = ResultShape.from_annotation(
        hints.get("return", inspect.Signature.empty), field_name=name
    )
    if not shape.has_error_slot:
        if strict:
            raise DescriptorError(
                f"Endpoint '{name}' declares no error output", field=name
            )
        logger.warning(
            f"Endpoint '{name}' declares no error output; call failures will be discarded"
        )

    return EndpointBinding(
        name=name,
        endpoint=meta,
        shape=shape,
        parameters=tuple(parameters),
        signature=signature.replace(parameters=declared),
        function=func,
    )


def _check_placeholders(
    name: str, meta: Endpoint, parameters: list[StubParameter]
) -> None:
    by_key = {p.name: p for p in parameters}
    by_key.update({str(p.index): p for p in parameters})
    for placeholder in meta.placeholders:
        param = by_key.get(placeholder)
        if param is None:
            raise DescriptorError(
                f"Endpoint '{name}' path placeholder {{{placeholder}}} names no parameter",
                field=name,
            )
        if param.structured:
            raise DescriptorError(
                f"Endpoint '{name}' path placeholder {{{placeholder}}} names the body parameter",
                field=name,
            )


__all__ = ["EndpointBinding", "StubParameter", "scan"]
