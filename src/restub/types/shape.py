# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Result shape derivation.

A ResultShape records how a stub's declared output signature decomposes into
an error slot and a payload slot, so that results can be assembled without
looking at type hints again on every call.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, get_args, get_origin

from ..exceptions import DescriptorError
from .introspection import is_error_type, strip_annotated, zero_value

ABSENT = -1


@dataclass(frozen=True)
class ResultShape:
    """
    Layout of an endpoint's declared outputs.

    Attributes:
        arity: Number of declared outputs (0, 1 or 2).
        output_types: Declared type of every output, in order.
        error_index: Position of the error output, or ABSENT.
        payload_index: Position of the payload output, or ABSENT.
        payload_type: Declared type of the payload output, or None.
    """

    arity: int
    output_types: tuple[Any, ...] = field(default=())
    error_index: int = ABSENT
    payload_index: int = ABSENT
    payload_type: Any = None

    @property
    def has_error_slot(self) -> bool:
        return self.error_index != ABSENT

    @property
    def has_payload_slot(self) -> bool:
        return self.payload_index != ABSENT

    @classmethod
    def from_annotation(cls, annotation: Any, field_name: str | None = None) -> "ResultShape":
        """
        Derive a shape from a return annotation.

        ``tuple[A, B]`` declares two outputs, ``None`` declares none, and any
        other annotation declares exactly one.

        Raises:
            DescriptorError: If the annotation is missing, variadic, or
                declares more than one error or more than one payload.
        """
        if annotation is inspect.Signature.empty:
            raise DescriptorError(
                f"Endpoint '{field_name}' has no return annotation", field=field_name
            )

        annotation = strip_annotated(annotation)
        if annotation is None or annotation is type(None):
            outputs: tuple[Any, ...] = ()
        elif get_origin(annotation) is tuple:
            outputs = get_args(annotation)
            if outputs == ((),):
                outputs = ()
            if Ellipsis in outputs:
                raise DescriptorError(
                    f"Endpoint '{field_name}' declares a variadic tuple result",
                    field=field_name,
                )
        else:
            outputs = (annotation,)

        error_index = ABSENT
        payload_index = ABSENT
        for index, output in enumerate(outputs):
            if is_error_type(output):
                if error_index != ABSENT:
                    raise DescriptorError(
                        f"Endpoint '{field_name}' declares more than one error output",
                        field=field_name,
                    )
                error_index = index
            else:
                if payload_index != ABSENT:
                    raise DescriptorError(
                        f"Endpoint '{field_name}' declares more than one payload output",
                        field=field_name,
                    )
                payload_index = index

        return cls(
            arity=len(outputs),
            output_types=tuple(outputs),
            error_index=error_index,
            payload_index=payload_index,
            payload_type=outputs[payload_index] if payload_index != ABSENT else None,
        )

    def zeros(self) -> list[Any]:
        """A fresh list holding the zero value of every output."""
        return [zero_value(tp) for tp in self.output_types]

    def pack(self, values: tuple[Any, ...]) -> Any:
        """Convert a result tuple to the stub's return convention."""
        if self.arity == 0:
            return None
        if self.arity == 1:
            return values[0]
        return values


__all__ = ["ABSENT", "ResultShape"]
