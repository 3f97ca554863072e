# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Type-hint helpers shared by the scanner, the synthesizer and the codecs.

Everything here works on resolved annotations (the output of
``typing.get_type_hints``), never on strings.
"""

import dataclasses
import types
from collections import abc
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel

_NONE_TYPE = type(None)

_EMPTY_BUILTINS: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    list,
    dict,
    tuple,
    set,
    frozenset,
)

# Abstract containers map to the concrete type used for their zero value
_ABC_ZERO: dict[Any, type] = {
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Iterable: list,
    abc.Collection: list,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
    abc.Set: set,
    abc.MutableSet: set,
}


def strip_annotated(tp: Any) -> Any:
    """Return the underlying type of ``Annotated[T, ...]``."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """
    Split ``T | None`` into ``(T, True)``.

    Unions of several non-None members are returned unchanged, with the
    optional flag still reported.
    """
    tp = strip_annotated(tp)
    if not is_union(tp):
        return tp, tp is None or tp is _NONE_TYPE
    members = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
    optional = len(members) != len(get_args(tp))
    if len(members) == 1:
        return strip_annotated(members[0]), optional
    return Union[tuple(members)], optional  # type: ignore[return-value]


def is_error_type(tp: Any) -> bool:
    """True for ``Exception``, its subclasses, and their optional forms."""
    inner, _ = unwrap_optional(tp)
    if get_origin(inner) is not None:
        return False
    return isinstance(inner, type) and issubclass(inner, BaseException)


def is_structured_type(tp: Any) -> bool:
    """True when values of ``tp`` are sent as a request body, not a path segment."""
    inner, _ = unwrap_optional(tp)
    origin = get_origin(inner) or inner
    if not isinstance(origin, type):
        return False
    if issubclass(origin, BaseModel) or dataclasses.is_dataclass(origin):
        return True
    return issubclass(origin, (dict, abc.Mapping))


def is_structured_value(value: Any) -> bool:
    if isinstance(value, (BaseModel, abc.Mapping)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def zero_value(tp: Any) -> Any:
    """
    Return the zero value of a declared output type.

    Builtin scalars and containers get their empty value (``""``, ``0``,
    ``[]``...). Optionals, models, dataclasses and anything else get None.
    """
    inner, optional = unwrap_optional(tp)
    if optional or inner is Any:
        return None
    origin = get_origin(inner) or inner
    if origin in _ABC_ZERO:
        return _ABC_ZERO[origin]()
    if origin in _EMPTY_BUILTINS:
        return origin()
    return None


def sequence_item_type(tp: Any) -> Any | None:
    """Return ``T`` for ``list[T]``-like annotations, else None."""
    inner, _ = unwrap_optional(tp)
    origin = get_origin(inner)
    if origin in (list, set, frozenset, abc.Sequence, abc.MutableSequence):
        args = get_args(inner)
        return args[0] if args else Any
    if origin is tuple:
        args = get_args(inner)
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
    if inner in (list, set, frozenset):
        return Any
    return None


__all__ = [
    "is_error_type",
    "is_structured_type",
    "is_structured_value",
    "sequence_item_type",
    "strip_annotated",
    "unwrap_optional",
    "zero_value",
]
