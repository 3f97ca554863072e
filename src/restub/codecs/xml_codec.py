# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
XML body codec backed by xmltodict and pydantic.

Encoding writes one root element named after the value's class, with one
child element per field. Sequences become repeated elements:

    User(id=7, tags=["a", "b"])  ->  <User><id>7</id><tags>a</tags><tags>b</tags></User>

Decoding parses the document with xmltodict, drops the root element and
validates the remaining dict into the target type with pydantic, which takes
care of coercing element text (``"7"``) into the declared field types.
"""

import dataclasses
import typing
from collections.abc import Mapping
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict
from pydantic import BaseModel, PydanticSchemaGenerationError, ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import DecodingError, EncodingError
from ..types.introspection import is_structured_type, sequence_item_type, unwrap_optional
from .base import type_adapter

# Nesting depth explored when looking for list-typed fields
_MAX_SCHEMA_DEPTH = 8


def _to_xml_data(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _to_xml_data(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_to_xml_data(item) for item in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _field_types(tp: Any) -> dict[str, Any]:
    """Element name -> declared type for a model or dataclass."""
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        return {
            (info.alias or name): info.annotation for name, info in tp.model_fields.items()
        }
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        hints = typing.get_type_hints(tp)
        return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(tp)}
    return {}


def _list_paths(tp: Any, prefix: tuple[str, ...] = (), depth: int = 0) -> set[tuple[str, ...]]:
    """Element paths (relative to the root) whose values must always be lists."""
    paths: set[tuple[str, ...]] = set()
    if depth > _MAX_SCHEMA_DEPTH:
        return paths
    inner, _ = unwrap_optional(tp)
    for name, annotation in _field_types(inner).items():
        path = (*prefix, name)
        item_type = sequence_item_type(annotation)
        if item_type is not None:
            paths.add(path)
            paths |= _list_paths(item_type, path, depth + 1)
        elif is_structured_type(annotation):
            paths |= _list_paths(annotation, path, depth + 1)
    return paths


class XMLCodec:
    """
    Encode and decode ``application/xml`` and ``text/xml`` bodies.

    Mappings cannot be encoded because they have no class name to use as the
    root element; send a model or dataclass instead.
    """

    media_type = "application/xml"

    def encode(self, value: Any) -> bytes:
        if isinstance(value, Mapping):
            raise EncodingError(
                "XML bodies need a named root element; send a model or dataclass, not a mapping"
            )
        try:
            data = type_adapter(type(value)).dump_python(value, mode="json", by_alias=True)
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise EncodingError(f"Cannot encode {type(value).__name__} as XML: {e}") from e
        document = xmltodict.unparse(
            {type(value).__name__: _to_xml_data(data)}, full_document=False
        )
        return document.encode("utf-8")

    def decode(self, data: bytes, target: Any) -> Any:
        inner, _ = unwrap_optional(target)
        item_type = sequence_item_type(inner)
        list_paths = _list_paths(item_type if item_type is not None else inner)

        def force_list(path: Any, key: str, value: Any) -> bool:
            if not path:
                return False
            relative = tuple(name for name, _ in path[1:]) + (key,)
            if item_type is not None:
                # Root is a list: its direct children are the items
                return len(relative) == 1 or relative[1:] in list_paths
            return relative in list_paths

        try:
            parsed = xmltodict.parse(data, attr_prefix="", force_list=force_list)
        except ExpatError as e:
            raise DecodingError(f"Malformed XML body: {e}", content_type=self.media_type) from e

        root = next(iter(parsed.values())) if parsed else None
        if item_type is not None:
            root = next(iter(root.values()), []) if isinstance(root, Mapping) else []
        elif root is None and is_structured_type(inner):
            root = {}

        try:
            return type_adapter(target).validate_python(root)
        except ValidationError as e:
            raise DecodingError(
                f"Cannot decode XML body into {target!r}: {e}", content_type=self.media_type
            ) from e
        except PydanticSchemaGenerationError as e:
            raise DecodingError(
                f"Payload type {target!r} is not decodable: {e}", content_type=self.media_type
            ) from e


__all__ = ["XMLCodec"]
