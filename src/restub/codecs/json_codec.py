# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""JSON body codec backed by pydantic."""

from typing import Any

from pydantic import PydanticSchemaGenerationError, ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import DecodingError, EncodingError
from .base import type_adapter


class JSONCodec:
    """
    Encode and decode ``application/json`` bodies.

    Any value pydantic can serialize is accepted on encode (models,
    dataclasses, mappings). On decode the bytes are validated directly into
    the declared payload type, so ``list[User]`` or ``dict[str, int]`` work
    as well as models.
    """

    media_type = "application/json"

    def encode(self, value: Any) -> bytes:
        try:
            return type_adapter(type(value)).dump_json(value, by_alias=True)
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise EncodingError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            return type_adapter(target).validate_json(data)
        except ValidationError as e:
            raise DecodingError(
                f"Cannot decode JSON body into {target!r}: {e}",
                content_type=self.media_type,
            ) from e
        except PydanticSchemaGenerationError as e:
            raise DecodingError(
                f"Payload type {target!r} is not decodable: {e}",
                content_type=self.media_type,
            ) from e


__all__ = ["JSONCodec"]
