# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Body codecs and content negotiation.

Exported classes:
    CodecRegistry: Media type -> codec mapping with suffix fallback.
    JSONCodec: ``application/json`` codec (pydantic).
    XMLCodec: ``application/xml`` / ``text/xml`` codec (xmltodict + pydantic).
"""

from .base import CodecRegistry, default_registry, normalize_media_type, type_adapter
from .json_codec import JSONCodec
from .xml_codec import XMLCodec

__all__ = [
    "CodecRegistry",
    "JSONCodec",
    "XMLCodec",
    "default_registry",
    "normalize_media_type",
    "type_adapter",
]
