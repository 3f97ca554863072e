# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Content negotiation: media type normalization and the codec registry.
"""

import functools
import logging
import threading
from typing import Any

from pydantic import TypeAdapter

from ..protocols.codec import CodecProtocol
from ..types.endpoint import DEFAULT_CONTENT_TYPE

logger = logging.getLogger(__name__)


def normalize_media_type(content_type: str | None) -> str:
    """
    Reduce a ``Content-Type`` value to its bare media type.

    Parameters after ``;`` are dropped and the result is lower-cased. An
    empty or missing value means JSON.

    Example:
        >>> normalize_media_type("Application/JSON; charset=utf-8")
        'application/json'
    """
    if not content_type:
        return DEFAULT_CONTENT_TYPE
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type or DEFAULT_CONTENT_TYPE


@functools.lru_cache(maxsize=256)
def _cached_adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def type_adapter(tp: Any) -> TypeAdapter[Any]:
    """Return a (cached, when hashable) pydantic TypeAdapter for ``tp``."""
    try:
        return _cached_adapter(tp)
    except TypeError:
        # Unhashable annotation metadata
        return TypeAdapter(tp)


class CodecRegistry:
    """
    Maps media types to codecs.

    Lookup is by exact normalized media type first, then by structured
    syntax suffix (``application/problem+json`` falls back to the codec
    registered for ``application/json``).

    Registration is guarded by a lock; lookups are plain dict reads and are
    safe from any thread once setup is complete.
    """

    _SUFFIX_FALLBACKS = {
        "+json": "application/json",
        "+xml": "application/xml",
    }

    def __init__(self, codecs: dict[str, CodecProtocol] | None = None) -> None:
        self._codecs: dict[str, CodecProtocol] = {}
        self._lock = threading.Lock()
        for media_type, codec in (codecs or {}).items():
            self.register(media_type, codec)

    def register(self, media_type: str, codec: CodecProtocol) -> None:
        if not isinstance(codec, CodecProtocol):
            raise TypeError(
                f"codec for {media_type!r} must implement encode() and decode()"
            )
        key = normalize_media_type(media_type)
        with self._lock:
            self._codecs[key] = codec
        logger.debug(f"Registered codec {type(codec).__name__} for {key}")

    def lookup(self, content_type: str | None) -> CodecProtocol | None:
        """Return the codec for ``content_type``, or None if unsupported."""
        media_type = normalize_media_type(content_type)
        codec = self._codecs.get(media_type)
        if codec is not None:
            return codec
        for suffix, base in self._SUFFIX_FALLBACKS.items():
            if media_type.endswith(suffix):
                return self._codecs.get(base)
        return None

    def copy(self) -> "CodecRegistry":
        with self._lock:
            return CodecRegistry(dict(self._codecs))

    @property
    def media_types(self) -> list[str]:
        return sorted(self._codecs)

    def __contains__(self, content_type: object) -> bool:
        return isinstance(content_type, str) and self.lookup(content_type) is not None


def default_registry() -> CodecRegistry:
    """Registry with JSON (``application/json``) and XML (``application/xml``, ``text/xml``)."""
    from .json_codec import JSONCodec
    from .xml_codec import XMLCodec

    xml = XMLCodec()
    return CodecRegistry(
        {
            "application/json": JSONCodec(),
            "application/xml": xml,
            "text/xml": xml,
        }
    )


__all__ = [
    "CodecRegistry",
    "default_registry",
    "normalize_media_type",
    "type_adapter",
]
