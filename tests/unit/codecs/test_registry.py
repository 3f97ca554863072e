"""Unit tests for media type normalization and the codec registry."""

from typing import Any

import pytest

from restub.codecs import CodecRegistry, JSONCodec, XMLCodec, default_registry, normalize_media_type
from restub.protocols import CodecProtocol


class PlainTextCodec:
    def encode(self, value: Any) -> bytes:
        return str(value).encode()

    def decode(self, data: bytes, target: Any) -> Any:
        return data.decode()


class TestNormalizeMediaType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("application/json", "application/json"),
            ("application/json; charset=utf-8", "application/json"),
            ("Text/XML;charset=UTF-8", "text/xml"),
            ("  application/xml  ", "application/xml"),
        ],
    )
    def test_strips_parameters_and_case(self, value, expected):
        """Parameters after ';' are dropped and the type is lower-cased."""
        assert normalize_media_type(value) == expected

    @pytest.mark.parametrize("value", [None, "", ";charset=utf-8"])
    def test_missing_defaults_to_json(self, value):
        """Missing or empty content types mean JSON."""
        assert normalize_media_type(value) == "application/json"


class TestCodecRegistry:
    def test_default_registry_media_types(self):
        """The default registry knows JSON and both XML media types."""
        registry = default_registry()
        assert registry.media_types == ["application/json", "application/xml", "text/xml"]
        assert isinstance(registry.lookup("application/json"), JSONCodec)
        assert isinstance(registry.lookup("application/xml"), XMLCodec)
        assert isinstance(registry.lookup("text/xml; charset=utf-8"), XMLCodec)

    def test_lookup_missing_returns_none(self):
        """Unsupported media types have no codec."""
        assert default_registry().lookup("text/plain") is None
        assert "text/plain" not in default_registry()

    def test_suffix_fallback(self):
        """Structured syntax suffixes fall back to the base codec."""
        registry = default_registry()
        assert isinstance(registry.lookup("application/problem+json"), JSONCodec)
        assert isinstance(registry.lookup("application/atom+xml"), XMLCodec)

    def test_register_custom_codec(self):
        """Custom codecs can be registered for new media types."""
        registry = CodecRegistry()
        codec = PlainTextCodec()
        registry.register("Text/Plain", codec)
        assert registry.lookup("text/plain; charset=ascii") is codec
        assert isinstance(codec, CodecProtocol)

    def test_register_rejects_non_codecs(self):
        """Objects without encode/decode are refused."""
        with pytest.raises(TypeError):
            CodecRegistry().register("text/plain", object())  # type: ignore[arg-type]

    def test_copy_is_independent(self):
        """Registering on a copy leaves the original untouched."""
        original = default_registry()
        copy = original.copy()
        copy.register("text/plain", PlainTextCodec())
        assert "text/plain" in copy
        assert "text/plain" not in original
