"""Unit tests for ClientConfig."""

import dataclasses

import httpx
import pytest

from restub.client import ClientConfig
from restub.codecs import CodecRegistry
from restub.exceptions import ConfigurationError


class TestClientConfig:
    def test_default_values(self):
        """Test default configuration values."""
        config = ClientConfig(root="https://api.example.com")

        assert config.root == "https://api.example.com"
        assert config.before is None
        assert config.client_factory is httpx.Client
        assert config.raise_for_status is False
        assert config.strict is False
        assert config.metrics_enabled is True
        assert isinstance(config.codecs, CodecRegistry)
        assert config.codecs.media_types == ["application/json", "application/xml", "text/xml"]

    def test_each_config_gets_its_own_registry(self):
        """Default registries are not shared between configs."""
        a = ClientConfig(root="https://a.example.com")
        b = ClientConfig(root="https://b.example.com")
        assert a.codecs is not b.codecs

    def test_frozen(self):
        """Configuration cannot be changed after construction."""
        config = ClientConfig(root="https://api.example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.root = "https://other.example.com"  # type: ignore[misc]

    @pytest.mark.parametrize("root", ["", "api.example.com", "ftp://files.example.com", "https://"])
    def test_invalid_root(self, root):
        """Roots must be absolute http(s) URLs."""
        with pytest.raises(ConfigurationError):
            ClientConfig(root=root)

    def test_non_callable_factory(self):
        """client_factory must be callable."""
        with pytest.raises(ConfigurationError, match="client_factory"):
            ClientConfig(root="https://api.example.com", client_factory="httpx")  # type: ignore[arg-type]

    def test_non_callable_hook(self):
        """before must be callable."""
        with pytest.raises(ConfigurationError, match="before"):
            ClientConfig(root="https://api.example.com", before=42)  # type: ignore[arg-type]
