# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
The restub client: scans descriptors and installs synthesized stubs.
"""

import logging
from typing import Any, TypeVar

from ..descriptor.scanner import EndpointBinding, scan
from ..exceptions import ConfigurationError, DescriptorError
from ..observability.metrics import EndpointMetrics
from ..protocols.hook import BeforeHook
from .config import ClientConfig
from .stub import StubSynthesizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Client:
    """
    Declarative HTTP client.

    The client holds the shared configuration (root URL, before hook,
    codecs) and turns descriptor instances into working API objects.

    Setup (``create``) is a one-time, single-threaded step per descriptor.
    Once installed, stubs can be called concurrently from any thread: each
    call builds its own request and its own transport client.

    Example:
        >>> client = Client("https://api.example.com")
        >>> users = client.create(UserService())
        >>> user, err = users.get_user(7)
    """

    def __init__(
        self,
        root: str | None = None,
        before: BeforeHook | None = None,
        *,
        config: ClientConfig | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize the client.

        Args:
            root: Base URL prefixed to every endpoint path
            before: Optional hook called with (request, client) before each send
            config: Complete configuration; mutually exclusive with the
                other arguments
            **options: Extra ClientConfig fields (client_factory, codecs,
                raise_for_status, strict, metrics_enabled)

        Raises:
            ConfigurationError: If the configuration is missing or invalid
        """
        if config is None:
            if root is None:
                raise ConfigurationError("Client requires a root URL or a ClientConfig")
            try:
                config = ClientConfig(root=root, before=before, **options)
            except TypeError as e:
                raise ConfigurationError(f"Unknown client option: {e}") from e
        elif root is not None or before is not None or options:
            raise ConfigurationError("Pass either config or root/before/options, not both")

        self.config = config
        self.metrics = EndpointMetrics() if config.metrics_enabled else None
        self._synthesizer = StubSynthesizer(config, self.metrics)

    @property
    def root(self) -> str:
        return self.config.root

    @property
    def before(self) -> BeforeHook | None:
        return self.config.before

    def endpoints(self, descriptor: Any) -> list[EndpointBinding]:
        """Scan and validate a descriptor (instance or class) without binding it."""
        return scan(descriptor, strict=self.config.strict)

    def create(self, descriptor: T) -> T:
        """
        Install a synthesized stub for every endpoint of ``descriptor``.

        The whole descriptor is validated before anything is installed, so a
        DescriptorError leaves the instance untouched. Calling ``create``
        again rebinds the stubs to this client.

        Args:
            descriptor: Descriptor instance; mutated in place

        Returns:
            The same descriptor instance

        Raises:
            DescriptorError: If the descriptor fails validation
        """
        if isinstance(descriptor, type):
            raise TypeError(
                f"create() needs a {descriptor.__name__} instance; use build() for classes"
            )

        bindings = self.endpoints(descriptor)
        for binding in bindings:
            try:
                setattr(descriptor, binding.name, self._synthesizer.synthesize(binding))
            except AttributeError as e:
                raise DescriptorError(
                    f"Cannot install endpoint '{binding.name}': {e}", field=binding.name
                ) from e

        logger.debug(
            f"Bound {len(bindings)} endpoint(s) of {type(descriptor).__name__} to {self.root}"
        )
        return descriptor

    def build(self, descriptor_cls: type[T], *args: Any, **kwargs: Any) -> T:
        """Instantiate ``descriptor_cls`` and ``create`` it in one step."""
        return self.create(descriptor_cls(*args, **kwargs))

    def get_metrics(self) -> dict[str, Any]:
        """Per-endpoint call statistics (empty when metrics are disabled)."""
        return self.metrics.get_stats() if self.metrics is not None else {}


__all__ = ["Client"]
