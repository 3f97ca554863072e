# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client, configuration, stub synthesis and result assembly.
"""

from .client import Client
from .config import ClientConfig
from .result import ResultBuilder
from .stub import StubSynthesizer, resolve_path

__all__ = [
    "Client",
    "ClientConfig",
    "ResultBuilder",
    "StubSynthesizer",
    "resolve_path",
]
