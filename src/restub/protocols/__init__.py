# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable restub components.

Available protocols:
- CodecProtocol: Interface for request/response body codecs
- BeforeHook: Interface for the pre-dispatch customization hook
"""

from .codec import CodecProtocol
from .hook import BeforeHook

__all__ = [
    "BeforeHook",
    "CodecProtocol",
]
