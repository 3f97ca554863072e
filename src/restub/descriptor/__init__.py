# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Service descriptor declaration and scanning.

Exported:
    endpoint, get, post, put, patch, delete: Stub decorators.
    scan: Derive and validate endpoint bindings for a descriptor.
    EndpointBinding, StubParameter: Scan results.
"""

from .decorators import delete, endpoint, get, get_endpoint, patch, post, put
from .scanner import EndpointBinding, StubParameter, scan

__all__ = [
    "EndpointBinding",
    "StubParameter",
    "delete",
    "endpoint",
    "get",
    "get_endpoint",
    "patch",
    "post",
    "put",
    "scan",
]
