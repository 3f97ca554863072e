# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and constants."""

from .endpoint import DEFAULT_CONTENT_TYPE, Endpoint
from .response import ResponseEnvelope
from .shape import ABSENT, ResultShape

__all__ = [
    "ABSENT",
    "DEFAULT_CONTENT_TYPE",
    # Endpoint metadata
    "Endpoint",
    # Per-call types
    "ResponseEnvelope",
    # Result layout
    "ResultShape",
]
