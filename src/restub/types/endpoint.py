# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Endpoint metadata types.

This module defines the immutable metadata attached to every endpoint stub
of a service descriptor: the path template, the HTTP verb and the content
types used for the request and the response.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CONTENT_TYPE = "application/json"

# RFC 9110 token characters
_METHOD_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Z-]+$")
_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


class Endpoint(BaseModel):
    """
    Metadata describing one remote endpoint.

    Created once per descriptor field (by the ``@endpoint`` decorator) and
    captured by the synthesized stub. Instances are frozen.

    Attributes:
        path_template: Path appended to the client root. Placeholders are
            ``{0}``, ``{1}``, ... (positional) or ``{name}`` (parameter name).
        method: HTTP verb, upper-cased.
        content_type: Media type of the request body and the value of the
            outgoing ``Content-Type`` header.
        accept: Media type used to decode the response. When None, the
            response's own ``Content-Type`` header is used.
    """

    model_config = ConfigDict(frozen=True)

    path_template: str
    method: str = "GET"
    content_type: str = DEFAULT_CONTENT_TYPE
    accept: str | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: object) -> str:
        method = str(value or "GET").strip().upper()
        if not _METHOD_RE.match(method):
            raise ValueError(f"invalid HTTP method: {value!r}")
        return method

    @field_validator("content_type", mode="before")
    @classmethod
    def _default_content_type(cls, value: object) -> str:
        return str(value).strip() if value else DEFAULT_CONTENT_TYPE

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in template order, e.g. ``["0", "user_id"]``."""
        return _PLACEHOLDER_RE.findall(self.path_template)

    @property
    def sends_body(self) -> bool:
        """GET requests never carry a body, even if one is captured."""
        return self.method != "GET"


__all__ = ["DEFAULT_CONTENT_TYPE", "Endpoint"]
