# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Endpoint declaration decorators.

A service descriptor is a plain class whose endpoint stubs are decorated
methods. The type hints of each stub declare its parameters and outputs; the
decorator carries the HTTP metadata:

    class UserService:
        @endpoint("/users/{0}")
        def get_user(self, user_id: int) -> tuple[User, Exception | None]: ...

        @endpoint("/users", method="POST")
        def create_user(self, user: User) -> Exception | None: ...
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from ..exceptions import DescriptorError, NotBoundError
from ..types.endpoint import DEFAULT_CONTENT_TYPE, Endpoint

ENDPOINT_ATTR = "__restub_endpoint__"

F = TypeVar("F", bound=Callable[..., Any])


def endpoint(
    path: str,
    *,
    method: str = "GET",
    content_type: str = DEFAULT_CONTENT_TYPE,
    accept: str | None = None,
) -> Callable[[F], F]:
    """
    Mark a method as an endpoint stub.

    Args:
        path: Path template with ``{0}``-style or ``{name}`` placeholders
        method: HTTP verb (default GET)
        content_type: Request body media type and ``Content-Type`` header
        accept: Media type used to decode responses; defaults to the
            response's own ``Content-Type``

    Raises:
        DescriptorError: If the metadata is invalid (e.g. a malformed verb)
    """
    try:
        meta = Endpoint(
            path_template=path, method=method, content_type=content_type, accept=accept
        )
    except ValidationError as e:
        raise DescriptorError(f"Invalid endpoint metadata for {path!r}: {e}") from e

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def unbound(*args: Any, **kwargs: Any) -> Any:
            raise NotBoundError(func.__name__)

        setattr(unbound, ENDPOINT_ATTR, meta)
        return unbound  # type: ignore[return-value]

    return decorator


get = functools.partial(endpoint, method="GET")
post = functools.partial(endpoint, method="POST")
put = functools.partial(endpoint, method="PUT")
patch = functools.partial(endpoint, method="PATCH")
delete = functools.partial(endpoint, method="DELETE")


def get_endpoint(obj: Any) -> Endpoint | None:
    """Return the endpoint metadata attached to ``obj``, if any."""
    meta = getattr(obj, ENDPOINT_ATTR, None)
    return meta if isinstance(meta, Endpoint) else None


__all__ = [
    "ENDPOINT_ATTR",
    "delete",
    "endpoint",
    "get",
    "get_endpoint",
    "patch",
    "post",
    "put",
]
