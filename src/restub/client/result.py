# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Result tuple assembly.

Every stub invocation ends here, whether it succeeded or failed part way:
the builder places the error (if any) in the declared error slot, decodes
the body (if any) into the declared payload slot, and leaves every other
slot at its zero value.
"""

import logging
from typing import Any

from ..codecs.base import CodecRegistry, normalize_media_type
from ..exceptions import DecodingError
from ..types.shape import ResultShape

logger = logging.getLogger(__name__)


class ResultBuilder:
    """Builds result tuples for one codec registry."""

    def __init__(self, codecs: CodecRegistry) -> None:
        self.codecs = codecs

    def build(
        self,
        shape: ResultShape,
        error: BaseException | None,
        body: bytes | None,
        content_type: str | None = None,
        field_name: str | None = None,
    ) -> tuple[Any, ...]:
        """
        Build a result tuple of exactly ``shape.arity`` values.

        Args:
            shape: Declared output layout of the endpoint
            error: Failure that occurred during the call, or None
            body: Response body bytes; None means no response was received
            content_type: Effective response media type (JSON if None)
            field_name: Endpoint name, for log messages

        Returns:
            Tuple with the error, the decoded payload and zero values
        """
        values = shape.zeros()

        if shape.has_error_slot:
            values[shape.error_index] = error
        elif error is not None:
            logger.debug(
                f"Discarding error for '{field_name}' (no error output declared): {error!r}"
            )

        if shape.has_payload_slot and body is not None:
            media_type = normalize_media_type(content_type)
            codec = self.codecs.lookup(media_type)
            if codec is None:
                logger.warning(
                    f"Content Type ({media_type}) not supported; "
                    f"leaving '{field_name}' payload empty"
                )
            else:
                try:
                    values[shape.payload_index] = codec.decode(body, shape.payload_type)
                except DecodingError as e:
                    return self.build(shape, e, None, content_type, field_name)

        return tuple(values)


__all__ = ["ResultBuilder"]
