"""Codec limits.

Limits are a frozen pydantic model so they are validated once at
construction and can be shared between readers and writers.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

# Largest byte count a length prefix can carry (signed 32-bit range).
I32_MAX = 2**31 - 1

ENV_MAX_STRING_BYTES = "DOTNETBIN_MAX_STRING_BYTES"


class CodecLimits(BaseModel):
    """Limits applied to length-prefixed strings.

    Attributes:
        max_string_bytes: Largest byte length accepted by string reads and
            writes (default 2**31 - 1, the full range of the length prefix).
            Lowering it makes readers reject oversized prefixes with
            InvalidData and writers refuse long strings with CannotEncode.

    Examples:
        ```python
        from dotnetbin import BinaryReader, CodecLimits

        limits = CodecLimits(max_string_bytes=4096)
        reader = BinaryReader(data, limits=limits)
        ```
    """

    model_config = ConfigDict(frozen=True)

    max_string_bytes: int = Field(default=I32_MAX, ge=0, le=I32_MAX)

    @classmethod
    def from_env(cls) -> CodecLimits:
        """Build limits from DOTNETBIN_MAX_STRING_BYTES, if set.

        Raises:
            pydantic.ValidationError: If the variable is not an integer in range
        """
        raw = os.environ.get(ENV_MAX_STRING_BYTES)
        if raw is None:
            return cls()
        return cls(max_string_bytes=raw)


DEFAULT_LIMITS = CodecLimits()
