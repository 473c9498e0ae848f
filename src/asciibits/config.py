"""Configuration for the streaming encoder and decoder.

This module provides the validated settings shared by StreamEncoder and
StreamDecoder. The dump layout is fixed and has no settings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BUFFER_SIZE = 1024


class StreamConfig(BaseModel):
    """Buffer settings for stream transcoding.

    Attributes:
        buffer_size: Capacity in bit characters of the encoder's scratch buffer
            and of the decoder's leftover buffer (default 1024). Must be a
            multiple of 8 and at least 16 so that one full group always fits
            next to a partial one.

    Examples:
        ```python
        from asciibits import StreamConfig, StreamEncoder

        config = StreamConfig(buffer_size=4096)
        encoder = StreamEncoder(sink, config=config)
        ```
    """

    model_config = ConfigDict(
        # Settings are shared between streams, never mutated
        frozen=True,
        extra="forbid",
    )

    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        ge=16,
        multiple_of=8,
        description="Scratch/leftover buffer capacity in bit characters",
    )

    @property
    def chunk_size(self) -> int:
        """Source bytes whose encoding fills the buffer exactly."""
        return self.buffer_size // 8
