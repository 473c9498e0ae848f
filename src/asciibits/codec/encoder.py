"""Streaming bit-string encoder.

This module provides StreamEncoder, a writer that encodes bytes into
bit characters and forwards them to a byte sink in bounded chunks.
"""

from __future__ import annotations

from typing import BinaryIO

from ..config import StreamConfig
from ..exceptions import SinkWriteError
from ..utils.logging import get_logger
from .core import GROUP_SIZE, encode_into

logger = get_logger(__name__)


class StreamEncoder:
    """Encodes written bytes as bit characters into a sink.

    Input is encoded in chunks of ``config.chunk_size`` bytes through a fixed
    scratch buffer, so output is identical however the input is split across
    calls. The sink must not keep a reference to the buffer it is given.

    A sink failure (an OSError or ValueError from ``sink.write``, or a short
    write) is recorded once and is sticky: the failing call and every later call
    raise SinkWriteError chained to that same failure.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> encoder = StreamEncoder(sink)
        >>> encoder.write(b"go")
        2
        >>> sink.getvalue()
        b'0110011101101111'
    """

    def __init__(self, sink: BinaryIO, config: StreamConfig | None = None) -> None:
        """Initialize a stream encoder.

        Args:
            sink: Destination for the bit characters
            config: Buffer settings. If None, uses default config.
        """
        self.config = config if config is not None else StreamConfig()
        self._sink = sink
        self._error: BaseException | None = None
        self._scratch = memoryview(bytearray(self.config.buffer_size))

    @property
    def error(self) -> BaseException | None:
        """The recorded sink failure, or None while the encoder is operating."""
        return self._error

    def write(self, data: bytes) -> int:
        """Encode data and hand the bit characters to the sink.

        Args:
            data: Bytes-like object to encode

        Returns:
            Number of source bytes consumed (always ``len(data)`` on success)

        Raises:
            SinkWriteError: If the sink fails now or failed on an earlier call.
                ``written`` holds the source bytes whose encoding reached the
                sink during this call.
        """
        if self._error is not None:
            raise SinkWriteError("Encoder sink failed earlier", written=0) from self._error

        source = memoryview(data).cast("B")
        chunk_size = self.config.chunk_size
        consumed = 0
        position = 0

        while position < len(source) and self._error is None:
            chunk = source[position : position + chunk_size]
            encoded = encode_into(self._scratch, chunk)
            position += len(chunk)

            try:
                written = self._sink.write(self._scratch[:encoded])
            except (OSError, ValueError) as e:
                self._fail(e, consumed)
                break

            if written is None:
                written = encoded
            consumed += written // GROUP_SIZE

            if written < encoded:
                self._fail(
                    OSError(f"Short write: sink accepted {written} of {encoded} characters"),
                    consumed,
                )

        if self._error is not None:
            raise SinkWriteError(
                f"Encoder sink failed after {consumed} byte(s): {self._error}",
                written=consumed,
            ) from self._error

        return consumed

    def _fail(self, error: BaseException, consumed: int) -> None:
        self._error = error
        logger.debug("Stream encoder failed after %d byte(s): %s", consumed, error)
