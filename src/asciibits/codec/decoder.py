"""Streaming bit-string decoder.

This module provides StreamDecoder, a reader that pulls bit characters from a
byte source and returns decoded bytes. Groups split across source reads are
carried over in a leftover buffer, so the result does not depend on how the
source chunks its data.
"""

from __future__ import annotations

import copy
from typing import BinaryIO, Iterator

from ..config import StreamConfig
from ..exceptions import BitDecodeError, InvalidCharacterError, UnexpectedEndOfStreamError
from ..utils.logging import get_logger
from .core import GROUP_SIZE, decode_into

logger = get_logger(__name__)

_ALPHABET = b"01"


class StreamDecoder:
    """Decodes bit characters read from a source.

    The source is any object whose ``read(n)`` returns up to n bytes and
    ``b""`` at end-of-input. A non-blocking source may return None when no
    data is available yet; the decoder then returns None as well, like
    ``io.RawIOBase``, and reads again on the next call. Read failures
    (OSError) and decode failures are sticky: once recorded, they are raised
    by every later call.

    Errors are deferred until all well-formed data before them has been
    returned. A call that decoded something returns it; the error comes on the
    next call, once fewer than 8 leftover characters remain.

    Example:
        >>> import io
        >>> decoder = StreamDecoder(io.BytesIO(b"0110011101101111"))
        >>> decoder.read()
        b'go'
    """

    def __init__(self, source: BinaryIO, config: StreamConfig | None = None) -> None:
        """Initialize a stream decoder.

        Args:
            source: Provider of bit characters
            config: Buffer settings. If None, uses default config.
        """
        self.config = config if config is not None else StreamConfig()
        self._source = source
        self._error: BaseException | None = None
        self._eof = False
        # Leftover characters not yet decoded, at most config.buffer_size
        self._pending = bytearray()

    @property
    def error(self) -> BaseException | None:
        """The recorded failure, or None while the decoder is operating."""
        return self._error

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        """Decode up to ``len(buffer)`` bytes into buffer.

        The source is read only when fewer than 8 leftover characters are
        buffered. It is read again while no complete group is available, so a
        return value of 0 for a non-empty buffer means end-of-input. An empty
        buffer returns 0 without reading.

        Args:
            buffer: Writable buffer for the decoded bytes

        Returns:
            Number of bytes written to buffer, or None if a non-blocking
            source has no data yet

        Raises:
            InvalidCharacterError: If the input contains a byte other than '0' or '1'
            UnexpectedEndOfStreamError: If the source ended inside a group
            OSError: If reading from the source failed
        """
        if not len(buffer):
            return 0

        blocked = False
        if len(self._pending) < GROUP_SIZE:
            blocked = not self._fill()

        count = min(len(buffer), len(self._pending) // GROUP_SIZE)
        decoded = 0

        if count:
            failure = None
            try:
                decoded = decode_into(buffer, self._pending[: count * GROUP_SIZE])
            except InvalidCharacterError as e:
                decoded = e.count
                failure = InvalidCharacterError(e.byte)

            if failure is not None:
                # No retry of a malformed group; drop everything after it
                self._pending.clear()
                self._fail(failure)
            else:
                del self._pending[: decoded * GROUP_SIZE]

        if decoded == 0 and self._error is not None and len(self._pending) < GROUP_SIZE:
            raise self._error
        if decoded == 0 and blocked:
            return None

        return decoded

    def read(self, size: int = -1) -> bytes | None:
        """Read and decode up to size bytes.

        Args:
            size: Maximum number of bytes to return. If negative, read until
                end-of-input.

        Returns:
            Decoded bytes; ``b""`` at end-of-input, None if a non-blocking
            source has no data yet

        Raises:
            InvalidCharacterError: If the input contains a byte other than '0' or '1'
            UnexpectedEndOfStreamError: If the source ended inside a group
            OSError: If reading from the source failed

        When reading to end-of-input, a decode error raised after some data was
        collected carries that data in its ``decoded`` attribute. The error
        recorded on the decoder is left unchanged.
        """
        if size == 0:
            return b""
        if size < 0:
            return self._read_all()

        buffer = bytearray(size)
        count = self.readinto(buffer)
        if count is None:
            return None
        del buffer[count:]
        return bytes(buffer)

    def __iter__(self) -> Iterator[bytes]:
        """Yield decoded chunks of up to ``config.chunk_size`` bytes."""
        while True:
            chunk = self.read(self.config.chunk_size)
            if not chunk:
                return
            yield chunk

    def _read_all(self) -> bytes | None:
        result = bytearray()
        buffer = bytearray(self.config.chunk_size)
        while True:
            try:
                count = self.readinto(buffer)
            except BitDecodeError as e:
                error = copy.copy(e)
                error.decoded = bytes(result)
                raise error from None
            if count is None:
                return bytes(result) if result else None
            if count == 0:
                return bytes(result)
            result += buffer[:count]

    def _fill(self) -> bool:
        """Read from the source until a full group is buffered or input stops.

        Returns False if a non-blocking source had no data available.
        """
        while len(self._pending) < GROUP_SIZE and self._error is None and not self._eof:
            try:
                chunk = self._source.read(self.config.buffer_size - len(self._pending))
            except OSError as e:
                self._fail(e)
                return True

            if chunk is None:
                return False

            if not chunk:
                self._eof = True
                self._check_tail()
                return True

            self._pending += chunk
        return True

    def _check_tail(self) -> None:
        remainder = len(self._pending) % GROUP_SIZE
        if not remainder:
            return

        last = self._pending[-1]
        if last not in _ALPHABET:
            self._fail(InvalidCharacterError(last))
        else:
            self._fail(UnexpectedEndOfStreamError(remainder))

    def _fail(self, error: BaseException) -> None:
        self._error = error
        logger.debug("Stream decoder failed: %s", error)
