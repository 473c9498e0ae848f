"""Annotated bit dumps in the style of ``xxd -b -c 6``.

Each output line looks like::

    00000000: 01100100 01110101 01101101 01110000 00100000 01110100  dump t

an 8-digit lowercase hex offset, six 8-character bit groups (one per byte),
a double space, then the bytes as text with non-printable bytes shown as '.'.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO

from ..codec.core import GROUP_SIZE, encode_into
from ..exceptions import FormatterClosedError
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Bytes per output line
LINE_WIDTH = 6

_SPACE = ord(" ")
_DOT = ord(".")
_PRINTABLE = range(32, 127)


def _to_char(value: int) -> int:
    return value if value in _PRINTABLE else _DOT


class Dumper:
    """Writes a bit dump of all bytes written to it into a sink.

    Output is produced as data arrives; only the text column of the current
    line is held back until the line is complete. Call close() (or use the
    dumper as a context manager) to flush a final partial line. Closing the
    dumper does not close the sink.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> with Dumper(sink) as dumper:
        ...     dumper.write(b"gopher")
        6
        >>> sink.getvalue()
        b'00000000: 01100111 01101111 01110000 01101000 01100101 01110010  gopher\\n'
    """

    def __init__(self, sink: BinaryIO) -> None:
        """Initialize a dumper.

        Args:
            sink: Destination for the dump text (ASCII bytes)
        """
        self._sink = sink
        self._offset = 0  # bytes dumped so far
        self._used = 0  # bytes on the current line, 0 to LINE_WIDTH - 1
        self._text = bytearray()  # text column of the current line
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes) -> int:
        """Dump data.

        Args:
            data: Bytes-like object to dump

        Returns:
            Number of bytes dumped

        Raises:
            FormatterClosedError: If the dumper has been closed
        """
        if self._closed:
            raise FormatterClosedError()

        group = bytearray(GROUP_SIZE + 2)
        group[GROUP_SIZE] = _SPACE
        group[GROUP_SIZE + 1] = _SPACE

        count = 0
        for value in memoryview(data).cast("B"):
            if self._used == 0:
                self._sink.write(b"%08x: " % self._offset)

            encode_into(group, (value,))
            # Extra space after the last group separates the text column
            length = GROUP_SIZE + 2 if self._used == LINE_WIDTH - 1 else GROUP_SIZE + 1
            self._sink.write(bytes(group[:length]))

            self._text.append(_to_char(value))
            self._used += 1
            self._offset += 1
            count += 1

            if self._used == LINE_WIDTH:
                self._sink.write(bytes(self._text) + b"\n")
                self._text.clear()
                self._used = 0

        return count

    def close(self) -> None:
        """Flush a pending partial line and stop accepting writes.

        Missing group slots are filled with spaces so the text column lines up
        with full lines. Closing twice is a no-op.
        """
        if self._closed:
            return
        self._closed = True

        if self._used == 0:
            return

        logger.debug("Padding final dump line with %d empty slot(s)", LINE_WIDTH - self._used)
        padding = (GROUP_SIZE + 1) * (LINE_WIDTH - self._used) + 1
        self._sink.write(b" " * padding + bytes(self._text) + b"\n")
        self._text.clear()
        self._used = 0

    def __enter__(self) -> Dumper:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def dump(data: bytes) -> str:
    """Return the complete bit dump of data.

    Args:
        data: Bytes to dump

    Returns:
        Dump text, one line per 6 bytes; empty string for empty input

    Example:
        >>> print(dump(b"dump test"), end="")
        00000000: 01100100 01110101 01101101 01110000 00100000 01110100  dump t
        00000006: 01100101 01110011 01110100                             est
    """
    sink = io.BytesIO()
    with Dumper(sink) as dumper:
        dumper.write(data)
    return sink.getvalue().decode("ascii")
