"""Exception hierarchy for asciibits.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from AsciibitsError for easy catching of any asciibits-specific error.
"""

from __future__ import annotations


class AsciibitsError(Exception):
    """Base exception for all asciibits errors."""

    pass


class BitDecodeError(AsciibitsError, ValueError):
    """Raised when a bit-string cannot be decoded.

    Decoding never throws away work: every byte decoded before the failure
    is available on the exception.

    Attributes:
        decoded: Bytes successfully decoded before the failure
        count: Number of bytes successfully decoded (``len(decoded)``)

    Examples:
        - Character other than '0' or '1' in the input
        - Input length not a multiple of 8
        - Stream ended in the middle of a group
    """

    def __init__(self, message: str, *, decoded: bytes = b"") -> None:
        super().__init__(message)
        self.decoded = bytes(decoded)

    @property
    def count(self) -> int:
        return len(self.decoded)

    def __copy__(self) -> BitDecodeError:
        # Subclass __init__ signatures differ from self.args, so skip __init__
        clone = self.__class__.__new__(self.__class__, *self.args)
        clone.__dict__.update(self.__dict__)
        return clone


class InvalidCharacterError(BitDecodeError):
    """Raised when a byte outside the alphabet {'0', '1'} is found.

    Attributes:
        byte: The offending byte value (0-255)
    """

    def __init__(self, byte: int, *, decoded: bytes = b"") -> None:
        self.byte = byte
        super().__init__(
            f"Invalid bit character {byte:#04x} ({chr(byte)!r})", decoded=decoded
        )


class LengthMismatchError(BitDecodeError):
    """Raised by one-shot decoding when the input length is not a multiple of 8."""

    def __init__(self, length: int, *, decoded: bytes = b"") -> None:
        self.length = length
        super().__init__(
            f"Bit-string length {length} is not a multiple of 8", decoded=decoded
        )


class UnexpectedEndOfStreamError(BitDecodeError):
    """Raised by stream decoding when the source ends in the middle of a group.

    This replaces LengthMismatchError for streams: a stream cannot tell a short
    read from a truncated input until end-of-input is observed.
    """

    def __init__(self, pending: int, *, decoded: bytes = b"") -> None:
        self.pending = pending
        super().__init__(
            f"Unexpected end of stream with {pending} bit character(s) left over",
            decoded=decoded,
        )


class FormatterClosedError(AsciibitsError):
    """Raised when writing to a Dumper after it has been closed."""

    def __init__(self) -> None:
        super().__init__("Dumper is closed")


class SinkWriteError(AsciibitsError, OSError):
    """Raised when a StreamEncoder sink fails or accepts fewer bytes than given.

    The underlying sink failure is chained as ``__cause__`` and stays recorded on
    the encoder; every later write raises again with ``written == 0``.

    Attributes:
        written: Source bytes consumed by the failing call

    Examples:
        - Sink raised OSError (closed file, broken pipe)
        - Sink reported a short write
    """

    def __init__(self, message: str, *, written: int = 0) -> None:
        super().__init__(message)
        self.written = written
