"""asciibits: bytes as '0'/'1' text

A Python library for converting binary data into its ASCII bit representation
(one byte becomes eight '0'/'1' characters, most significant bit first) and
back. Intended for logging, wire-format debugging and simple text protocols.

Key Features:
- One-shot encode/decode with partial results preserved on errors
- Streaming encoder/decoder independent of how input is chunked
- Bit dumps in the layout of ``xxd -b -c 6``

Quick Start:
    >>> from asciibits import decode, dump, encode
    >>>
    >>> encode(b"Hi")
    b'0100100001101001'
    >>> decode(b"0100100001101001")
    b'Hi'
    >>> print(dump(b"Hi"), end="")
    00000000: 01001000 01101001                                      Hi
"""

from __future__ import annotations

from .codec import (
    StreamDecoder,
    StreamEncoder,
    decode,
    decode_in_place,
    decode_into,
    decode_string,
    decoded_length,
    encode,
    encode_into,
    encode_to_string,
    encoded_length,
)
from .config import DEFAULT_BUFFER_SIZE, StreamConfig
from .dump import Dumper, dump
from .exceptions import (
    AsciibitsError,
    BitDecodeError,
    FormatterClosedError,
    InvalidCharacterError,
    LengthMismatchError,
    SinkWriteError,
    UnexpectedEndOfStreamError,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_into",
    "encode_to_string",
    "decode",
    "decode_into",
    "decode_in_place",
    "decode_string",
    "encoded_length",
    "decoded_length",
    # Streaming
    "StreamEncoder",
    "StreamDecoder",
    "StreamConfig",
    "DEFAULT_BUFFER_SIZE",
    # Dump
    "Dumper",
    "dump",
    # Exceptions
    "AsciibitsError",
    "BitDecodeError",
    "InvalidCharacterError",
    "LengthMismatchError",
    "UnexpectedEndOfStreamError",
    "FormatterClosedError",
    "SinkWriteError",
    # Version
    "__version__",
]
