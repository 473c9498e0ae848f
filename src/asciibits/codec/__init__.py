"""Bit-string codec for asciibits.

This module provides one-shot encoding and decoding between bytes and
bit-strings, and the streaming encoder/decoder built on top of it.
"""

from __future__ import annotations

from .core import (
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
from .decoder import StreamDecoder
from .encoder import StreamEncoder

__all__ = [
    # One-shot
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
]
