"""One-shot conversion between bytes and bit-strings.

A bit-string is ASCII text over the alphabet {'0', '1'}: every byte becomes
eight characters, most significant bit first, with no separators.
All functions in this module are pure and keep no state between calls.
"""

from __future__ import annotations

from ..exceptions import BitDecodeError, InvalidCharacterError, LengthMismatchError

# Bit value -> ASCII character
_BIT_TABLE = b"01"

# Bit positions, most significant first
_SHIFTS = (7, 6, 5, 4, 3, 2, 1, 0)

_ZERO = ord("0")
_ONE = ord("1")

GROUP_SIZE = 8


def encoded_length(n: int) -> int:
    """Return the length of the encoding of n source bytes (``8 * n``).

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    return n * GROUP_SIZE


def decoded_length(x: int) -> int:
    """Return the number of bytes decoded from x bit characters (``x // 8``).

    This does not check that x is a multiple of 8.

    Raises:
        ValueError: If x is negative
    """
    if x < 0:
        raise ValueError(f"Length must be non-negative, got {x}")
    return x // GROUP_SIZE


def encode_into(dst: bytearray | memoryview, src: bytes) -> int:
    """Encode src into the first ``encoded_length(len(src))`` bytes of dst.

    The caller sizes dst; a buffer that is too small is a programming error and
    fails with the buffer's own IndexError.

    Args:
        dst: Writable buffer for the bit characters
        src: Bytes to encode

    Returns:
        Number of characters written, always ``encoded_length(len(src))``

    Example:
        >>> dst = bytearray(16)
        >>> encode_into(dst, b"\\xe3\\xa1")
        16
        >>> bytes(dst)
        b'1110001110100001'
    """
    j = 0
    for value in src:
        for shift in _SHIFTS:
            dst[j] = _BIT_TABLE[(value >> shift) & 1]
            j += 1
    return encoded_length(len(src))


def encode(src: bytes) -> bytes:
    """Return the bit-string encoding of src as ASCII bytes.

    Example:
        >>> encode(b"g")
        b'01100111'
    """
    dst = bytearray(encoded_length(len(src)))
    encode_into(dst, src)
    return bytes(dst)


def encode_to_string(src: bytes) -> str:
    """Return the bit-string encoding of src as text."""
    return encode(src).decode("ascii")


def decode_into(dst: bytearray | memoryview, src: bytes | bytearray | memoryview) -> int:
    """Decode the bit-string src into dst.

    src is consumed in complete groups of 8 characters. dst must hold at least
    ``decoded_length(len(src))`` bytes and may be the same buffer as src: byte
    ``i`` is written only after characters ``8*i .. 8*i + 7`` have been read, so
    the write position never passes unread input.

    Content errors take precedence over a length error: a trailing partial group
    is checked for invalid characters before LengthMismatchError is raised.

    Args:
        dst: Writable buffer for the decoded bytes
        src: Bit characters to decode

    Returns:
        Number of bytes written to dst

    Raises:
        InvalidCharacterError: If src contains a byte other than '0' or '1'.
            Bytes decoded before it stay in dst and are on the exception.
        LengthMismatchError: If len(src) is not a multiple of 8

    Example:
        >>> dst = bytearray(1)
        >>> decode_into(dst, b"01100111")
        1
        >>> bytes(dst)
        b'g'
    """
    length = len(src)
    i = 0  # write position in dst
    j = 0  # read position in src

    while j + GROUP_SIZE <= length:
        value = 0
        for k in range(j, j + GROUP_SIZE):
            char = src[k]
            if char == _ZERO:
                value <<= 1
            elif char == _ONE:
                value = (value << 1) | 1
            else:
                raise InvalidCharacterError(char, decoded=dst[:i])

        assert i <= j, "decode write position overtook unread input"
        dst[i] = value
        i += 1
        j += GROUP_SIZE

    if length % GROUP_SIZE:
        for k in range(j, length):
            char = src[k]
            if char != _ZERO and char != _ONE:
                raise InvalidCharacterError(char, decoded=dst[:i])
        raise LengthMismatchError(length, decoded=dst[:i])

    return i


def decode(src: bytes | bytearray | memoryview) -> bytes:
    """Return the bytes represented by the bit-string src.

    Raises:
        InvalidCharacterError: If src contains a byte other than '0' or '1'
        LengthMismatchError: If len(src) is not a multiple of 8

    Example:
        >>> decode(b"0110011101101111")
        b'go'
    """
    dst = bytearray(decoded_length(len(src)))
    count = decode_into(dst, src)
    return bytes(dst[:count])


def decode_in_place(buffer: bytearray) -> int:
    """Decode a bit-string using its own storage for the output.

    On return buffer holds only the decoded bytes. On failure it is truncated to
    the bytes decoded before the error, then the error is raised.

    Args:
        buffer: Bit characters; replaced by the decoded bytes

    Returns:
        Number of decoded bytes (the new length of buffer)

    Raises:
        InvalidCharacterError: If buffer contains a byte other than '0' or '1'
        LengthMismatchError: If len(buffer) is not a multiple of 8

    Example:
        >>> data = bytearray(b"0110011101101111")
        >>> decode_in_place(data)
        2
        >>> data
        bytearray(b'go')
    """
    try:
        count = decode_into(buffer, buffer)
    except BitDecodeError as e:
        del buffer[e.count :]
        raise
    del buffer[count:]
    return count


def decode_string(s: str) -> bytes:
    """Return the bytes represented by the bit-string text s.

    s is converted with UTF-8, so a non-ASCII character is reported by the first
    byte of its UTF-8 encoding.

    Raises:
        InvalidCharacterError: If s contains a character other than '0' or '1'
        LengthMismatchError: If len(s) is not a multiple of 8
    """
    buffer = bytearray(s.encode("utf-8"))
    decode_in_place(buffer)
    return bytes(buffer)
