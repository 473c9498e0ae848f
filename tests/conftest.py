"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

HELLO_BITS = (
    "01001000011001010110110001101100011011110010000001000111"
    "011011110111000001101000011001010111001000100001"
)

# (bit-string, bytes) pairs valid in both directions
_ENC_DEC_CASES = [
    ("", b""),
    (
        "0000000000000001000000100000001100000100000001010000011000000111",
        bytes([0, 1, 2, 3, 4, 5, 6, 7]),
    ),
    (
        "0000100000001001000010100000101100001100000011010000111000001111",
        bytes([8, 9, 10, 11, 12, 13, 14, 15]),
    ),
    (
        "1111000011110001111100101111001111110100111101011111011011110111",
        bytes([0xF0, 0xF1, 0xF2, 0xF3, 0xF4, 0xF5, 0xF6, 0xF7]),
    ),
    (
        "1111100011111001111110101111101111111100111111011111111011111111",
        bytes([0xF8, 0xF9, 0xFA, 0xFB, 0xFC, 0xFD, 0xFE, 0xFF]),
    ),
    ("01100111", b"g"),
    ("1110001110100001", bytes([0b11100011, 0b10100001])),
]


@pytest.fixture
def enc_dec_cases() -> list[tuple[str, bytes]]:
    """Known bit-string/bytes pairs."""
    return list(_ENC_DEC_CASES)


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello Gopher!"


@pytest.fixture
def sample_bits() -> bytes:
    """Bit-string encoding of sample_payload."""
    return HELLO_BITS.encode("ascii")


@pytest.fixture
def dump_input() -> bytes:
    """40 bytes, 30 through 69, mixing control and printable characters."""
    return bytes(range(30, 70))


@pytest.fixture
def expected_dump() -> str:
    """Bit dump of dump_input."""
    return (
        "00000000: 00011110 00011111 00100000 00100001 00100010 00100011  .. !\"#\n"
        "00000006: 00100100 00100101 00100110 00100111 00101000 00101001  $%&'()\n"
        "0000000c: 00101010 00101011 00101100 00101101 00101110 00101111  *+,-./\n"
        "00000012: 00110000 00110001 00110010 00110011 00110100 00110101  012345\n"
        "00000018: 00110110 00110111 00111000 00111001 00111010 00111011  6789:;\n"
        "0000001e: 00111100 00111101 00111110 00111111 01000000 01000001  <=>?@A\n"
        "00000024: 01000010 01000011 01000100 01000101"
        + " " * 20
        + "BCDE\n"
    )
