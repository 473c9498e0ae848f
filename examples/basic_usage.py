"""Basic usage example for asciibits.

This example demonstrates:
1. One-shot encoding and decoding
2. Streaming to and from file-like objects
3. Handling decode errors without losing data
4. Bit dumps
"""

from __future__ import annotations

import io
import sys

from asciibits import (
    BitDecodeError,
    Dumper,
    StreamDecoder,
    StreamEncoder,
    decode,
    decode_string,
    dump,
    encode,
    encode_to_string,
)


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("asciibits Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"Hello Gopher!"

    # 1. One-shot
    print("1. One-shot encoding:")
    bits = encode(payload)
    print(f"   {payload!r} -> {len(bits)} characters")
    print(f"   {bits.decode('ascii')}")
    print(f"   decode() -> {decode(bits)!r}")
    print(f"   encode_to_string/decode_string -> {decode_string(encode_to_string(payload))!r}")
    print()

    # 2. Streaming
    print("2. Streaming:")
    sink = io.BytesIO()
    encoder = StreamEncoder(sink)
    for word in payload.split(b" "):
        encoder.write(word)
    print(f"   streamed encoding: {sink.getvalue().decode('ascii')}")

    sink.seek(0)
    decoder = StreamDecoder(sink)
    print(f"   first 5 bytes: {decoder.read(5)!r}")
    print(f"   rest: {decoder.read()!r}")
    print()

    # 3. Errors keep the decoded prefix
    print("3. Error handling:")
    for broken in (b"0100100001101001z", b"01001000011010"):
        try:
            decode(broken)
        except BitDecodeError as e:
            print(f"   {broken.decode('ascii')!r}: {e} (decoded so far: {e.decoded!r})")
    print()

    # 4. Dumps
    print("4. Bit dump:")
    print(dump(b"dump test"), end="")
    print()
    print("   Streaming dump to stdout:")
    sys.stdout.flush()
    with Dumper(sys.stdout.buffer) as dumper:
        dumper.write(b"Hello ")
        dumper.write(b"Gopher!")
    sys.stdout.flush()

    print()
    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
