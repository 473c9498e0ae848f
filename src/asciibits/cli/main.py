"""Main CLI entry point for asciibits."""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path
from typing import BinaryIO

from .. import __version__
from ..codec import StreamDecoder, StreamEncoder
from ..dump import Dumper
from ..exceptions import AsciibitsError
from ..utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

_WHITESPACE = b" \t\r\n\v\f"


class _WhitespaceFilter:
    """Byte source that drops ASCII whitespace from another source."""

    def __init__(self, source: BinaryIO) -> None:
        self._source = source

    def read(self, size: int = -1) -> bytes:
        while True:
            chunk = self._source.read(size)
            if not chunk:
                return b""
            chunk = chunk.translate(None, _WHITESPACE)
            if chunk:
                return chunk


def _open_input(path: str | None) -> BinaryIO:
    if path is None or path == "-":
        return sys.stdin.buffer
    return Path(path).open("rb")


def _cmd_encode(args: argparse.Namespace, source: BinaryIO, sink: BinaryIO) -> None:
    encoder = StreamEncoder(sink)
    shutil.copyfileobj(source, encoder)
    if args.newline:
        sink.write(b"\n")


def _cmd_decode(args: argparse.Namespace, source: BinaryIO, sink: BinaryIO) -> None:
    if args.ignore_whitespace:
        source = _WhitespaceFilter(source)  # type: ignore[assignment]
    decoder = StreamDecoder(source)
    shutil.copyfileobj(decoder, sink)


def _cmd_dump(args: argparse.Namespace, source: BinaryIO, sink: BinaryIO) -> None:
    with Dumper(sink) as dumper:
        shutil.copyfileobj(source, dumper)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciibits",
        description="asciibits: bytes as '0'/'1' text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  asciibits encode image.png > image.bits     Encode a file
  asciibits decode image.bits > image.png     Decode it again
  echo -n "hello" | asciibits dump            Bit dump of stdin
  asciibits --version                         Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"asciibits {__version__}",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser("encode", help="Encode bytes as a bit-string")
    encode_parser.add_argument("file", nargs="?", metavar="FILE", help="Input file (default: stdin)")
    encode_parser.add_argument(
        "-n",
        "--newline",
        action="store_true",
        help="Append a newline to the output",
    )
    encode_parser.set_defaults(handler=_cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode a bit-string into bytes")
    decode_parser.add_argument("file", nargs="?", metavar="FILE", help="Input file (default: stdin)")
    decode_parser.add_argument(
        "-w",
        "--ignore-whitespace",
        action="store_true",
        help="Skip spaces, tabs and newlines in the input",
    )
    decode_parser.set_defaults(handler=_cmd_decode)

    dump_parser = subparsers.add_parser("dump", help="Print an annotated bit dump")
    dump_parser.add_argument("file", nargs="?", metavar="FILE", help="Input file (default: stdin)")
    dump_parser.set_defaults(handler=_cmd_dump)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the asciibits CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        source = _open_input(args.file)
    except OSError as e:
        print(f"Error: Cannot open {args.file}: {e}", file=sys.stderr)
        return 1

    sink = sys.stdout.buffer
    try:
        logger.debug("Running %s on %s", args.command, args.file or "<stdin>")
        args.handler(args, source, sink)
        sink.flush()
        return 0
    except (AsciibitsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if source is not sys.stdin.buffer:
            source.close()


if __name__ == "__main__":
    sys.exit(main())
