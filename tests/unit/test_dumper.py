"""Unit tests for bit dump formatting."""

from __future__ import annotations

import io

import pytest

from asciibits import Dumper, FormatterClosedError, dump

GOPHER_LINE = "00000000: 01100111 01101111 01110000 01101000 01100101 01110010  gopher\n"


class TestDumper:
    """Test incremental dumping."""

    def test_every_stride(self, dump_input: bytes, expected_dump: str) -> None:
        """Test output does not depend on how input is split across writes."""
        for stride in range(1, len(dump_input)):
            out = io.BytesIO()
            dumper = Dumper(out)
            for start in range(0, len(dump_input), stride):
                dumper.write(dump_input[start : start + stride])
            dumper.close()

            assert out.getvalue().decode("ascii") == expected_dump, f"stride={stride}"

    def test_write_returns_count(self) -> None:
        """Test write reports every byte as dumped."""
        dumper = Dumper(io.BytesIO())

        assert dumper.write(b"abc") == 3
        assert dumper.write(b"") == 0

    def test_full_line_written_before_close(self) -> None:
        """Test a complete line is emitted without closing."""
        out = io.BytesIO()
        dumper = Dumper(out)
        dumper.write(b"gopher")

        assert out.getvalue().decode("ascii") == GOPHER_LINE

    def test_partial_line_held_until_close(self) -> None:
        """Test groups are streamed but the text column waits for close."""
        out = io.BytesIO()
        dumper = Dumper(out)
        dumper.write(b"go")

        assert out.getvalue() == b"00000000: 01100111 01101111 "

        dumper.close()
        assert out.getvalue() == b"00000000: 01100111 01101111 " + b" " * 37 + b"go\n"

    def test_line_width_is_constant(self) -> None:
        """Test partial lines are padded to the full line width."""
        out = io.BytesIO()
        with Dumper(out) as dumper:
            dumper.write(bytes(range(65, 65 + 6 * 3 + 1)))

        lines = out.getvalue().decode("ascii").splitlines()
        assert len(lines) == 4
        text_column = lines[0].index("ABCDEF")
        assert lines[3].index("S") == text_column
        assert len(lines[3]) == text_column + 1

    def test_non_printable_bytes(self) -> None:
        """Test bytes outside 32-126 show as dots."""
        out = io.BytesIO()
        with Dumper(out) as dumper:
            dumper.write(b"\x00\x1f \x7e\x7f\xff")

        assert out.getvalue().decode("ascii").endswith("  .. ~..\n")

    def test_offsets_are_hex(self) -> None:
        """Test offsets are 8 lowercase hex digits."""
        text = dump(bytes(6 * 3))
        offsets = [line.split(":")[0] for line in text.splitlines()]

        assert offsets == ["00000000", "00000006", "0000000c"]


class TestDumperClose:
    """Test closing semantics."""

    def test_double_close(self) -> None:
        """Test closing twice is a no-op and writes after close fail."""
        out = io.BytesIO()
        dumper = Dumper(out)

        dumper.write(b"gopher")
        dumper.close()
        dumper.close()

        with pytest.raises(FormatterClosedError, match="closed"):
            dumper.write(b"gopher")
        dumper.close()

        assert out.getvalue().decode("ascii") == GOPHER_LINE
        assert dumper.closed

    def test_early_close(self) -> None:
        """Test closing before any write produces no output."""
        out = io.BytesIO()
        dumper = Dumper(out)

        dumper.close()
        with pytest.raises(FormatterClosedError):
            dumper.write(b"gopher")

        assert out.getvalue() == b""

    def test_context_manager_closes(self) -> None:
        """Test leaving the with block flushes the partial line."""
        out = io.BytesIO()
        with Dumper(out) as dumper:
            dumper.write(b"abc")

        assert dumper.closed
        assert out.getvalue().endswith(b"abc\n")

    def test_close_leaves_sink_open(self) -> None:
        """Test the sink is not closed with the dumper."""
        out = io.BytesIO()
        Dumper(out).close()

        assert not out.closed


class TestDump:
    """Test the one-shot dump function."""

    def test_dump(self, dump_input: bytes, expected_dump: str) -> None:
        """Test the complete dump matches the reference."""
        assert dump(dump_input) == expected_dump

    def test_dump_empty(self) -> None:
        """Test empty input gives empty output."""
        assert dump(b"") == ""

    def test_dump_nine_bytes(self) -> None:
        """Test nine bytes give two aligned lines."""
        expected = (
            "00000000: 01100100 01110101 01101101 01110000 00100000 01110100  dump t\n"
            "00000006: 01100101 01110011 01110100" + " " * 29 + "est\n"
        )

        assert dump(b"dump test") == expected

    def test_dump_accepts_bytearray(self) -> None:
        """Test bytes-like input."""
        assert dump(bytearray(b"gopher")) == GOPHER_LINE
