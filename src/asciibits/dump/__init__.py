"""Bit dump formatting for asciibits.

This module renders bytes as offset-annotated lines of bit groups with a
trailing text column.
"""

from __future__ import annotations

from .dumper import LINE_WIDTH, Dumper, dump

__all__ = [
    "Dumper",
    "dump",
    "LINE_WIDTH",
]
