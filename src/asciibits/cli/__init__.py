"""Command-line interface for asciibits."""
