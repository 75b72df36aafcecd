"""wcx - count lines, bytes, characters, and words in files."""

__version__ = "0.1.0"
