"""Chunk text buffer, comparison, and display encoding."""

from .chunk import NOT_FOUND, ChunkText
from .codepoints import to_codepoints
from .compare import chunk_sort_key, compare, compare_codepoints, fold_case
from .display import CR_SYMBOL, NL_SYMBOL, decode_display, encode_display
from .validation import ChunkRangeError, clamp_window

__all__ = [
    "ChunkText",
    "ChunkRangeError",
    "NOT_FOUND",
    "CR_SYMBOL",
    "NL_SYMBOL",
    "chunk_sort_key",
    "clamp_window",
    "compare",
    "compare_codepoints",
    "decode_display",
    "encode_display",
    "fold_case",
    "to_codepoints",
]
