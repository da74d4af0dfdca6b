"""Code-point text chunks for source-code tooling."""

from .text import NOT_FOUND, ChunkRangeError, ChunkText, chunk_sort_key, compare

__all__ = [
    "ChunkText",
    "ChunkRangeError",
    "NOT_FOUND",
    "chunk_sort_key",
    "compare",
    "runtime",
    "text",
]

__version__ = "0.1.0"
