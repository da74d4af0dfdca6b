"""Case-folded ordering of chunks."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .chunk import ChunkText

MAX_CODEPOINT = 0x10FFFF


def fold_case(ch: int) -> int:
    """Lower-case a single code point, leaving it alone if that is ambiguous."""

    if ch < 0 or ch > MAX_CODEPOINT:
        return ch
    lowered = chr(ch).lower()
    if len(lowered) != 1:
        return ch
    return ord(lowered)


def compare_codepoints(lhs: Sequence[int], rhs: Sequence[int], length: int) -> int:
    """Order two code-point sequences over at most ``length`` positions.

    Letters compare case-insensitively. When two positions hold the same
    letter in different case the lowercase one sorts first, i.e. the raw
    difference is negated. If the shorter input ends the scan before
    ``length`` positions, the length difference decides.
    """

    len1 = len(lhs)
    len2 = len(rhs)
    max_idx = min(length, len1, len2)
    idx = 0
    while idx < max_idx:
        ch1 = lhs[idx]
        ch2 = rhs[idx]
        if ch1 != ch2:
            diff = fold_case(ch1) - fold_case(ch2)
            if diff == 0:
                # same letter, different case: lowercase first
                return -(ch1 - ch2)
            return diff
        idx += 1

    if idx == length:
        return 0
    return len1 - len2


def compare(lhs: "ChunkText", rhs: "ChunkText", length: int) -> int:
    return compare_codepoints(lhs._chars, rhs._chars, length)


def _compare_full(lhs: "ChunkText", rhs: "ChunkText") -> int:
    return compare(lhs, rhs, max(len(lhs), len(rhs)))


chunk_sort_key = cmp_to_key(_compare_full)


__all__ = ["chunk_sort_key", "compare", "compare_codepoints", "fold_case"]
