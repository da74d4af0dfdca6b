"""Window clamping and range checks shared by chunk operations."""

from __future__ import annotations

from typing import Optional

from chunk_text.runtime import telemetry


class ChunkRangeError(IndexError):
    """Raised when a caller passes an index or length outside the chunk."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        length: Optional[int] = None,
        size: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.length = length
        self.size = size


def clamp_window(size: int, idx: int, length: int) -> int:
    """Return how many elements of ``[idx, idx + length)`` exist in ``size``."""

    if idx >= size:
        return 0
    left = size - idx
    return left if length > left else length


def _violation(
    message: str, *, index: int, length: Optional[int], size: int
) -> ChunkRangeError:
    telemetry.record_event(
        "chunk.range_violation",
        level="warning",
        data={"reason": message, "index": index, "length": length, "size": size},
    )
    return ChunkRangeError(message, index=index, length=length, size=size)


def ensure_non_negative(value: int, *, name: str, size: int) -> int:
    if value < 0:
        raise _violation(
            f"{name} must be non-negative, got {value}",
            index=value,
            length=None,
            size=size,
        )
    return value


def ensure_position(idx: int, size: int) -> int:
    """Validate an insertion point, which may equal ``size``."""

    if idx < 0 or idx > size:
        raise _violation(
            f"position {idx} outside [0, {size}]", index=idx, length=None, size=size
        )
    return idx


def ensure_index(idx: int, size: int) -> int:
    """Validate an element index; negative values count from the end."""

    resolved = idx + size if idx < 0 else idx
    if resolved < 0 or resolved >= size:
        raise _violation(
            f"index {idx} out of range for chunk of {size}",
            index=idx,
            length=None,
            size=size,
        )
    return resolved


def ensure_span(idx: int, length: int, size: int) -> None:
    if idx < 0 or length < 0 or idx + length > size:
        raise _violation(
            f"span [{idx}, {idx + length}) outside chunk of {size}",
            index=idx,
            length=length,
            size=size,
        )


__all__ = [
    "ChunkRangeError",
    "clamp_window",
    "ensure_index",
    "ensure_non_negative",
    "ensure_position",
    "ensure_span",
]
