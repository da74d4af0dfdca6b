"""Coercion of caller-supplied text into code-point lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Union

if TYPE_CHECKING:
    from .chunk import ChunkText

TextSource = Union["ChunkText", str, bytes, bytearray, Iterable[int]]


def to_codepoints(source: TextSource) -> List[int]:
    """Return a fresh list of code points for ``source``.

    ``str`` contributes ``ord()`` of each character, ``bytes`` each byte
    zero-extended, and ``ChunkText`` a copy of its content. Any other
    iterable must yield ``int`` values.
    """

    if isinstance(source, str):
        return [ord(ch) for ch in source]
    if isinstance(source, (bytes, bytearray)):
        return list(source)
    chars = getattr(source, "codepoints", None)
    if chars is not None:
        return list(chars)
    try:
        values = list(source)
    except TypeError as exc:
        raise TypeError(
            f"cannot build code points from {type(source).__name__}"
        ) from exc
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"code points must be int, got {type(value).__name__}")
    return values


__all__ = ["TextSource", "to_codepoints"]
