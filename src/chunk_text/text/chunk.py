"""Mutable code-point buffer holding one lexical chunk of source text."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union, overload

from chunk_text.runtime import telemetry

from .codepoints import TextSource, to_codepoints
from .compare import compare as compare_chunks
from .display import decode_display, encode_display
from .validation import (
    clamp_window,
    ensure_index,
    ensure_non_negative,
    ensure_position,
    ensure_span,
)

NOT_FOUND = -1

ChunkSource = Union[int, TextSource]


def _window(chars: List[int], idx: int, length: int) -> List[int]:
    """Copy ``[idx, idx + length)`` of ``chars``, zero-filling any overrun."""

    copied = clamp_window(len(chars), idx, length)
    window = chars[idx : idx + copied]
    window.extend([0] * (length - copied))
    return window


def _find(chars: List[int], needle: List[int], start: int) -> int:
    last = len(chars) - len(needle)
    if last < 0:
        return NOT_FOUND
    width = len(needle)
    for pos in range(start, last + 1):
        if chars[pos : pos + width] == needle:
            return pos
    return NOT_FOUND


class ChunkText:
    """Ordered code points plus a lazily rebuilt display encoding.

    The code points are the only real content. ``c_str()`` hands out a
    NUL-terminated UTF-8 rendering in which line feeds and carriage returns
    appear as visible glyphs; it is rebuilt on demand after any mutation.
    """

    compare = staticmethod(compare_chunks)

    def __init__(
        self,
        source: Optional[ChunkSource] = None,
        idx: int = 0,
        length: Optional[int] = None,
    ) -> None:
        self._chars: List[int] = []
        self._display: bytes = b""
        self._display_ok = False
        if source is not None:
            self.set(source, idx, length)

    # -- content -----------------------------------------------------------

    @property
    def codepoints(self) -> Tuple[int, ...]:
        """Return the current code points without exposing internal mutability."""

        return tuple(self._chars)

    @property
    def cache_valid(self) -> bool:
        return self._display_ok

    def _invalidate(self) -> None:
        self._display_ok = False

    def set(
        self, source: ChunkSource, idx: int = 0, length: Optional[int] = None
    ) -> None:
        """Replace the whole content with ``source``.

        With ``length`` given the content becomes exactly ``length`` code
        points: the part of ``source[idx:idx + length]`` that exists, followed
        by zeros for whatever the window overran. A ``ChunkText`` source whose
        size equals ``length`` is copied whole regardless of ``idx``.
        """

        if isinstance(source, int):
            self._chars = [source]
        elif length is None:
            ensure_non_negative(idx, name="idx", size=len(self._chars))
            chars = to_codepoints(source)
            self._chars = chars[idx:] if idx else chars
        else:
            ensure_non_negative(idx, name="idx", size=len(self._chars))
            ensure_non_negative(length, name="length", size=len(self._chars))
            chars = to_codepoints(source)
            if isinstance(source, ChunkText) and length == len(chars):
                self._chars = chars
            else:
                self._chars = _window(chars, idx, length)
        self._invalidate()

    def resize(self, size: int) -> None:
        ensure_non_negative(size, name="size", size=len(self._chars))
        current = len(self._chars)
        if current == size:
            return
        if size < current:
            del self._chars[size:]
        else:
            self._chars.extend([0] * (size - current))
        self._invalidate()

    def clear(self) -> None:
        self._chars.clear()
        self._invalidate()

    def insert(self, idx: int, value: ChunkSource) -> None:
        ensure_position(idx, len(self._chars))
        if isinstance(value, int):
            self._chars.insert(idx, value)
        else:
            self._chars[idx:idx] = to_codepoints(value)
        self._invalidate()

    def append(
        self, value: ChunkSource, idx: int = 0, length: Optional[int] = None
    ) -> None:
        """Append a code point, text, or a clamped window of a sequence."""

        if isinstance(value, int):
            self._chars.append(value)
        elif length is None and idx == 0:
            self._chars.extend(to_codepoints(value))
        else:
            tail = ChunkText(to_codepoints(value), idx, length)
            self._chars.extend(tail._chars)
        self._invalidate()

    def erase(self, idx: int, length: int) -> None:
        if length == 0:
            return
        ensure_span(idx, length, len(self._chars))
        del self._chars[idx : idx + length]
        self._invalidate()

    def back(self) -> int:
        return self._chars[ensure_index(-1, len(self._chars))]

    def pop_back(self) -> None:
        if self._chars:
            self._chars.pop()
            self._invalidate()

    def pop_front(self) -> None:
        if self._chars:
            del self._chars[0]
            self._invalidate()

    # -- comparison --------------------------------------------------------

    def equals(self, other: TextSource) -> bool:
        """Exact, case-sensitive equality of the code points.

        ``other`` may be anything a pattern may be, e.g. ``"abc"`` or ``b"abc"``.
        """

        if isinstance(other, ChunkText):
            return self._chars == other._chars
        return self._chars == to_codepoints(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkText):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # -- search ------------------------------------------------------------

    def startswith(self, pattern: TextSource, idx: int = 0) -> bool:
        """Return True if ``pattern`` occurs at ``idx``.

        At least one code point of the chunk must be consumed, so an empty
        pattern, or an ``idx`` at or past the end, never matches.
        """

        ensure_non_negative(idx, name="idx", size=len(self._chars))
        needle = to_codepoints(pattern)
        size = len(self._chars)
        pos = idx
        si = 0
        while pos < size and si < len(needle):
            if needle[si] != self._chars[pos]:
                return False
            pos += 1
            si += 1
        return pos != idx and si == len(needle)

    def find(self, pattern: TextSource, idx: int = 0) -> int:
        ensure_non_negative(idx, name="idx", size=len(self._chars))
        return _find(self._chars, to_codepoints(pattern), idx)

    def rfind(self, pattern: TextSource, idx: Optional[int] = None) -> int:
        """Return the last match starting at or before ``idx`` (default: end)."""

        needle = to_codepoints(pattern)
        last = len(self._chars) - len(needle)
        if last < 0:
            return NOT_FOUND
        if idx is not None:
            ensure_non_negative(idx, name="idx", size=len(self._chars))
            last = min(idx, last)
        width = len(needle)
        # index 0 is a candidate like any other
        for pos in range(last, -1, -1):
            if self._chars[pos : pos + width] == needle:
                return pos
        return NOT_FOUND

    def replace(self, old: TextSource, new: TextSource) -> int:
        """Replace every occurrence of ``old`` with ``new``; return the count.

        Searching resumes right after each inserted replacement, so text
        introduced by ``new`` is never matched again.
        """

        needle = to_codepoints(old)
        if not needle:
            return 0
        replacement = to_codepoints(new)
        count = 0
        pattern = decode_display(encode_display(needle))
        with telemetry.span(
            "chunk::replace", metadata={"pattern": pattern, "size": len(self._chars)}
        ):
            pos = _find(self._chars, needle, 0)
            while pos != NOT_FOUND:
                count += 1
                self.erase(pos, len(needle))
                self.insert(pos, replacement)
                pos = _find(self._chars, needle, pos + len(replacement))
        telemetry.record_event(
            "chunk.replace",
            level="debug",
            data={"pattern": pattern, "replacements": count},
        )
        return count

    # -- display -----------------------------------------------------------

    def c_str(self) -> bytes:
        """Return the NUL-terminated display encoding, rebuilding if stale.

        The result describes the content at the time of the call; fetch it
        again after mutating the chunk.
        """

        if not self._display_ok:
            self._display = encode_display(self._chars)
            self._display_ok = True
        return self._display

    def __str__(self) -> str:
        return decode_display(self.c_str())

    def __repr__(self) -> str:
        return f"ChunkText({str(self)!r})"

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._chars))

    def __contains__(self, pattern: object) -> bool:
        if isinstance(pattern, int):
            return pattern in self._chars
        return self.find(pattern) != NOT_FOUND  # type: ignore[arg-type]

    @overload
    def __getitem__(self, key: int) -> int: ...

    @overload
    def __getitem__(self, key: slice) -> "ChunkText": ...

    def __getitem__(self, key: Union[int, slice]) -> Union[int, "ChunkText"]:
        if isinstance(key, slice):
            return ChunkText(self._chars[key])
        return self._chars[ensure_index(key, len(self._chars))]

    def __setitem__(self, key: Union[int, slice], value: ChunkSource) -> None:
        if isinstance(key, slice):
            self._chars[key] = to_codepoints(value)  # type: ignore[arg-type]
        else:
            if not isinstance(value, int):
                raise TypeError("a single position takes an int code point")
            self._chars[ensure_index(key, len(self._chars))] = value
        self._invalidate()

    def __iadd__(self, other: ChunkSource) -> "ChunkText":
        self.append(other)
        return self

    def __add__(self, other: ChunkSource) -> "ChunkText":
        result = ChunkText(self)
        result.append(other)
        return result


__all__ = ["ChunkText", "NOT_FOUND"]
