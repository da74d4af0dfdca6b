"""Display encoding used when chunks are written to logs."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

NL_SYMBOL = 0x2424
CR_SYMBOL = 0x240D
REPLACEMENT = 0xFFFD
TERMINATOR = b"\x00"

GLYPHS: Mapping[int, int] = MappingProxyType({0x0A: NL_SYMBOL, 0x0D: CR_SYMBOL})


def encode_codepoint(ch: int) -> bytes:
    if ch < 0 or ch > 0x10FFFF:
        ch = REPLACEMENT
    return chr(ch).encode("utf-8", "surrogatepass")


def encode_display(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 with visible LF/CR glyphs and a NUL byte."""

    out = bytearray()
    for ch in codepoints:
        out += encode_codepoint(GLYPHS.get(ch, ch))
    out += TERMINATOR
    return bytes(out)


def decode_display(data: bytes) -> str:
    """Return the printable text of an encoded display buffer."""

    if data.endswith(TERMINATOR):
        data = data[:-1]
    return data.decode("utf-8", "surrogatepass")


__all__ = [
    "CR_SYMBOL",
    "GLYPHS",
    "NL_SYMBOL",
    "TERMINATOR",
    "decode_display",
    "encode_codepoint",
    "encode_display",
]
