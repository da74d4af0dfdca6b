import pytest

from chunk_text import ChunkRangeError, ChunkText
from chunk_text.text import clamp_window, to_codepoints


def codes(text: str) -> tuple[int, ...]:
    return tuple(ord(ch) for ch in text)


def test_empty_chunk() -> None:
    chunk = ChunkText()

    assert len(chunk) == 0
    assert chunk.codepoints == ()


def test_ascii_text_round_trips_as_codepoints() -> None:
    text = "int main(void) { return 0; }"

    assert ChunkText(text).codepoints == codes(text)
    assert ChunkText(text.encode("ascii")).codepoints == codes(text)


def test_bytes_are_zero_extended() -> None:
    assert ChunkText(b"\xff\x01").codepoints == (255, 1)


def test_single_codepoint() -> None:
    chunk = ChunkText("previous")
    chunk.set(0x41)

    assert chunk.codepoints == (65,)


def test_copy_does_not_share_storage() -> None:
    original = ChunkText("abc")
    copy = ChunkText(original)
    copy.append(ord("d"))

    assert original.codepoints == codes("abc")
    assert copy.codepoints == codes("abcd")


def test_window_of_chunk() -> None:
    source = ChunkText("hello")

    assert ChunkText(source, 1, 3).codepoints == codes("ell")


def test_window_matching_full_size_copies_whole_source() -> None:
    source = ChunkText("hello")

    assert ChunkText(source, 3, 5).codepoints == codes("hello")


def test_window_overrun_is_zero_filled() -> None:
    source = ChunkText("hello")

    assert ChunkText(source, 3, 4).codepoints == (ord("l"), ord("o"), 0, 0)
    assert ChunkText(source, 7, 2).codepoints == (0, 0)


def test_raw_sequence_window_has_no_full_size_shortcut() -> None:
    assert ChunkText([1, 2, 3], 1, 3).codepoints == (2, 3, 0)
    assert ChunkText([1, 2, 3], 0, 3).codepoints == (1, 2, 3)


def test_offset_without_length_takes_the_tail() -> None:
    assert ChunkText("hello", 2).codepoints == codes("llo")


def test_set_invalidates_display_cache() -> None:
    chunk = ChunkText("abc")
    chunk.c_str()
    assert chunk.cache_valid

    chunk.set("xyz")

    assert not chunk.cache_valid
    assert str(chunk) == "xyz"


def test_negative_window_is_rejected() -> None:
    with pytest.raises(ChunkRangeError):
        ChunkText("abc", -1, 2)
    with pytest.raises(IndexError):
        ChunkText("abc", 0, -2)


def test_unsupported_source_type() -> None:
    with pytest.raises(TypeError):
        ChunkText(3.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        to_codepoints(["a", "b"])  # type: ignore[list-item]


def test_clamp_window() -> None:
    assert clamp_window(5, 0, 3) == 3
    assert clamp_window(5, 3, 3) == 2
    assert clamp_window(5, 5, 1) == 0
    assert clamp_window(0, 0, 4) == 0
