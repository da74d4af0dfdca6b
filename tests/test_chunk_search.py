from contextlib import nullcontext
from typing import Any, Dict, List

import pytest

from chunk_text import NOT_FOUND, ChunkRangeError, ChunkText
from chunk_text.runtime import telemetry


def test_find_substring() -> None:
    chunk = ChunkText("abcde")

    assert chunk.find("cd") == 2
    assert chunk.find("xy") == NOT_FOUND
    assert chunk.find(b"de", 0) == 3


def test_find_respects_start_index() -> None:
    chunk = ChunkText("abab")

    assert chunk.find("ab", 1) == 2
    assert chunk.find("ab", 3) == NOT_FOUND
    assert chunk.find("ab", 99) == NOT_FOUND


def test_find_pattern_longer_than_chunk() -> None:
    assert ChunkText("abc").find("abcd") == NOT_FOUND


def test_find_accepts_chunk_pattern() -> None:
    assert ChunkText("a->b").find(ChunkText("->")) == 1


def test_rfind_returns_last_occurrence() -> None:
    chunk = ChunkText("abab")

    assert chunk.rfind("ab") == 2
    assert chunk.rfind("x") == NOT_FOUND


def test_rfind_checks_index_zero() -> None:
    assert ChunkText("abab").rfind("ab", 1) == 0
    assert ChunkText("abc").rfind("abc", 0) == 0
    assert ChunkText("abc").rfind("abc") == 0
    assert ChunkText("xbc").rfind("x", 0) == 0


def test_rfind_clamps_start_to_last_fit() -> None:
    assert ChunkText("abcab").rfind("ab", 100) == 3


def test_rfind_pattern_longer_than_chunk() -> None:
    assert ChunkText("ab").rfind("abc") == NOT_FOUND
    assert ChunkText("").rfind("a", 0) == NOT_FOUND


def test_startswith_at_offset() -> None:
    chunk = ChunkText("xabcy")

    assert chunk.startswith("abc", 1)
    assert not chunk.startswith("abc", 0)
    assert chunk.startswith(b"xa")
    assert chunk.startswith(ChunkText("cy"), 3)


def test_startswith_requires_progress() -> None:
    chunk = ChunkText("abc")

    assert not chunk.startswith("")
    assert not chunk.startswith("", 1)
    assert not chunk.startswith("abc", 3)
    assert not ChunkText("").startswith("a")


def test_startswith_pattern_running_past_end() -> None:
    assert not ChunkText("ab").startswith("abc")


def test_negative_search_index_is_rejected() -> None:
    chunk = ChunkText("abc")

    with pytest.raises(ChunkRangeError):
        chunk.find("a", -1)
    with pytest.raises(ChunkRangeError):
        chunk.rfind("a", -1)
    with pytest.raises(ChunkRangeError):
        chunk.startswith("a", -1)


def test_contains() -> None:
    chunk = ChunkText("if (x)")

    assert "(x" in chunk
    assert ord("x") in chunk
    assert "y" not in chunk


def test_replace_growing_replacement() -> None:
    chunk = ChunkText("aaa")

    count = chunk.replace("a", "bb")

    assert count == 3
    assert str(chunk) == "bbbbbb"


def test_replace_does_not_rescan_inserted_text() -> None:
    chunk = ChunkText("aXa")

    count = chunk.replace("a", "aa")

    assert count == 2
    assert str(chunk) == "aaXaa"


def test_replace_shrinking_replacement() -> None:
    chunk = ChunkText("abab")

    assert chunk.replace("ab", "c") == 2
    assert str(chunk) == "cc"

    chunk = ChunkText("xaby")
    assert chunk.replace("ab", "") == 1
    assert str(chunk) == "xy"


def test_replace_without_match_keeps_cache() -> None:
    chunk = ChunkText("abc")
    chunk.c_str()

    assert chunk.replace("z", "y") == 0
    assert chunk.cache_valid


def test_replace_invalidates_cache() -> None:
    chunk = ChunkText("a\tb")
    before = chunk.c_str()

    chunk.replace("\t", " ")

    assert not chunk.cache_valid
    assert before == b"a\tb\x00"
    assert chunk.c_str() == b"a b\x00"


def test_replace_empty_pattern_is_noop() -> None:
    chunk = ChunkText("abc")

    assert chunk.replace("", "x") == 0
    assert str(chunk) == "abc"


def test_replace_reports_count_through_telemetry(monkeypatch) -> None:
    events: List[Dict[str, Any]] = []

    def fake_record(name: str, **kwargs: Any) -> None:
        events.append({"name": name, **kwargs})

    monkeypatch.setattr(telemetry, "record_event", fake_record)
    monkeypatch.setattr(telemetry, "span", lambda name, **kwargs: nullcontext())
    chunk = ChunkText("a\nb\n")

    assert chunk.replace("\n", " ") == 2

    assert events == [
        {
            "name": "chunk.replace",
            "level": "debug",
            "data": {"pattern": chr(0x2424), "replacements": 2},
        }
    ]
