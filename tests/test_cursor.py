from __future__ import annotations

import dataclasses

import pytest

from unicodec.codec import REPLACEMENT_CHARACTER
from unicodec.cursor import ByteCursor, CursorContext, CursorError
from unicodec.enums import Encoding


def test_walk_utf16le():
    cursor = ByteCursor(b"\x61\x00\x62\x00\x63\x00", Encoding.UTF16LE)
    for expected_pos, expected_char in ((0, "a"), (2, "b"), (4, "c")):
        assert cursor.has_bytes()
        assert cursor.has_codepoint()
        assert cursor.byte_pos == expected_pos
        assert cursor.extract_codepoint() == ord(expected_char)
    assert not cursor.has_bytes()
    assert not cursor.has_codepoint()
    assert cursor.byte_pos == 6


def test_iteration_yields_code_points(encoding):
    text = "aà⟶🍌"
    cursor = ByteCursor(text.encode(encoding.codec_name), encoding)
    assert list(cursor) == [ord(c) for c in text]
    assert not cursor.has_bytes()


def test_empty_buffer():
    cursor = ByteCursor(b"", Encoding.UTF8)
    assert not cursor.has_bytes()
    assert not cursor.has_codepoint()
    assert list(cursor) == []


# ---------------------------------------------------------------------------
# Truncated units
# ---------------------------------------------------------------------------


def test_truncated_utf8_tail_is_not_a_codepoint():
    cursor = ByteCursor(b"\xe2\x9f", Encoding.UTF8)
    assert cursor.has_bytes()
    assert not cursor.has_codepoint()


def test_malformed_utf8_is_still_a_codepoint():
    cursor = ByteCursor(b"\xe2\x9fA", Encoding.UTF8)
    assert list(cursor) == [REPLACEMENT_CHARACTER, REPLACEMENT_CHARACTER, 0x41]


def test_odd_utf16_tail():
    cursor = ByteCursor(b"a\x00b", Encoding.UTF16LE)
    assert cursor.extract_codepoint() == 0x61
    assert cursor.has_bytes()
    assert not cursor.has_codepoint()


def test_short_utf32_tail():
    cursor = ByteCursor(b"\x00\x00\x00a\x00", Encoding.UTF32BE)
    assert cursor.extract_codepoint() == 0x61
    assert cursor.has_bytes()
    assert not cursor.has_codepoint()


def test_extract_without_codepoint_raises():
    cursor = ByteCursor(b"\xe2\x9f", Encoding.UTF8)
    with pytest.raises(CursorError, match="offset 0"):
        cursor.extract_codepoint()
    assert cursor.byte_pos == 0


def test_cursor_error_is_value_error():
    assert issubclass(CursorError, ValueError)
    cursor = ByteCursor(b"", Encoding.UTF32LE)
    with pytest.raises(ValueError):
        cursor.extract_codepoint()


# ---------------------------------------------------------------------------
# Positioning
# ---------------------------------------------------------------------------


def test_save_and_restore_context():
    cursor = ByteCursor(b"abc", Encoding.UTF8)
    cursor.extract_codepoint()
    context = cursor.save_context()
    assert context == CursorContext(1)
    assert cursor.extract_codepoint() == ord("b")
    assert cursor.extract_codepoint() == ord("c")
    cursor.restore_context(context)
    assert cursor.byte_pos == 1
    assert cursor.extract_codepoint() == ord("b")


def test_context_is_frozen():
    context = CursorContext(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.offset = 0  # type: ignore[misc]


def test_advance_skips_bytes():
    cursor = ByteCursor(b"\xef\xbb\xbfhi", Encoding.UTF8)
    cursor.advance(3)
    assert cursor.byte_pos == 3
    assert list(cursor) == [ord("h"), ord("i")]


def test_advance_is_clamped_to_end():
    cursor = ByteCursor(b"hi", Encoding.UTF8)
    cursor.advance(10)
    assert cursor.byte_pos == 2
    assert not cursor.has_bytes()


def test_advance_rejects_negative():
    cursor = ByteCursor(b"hi", Encoding.UTF8)
    with pytest.raises(ValueError, match="negative"):
        cursor.advance(-1)


def test_set_as_depleted():
    cursor = ByteCursor(b"hello", Encoding.UTF8)
    cursor.set_as_depleted()
    assert cursor.byte_pos == 5
    assert not cursor.has_bytes()
    assert cursor.current_view().tobytes() == b""


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def test_views_alias_the_input():
    data = b"hello world"
    cursor = ByteCursor(data, Encoding.UTF8)
    assert cursor.data.obj is data
    cursor.advance(6)
    remaining = cursor.current_view()
    assert remaining.obj is data
    assert remaining.tobytes() == b"world"


def test_view_between():
    cursor = ByteCursor(b"hello world", Encoding.UTF8)
    assert cursor.view_between(0, 5).tobytes() == b"hello"
    assert cursor.view_between(4, 4).tobytes() == b""


def test_view_between_rejects_reversed_range():
    cursor = ByteCursor(b"hello", Encoding.UTF8)
    with pytest.raises(ValueError, match="must not be after"):
        cursor.view_between(3, 1)


def test_accepts_bytearray_and_memoryview():
    assert list(ByteCursor(bytearray(b"ab"), Encoding.UTF8)) == [0x61, 0x62]
    assert list(ByteCursor(memoryview(b"ab"), Encoding.UTF8)) == [0x61, 0x62]


def test_rejects_bad_arguments():
    with pytest.raises(TypeError):
        ByteCursor("text", Encoding.UTF8)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ByteCursor(b"text", "utf-8")  # type: ignore[arg-type]


def test_properties_and_repr():
    cursor = ByteCursor(b"\x00a", Encoding.UTF16BE)
    assert cursor.encoding is Encoding.UTF16BE
    assert repr(cursor) == "ByteCursor(encoding=UTF16BE, byte_pos=0, size=2)"
