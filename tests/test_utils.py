from __future__ import annotations

import array

import pytest

from unicodec._utils import (
    _as_byte_view,
    _validate_flags,
    combine_bytes,
    combine_bytes4,
    hh_byte_of,
    high_byte_of,
    hl_byte_of,
    lh_byte_of,
    ll_byte_of,
    low_byte_of,
)
from unicodec.enums import TranscodeFlag

# ---------------------------------------------------------------------------
# Byte composer
# ---------------------------------------------------------------------------


def test_combine_two_bytes():
    assert combine_bytes(0xCA, 0xFE) == 0xCAFE
    assert combine_bytes(0x01, 0x02) == 0x0102
    assert combine_bytes(0x00, 0x00) == 0


def test_split_word():
    assert high_byte_of(0xCAFE) == 0xCA
    assert low_byte_of(0xCAFE) == 0xFE
    assert high_byte_of(0x0102) == 0x01
    assert low_byte_of(0x0102) == 0x02


def test_combine_four_bytes():
    assert combine_bytes4(0xFA, 0xDE, 0xBA, 0xDA) == 0xFADEBADA
    assert combine_bytes4(0x01, 0x02, 0x03, 0x04) == 0x01020304


def test_split_dword():
    assert hh_byte_of(0xFADEBADA) == 0xFA
    assert hl_byte_of(0xFADEBADA) == 0xDE
    assert lh_byte_of(0xFADEBADA) == 0xBA
    assert ll_byte_of(0xFADEBADA) == 0xDA


def test_split_masks_wider_values():
    # Only the addressed byte is returned, whatever sits above it.
    assert low_byte_of(0x1_23_45) == 0x45
    assert high_byte_of(0x1_23_45) == 0x23
    assert hh_byte_of(0x1_FF_00_00_00) == 0xFF


def test_combine_then_split_is_identity():
    value = combine_bytes4(0x12, 0x34, 0x56, 0x78)
    parts = (hh_byte_of(value), hl_byte_of(value), lh_byte_of(value), ll_byte_of(value))
    assert parts == (0x12, 0x34, 0x56, 0x78)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def test_byte_view_does_not_copy():
    data = b"hello"
    view = _as_byte_view(data)
    assert view.obj is data
    assert view[0] == ord("h")


def test_byte_view_casts_wider_formats():
    words = array.array("H", [1, 2, 3])
    view = _as_byte_view(words)
    assert view.format == "B"
    assert len(view) == 3 * words.itemsize


def test_byte_view_rejects_str():
    with pytest.raises(TypeError, match="bytes-like"):
        _as_byte_view("not bytes")  # type: ignore[arg-type]


@pytest.mark.parametrize("flags", [0, 1, TranscodeFlag.NONE, TranscodeFlag.SKIP_BOM])
def test_validate_flags_accepts_known_bits(flags):
    assert isinstance(_validate_flags(flags), TranscodeFlag)


@pytest.mark.parametrize("flags", [2, 0x80, -1, True, 1.0, "SKIP_BOM", None])
def test_validate_flags_rejects_unknown(flags):
    with pytest.raises(ValueError):
        _validate_flags(flags)
