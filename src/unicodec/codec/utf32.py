"""UTF-32 (little- and big-endian) code-point codec.

Each code unit is the code point itself; no range check is made.
"""

from __future__ import annotations

from unicodec._utils import (
    combine_bytes4,
    hh_byte_of,
    hl_byte_of,
    lh_byte_of,
    ll_byte_of,
)
from unicodec.codec import BytesLike


def extract_utf32le(data: BytesLike, pos: int) -> tuple[int, int]:
    code_point = combine_bytes4(data[pos + 3], data[pos + 2], data[pos + 1], data[pos])
    return code_point, pos + 4


def extract_utf32be(data: BytesLike, pos: int) -> tuple[int, int]:
    code_point = combine_bytes4(data[pos], data[pos + 1], data[pos + 2], data[pos + 3])
    return code_point, pos + 4


def has_codepoint_utf32(data: BytesLike, pos: int) -> bool:
    return pos + 4 <= len(data)


def append_utf32le(code_point: int, out: bytearray) -> None:
    out.append(ll_byte_of(code_point))
    out.append(lh_byte_of(code_point))
    out.append(hl_byte_of(code_point))
    out.append(hh_byte_of(code_point))


def append_utf32be(code_point: int, out: bytearray) -> None:
    out.append(hh_byte_of(code_point))
    out.append(hl_byte_of(code_point))
    out.append(lh_byte_of(code_point))
    out.append(ll_byte_of(code_point))
