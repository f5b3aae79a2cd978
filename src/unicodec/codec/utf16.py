"""UTF-16 (little- and big-endian) code-point codec.

A code unit outside ``[0xD800, 0xE000)`` is the code point itself (Basic
Multilingual Plane).  Anything above U+FFFF is carried by a surrogate pair::

    lead  = 0b110110yyyyyyyyyy   # 0xD800 + yyyyyyyyyy, in [0xD800, 0xDC00)
    trail = 0b110111xxxxxxxxxx   # 0xDC00 + xxxxxxxxxx, in [0xDC00, 0xE000)
    code_point = 0x10000 + yyyyyyyyyyxxxxxxxxxx

On a broken pair only the first unit is consumed, so a following unit that
is not a trailing surrogate is decoded on its own by the next call.
"""

from __future__ import annotations

from unicodec._utils import combine_bytes, high_byte_of, low_byte_of
from unicodec.codec import REPLACEMENT_CHARACTER, BytesLike

_LEAD_MIN = 0xD800
_TRAIL_MIN = 0xDC00
_SURROGATE_END = 0xE000
_SUPPLEMENTARY_MIN = 0x10000


def _unit_le(data: BytesLike, i: int) -> int:
    return combine_bytes(data[i + 1], data[i])


def _unit_be(data: BytesLike, i: int) -> int:
    return combine_bytes(data[i], data[i + 1])


def _extract(data: BytesLike, pos: int, little_endian: bool) -> tuple[int, int]:
    get_unit = _unit_le if little_endian else _unit_be

    lead = get_unit(data, pos)
    pos += 2

    if lead < _LEAD_MIN or lead >= _SURROGATE_END:
        return lead, pos

    # Lone trailing surrogate, or no room left for the second unit.
    if lead >= _TRAIL_MIN or pos + 1 >= len(data):
        return REPLACEMENT_CHARACTER, pos

    trail = get_unit(data, pos)
    if trail < _TRAIL_MIN or trail >= _SURROGATE_END:
        return REPLACEMENT_CHARACTER, pos

    code_point = _SUPPLEMENTARY_MIN + ((lead - _LEAD_MIN) << 10) + (trail - _TRAIL_MIN)
    return code_point, pos + 2


def extract_utf16le(data: BytesLike, pos: int) -> tuple[int, int]:
    return _extract(data, pos, little_endian=True)


def extract_utf16be(data: BytesLike, pos: int) -> tuple[int, int]:
    return _extract(data, pos, little_endian=False)


def has_codepoint_utf16(data: BytesLike, pos: int) -> bool:
    return pos + 2 <= len(data)


def split_surrogates(code_point: int) -> tuple[int, int]:
    """Split a supplementary-plane *code_point* into ``(lead, trail)`` units.

    :raises ValueError: If *code_point* is below U+10000.
    """
    if code_point < _SUPPLEMENTARY_MIN:
        msg = f"U+{code_point:04X} does not need a surrogate pair"
        raise ValueError(msg)
    offset = code_point - _SUPPLEMENTARY_MIN
    lead = ((offset >> 10) + _LEAD_MIN) & 0xFFFF
    trail = (offset & 0x3FF) + _TRAIL_MIN
    return lead, trail


def _units_of(code_point: int) -> tuple[int, ...]:
    if code_point < _SUPPLEMENTARY_MIN:
        return (code_point & 0xFFFF,)
    return split_surrogates(code_point)


def append_utf16le(code_point: int, out: bytearray) -> None:
    for unit in _units_of(code_point):
        out.append(low_byte_of(unit))
        out.append(high_byte_of(unit))


def append_utf16be(code_point: int, out: bytearray) -> None:
    for unit in _units_of(code_point):
        out.append(high_byte_of(unit))
        out.append(low_byte_of(unit))
