"""UTF-8 code-point codec.

Decoding is permissive: a malformed or truncated sequence yields
:data:`~unicodec.codec.REPLACEMENT_CHARACTER` and the cursor moves on by a
single byte, so the next call resynchronises on whatever follows.
Overlong forms and encoded surrogates are accepted as-is.
"""

from __future__ import annotations

from unicodec.codec import REPLACEMENT_CHARACTER, BytesLike


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def _sequence_length(lead: int) -> int:
    """Length announced by a leading byte, or 0 if it cannot start a sequence."""
    if (lead & 0x80) == 0:
        return 1
    if (lead & 0xE0) == 0xC0:
        return 2
    if (lead & 0xF0) == 0xE0:
        return 3
    if (lead & 0xF8) == 0xF0:
        return 4
    return 0


def extract_utf8(data: BytesLike, pos: int) -> tuple[int, int]:
    """Decode the code point starting at *pos*.

    :returns: ``(code_point, new_pos)``.
    """
    size = len(data)
    b0 = data[pos]

    if (b0 & 0x80) == 0:
        return b0, pos + 1

    if pos + 1 < size and (b0 & 0xE0) == 0xC0 and _is_continuation(data[pos + 1]):
        return ((b0 & 0x1F) << 6) | (data[pos + 1] & 0x3F), pos + 2

    if (
        pos + 2 < size
        and (b0 & 0xF0) == 0xE0
        and _is_continuation(data[pos + 1])
        and _is_continuation(data[pos + 2])
    ):
        code_point = (
            ((b0 & 0x0F) << 12) | ((data[pos + 1] & 0x3F) << 6) | (data[pos + 2] & 0x3F)
        )
        return code_point, pos + 3

    if (
        pos + 3 < size
        and (b0 & 0xF8) == 0xF0
        and _is_continuation(data[pos + 1])
        and _is_continuation(data[pos + 2])
        and _is_continuation(data[pos + 3])
    ):
        code_point = (
            ((b0 & 0x07) << 18)
            | ((data[pos + 1] & 0x3F) << 12)
            | ((data[pos + 2] & 0x3F) << 6)
            | (data[pos + 3] & 0x3F)
        )
        return code_point, pos + 4

    return REPLACEMENT_CHARACTER, pos + 1


def incomplete_tail(data: BytesLike, pos: int) -> bool:
    """Return True if ``data[pos:]`` is a well-formed but unfinished sequence.

    That is a leading byte announcing more bytes than remain, followed only
    by continuation bytes.  Such a tail is a truncated final unit rather
    than a run of malformed bytes.
    """
    remaining = len(data) - pos
    if remaining <= 0:
        return False
    needed = _sequence_length(data[pos])
    if needed <= remaining:
        return False
    return all(_is_continuation(data[i]) for i in range(pos + 1, len(data)))


def has_codepoint_utf8(data: BytesLike, pos: int) -> bool:
    return pos < len(data) and not incomplete_tail(data, pos)


def append_utf8(code_point: int, out: bytearray) -> None:
    """Append the UTF-8 form of *code_point* to *out*."""
    if code_point < 0x80:
        out.append(code_point)
    elif code_point < 0x800:
        out.append(0xC0 | (code_point >> 6))
        out.append(0x80 | (code_point & 0x3F))
    elif code_point < 0x10000:
        out.append(0xE0 | (code_point >> 12))
        out.append(0x80 | ((code_point >> 6) & 0x3F))
        out.append(0x80 | (code_point & 0x3F))
    else:
        # Values past U+1FFFFF do not fit the 4-byte form; keep the low bits.
        out.append((0xF0 | (code_point >> 18)) & 0xFF)
        out.append(0x80 | ((code_point >> 12) & 0x3F))
        out.append(0x80 | ((code_point >> 6) & 0x3F))
        out.append(0x80 | (code_point & 0x3F))
