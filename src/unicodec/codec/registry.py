"""Runtime dispatch from an :class:`Encoding` value to its codec."""

from __future__ import annotations

from typing import assert_never

from unicodec.codec import Codec
from unicodec.codec.utf8 import append_utf8, extract_utf8, has_codepoint_utf8
from unicodec.codec.utf16 import (
    append_utf16be,
    append_utf16le,
    extract_utf16be,
    extract_utf16le,
    has_codepoint_utf16,
)
from unicodec.codec.utf32 import (
    append_utf32be,
    append_utf32le,
    extract_utf32be,
    extract_utf32le,
    has_codepoint_utf32,
)
from unicodec.enums import Encoding


def _build_codec(encoding: Encoding) -> Codec:
    # Exhaustive over the closed enum; a new member fails type checking here.
    match encoding:
        case Encoding.UTF8:
            return Codec(encoding, extract_utf8, append_utf8, has_codepoint_utf8)
        case Encoding.UTF16LE:
            return Codec(encoding, extract_utf16le, append_utf16le, has_codepoint_utf16)
        case Encoding.UTF16BE:
            return Codec(encoding, extract_utf16be, append_utf16be, has_codepoint_utf16)
        case Encoding.UTF32LE:
            return Codec(encoding, extract_utf32le, append_utf32le, has_codepoint_utf32)
        case Encoding.UTF32BE:
            return Codec(encoding, extract_utf32be, append_utf32be, has_codepoint_utf32)
        case _:
            assert_never(encoding)


#: One codec per :class:`Encoding`, in declaration order.
REGISTRY: tuple[Codec, ...] = tuple(_build_codec(enc) for enc in Encoding)

_BY_ENCODING: dict[Encoding, Codec] = {codec.encoding: codec for codec in REGISTRY}


def get_codec(encoding: Encoding) -> Codec:
    """Return the codec bound to *encoding*.

    :raises TypeError: If *encoding* is not an :class:`Encoding` member.
    """
    try:
        return _BY_ENCODING[encoding]
    except (KeyError, TypeError):
        msg = f"encoding must be an Encoding member, got {encoding!r}"
        raise TypeError(msg) from None
