"""Transcoding pipeline: bytes to bytes, bytes to code points and back.

Every entry point is total over its input bytes.  Malformed units come out
as U+FFFD, and a buffer that ends part-way through a unit gets exactly one
U+FFFD appended for the truncated tail.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from unicodec._utils import _as_byte_view, _validate_flags
from unicodec.codec import REPLACEMENT_CHARACTER, BytesLike
from unicodec.codec.bom import detect_bom
from unicodec.codec.registry import get_codec
from unicodec.cursor import ByteCursor
from unicodec.enums import Encoding, TranscodeFlag

logger = logging.getLogger(__name__)

#: Flags used when none are given: the BOM is decoded like any other bytes.
DEFAULT_FLAGS = TranscodeFlag.NONE

_MAX_CODE_POINT = 0xFFFFFFFF

_UTF16 = frozenset({Encoding.UTF16LE, Encoding.UTF16BE})
_UTF32 = frozenset({Encoding.UTF32LE, Encoding.UTF32BE})


def expansion_ratio(in_encoding: Encoding, out_encoding: Encoding) -> int:
    """Growth factor to expect from transcoding *in_encoding* to *out_encoding*.

    A sizing hint only.  It is exact for the widening conversions but UTF-16
    text in the U+0800..U+FFFF range grows by half when written as UTF-8.
    """
    if out_encoding in _UTF32:
        if in_encoding is Encoding.UTF8:
            return 4
        if in_encoding in _UTF16:
            return 2
    elif out_encoding in _UTF16 and in_encoding is Encoding.UTF8:
        return 2
    return 1


def _drain(cursor: ByteCursor) -> Iterator[int]:
    """Yield every code point, then U+FFFD if the buffer ends mid-unit."""
    yield from cursor
    if cursor.has_bytes():
        logger.debug(
            "Truncated %s unit at offset %d of %d, substituting U+FFFD",
            cursor.encoding.name,
            cursor.byte_pos,
            len(cursor.data),
        )
        cursor.set_as_depleted()
        yield REPLACEMENT_CHARACTER


def _sniff(
    data: BytesLike, flags: TranscodeFlag | int
) -> tuple[memoryview, Encoding]:
    """Detect the input encoding from its BOM, dropping the BOM if asked to."""
    flags = _validate_flags(flags)
    view = _as_byte_view(data)
    encoding, bom_length = detect_bom(view)
    logger.debug("Detected %s with a %d-byte BOM", encoding.name, bom_length)
    if flags & TranscodeFlag.SKIP_BOM:
        view = view[bom_length:]
    return view, encoding


def reencode(data: BytesLike, in_encoding: Encoding, out_encoding: Encoding) -> bytes:
    """Re-encode *data* from *in_encoding* to *out_encoding*.

    The input encoding is taken as given; no BOM detection is done and any
    BOM bytes are carried through as U+FEFF.

    :param data: The bytes to convert.
    :param in_encoding: How *data* is encoded.
    :param out_encoding: The encoding of the result.
    :returns: A new ``bytes`` object.
    """
    cursor = ByteCursor(data, in_encoding)
    append = get_codec(out_encoding).append
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Re-encoding %d bytes %s -> %s (expect x%d)",
            len(cursor.data),
            in_encoding.name,
            out_encoding.name,
            expansion_ratio(in_encoding, out_encoding),
        )
    out = bytearray()
    for code_point in _drain(cursor):
        append(code_point, out)
    return bytes(out)


def encode_as(
    out_encoding: Encoding,
    data: BytesLike,
    flags: TranscodeFlag | int = DEFAULT_FLAGS,
) -> bytes:
    """Convert *data* to *out_encoding*, sniffing its encoding from the BOM.

    The BOM is authoritative: whatever the caller believes about *data*,
    it is decoded as the encoding its first bytes announce, or as UTF-8
    when there is no BOM.

    :param out_encoding: The encoding of the result.
    :param data: The bytes to convert.
    :param flags: :attr:`TranscodeFlag.SKIP_BOM` drops the detected BOM
        instead of converting it.
    :returns: A new ``bytes`` object.
    """
    get_codec(out_encoding)
    view, in_encoding = _sniff(data, flags)
    return reencode(view, in_encoding, out_encoding)


def encode_if_necessary_as(
    out_encoding: Encoding,
    data: BytesLike,
    scratch: bytearray,
    flags: TranscodeFlag | int = DEFAULT_FLAGS,
) -> memoryview:
    """Like :func:`encode_as`, but avoid copying when nothing changes.

    If the detected encoding already is *out_encoding*, the result is a
    view of *data* itself (past the BOM when it is skipped).  Otherwise
    the converted bytes replace the contents of *scratch* and the result
    is a view of *scratch*.  While that view is alive *scratch* cannot be
    resized.

    :param out_encoding: The encoding of the result.
    :param data: The bytes to convert.
    :param scratch: Caller-owned buffer receiving converted output.
    :param flags: See :func:`encode_as`.
    :raises TypeError: If *scratch* is not a ``bytearray``.
    """
    get_codec(out_encoding)
    if not isinstance(scratch, bytearray):
        msg = f"scratch must be a bytearray, got {type(scratch).__name__}"
        raise TypeError(msg)
    view, in_encoding = _sniff(data, flags)
    if in_encoding is out_encoding:
        logger.debug("Input already %s, returning it unchanged", out_encoding.name)
        return view
    scratch[:] = reencode(view, in_encoding, out_encoding)
    return memoryview(scratch)


def to_code_points(data: BytesLike, encoding: Encoding) -> list[int]:
    """Decode *data* from *encoding* into a list of code points."""
    return list(_drain(ByteCursor(data, encoding)))


def decode(data: BytesLike, flags: TranscodeFlag | int = DEFAULT_FLAGS) -> list[int]:
    """Decode *data* into code points, sniffing its encoding from the BOM."""
    view, encoding = _sniff(data, flags)
    return to_code_points(view, encoding)


def from_code_points(code_points: str | Iterable[int], encoding: Encoding) -> bytes:
    """Encode a sequence of code points.

    :param code_points: Integers, or a ``str`` whose characters are used.
    :param encoding: The encoding of the result.  No BOM is written.
    :raises ValueError: If a code point does not fit in 32 unsigned bits.
    """
    append = get_codec(encoding).append
    if isinstance(code_points, str):
        code_points = map(ord, code_points)
    out = bytearray()
    for code_point in code_points:
        if not 0 <= code_point <= _MAX_CODE_POINT:
            msg = f"code point {code_point!r} is not a 32-bit unsigned value"
            raise ValueError(msg)
        append(code_point, out)
    return bytes(out)


def encode_codepoint(code_point: int, encoding: Encoding) -> bytes:
    """Encode a single code point."""
    return from_code_points((code_point,), encoding)


def to_utf8(code_points: str | Iterable[int] | int) -> bytes:
    """Encode one code point, or a sequence of them, as UTF-8."""
    if isinstance(code_points, int):
        return encode_codepoint(code_points, Encoding.UTF8)
    return from_code_points(code_points, Encoding.UTF8)
