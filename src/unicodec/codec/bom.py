"""BOM (Byte Order Mark) detection."""

from __future__ import annotations

from unicodec.codec import BomResult, BytesLike
from unicodec.enums import Encoding

#: Result for input without a recognisable BOM.
NO_BOM = BomResult(Encoding.UTF8, 0)

# +-----------+-------------+
# | Encoding  | Bytes       |
# |-----------|-------------|
# | utf-8     | EF BB BF    |
# | utf-16-be | FE FF       |
# | utf-16-le | FF FE       |
# | utf-32-be | 00 00 FE FF |
# | utf-32-le | FF FE 00 00 |
# +-----------+-------------+


def detect_bom(data: BytesLike) -> BomResult:
    """Detect the encoding announced by a BOM at the start of *data*.

    UTF-32-LE is only reported when all four BOM bytes are present;
    otherwise ``FF FE`` is read as the shorter UTF-16-LE mark.  Buffers of
    two bytes or fewer never match, so a bare ``FF FE`` falls back too.

    :param data: The raw bytes to inspect.
    :returns: The detected encoding and how many bytes the BOM occupies.
    """
    size = len(data)
    if size <= 2:
        return NO_BOM

    b0, b1, b2 = data[0], data[1], data[2]
    if b0 == 0xFF and b1 == 0xFE:
        if size >= 4 and b2 == 0x00 and data[3] == 0x00:
            return BomResult(Encoding.UTF32LE, 4)
        return BomResult(Encoding.UTF16LE, 2)
    if b0 == 0xFE and b1 == 0xFF:
        return BomResult(Encoding.UTF16BE, 2)
    if size >= 4 and b0 == 0x00 and b1 == 0x00 and b2 == 0xFE and data[3] == 0xFF:
        return BomResult(Encoding.UTF32BE, 4)
    if b0 == 0xEF and b1 == 0xBB and b2 == 0xBF:
        return BomResult(Encoding.UTF8, 3)
    return NO_BOM
