"""Unicode transcoding between UTF-8, UTF-16 and UTF-32 with BOM sniffing."""

from __future__ import annotations

import logging

from unicodec.codec import REPLACEMENT_CHARACTER, BomResult
from unicodec.codec.bom import detect_bom
from unicodec.cursor import ByteCursor, CursorContext, CursorError
from unicodec.enums import Encoding, TranscodeFlag
from unicodec.transcoder import (
    decode,
    encode_as,
    encode_codepoint,
    encode_if_necessary_as,
    expansion_ratio,
    from_code_points,
    reencode,
    to_code_points,
    to_utf8,
)

__version__ = "1.0.0"
__all__ = [
    "REPLACEMENT_CHARACTER",
    "BomResult",
    "ByteCursor",
    "CursorContext",
    "CursorError",
    "Encoding",
    "TranscodeFlag",
    "decode",
    "detect_bom",
    "encode_as",
    "encode_codepoint",
    "encode_if_necessary_as",
    "expansion_ratio",
    "from_code_points",
    "reencode",
    "to_code_points",
    "to_utf8",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
