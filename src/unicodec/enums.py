"""Enumerations for unicodec."""

from __future__ import annotations

import enum


class Encoding(enum.Enum):
    """The closed set of byte encodings the engine reads and writes.

    There is deliberately no "unknown" member: BOM detection falls back to
    :attr:`UTF8` when nothing else matches.
    """

    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    UTF16BE = "utf-16-be"
    UTF32LE = "utf-32-le"
    UTF32BE = "utf-32-be"

    @property
    def codec_name(self) -> str:
        """Name of the equivalent Python codec, usable with ``bytes.decode``."""
        return self.value

    @property
    def unit_size(self) -> int:
        """Width in bytes of one code unit."""
        return _UNIT_SIZES[self]

    @classmethod
    def from_name(cls, name: str) -> Encoding:
        """Look up a member by a loosely spelled label.

        Case, ``-`` and ``_`` are ignored, so ``"UTF-16LE"``, ``"utf_16_le"``
        and ``"utf16le"`` all resolve to :attr:`UTF16LE`.

        :raises ValueError: If *name* does not name one of the five encodings.
        """
        key = name.replace("-", "").replace("_", "").upper()
        try:
            return cls[key]
        except KeyError:
            msg = f"unsupported encoding: {name!r}"
            raise ValueError(msg) from None


_UNIT_SIZES: dict[Encoding, int] = {
    Encoding.UTF8: 1,
    Encoding.UTF16LE: 2,
    Encoding.UTF16BE: 2,
    Encoding.UTF32LE: 4,
    Encoding.UTF32BE: 4,
}


class TranscodeFlag(enum.IntFlag):
    """Bit flags tuning how input bytes are consumed."""

    NONE = 0
    SKIP_BOM = 1
