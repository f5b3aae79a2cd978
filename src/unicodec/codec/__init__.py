"""Per-encoding code-point codecs and shared codec types."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator

from unicodec.enums import Encoding

#: Code point substituted for any unit that cannot be decoded (U+FFFD).
REPLACEMENT_CHARACTER: int = 0xFFFD

BytesLike = bytes | bytearray | memoryview

#: ``extract(data, pos) -> (code_point, new_pos)``
ExtractFunc = Callable[[BytesLike, int], tuple[int, int]]
#: ``append(code_point, out) -> None``
AppendFunc = Callable[[int, bytearray], None]
#: ``has_codepoint(data, pos) -> bool``
ReadyFunc = Callable[[BytesLike, int], bool]


@dataclasses.dataclass(frozen=True, slots=True)
class BomResult:
    """Outcome of byte order mark detection.

    Unpacks as a pair, so ``encoding, bom_length = detect_bom(data)`` works.
    A *bom_length* of 0 means no BOM was found and UTF-8 is assumed.
    """

    encoding: Encoding
    bom_length: int

    def __iter__(self) -> Iterator[Encoding | int]:
        yield self.encoding
        yield self.bom_length


@dataclasses.dataclass(frozen=True, slots=True)
class Codec:
    """The decode/encode pair bound to a single :class:`Encoding`."""

    encoding: Encoding
    extract: ExtractFunc
    append: AppendFunc
    has_codepoint: ReadyFunc
