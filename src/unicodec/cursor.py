"""ByteCursor: position-tracking reader over an encoded byte buffer."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from unicodec._utils import _as_byte_view
from unicodec.codec import BytesLike
from unicodec.codec.registry import get_codec
from unicodec.enums import Encoding


class CursorError(ValueError):
    """Raised when a cursor is asked for a code point it does not hold."""


@dataclasses.dataclass(frozen=True, slots=True)
class CursorContext:
    """Snapshot of a cursor position, restorable with :meth:`ByteCursor.restore_context`."""

    offset: int


class ByteCursor:
    """Reads code points one at a time from a buffer in a fixed encoding.

    The cursor holds a :class:`memoryview` over the caller's bytes and an
    offset into it; the bytes themselves are never copied.  The offset
    always satisfies ``0 <= byte_pos <= len(data)``.
    """

    def __init__(self, data: BytesLike, encoding: Encoding) -> None:
        """Bind a cursor to *data*.

        :param data: Any bytes-like object.  It must not be resized while
            the cursor is alive.
        :param encoding: How the bytes are encoded.
        :raises TypeError: If *data* is not bytes-like or *encoding* is not
            an :class:`Encoding`.
        """
        self._codec = get_codec(encoding)
        self._view = _as_byte_view(data)
        self._offset = 0

    @property
    def encoding(self) -> Encoding:
        return self._codec.encoding

    @property
    def data(self) -> memoryview:
        """The whole underlying buffer, regardless of position."""
        return self._view

    @property
    def byte_pos(self) -> int:
        """Absolute offset of the next unread byte."""
        return self._offset

    def has_bytes(self) -> bool:
        """Whether any unread byte remains."""
        return self._offset < len(self._view)

    def has_codepoint(self) -> bool:
        """Whether enough bytes remain to decode one more full code point.

        May be False while :meth:`has_bytes` is True: the buffer then ends
        in a truncated unit.
        """
        return self._codec.has_codepoint(self._view, self._offset)

    def current_view(self) -> memoryview:
        """The unread remainder of the buffer."""
        return self._view[self._offset :]

    def view_between(self, start: int, stop: int) -> memoryview:
        """The bytes between two absolute positions.

        :raises ValueError: If *start* is after *stop*.
        """
        if start > stop:
            msg = f"start ({start}) must not be after stop ({stop})"
            raise ValueError(msg)
        return self._view[start:stop]

    def advance(self, num_bytes: int) -> None:
        """Skip *num_bytes* without decoding them (e.g. a BOM).

        The offset never moves past the end of the buffer.

        :raises ValueError: If *num_bytes* is negative.
        """
        if num_bytes < 0:
            msg = "num_bytes must not be negative"
            raise ValueError(msg)
        self._offset = min(self._offset + num_bytes, len(self._view))

    def set_as_depleted(self) -> None:
        """Mark every byte as consumed."""
        self._offset = len(self._view)

    def extract_codepoint(self) -> int:
        """Decode the next code point and move past it.

        Malformed units decode to U+FFFD rather than raising.

        :raises CursorError: If :meth:`has_codepoint` is False.  This is a
            caller bug, not a property of the input.
        """
        if not self.has_codepoint():
            msg = (
                f"no complete {self.encoding.codec_name} code point at "
                f"offset {self._offset} of {len(self._view)}"
            )
            raise CursorError(msg)
        code_point, self._offset = self._codec.extract(self._view, self._offset)
        return code_point

    def save_context(self) -> CursorContext:
        return CursorContext(self._offset)

    def restore_context(self, context: CursorContext) -> None:
        """Return to a position captured by :meth:`save_context`."""
        self._offset = context.offset

    def __iter__(self) -> Iterator[int]:
        while self.has_codepoint():
            yield self.extract_codepoint()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(encoding={self.encoding.name}, "
            f"byte_pos={self._offset}, size={len(self._view)})"
        )
