"""Internal shared utilities for unicodec."""

from __future__ import annotations

from unicodec.enums import TranscodeFlag

# ---------------------------------------------------------------------------
# Byte composer
# ---------------------------------------------------------------------------


def combine_bytes(high: int, low: int) -> int:
    """Compose a 16-bit value from its high and low bytes."""
    return ((high & 0xFF) << 8) | (low & 0xFF)


def combine_bytes4(hh: int, hl: int, lh: int, ll: int) -> int:
    """Compose a 32-bit value from its four bytes, most significant first."""
    return ((hh & 0xFF) << 24) | ((hl & 0xFF) << 16) | ((lh & 0xFF) << 8) | (ll & 0xFF)


def high_byte_of(word: int) -> int:
    return (word >> 8) & 0xFF


def low_byte_of(word: int) -> int:
    return word & 0xFF


def hh_byte_of(dword: int) -> int:
    return (dword >> 24) & 0xFF


def hl_byte_of(dword: int) -> int:
    return (dword >> 16) & 0xFF


def lh_byte_of(dword: int) -> int:
    return (dword >> 8) & 0xFF


def ll_byte_of(dword: int) -> int:
    return dword & 0xFF


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------


def _as_byte_view(data: bytes | bytearray | memoryview) -> memoryview:
    """Return an unsigned-byte ``memoryview`` over *data* without copying.

    :raises TypeError: If *data* does not support the buffer protocol.
    """
    try:
        view = memoryview(data)
    except TypeError:
        msg = f"expected a bytes-like object, got {type(data).__name__}"
        raise TypeError(msg) from None
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _validate_flags(flags: TranscodeFlag | int) -> TranscodeFlag:
    """Coerce *flags* to :class:`TranscodeFlag`, rejecting unknown bits."""
    if isinstance(flags, bool) or not isinstance(flags, int):
        msg = f"flags must be a TranscodeFlag, got {flags!r}"
        raise ValueError(msg)
    known = 0
    for member in TranscodeFlag:
        known |= member.value
    if flags < 0 or flags & ~known:
        msg = f"unknown transcode flag bits in {flags!r}"
        raise ValueError(msg)
    return TranscodeFlag(flags)
