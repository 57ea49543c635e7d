"""Perk bitmap packing.

One bit per perk in perk list order, MSB-first within each byte. The
bitmap occupies ``ceil(n / 8)`` bytes; unused low-order bits of the last
byte are zero.
"""

from __future__ import annotations

from collections.abc import Iterable


def bitmap_size(count: int) -> int:
    """Number of bytes needed to hold ``count`` flags."""
    return (count + 7) // 8


def pack_flags(flags: Iterable[bool]) -> bytes:
    """Pack booleans into an MSB-first bitmap.

    Args:
        flags: One flag per perk, in perk list order.

    Returns:
        The packed bitmap.

    Example:
        >>> pack_flags([True, False, True])
        b'\\xa0'
    """
    packed = bytearray()
    current = 0
    count = 0
    for index, flag in enumerate(flags):
        current = (current << 1) | (1 if flag else 0)
        count = index + 1
        if index % 8 == 7:
            packed.append(current)
            current = 0

    remaining = count % 8
    if remaining:
        packed.append(current << (8 - remaining))
    return bytes(packed)


def unpack_flags(data: bytes, count: int, *, offset: int = 0) -> list[bool]:
    """Unpack ``count`` flags from an MSB-first bitmap.

    Bytes beyond the end of ``data`` read as zero, so a truncated bitmap
    yields False for the missing flags.

    Args:
        data: Buffer holding the bitmap.
        count: Number of flags to read.
        offset: Byte offset where the bitmap starts.

    Returns:
        One flag per position.
    """
    flags = []
    for index in range(count):
        byte_index = offset + index // 8
        value = data[byte_index] if byte_index < len(data) else 0
        flags.append(bool(value & (1 << (7 - index % 8))))
    return flags
