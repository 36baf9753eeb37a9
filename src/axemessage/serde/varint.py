"""Bitcoin CompactSize variable-length integers (1, 3, 5 or 9 bytes, little-endian)."""

from __future__ import annotations

import struct

_MAX_U64 = 0xFFFFFFFFFFFFFFFF


def varint_encode(n: int) -> bytes:
    """
    Encode a non-negative integer as a CompactSize varint.

    Args:
        n: Value in [0, 2**64).

    Returns:
        1 byte for n < 0xfd, else a 0xfd/0xfe/0xff marker and a 2/4/8 byte value.
    """
    if n < 0 or n > _MAX_U64:
        raise ValueError(f"varint out of range: {n}")
    if n < 0xFD:
        return struct.pack("<B", n)
    if n <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", n)
    if n <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", n)
    return b"\xff" + struct.pack("<Q", n)


def varint_decode(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a CompactSize varint starting at offset.

    Args:
        buf: Buffer holding the varint.
        offset: Index of the first varint byte.

    Returns:
        (value, number of bytes consumed).
    """
    if offset >= len(buf):
        raise ValueError("varint: buffer too short")
    first = buf[offset]
    if first < 0xFD:
        return first, 1
    fmt, size = {0xFD: ("<H", 2), 0xFE: ("<I", 4), 0xFF: ("<Q", 8)}[first]
    end = offset + 1 + size
    if end > len(buf):
        raise ValueError("varint: buffer too short")
    (value,) = struct.unpack(fmt, buf[offset + 1 : end])
    return value, 1 + size


__all__: tuple[str, ...] = ("varint_decode", "varint_encode")
