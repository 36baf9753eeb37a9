"""
Signed-message digest: double SHA-256 over the length-prefixed magic and message.
"""

from __future__ import annotations

from ..errors import InvalidArgumentError
from ..hashes import sha256d
from ..serde import varint_encode

MAGIC_BYTES = b"DarkCoin Signed Message:\n"


def magic_hash(message: bytes, magic: bytes = MAGIC_BYTES) -> bytes:
    """
    Hash signed by a message signature.

    Args:
        message: Raw message bytes.
        magic: Domain separator; defaults to the Axe/Dash "DarkCoin Signed Message:\\n".

    Returns:
        sha256d(varint(len(magic)) || magic || varint(len(message)) || message).
    """
    if not isinstance(message, (bytes, bytearray)):
        raise InvalidArgumentError(f"message must be bytes, got {type(message).__name__}")
    buf = varint_encode(len(magic)) + magic + varint_encode(len(message)) + bytes(message)
    return sha256d(buf)


__all__: tuple[str, ...] = ("MAGIC_BYTES", "magic_hash")
