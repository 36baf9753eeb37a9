"""
SHA-256 based digests used by signed messages and addresses.
SHA-256 comes from stdlib hashlib; RIPEMD-160 from pycryptodome, since
OpenSSL 3 builds of hashlib may not provide it.
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160


def sha256(data: bytes) -> bytes:
    """Single SHA-256 digest (32 bytes)."""
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """
    Double SHA-256, SHA256(SHA256(data)).

    Args:
        data: Bytes to hash.

    Returns:
        32-byte digest.
    """
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def ripemd160(data: bytes) -> bytes:
    """RIPEMD-160 digest (20 bytes)."""
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    """
    RIPEMD160(SHA256(data)), the 20-byte hash inside pay-to-pubkey-hash addresses.

    Args:
        data: Usually a SEC1-encoded public key.

    Returns:
        20-byte digest.
    """
    return ripemd160(sha256(data))


__all__: tuple[str, ...] = ("hash160", "ripemd160", "sha256", "sha256d")
