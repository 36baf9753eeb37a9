"""Hash functions: SHA-256, double SHA-256, RIPEMD-160, hash160."""

from .sha256 import hash160, ripemd160, sha256, sha256d

__all__: tuple[str, ...] = ("hash160", "ripemd160", "sha256", "sha256d")
