"""
Recoverable ECDSA signature and its 65-byte compact encoding (header || r || s).
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

from ecdsa import SECP256k1

from ..errors import InvalidSignatureError

COMPACT_SIZE = 65
HEADER_OFFSET = 27
COMPRESSED_FLAG = 4

_N = SECP256k1.order


@dataclass(frozen=True)
class RecoverableSignature:
    """(r, s) plus the recovery id and whether the signer's key is compressed."""

    r: int
    s: int
    recovery_id: int
    compressed: bool = True

    def __post_init__(self) -> None:
        if not 0 < self.r < _N:
            raise InvalidSignatureError("signature r must be in [1, n)")
        if not 0 < self.s < _N:
            raise InvalidSignatureError("signature s must be in [1, n)")
        if self.recovery_id not in (0, 1, 2, 3):
            raise InvalidSignatureError(f"recovery id must be 0..3, got {self.recovery_id!r}")

    @property
    def header(self) -> int:
        return HEADER_OFFSET + self.recovery_id + (COMPRESSED_FLAG if self.compressed else 0)

    def to_compact(self) -> bytes:
        return bytes([self.header]) + self.r.to_bytes(32, "big") + self.s.to_bytes(32, "big")

    @classmethod
    def from_compact(cls, data: bytes) -> RecoverableSignature:
        """
        Decode header || r || s.

        Header 27..30 means an uncompressed key, 31..34 a compressed one; the
        remainder after the offset is the recovery id.

        Raises:
            InvalidSignatureError: wrong length, header out of range, or r/s out of range.
        """
        if len(data) != COMPACT_SIZE:
            raise InvalidSignatureError(
                f"compact signature must be {COMPACT_SIZE} bytes, got {len(data)}"
            )
        header = data[0] - HEADER_OFFSET
        if not 0 <= header < 2 * COMPRESSED_FLAG:
            raise InvalidSignatureError(f"invalid signature header byte: {data[0]}")
        compressed = header >= COMPRESSED_FLAG
        return cls(
            r=int.from_bytes(data[1:33], "big"),
            s=int.from_bytes(data[33:65], "big"),
            recovery_id=header - COMPRESSED_FLAG if compressed else header,
            compressed=compressed,
        )

    def to_base64(self) -> str:
        return base64.b64encode(self.to_compact()).decode("ascii")

    @classmethod
    def from_base64(cls, text: str) -> RecoverableSignature:
        if not isinstance(text, str) or not text:
            raise InvalidSignatureError("signature must be a non-empty base64 str")
        try:
            data = base64.b64decode(text, validate=True)
        except ValueError as exc:
            raise InvalidSignatureError(f"signature is not valid base64: {exc}") from exc
        return cls.from_compact(data)


__all__: tuple[str, ...] = (
    "COMPACT_SIZE",
    "COMPRESSED_FLAG",
    "HEADER_OFFSET",
    "RecoverableSignature",
)
