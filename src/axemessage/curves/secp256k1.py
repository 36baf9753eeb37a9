"""
secp256k1 (Bitcoin/Axe curve): key derivation, recoverable ECDSA sign, verify,
public key recovery. Curve arithmetic and RFC 6979 signing come from python-ecdsa.
"""

from __future__ import annotations

import hashlib

from ecdsa import SECP256k1, BadSignatureError, MalformedPointError, SigningKey, VerifyingKey
from ecdsa import ellipticcurve, numbertheory
from ecdsa.util import sigdecode_strings, sigencode_strings_canonize

_CURVE = SECP256k1.curve
_G = SECP256k1.generator
_P = _CURVE.p()
_N = SECP256k1.order


def is_valid_privkey(privkey: bytes) -> bool:
    """True iff privkey is 32 bytes encoding a scalar in [1, n)."""
    if len(privkey) != 32:
        return False
    d = int.from_bytes(privkey, "big")
    return 0 < d < _N


def _signing_key(privkey: bytes) -> SigningKey:
    if not is_valid_privkey(privkey):
        raise ValueError("invalid privkey")
    return SigningKey.from_string(privkey, curve=SECP256k1)


def _encode_point(vk: VerifyingKey, compressed: bool) -> bytes:
    return vk.to_string("compressed" if compressed else "uncompressed")


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the SEC1 public key from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: Return the 33-byte compressed form instead of 65 bytes.

    Returns:
        33-byte (0x02/0x03 || x) or 65-byte (0x04 || x || y) public key.
    """
    vk = _signing_key(privkey).get_verifying_key()
    return _encode_point(vk, compressed)


def parse_pubkey(pubkey: bytes) -> bytes:
    """
    Validate a SEC1 public key (33 or 65 bytes) and return its uncompressed form.

    Raises:
        ValueError: the bytes do not encode a point on secp256k1.
    """
    if len(pubkey) not in (33, 65):
        raise ValueError("pubkey must be 33 or 65 bytes")
    try:
        vk = VerifyingKey.from_string(pubkey, curve=SECP256k1)
    except MalformedPointError as exc:
        raise ValueError(f"invalid pubkey: {exc}") from exc
    return _encode_point(vk, False)


def compress_pubkey(pubkey: bytes) -> bytes:
    """Compressed (33-byte) form of any valid SEC1 public key."""
    vk = VerifyingKey.from_string(parse_pubkey(pubkey), curve=SECP256k1)
    return _encode_point(vk, True)


def _recover_point(msg_hash: bytes, r: int, s: int, recid: int):
    """Recover Q from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    if recid & 2:
        if r + _N >= _P:
            raise ValueError("recid 2/3 but r+n >= p")
        x = r + _N
    else:
        x = r
    alpha = (pow(x, 3, _P) + _CURVE.a() * x + _CURVE.b()) % _P
    try:
        beta = numbertheory.square_root_mod_prime(alpha, _P)
    except numbertheory.Error as exc:
        raise ValueError("no square root") from exc
    y = beta if (beta & 1) == (recid & 1) else _P - beta
    point_r = ellipticcurve.PointJacobi(_CURVE, x, y, 1, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    r_inv = numbertheory.inverse_mod(r, _N)
    q = r_inv * (s * point_r + ((-z) % _N) * _G)
    if q == ellipticcurve.INFINITY:
        raise ValueError("recovered point at infinity")
    return q


def recover_pubkey(
    msg_hash: bytes, r: int, s: int, recid: int, compressed: bool = False
) -> bytes:
    """
    Recover the signer's public key from an ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte hash that was signed.
        r, s: Signature components (scalars in [1, n)).
        recid: Recovery id (0-3) selecting the candidate point.
        compressed: Return the 33-byte compressed encoding.

    Returns:
        SEC1 public key.

    Raises:
        ValueError: no public key is consistent with the signature and recid.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    if not (0 < r < _N and 0 < s < _N):
        raise ValueError("r and s must be in [1, n)")
    if not 0 <= recid <= 3:
        raise ValueError("recid must be in 0..3")
    q = _recover_point(msg_hash, r, s, recid)
    vk = VerifyingKey.from_public_point(q, curve=SECP256k1)
    return _encode_point(vk, compressed)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id; deterministic k (RFC 6979), low-s normalised.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte hash to sign.

    Returns:
        (r, s, recid) with recid in 0..3.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    sk = _signing_key(privkey)
    r_bytes, s_bytes = sk.sign_digest_deterministic(
        msg_hash, hashfunc=hashlib.sha256, sigencode=sigencode_strings_canonize
    )
    r = int.from_bytes(r_bytes, "big")
    s = int.from_bytes(s_bytes, "big")
    our_pub = _encode_point(sk.get_verifying_key(), False)
    for recid in range(4):
        try:
            if recover_pubkey(msg_hash, r, s, recid) == our_pub:
                return (r, s, recid)
        except ValueError:
            continue
    raise ValueError(
        "sign_recoverable: could not produce valid signature (recovery never matched our pubkey)"
    )


def verify_signature(msg_hash: bytes, r: int, s: int, pubkey: bytes) -> bool:
    """
    Verify an ECDSA signature over msg_hash against a SEC1 public key.

    Returns:
        True iff the signature is valid; malformed keys raise ValueError.
    """
    if not (0 < r < _N and 0 < s < _N):
        return False
    vk = VerifyingKey.from_string(parse_pubkey(pubkey), curve=SECP256k1)
    try:
        return vk.verify_digest(
            (r.to_bytes(32, "big"), s.to_bytes(32, "big")),
            msg_hash,
            sigdecode=sigdecode_strings,
        )
    except BadSignatureError:
        return False


__all__: tuple[str, ...] = (
    "compress_pubkey",
    "is_valid_privkey",
    "parse_pubkey",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
)
