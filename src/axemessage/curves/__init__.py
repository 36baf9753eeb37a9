"""Elliptic-curve crypto: secp256k1 (Bitcoin/Axe) on top of python-ecdsa."""

from .secp256k1 import (compress_pubkey, is_valid_privkey, parse_pubkey,
                        privkey_to_pubkey, recover_pubkey, sign_recoverable,
                        verify_signature)

__all__: tuple[str, ...] = (
    "compress_pubkey",
    "is_valid_privkey",
    "parse_pubkey",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
)
