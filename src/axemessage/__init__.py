"""
Axe signed messages: sign text with a secp256k1 key, verify against an address by
public-key recovery. Curve math via python-ecdsa.
"""

from .__about__ import __version__
from .curves import (privkey_to_pubkey, recover_pubkey, sign_recoverable,
                     verify_signature)
from .errors import (AxeMessageError, InvalidAddressError, InvalidArgumentError,
                     InvalidKeyError, InvalidSignatureError, UnknownNetworkError)
from .hashes import hash160, sha256d
from .keys import Address, PrivateKey, PublicKey
from .networks import (DEFAULT_NETWORK, LIVENET, REGTEST, TESTNET, Network,
                       get_network, load_networks, register_network)
from .serde import varint_decode, varint_encode
from .signing import (MAGIC_BYTES, Message, RecoverableSignature,
                      VerificationFailure, VerificationResult, magic_hash,
                      sign_message, verify_message)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "hash160",
    "sha256d",
    # Serde
    "varint_decode",
    "varint_encode",
    # Curves: secp256k1
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
    # Networks
    "DEFAULT_NETWORK",
    "LIVENET",
    "Network",
    "REGTEST",
    "TESTNET",
    "get_network",
    "load_networks",
    "register_network",
    # Keys and addresses
    "Address",
    "PrivateKey",
    "PublicKey",
    # Signing: signed messages
    "MAGIC_BYTES",
    "Message",
    "RecoverableSignature",
    "VerificationFailure",
    "VerificationResult",
    "magic_hash",
    "sign_message",
    "verify_message",
    # Errors
    "AxeMessageError",
    "InvalidAddressError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "UnknownNetworkError",
)
