"""
Signed messages: sign text with a private key, verify a base64 compact signature
against an address by recovering the signer's public key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum

from ..curves import recover_pubkey, sign_recoverable, verify_signature
from ..errors import InvalidArgumentError, InvalidKeyError
from ..keys import Address, PrivateKey, PublicKey
from ..networks import Network
from .magic import MAGIC_BYTES, magic_hash
from .signature import RecoverableSignature

logger = logging.getLogger(__name__)


class VerificationFailure(str, Enum):
    INVALID_SIGNATURE = "The signature was invalid"
    ADDRESS_MISMATCH = "The signature did not match the message digest"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a verification; falsy when the signature was rejected."""

    verified: bool
    failure: VerificationFailure | None = None

    @property
    def error(self) -> str | None:
        """Human-readable reason for a failed verification, None on success."""
        return self.failure.value if self.failure is not None else None

    def __bool__(self) -> bool:
        return self.verified


_VERIFIED = VerificationResult(True)


def _sign_hash(private_key: PrivateKey, msg_hash: bytes) -> RecoverableSignature:
    if not isinstance(private_key, PrivateKey):
        raise InvalidArgumentError(
            f"private_key must be a PrivateKey, got {type(private_key).__name__}"
        )
    r, s, recid = sign_recoverable(private_key.secret, msg_hash)
    return RecoverableSignature(r, s, recid, private_key.compressed)


def _verify_hash(
    msg_hash: bytes, public_key: PublicKey, signature: RecoverableSignature
) -> VerificationResult:
    if not isinstance(public_key, PublicKey):
        raise InvalidArgumentError(
            f"public_key must be a PublicKey, got {type(public_key).__name__}"
        )
    if not isinstance(signature, RecoverableSignature):
        raise InvalidArgumentError(
            f"signature must be a RecoverableSignature, got {type(signature).__name__}"
        )
    try:
        valid = verify_signature(msg_hash, signature.r, signature.s, public_key.point)
    except ValueError as exc:
        raise InvalidKeyError(f"public_key is not a valid secp256k1 point: {exc}") from exc
    if valid:
        return _VERIFIED
    logger.debug("signature failed ECDSA verification")
    return VerificationResult(False, VerificationFailure.INVALID_SIGNATURE)


def _verify_recovered(
    msg_hash: bytes, address: Address, signature_text: str
) -> VerificationResult:
    if not isinstance(address, Address):
        raise InvalidArgumentError(f"address must be an Address, got {type(address).__name__}")
    signature = RecoverableSignature.from_base64(signature_text)

    try:
        point = recover_pubkey(msg_hash, signature.r, signature.s, signature.recovery_id)
    except ValueError as exc:
        logger.debug("public key recovery failed: %s", exc)
        return VerificationResult(False, VerificationFailure.INVALID_SIGNATURE)
    public_key = PublicKey(point, signature.compressed)

    recovered = Address.from_public_key(public_key, address.network)
    if str(recovered) != str(address):
        logger.debug("recovered address %s does not match %s", recovered, address)
        return VerificationResult(False, VerificationFailure.ADDRESS_MISMATCH)

    return _verify_hash(msg_hash, public_key, signature)


@dataclass(frozen=True)
class Message:
    """
    Immutable text message that can be signed and verified.

    Args:
        message: The text; signed as its UTF-8 encoding.
        magic: Domain separator prefix (defaults to MAGIC_BYTES).
    """

    message: str
    magic: bytes = field(default=MAGIC_BYTES, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise InvalidArgumentError(
                f"message must be a str, got {type(self.message).__name__}"
            )
        if not isinstance(self.magic, bytes):
            raise InvalidArgumentError("magic must be bytes")
        try:
            self.message.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidArgumentError("message must be encodable as UTF-8") from exc

    def magic_hash(self) -> bytes:
        """32-byte digest that signatures over this message commit to."""
        return magic_hash(self.message.encode("utf-8"), self.magic)

    def sign_recoverable(self, private_key: PrivateKey) -> RecoverableSignature:
        """Sign and return the structured signature (r, s, recovery id, compression)."""
        signature = _sign_hash(private_key, self.magic_hash())
        logger.debug("signed message with recovery id %d", signature.recovery_id)
        return signature

    def sign(self, private_key: PrivateKey) -> str:
        """
        Sign with a private key.

        Args:
            private_key: Signing key; its `compressed` flag is carried in the header.

        Returns:
            Base64-encoded 65-byte compact signature.
        """
        return self.sign_recoverable(private_key).to_base64()

    def verify_with_public_key(
        self, public_key: PublicKey, signature: RecoverableSignature
    ) -> VerificationResult:
        """ECDSA check of signature over this message's hash against a known public key."""
        return _verify_hash(self.magic_hash(), public_key, signature)

    def verify(self, address: Address, signature: str) -> VerificationResult:
        """
        Verify a base64 compact signature against the address that claims to have signed.

        The public key is recovered from the signature, turned into an address on
        address.network and compared; only then is the ECDSA signature checked
        against the recovered key.

        Args:
            address: Claimed signer.
            signature: Base64 compact signature.

        Returns:
            VerificationResult; falsy with a reason when verification fails.

        Raises:
            InvalidSignatureError: signature text is not a well-formed compact signature.
        """
        return _verify_recovered(self.magic_hash(), address, signature)

    def verify_address_string(
        self, address: str, signature: str, network: Network | str | None = None
    ) -> VerificationResult:
        """Like verify, but parses the address text first (optionally pinned to a network)."""
        return self.verify(Address.from_string(address, network), signature)

    @classmethod
    def from_string(cls, text: str) -> Message:
        return cls(text)

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}

    @classmethod
    def from_dict(cls, obj: dict) -> Message:
        if not isinstance(obj, dict) or "message" not in obj:
            raise InvalidArgumentError("expected an object with a 'message' key")
        return cls(obj["message"])

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Message:
        try:
            obj = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"message JSON is not valid: {exc}") from exc
        return cls.from_dict(obj)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"<Message: {self.message}>"


def sign_message(
    private_key: PrivateKey, message: bytes, magic: bytes = MAGIC_BYTES
) -> str:
    """
    Sign raw message bytes.

    Args:
        private_key: Signing key.
        message: Message bytes (need not be UTF-8).
        magic: Domain separator prefix.

    Returns:
        Base64-encoded 65-byte compact signature.
    """
    return _sign_hash(private_key, magic_hash(message, magic)).to_base64()


def verify_message(
    address: Address, message: bytes, signature: str, magic: bytes = MAGIC_BYTES
) -> VerificationResult:
    """Verify a compact signature over raw message bytes against a claimed address."""
    return _verify_recovered(magic_hash(message, magic), address, signature)


__all__: tuple[str, ...] = (
    "Message",
    "VerificationFailure",
    "VerificationResult",
    "sign_message",
    "verify_message",
)
