"""Signed messages: magic hash, compact recoverable signatures, Message."""

from .magic import MAGIC_BYTES, magic_hash
from .message import (Message, VerificationFailure, VerificationResult,
                      sign_message, verify_message)
from .signature import RecoverableSignature

__all__: tuple[str, ...] = (
    "MAGIC_BYTES",
    "Message",
    "RecoverableSignature",
    "VerificationFailure",
    "VerificationResult",
    "magic_hash",
    "sign_message",
    "verify_message",
)
