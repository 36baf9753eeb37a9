"""Exceptions raised for caller misuse (bad arguments, malformed encodings).

A signature that merely fails to verify is not an error: verification returns
a VerificationResult instead.
"""

from __future__ import annotations


class AxeMessageError(Exception):
    """Base class for all axemessage errors."""


class InvalidArgumentError(AxeMessageError, ValueError):
    """An argument has the wrong type or an unusable value."""


class InvalidSignatureError(InvalidArgumentError):
    """Signature text or bytes are not a well-formed compact signature."""


class InvalidKeyError(InvalidArgumentError):
    """Private or public key material is not valid on secp256k1."""


class InvalidAddressError(InvalidArgumentError):
    """Address text does not decode to an address of a known network."""


class UnknownNetworkError(AxeMessageError, KeyError):
    """No network is registered under the requested name."""


__all__: tuple[str, ...] = (
    "AxeMessageError",
    "InvalidAddressError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "UnknownNetworkError",
)
