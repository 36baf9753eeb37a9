"""
Key and address value types: WIF private keys, SEC1 public keys, Base58Check addresses.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import base58

from .curves import compress_pubkey, is_valid_privkey, parse_pubkey, privkey_to_pubkey
from .errors import InvalidAddressError, InvalidKeyError
from .hashes import hash160
from .networks import Network, get_network, network_for_version


@dataclass(frozen=True)
class PublicKey:
    """secp256k1 public key; `point` is always the 65-byte uncompressed encoding."""

    point: bytes
    compressed: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.point, (bytes, bytearray)):
            raise InvalidKeyError("public key must be bytes")
        try:
            point = parse_pubkey(bytes(self.point))
        except ValueError as exc:
            raise InvalidKeyError(str(exc)) from exc
        object.__setattr__(self, "point", point)

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Parse a 33-byte compressed or 65-byte uncompressed SEC1 key."""
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidKeyError("public key must be bytes")
        return cls(bytes(data), compressed=len(data) == 33)

    @classmethod
    def from_hex(cls, text: str) -> PublicKey:
        try:
            data = bytes.fromhex(text)
        except (TypeError, ValueError) as exc:
            raise InvalidKeyError("public key hex is not valid hex") from exc
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        return compress_pubkey(self.point) if self.compressed else self.point

    def hex(self) -> str:
        return self.to_bytes().hex()

    def to_address(self, network: Network | str | None = None) -> Address:
        return Address.from_public_key(self, network)


@dataclass(frozen=True)
class PrivateKey:
    """
    secp256k1 private key bound to a network.

    `compressed` decides which public key encoding (and therefore which address)
    the key stands for, as in WIF.
    """

    secret: bytes = field(repr=False)
    network: Network = field(default_factory=get_network)
    compressed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "network", get_network(self.network))
        if not isinstance(self.secret, bytes) or not is_valid_privkey(self.secret):
            raise InvalidKeyError("private key must be 32 bytes encoding a scalar in [1, n)")

    @classmethod
    def from_hex(
        cls, text: str, network: Network | str | None = None, compressed: bool = True
    ) -> PrivateKey:
        try:
            secret = bytes.fromhex(text)
        except (TypeError, ValueError) as exc:
            raise InvalidKeyError("private key hex is not valid hex") from exc
        return cls(secret, get_network(network), compressed)

    @classmethod
    def from_wif(cls, text: str) -> PrivateKey:
        """
        Decode a Wallet Import Format key.

        Args:
            text: Base58Check of [version][32-byte secret][0x01 if compressed].

        Returns:
            PrivateKey on the network whose privatekey version matches.
        """
        try:
            raw = base58.b58decode_check(text)
        except ValueError as exc:
            raise InvalidKeyError(f"invalid WIF: {exc}") from exc
        if len(raw) == 34 and raw[-1] == 0x01:
            compressed = True
        elif len(raw) == 33:
            compressed = False
        else:
            raise InvalidKeyError(f"invalid WIF payload length: {len(raw)}")
        network = network_for_version("privatekey", raw[0])
        if network is None:
            raise InvalidKeyError(f"unknown WIF version byte: {raw[0]:#04x}")
        return cls(raw[1:33], network, compressed)

    def to_wif(self) -> str:
        payload = bytes([self.network.privatekey]) + self.secret
        if self.compressed:
            payload += b"\x01"
        return base58.b58encode_check(payload).decode("ascii")

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(privkey_to_pubkey(self.secret), self.compressed)

    def to_address(self) -> Address:
        return Address.from_public_key(self.public_key, self.network)


@dataclass(frozen=True)
class Address:
    """Base58Check address: version byte of `network` + 20-byte hash160."""

    hash: bytes
    network: Network
    type: str = "pubkeyhash"

    def __post_init__(self) -> None:
        object.__setattr__(self, "network", get_network(self.network))
        if len(self.hash) != 20:
            raise InvalidAddressError("address hash must be 20 bytes")
        if self.type not in ("pubkeyhash", "scripthash"):
            raise InvalidAddressError(f"unknown address type: {self.type!r}")

    @classmethod
    def from_public_key(
        cls, public_key: PublicKey, network: Network | str | None = None
    ) -> Address:
        return cls(hash160(public_key.to_bytes()), get_network(network), "pubkeyhash")

    @classmethod
    def from_string(cls, text: str, network: Network | str | None = None) -> Address:
        """
        Parse address text.

        Args:
            text: Base58Check address.
            network: If given, the address must belong to this network; otherwise
                the first registered network with a matching version byte is used.

        Raises:
            InvalidAddressError: bad encoding, length, or version byte.
        """
        if not isinstance(text, str):
            raise InvalidAddressError("address must be a str")
        try:
            raw = base58.b58decode_check(text)
        except ValueError as exc:
            raise InvalidAddressError(f"invalid address {text!r}: {exc}") from exc
        if len(raw) != 21:
            raise InvalidAddressError(f"invalid address {text!r}: payload must be 21 bytes")
        version = raw[0]
        if network is not None:
            net = get_network(network)
            for kind in ("pubkeyhash", "scripthash"):
                if getattr(net, kind) == version:
                    return cls(raw[1:], net, kind)
            raise InvalidAddressError(f"address {text!r} is not a {net.name} address")
        for kind in ("pubkeyhash", "scripthash"):
            net = network_for_version(kind, version)
            if net is not None:
                return cls(raw[1:], net, kind)
        raise InvalidAddressError(f"address {text!r} has unknown version byte {version:#04x}")

    @property
    def version(self) -> int:
        return getattr(self.network, self.type)

    def __str__(self) -> str:
        return base58.b58encode_check(bytes([self.version]) + self.hash).decode("ascii")


__all__: tuple[str, ...] = ("Address", "PrivateKey", "PublicKey")
