"""Network parameters (address and WIF version bytes) and their YAML configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import InvalidArgumentError, UnknownNetworkError

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "livenet"

ADDRESS_TYPES = ("pubkeyhash", "scripthash")


@dataclass(frozen=True)
class Network:
    name: str
    pubkeyhash: int
    scripthash: int
    privatekey: int
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for kind in ("pubkeyhash", "scripthash", "privatekey"):
            value = getattr(self, kind)
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise InvalidArgumentError(
                    f"network {self.name!r}: {kind} must be a byte value, got {value!r}"
                )

    def __str__(self) -> str:
        return self.name


LIVENET = Network("livenet", pubkeyhash=0x37, scripthash=0x10, privatekey=0xCC, aliases=("mainnet",))
TESTNET = Network("testnet", pubkeyhash=0x8C, scripthash=0x13, privatekey=0xEF)
REGTEST = Network("regtest", pubkeyhash=0x8C, scripthash=0x13, privatekey=0xEF)

# Registration order decides which network wins when version bytes are shared.
_REGISTRY: dict[str, Network] = {}


def register_network(network: Network) -> Network:
    """Add (or replace) a network under its name and aliases."""
    for key in (network.name, *network.aliases):
        _REGISTRY[key] = network
    logger.debug("registered network %s", network.name)
    return network


for _network in (LIVENET, TESTNET, REGTEST):
    register_network(_network)


def networks() -> list[Network]:
    """Registered networks in registration order, without alias duplicates."""
    seen: list[Network] = []
    for network in _REGISTRY.values():
        if network not in seen:
            seen.append(network)
    return seen


def get_network(network: Network | str | None = None) -> Network:
    """
    Resolve a network name (or alias) to its parameters.

    Args:
        network: A Network (returned as is), a registered name or alias, or None
            for DEFAULT_NETWORK.

    Raises:
        UnknownNetworkError: the name is not registered.
    """
    if isinstance(network, Network):
        return network
    if network is None:
        network = DEFAULT_NETWORK
    try:
        return _REGISTRY[network]
    except KeyError:
        raise UnknownNetworkError(f"unknown network: {network!r}") from None


def network_for_version(kind: str, version: int) -> Network | None:
    """First registered network whose `kind` version byte equals version."""
    if kind not in (*ADDRESS_TYPES, "privatekey"):
        raise InvalidArgumentError(f"unknown version kind: {kind!r}")
    for network in networks():
        if getattr(network, kind) == version:
            return network
    return None


def load_networks(path: Path) -> list[Network]:
    """
    Load and register networks from a YAML file.

    Expected layout::

        networks:
          - name: axe-devnet
            pubkeyhash: 0x8c
            scripthash: 0x13
            privatekey: 0xef
            aliases: [devnet]
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    entries = raw.get("networks", []) if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise InvalidArgumentError(f"{path}: 'networks' must be a list")

    loaded = []
    for entry in entries:
        aliases = entry.get("aliases", []) if isinstance(entry, dict) else []
        if not isinstance(aliases, list):
            raise InvalidArgumentError(f"{path}: aliases of {entry.get('name')!r} must be a list")
        try:
            network = Network(
                name=str(entry["name"]),
                pubkeyhash=entry["pubkeyhash"],
                scripthash=entry["scripthash"],
                privatekey=entry["privatekey"],
                aliases=tuple(str(alias) for alias in aliases),
            )
        except (AttributeError, KeyError, TypeError) as exc:
            raise InvalidArgumentError(f"{path}: malformed network entry {entry!r}") from exc
        loaded.append(register_network(network))

    logger.info("loaded %d network(s) from %s", len(loaded), path)
    return loaded


__all__: tuple[str, ...] = (
    "ADDRESS_TYPES",
    "DEFAULT_NETWORK",
    "LIVENET",
    "Network",
    "REGTEST",
    "TESTNET",
    "get_network",
    "load_networks",
    "network_for_version",
    "networks",
    "register_network",
)
