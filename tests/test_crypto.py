"""Tests for the primitives under the signed-message layer: hashes, varints, secp256k1, keys, networks."""

import pytest

from axemessage import (LIVENET, REGTEST, TESTNET, Address, InvalidAddressError,
                        InvalidArgumentError, InvalidKeyError, Network, PrivateKey,
                        PublicKey, UnknownNetworkError, get_network, hash160,
                        load_networks, privkey_to_pubkey, recover_pubkey, sha256d,
                        sign_recoverable, varint_decode, varint_encode,
                        verify_signature)
from axemessage.curves import compress_pubkey, is_valid_privkey, parse_pubkey
from axemessage.hashes import ripemd160

SHA256D_EMPTY = bytes.fromhex(
    "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
)
RIPEMD160_EMPTY = bytes.fromhex("9c1185a5c5e9fc54612808977ee8f548b2258d31")
SECP_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

PRIV_ONE = bytes(31) + bytes([1])
TEST_WIF = "cR4qogdN9UxLZJXCNFNwDRRZNeLRWuds9TTSuLNweFVjiaE4gPaq"
TEST_ADDRESS = "yZKdLYCvDXa2kyQr8Tg3N6c3xeZoK7XDcj"


def test_sha256d_empty() -> None:
    assert sha256d(b"") == SHA256D_EMPTY


def test_sha256d_deterministic() -> None:
    assert sha256d(b"same input") == sha256d(b"same input")
    assert sha256d(b"input a") != sha256d(b"input b")


def test_ripemd160_empty() -> None:
    assert ripemd160(b"") == RIPEMD160_EMPTY


def test_hash160_output_length() -> None:
    assert len(hash160(b"hello")) == 20


@pytest.mark.parametrize(
    "value, encoded",
    [
        (0, b"\x00"),
        (0xFC, b"\xfc"),
        (0xFD, b"\xfd\xfd\x00"),
        (0xFFFF, b"\xfd\xff\xff"),
        (0x10000, b"\xfe\x00\x00\x01\x00"),
        (0xFFFFFFFF, b"\xfe\xff\xff\xff\xff"),
        (0x100000000, b"\xff\x00\x00\x00\x00\x01\x00\x00\x00"),
    ],
)
def test_varint_encode(value: int, encoded: bytes) -> None:
    assert varint_encode(value) == encoded
    assert varint_decode(encoded) == (value, len(encoded))


def test_varint_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        varint_encode(-1)
    with pytest.raises(ValueError):
        varint_encode(2**64)


def test_varint_decode_offset_and_truncation() -> None:
    assert varint_decode(b"\xaa\xfd\x00\x01", offset=1) == (0x100, 3)
    with pytest.raises(ValueError):
        varint_decode(b"\xfe\x00\x00")
    with pytest.raises(ValueError):
        varint_decode(b"")


def test_privkey_to_pubkey() -> None:
    pub = privkey_to_pubkey(PRIV_ONE)
    assert len(pub) == 65
    assert pub[0] == 0x04
    compressed = privkey_to_pubkey(PRIV_ONE, compressed=True)
    assert len(compressed) == 33
    assert compressed == compress_pubkey(pub)
    assert parse_pubkey(compressed) == pub


def test_privkey_validation() -> None:
    assert is_valid_privkey(PRIV_ONE)
    assert not is_valid_privkey(bytes(32))
    assert not is_valid_privkey(SECP_N.to_bytes(32, "big"))
    assert not is_valid_privkey(bytes(31) + b"\x01" + b"\x00")
    with pytest.raises(ValueError):
        privkey_to_pubkey(bytes(32))


def test_sign_recoverable_recovers_signer() -> None:
    msg_hash = sha256d(b"message to sign")
    r, s, recid = sign_recoverable(PRIV_ONE, msg_hash)
    assert 0 <= recid <= 3
    assert s <= SECP_N // 2
    pub = privkey_to_pubkey(PRIV_ONE)
    assert recover_pubkey(msg_hash, r, s, recid) == pub
    assert verify_signature(msg_hash, r, s, pub) is True
    assert verify_signature(sha256d(b"other message"), r, s, pub) is False


def test_sign_recoverable_is_deterministic() -> None:
    msg_hash = sha256d(b"message to sign")
    assert sign_recoverable(PRIV_ONE, msg_hash) == sign_recoverable(PRIV_ONE, msg_hash)


def test_recover_pubkey_rejects_bad_input() -> None:
    msg_hash = sha256d(b"x")
    with pytest.raises(ValueError):
        recover_pubkey(msg_hash[:31], 1, 1, 0)
    with pytest.raises(ValueError):
        recover_pubkey(msg_hash, 0, 1, 0)
    with pytest.raises(ValueError):
        recover_pubkey(msg_hash, 1, 1, 4)
    # x = r + n would exceed the field prime
    with pytest.raises(ValueError):
        recover_pubkey(msg_hash, SECP_N - 1, 1, 2)


def test_verify_signature_out_of_range_scalars() -> None:
    pub = privkey_to_pubkey(PRIV_ONE)
    assert verify_signature(sha256d(b"x"), 0, 1, pub) is False
    assert verify_signature(sha256d(b"x"), 1, SECP_N, pub) is False


def test_get_network() -> None:
    assert get_network() is LIVENET
    assert get_network("mainnet") is LIVENET
    assert get_network("testnet") is TESTNET
    assert get_network(REGTEST) is REGTEST
    with pytest.raises(UnknownNetworkError):
        get_network("nonexistent")


def test_network_rejects_non_byte_versions() -> None:
    with pytest.raises(InvalidArgumentError):
        Network("broken", pubkeyhash=256, scripthash=0, privatekey=0)


def test_load_networks_from_yaml(tmp_path) -> None:
    path = tmp_path / "networks.yaml"
    path.write_text(
        "networks:\n"
        "  - name: axe-devnet-yaml\n"
        "    pubkeyhash: 0x1e\n"
        "    scripthash: 0x1f\n"
        "    privatekey: 0x9e\n"
        "    aliases: [devnet-yaml]\n"
    )
    loaded = load_networks(path)
    assert [n.name for n in loaded] == ["axe-devnet-yaml"]
    network = get_network("devnet-yaml")
    assert network.pubkeyhash == 0x1E
    key = PrivateKey(PRIV_ONE, network)
    address = key.to_address()
    assert Address.from_string(str(address)).network is network
    assert PrivateKey.from_wif(key.to_wif()).network is network


def test_load_networks_rejects_malformed_entry(tmp_path) -> None:
    path = tmp_path / "networks.yaml"
    path.write_text("networks:\n  - name: incomplete\n    pubkeyhash: 1\n")
    with pytest.raises(InvalidArgumentError):
        load_networks(path)
    path.write_text("networks: 3\n")
    with pytest.raises(InvalidArgumentError):
        load_networks(path)


def test_load_networks_rejects_scalar_aliases(tmp_path) -> None:
    path = tmp_path / "networks.yaml"
    path.write_text(
        "networks:\n"
        "  - name: axe-devnet\n"
        "    pubkeyhash: 0x8c\n"
        "    scripthash: 0x13\n"
        "    privatekey: 0xef\n"
        "    aliases: devnet\n"
    )
    with pytest.raises(InvalidArgumentError, match="aliases"):
        load_networks(path)
    with pytest.raises(UnknownNetworkError):
        get_network("d")


def test_private_key_from_wif() -> None:
    key = PrivateKey.from_wif(TEST_WIF)
    assert key.network is TESTNET
    assert key.compressed is True
    assert key.to_wif() == TEST_WIF
    assert str(key.to_address()) == TEST_ADDRESS


def test_private_key_rejects_invalid_material() -> None:
    with pytest.raises(InvalidKeyError):
        PrivateKey(bytes(32))
    with pytest.raises(InvalidKeyError):
        PrivateKey.from_hex("zz")
    with pytest.raises(InvalidKeyError):
        PrivateKey.from_wif("not-a-wif")
    with pytest.raises(InvalidKeyError):
        PrivateKey.from_wif(TEST_ADDRESS)


def test_public_key_from_bytes() -> None:
    compressed = privkey_to_pubkey(PRIV_ONE, compressed=True)
    key = PublicKey.from_bytes(compressed)
    assert key.compressed is True
    assert key.to_bytes() == compressed
    uncompressed = PublicKey.from_bytes(privkey_to_pubkey(PRIV_ONE))
    assert uncompressed.compressed is False
    assert uncompressed.point == key.point
    assert PublicKey.from_hex(key.hex()) == key


def test_public_key_rejects_invalid_bytes() -> None:
    with pytest.raises(InvalidKeyError):
        PublicKey.from_bytes(b"\x05" + bytes(32))
    with pytest.raises(InvalidKeyError):
        PublicKey.from_bytes(bytes(10))
    with pytest.raises(InvalidKeyError):
        PublicKey.from_bytes("02" * 33)


def test_public_key_constructor_validates_point() -> None:
    with pytest.raises(InvalidKeyError):
        PublicKey(b"junk")
    with pytest.raises(InvalidKeyError):
        PublicKey(b"\x04" + bytes(64))
    with pytest.raises(InvalidKeyError):
        PublicKey("04" * 65)
    compressed = privkey_to_pubkey(PRIV_ONE, compressed=True)
    assert PublicKey(compressed).point == privkey_to_pubkey(PRIV_ONE)


def test_address_parsing() -> None:
    address = Address.from_string(TEST_ADDRESS)
    assert address.network is TESTNET
    assert address.type == "pubkeyhash"
    assert str(address) == TEST_ADDRESS
    pinned = Address.from_string(TEST_ADDRESS, "regtest")
    assert pinned.network is REGTEST
    assert str(pinned) == TEST_ADDRESS


def test_address_livenet_round_trip() -> None:
    address = PrivateKey(PRIV_ONE).to_address()
    assert address.network is LIVENET
    assert Address.from_string(str(address)) == address


def test_address_rejects_invalid_text() -> None:
    with pytest.raises(InvalidAddressError):
        Address.from_string("notanaddress")
    with pytest.raises(InvalidAddressError):
        Address.from_string(TEST_ADDRESS[:-1] + ("k" if TEST_ADDRESS[-1] != "k" else "m"))
    with pytest.raises(InvalidAddressError):
        Address.from_string(TEST_ADDRESS, "livenet")
    with pytest.raises(InvalidAddressError):
        Address.from_string(12345)
