#!/usr/bin/env python3
"""Example: sign a message with a testnet key and verify it against the address."""

from axemessage import Message, PrivateKey

private_key = PrivateKey.from_wif("cR4qogdN9UxLZJXCNFNwDRRZNeLRWuds9TTSuLNweFVjiaE4gPaq")
address = private_key.to_address()
print("Address:", address)

message = Message("hello, world")
print("Magic hash:", message.magic_hash().hex())

signature = message.sign(private_key)
print("Signature (base64):", signature)

result = message.verify(address, signature)
print("Verify:", result.verified)

result = Message("hello, world!").verify(address, signature)
print("Verify tampered:", result.verified, "-", result.error)
