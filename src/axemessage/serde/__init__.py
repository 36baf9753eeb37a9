"""Serialization / deserialization (serde): Bitcoin variable-length integers."""

from .varint import varint_decode, varint_encode

__all__: tuple[str, ...] = ("varint_decode", "varint_encode")
