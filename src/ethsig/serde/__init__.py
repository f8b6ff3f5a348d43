"""Serialization / deserialization (serde): RLP."""

from .rlp import rlp_decode, rlp_encode

__all__: tuple[str, ...] = ("rlp_decode", "rlp_encode")
