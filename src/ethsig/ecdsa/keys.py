"""
secp256k1 keys: private key generation, public key derivation and SEC 1 encodings.
"""

from __future__ import annotations

import secrets

from .curve import B, G, N, P, Point
from .field import mod_sqrt

PRIVATE_KEY_SIZE = 32
COMPRESSED_SIZE = 33
UNCOMPRESSED_SIZE = 65


def generate_private_key() -> int:
    """Random private key in [1, N) from the OS CSPRNG."""
    return 1 + secrets.randbelow(N - 1)


def private_key_from_bytes(privkey: bytes) -> int:
    if len(privkey) != PRIVATE_KEY_SIZE:
        raise ValueError("privkey must be 32 bytes")
    return int.from_bytes(privkey, "big")


def derive_public_key(private_key: int) -> Point:
    """G * private_key. Keys outside [0, N) are rejected."""
    if not 0 <= private_key < N:
        raise ValueError("private key out of range [0, N)")
    return G.multiply(private_key)


def public_key_bytes(public_key: Point) -> bytes:
    """64-byte x || y, the form hashed for address derivation."""
    return public_key.x.to_bytes(32, "big") + public_key.y.to_bytes(32, "big")


def encode_uncompressed(public_key: Point) -> bytes:
    """65 bytes: 0x04 || x || y."""
    return b"\x04" + public_key_bytes(public_key)


def encode_compressed(public_key: Point) -> bytes:
    """33 bytes: 0x02 (even y) or 0x03 (odd y) || x."""
    prefix = b"\x03" if public_key.y & 1 else b"\x02"
    return prefix + public_key.x.to_bytes(32, "big")


def encode_public_key(public_key: Point, compressed: bool = False) -> bytes:
    if compressed:
        return encode_compressed(public_key)
    return encode_uncompressed(public_key)


def decode_public_key(data: bytes) -> Point:
    """
    Parse a SEC 1 encoded public key.

    Args:
        data: 33-byte compressed (0x02/0x03 || x) or 65-byte uncompressed
            (0x04 || x || y) encoding.

    Returns:
        The encoded point.

    Raises:
        ValueError: on bad length or prefix, out-of-range coordinates, or a
            point that is not on the curve.
    """
    if len(data) == COMPRESSED_SIZE and data[0] in (2, 3):
        x = int.from_bytes(data[1:], "big")
        if x >= P:
            raise ValueError("x coordinate out of range")
        y = mod_sqrt(x * x * x + B, P)
        if y is None:
            raise ValueError("x coordinate is not on the curve")
        if (y & 1) != (data[0] & 1):
            y = P - y
        return Point(x, y)
    if len(data) == UNCOMPRESSED_SIZE and data[0] == 4:
        x = int.from_bytes(data[1:33], "big")
        y = int.from_bytes(data[33:], "big")
        if x >= P or y >= P:
            raise ValueError("coordinate out of range")
        point = Point(x, y)
        if not point.is_on_curve():
            raise ValueError("point is not on the curve")
        return point
    raise ValueError("public key must be 33 bytes (02/03) or 65 bytes (04)")


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the encoded public key from a 32-byte private key.

    Args:
        privkey: 32-byte big-endian secp256k1 private key.
        compressed: Return the 33-byte form instead of the 65-byte one.

    Returns:
        65-byte uncompressed (or 33-byte compressed) public key.
    """
    d = private_key_from_bytes(privkey)
    if d == 0:
        raise ValueError("invalid privkey")
    return encode_public_key(derive_public_key(d), compressed)


__all__: tuple[str, ...] = (
    "COMPRESSED_SIZE",
    "PRIVATE_KEY_SIZE",
    "UNCOMPRESSED_SIZE",
    "decode_public_key",
    "derive_public_key",
    "encode_compressed",
    "encode_public_key",
    "encode_uncompressed",
    "generate_private_key",
    "private_key_from_bytes",
    "privkey_to_pubkey",
    "public_key_bytes",
)
