"""Keccak-256/512 vectors and the incremental hasher."""

from __future__ import annotations

import pytest

from ethsig.hashes import Keccak, keccak256, keccak512

KECCAK256_EMPTY = bytes.fromhex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)
KECCAK256_HELLO_WORLD = bytes.fromhex(
    "47173285a8d7341e5e972fc677286384f802f8ef42a5ec5f03bbfa254cb01fad"
)
KECCAK256_MESSAGE_TO_SIGN = bytes.fromhex(
    "2339863461be3f2dbbc5f995c5bf6953ee73f6437f37b0b44de4e67088bcd4c2"
)
KECCAK512_HELLO_WORLD = bytes.fromhex(
    "3ee2b40047b8060f68c67242175660f4174d0af5c01d47168ec20ed619b0b7c4"
    "2181f40aa1046f39e2ef9efc6910782a998e0013d172458957957fac9405b67d"
)


def test_keccak256_empty() -> None:
    assert keccak256(b"") == KECCAK256_EMPTY


def test_keccak256_vectors() -> None:
    assert keccak256(b"hello world") == KECCAK256_HELLO_WORLD
    assert keccak256(b"message to sign") == KECCAK256_MESSAGE_TO_SIGN


def test_keccak512_vector() -> None:
    assert keccak512(b"hello world") == KECCAK512_HELLO_WORLD


def test_keccak256_output_length() -> None:
    assert len(keccak256(b"hello")) == 32
    assert len(keccak256(b"x" * 200)) == 32
    assert len(keccak512(b"x" * 200)) == 64


@pytest.mark.parametrize("size", [135, 136, 137, 272, 300])
def test_incremental_matches_one_shot(size: int) -> None:
    data = bytes(range(256)) * 2
    data = data[:size]
    hasher = Keccak()
    for i in range(0, size, 7):
        hasher.update(data[i : i + 7])
    assert hasher.digest() == Keccak(32, data).digest()
    assert len(hasher.digest()) == 32


def test_hasher_digest_does_not_finalize() -> None:
    hasher = Keccak(32, b"hello ")
    snapshot = hasher.copy()
    assert hasher.update(b"world").hexdigest() == KECCAK256_HELLO_WORLD.hex()
    assert snapshot.digest() == keccak256(b"hello ")
    assert hasher.digest() == hasher.digest()
    assert hasher.name == "keccak256"


def test_hasher_rejects_unknown_size() -> None:
    with pytest.raises(ValueError):
        Keccak(20)
