"""RLP encoding and decoding."""

from __future__ import annotations

import pytest

from ethsig.exceptions import RLPDecodingError
from ethsig.serde import rlp_decode, rlp_encode

LOREM = b"Lorem ipsum dolor sit amet, consectetur adipisicing elit"
SET_THEORY_THREE = [[], [[]], [[], [[]]]]


def test_encode_dog() -> None:
    assert rlp_encode(b"dog") == bytes([0x83, 0x64, 0x6F, 0x67])
    assert rlp_encode("dog") == rlp_encode(b"dog")


def test_encode_cat_dog() -> None:
    assert rlp_encode([b"cat", b"dog"]) == bytes.fromhex("c88363617483646f67")


def test_encode_empty() -> None:
    assert rlp_encode(b"") == b"\x80"
    assert rlp_encode([]) == b"\xc0"


def test_encode_single_bytes() -> None:
    assert rlp_encode(b"\x00") == b"\x00"
    assert rlp_encode(b"\x7f") == b"\x7f"
    assert rlp_encode(b"\x80") == b"\x81\x80"


def test_encode_integers() -> None:
    assert rlp_encode(0) == b"\x80"
    assert rlp_encode(15) == b"\x0f"
    assert rlp_encode(1024) == b"\x82\x04\x00"
    with pytest.raises(ValueError):
        rlp_encode(-1)


def test_encode_set_theory_three() -> None:
    assert rlp_encode(SET_THEORY_THREE) == bytes.fromhex("c7c0c1c0c3c0c1c0")


def test_encode_lorem() -> None:
    assert rlp_encode(LOREM) == b"\xb8\x38" + LOREM


def test_encode_long_list() -> None:
    encoded = rlp_encode([b"a" * 60])
    assert encoded[:2] == b"\xf8\x3e"
    assert encoded[2:4] == b"\xb8\x3c"
    assert len(encoded) == 64


def test_encode_long_length_prefix() -> None:
    assert rlp_encode(b"x" * 256)[:3] == b"\xb9\x01\x00"


def test_encode_unsupported_type() -> None:
    with pytest.raises(TypeError):
        rlp_encode(1.5)
    with pytest.raises(TypeError):
        rlp_encode({"a": 1})


def test_decode_items() -> None:
    assert rlp_decode(rlp_encode(b"dog")) == b"dog"
    assert rlp_decode(rlp_encode([b"cat", b"dog"])) == [b"cat", b"dog"]
    assert rlp_decode(b"\x80") == b""
    assert rlp_decode(b"\xc0") == []
    assert rlp_decode(b"\x00") == b"\x00"
    assert rlp_decode(b"\x82\x04\x00") == b"\x04\x00"
    assert rlp_decode(b"\xb8\x38" + LOREM) == LOREM


def test_decode_set_theory_three() -> None:
    assert rlp_decode(bytes.fromhex("c7c0c1c0c3c0c1c0")) == SET_THEORY_THREE


def test_decode_long_list() -> None:
    assert rlp_decode(rlp_encode([b"a" * 60, [b"b", 1024]])) == [
        b"a" * 60,
        [b"b", b"\x04\x00"],
    ]


def test_decode_empty_input() -> None:
    assert rlp_decode(b"") is None


def test_decode_ignores_trailing_bytes() -> None:
    assert rlp_decode(b"\x83dog\x01") == b"dog"


def test_decode_truncated() -> None:
    with pytest.raises(RLPDecodingError):
        rlp_decode(b"\x83do")
    with pytest.raises(RLPDecodingError):
        rlp_decode(b"\xb8")
    with pytest.raises(RLPDecodingError):
        rlp_decode(b"\xb8\x38abc")
    # inner item claims more than the enclosing list holds
    with pytest.raises(RLPDecodingError):
        rlp_decode(b"\xc2\x83do")
    with pytest.raises(ValueError):
        rlp_decode(b"\xf9\x01")
