"""
Ethereum addresses: the low 20 bytes of keccak256(x || y) of a public key,
rendered as 0x-prefixed hex (lowercase or EIP-55 checksummed).
"""

from __future__ import annotations

from .ecdsa.curve import Point
from .ecdsa.keys import derive_public_key, private_key_from_bytes, public_key_bytes
from .hashes import keccak256

ADDRESS_SIZE = 20


class Address:
    """Immutable 20-byte account address."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes):
        if len(raw) != ADDRESS_SIZE:
            raise ValueError(f"address must be {ADDRESS_SIZE} bytes, got {len(raw)}")
        self._raw = bytes(raw)

    @classmethod
    def from_public_key(cls, public_key: Point) -> Address:
        return cls(keccak256(public_key_bytes(public_key))[-ADDRESS_SIZE:])

    @classmethod
    def from_hex(cls, text: str) -> Address:
        """
        Parse "0x" + 40 hex digits. All-lowercase and all-uppercase input is
        accepted as is; mixed case must carry a valid EIP-55 checksum.
        """
        digits = text[2:] if text[:2] in ("0x", "0X") else text
        if len(digits) != 2 * ADDRESS_SIZE:
            raise ValueError("address must be 40 hex digits")
        try:
            address = cls(bytes.fromhex(digits))
        except ValueError as e:
            raise ValueError(f"invalid hex address: {text!r}") from e
        if digits != digits.lower() and digits != digits.upper():
            if address.checksum()[2:] != digits:
                raise ValueError(f"bad EIP-55 checksum: {text!r}")
        return address

    @property
    def raw(self) -> bytes:
        return self._raw

    def checksum(self) -> str:
        """EIP-55 mixed-case rendering."""
        digits = self._raw.hex()
        mask = keccak256(digits.encode("ascii")).hex()
        return "0x" + "".join(
            ch.upper() if int(m, 16) >= 8 else ch for ch, m in zip(digits, mask)
        )

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return "0x" + self._raw.hex()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    def __eq__(self, other: object) -> bool:
        # strings compare unequal; parse them with from_hex
        if isinstance(other, Address):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)


def privkey_to_address(privkey: bytes) -> str:
    """
    Ethereum address (0x + 40 lowercase hex) from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.

    Returns:
        "0x" plus 40 hex chars (keccak256(x || y)[12:32]).
    """
    d = private_key_from_bytes(privkey)
    if d == 0:
        raise ValueError("invalid privkey")
    return str(Address.from_public_key(derive_public_key(d)))


__all__: tuple[str, ...] = ("ADDRESS_SIZE", "Address", "privkey_to_address")
