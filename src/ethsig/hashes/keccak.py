"""
Keccak sponge (original submission padding, as used by Ethereum; not SHA-3).
Pure Python; exposes a hashlib-style hasher plus keccak256/keccak512 helpers.
"""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF

_ROUND_CONSTANTS = (
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
)

# rotation offset for lane index x + 5*y
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)

# destination of lane x + 5*y after pi: (y, 2x + 3y)
_PI = tuple(y + 5 * ((2 * x + 3 * y) % 5) for y in range(5) for x in range(5))


def _permute(lanes: list[int]) -> None:
    """Keccak-f[1600] on a flat list of 25 lanes (index x + 5*y), in place."""
    b = [0] * 25
    for rc in _ROUND_CONSTANTS:
        # theta
        c = [lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20] for x in range(5)]
        for x in range(5):
            c1 = c[(x + 1) % 5]
            d = c[(x + 4) % 5] ^ (((c1 << 1) | (c1 >> 63)) & _MASK64)
            for y in range(0, 25, 5):
                lanes[x + y] ^= d
        # rho and pi
        for i in range(25):
            v, n = lanes[i], _RHO[i]
            b[_PI[i]] = ((v << n) | (v >> (64 - n))) & _MASK64 if n else v
        # chi
        for y in range(0, 25, 5):
            b0, b1, b2, b3, b4 = b[y], b[y + 1], b[y + 2], b[y + 3], b[y + 4]
            lanes[y] = b0 ^ (~b1 & b2)
            lanes[y + 1] = b1 ^ (~b2 & b3)
            lanes[y + 2] = b2 ^ (~b3 & b4)
            lanes[y + 3] = b3 ^ (~b4 & b0)
            lanes[y + 4] = b4 ^ (~b0 & b1)
        # iota
        lanes[0] ^= rc


class Keccak:
    """
    Incremental Keccak hasher with capacity 2 * digest_size.

    Usage mirrors hashlib: update() any number of times, then digest(); the
    hasher may keep being updated after a digest is taken.
    """

    def __init__(self, digest_size: int = 32, data: bytes = b""):
        if digest_size not in (28, 32, 48, 64):
            raise ValueError("digest_size must be one of 28, 32, 48, 64")
        self.digest_size = digest_size
        self.block_size = 200 - 2 * digest_size
        self._lanes = [0] * 25
        self._buffer = bytearray()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"keccak{self.digest_size * 8}"

    def _absorb(self, block: bytes) -> None:
        lanes = self._lanes
        for i in range(self.block_size // 8):
            lanes[i] ^= int.from_bytes(block[8 * i : 8 * i + 8], "little")
        _permute(lanes)

    def update(self, data: bytes) -> Keccak:
        self._buffer.extend(data)
        rate = self.block_size
        full = len(self._buffer) - len(self._buffer) % rate
        for off in range(0, full, rate):
            self._absorb(self._buffer[off : off + rate])
        del self._buffer[:full]
        return self

    def copy(self) -> Keccak:
        other = self.__class__.__new__(self.__class__)
        other.digest_size = self.digest_size
        other.block_size = self.block_size
        other._lanes = list(self._lanes)
        other._buffer = bytearray(self._buffer)
        return other

    def digest(self) -> bytes:
        rate = self.block_size
        final = self.copy()
        pad = bytearray(rate - len(final._buffer))
        pad[0] |= 0x01
        pad[-1] |= 0x80
        final._absorb(bytes(final._buffer + pad))
        out = bytearray()
        while True:
            for lane in final._lanes[: rate // 8]:
                out += lane.to_bytes(8, "little")
            if len(out) >= self.digest_size:
                return bytes(out[: self.digest_size])
            _permute(final._lanes)

    def hexdigest(self) -> str:
        return self.digest().hex()


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 digest.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return Keccak(32, data).digest()


def keccak512(data: bytes) -> bytes:
    """Keccak-512 digest (64 bytes)."""
    return Keccak(64, data).digest()


__all__: tuple[str, ...] = ("Keccak", "keccak256", "keccak512")
