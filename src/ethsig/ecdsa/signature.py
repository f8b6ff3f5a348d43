"""
Recoverable ECDSA over secp256k1 with Ethereum's v = 27 + recovery id convention.

Signing samples a random nonce; s is left as computed (no low-s normalization),
so both (r, s) and (r, N - s) verify.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from ..exceptions import RecoveryError
from .curve import B, G, N, P, Point
from .field import mod_inverse, mod_sqrt, select_root

if TYPE_CHECKING:
    from ..address import Address

logger = logging.getLogger(__name__)

DIGEST_SIZE = 32
SIGNATURE_SIZE = 65
V_OFFSET = 27


def _digest_to_int(digest: bytes) -> int:
    if len(digest) != DIGEST_SIZE:
        raise ValueError("digest must be 32 bytes")
    return int.from_bytes(digest, "big")


@dataclass(frozen=True)
class Signature:
    """ECDSA signature (r, s) plus Ethereum-style v in {27, 28, 29, 30}."""

    r: int
    s: int
    v: int

    @property
    def recovery_id(self) -> int:
        return self.v - V_OFFSET

    @classmethod
    def create(
        cls,
        private_key: int,
        digest: bytes,
        nonce_source: Callable[[int], int] = secrets.randbelow,
    ) -> Signature:
        """
        Sign a 32-byte digest.

        Args:
            private_key: Scalar in [1, N).
            digest: 32-byte message hash, read big-endian.
            nonce_source: Returns a uniform integer in [0, bound) for a given
                bound; defaults to `secrets.randbelow`.

        Returns:
            Signature with v = 27 + 2 * (R.x >= N) + (R.y odd).
        """
        z = _digest_to_int(digest)
        if not 0 < private_key < N:
            raise ValueError("private key out of range [1, N)")

        k = nonce_source(N)
        R = G.multiply(k)
        while R.x == 0:
            logger.debug("nonce produced R.x == 0, resampling")
            k = nonce_source(N)
            R = G.multiply(k)

        r = R.x % N
        s = (z + private_key * r) * mod_inverse(k, N) % N
        recovery_id = 2 * (R.x >= N) + (R.y & 1)
        return cls(r, s, recovery_id + V_OFFSET)

    def verify(self, digest: bytes, public_key: Point) -> bool:
        """True iff this signature over `digest` was made by `public_key`'s owner."""
        if not 1 <= self.r < N or not 1 <= self.s < N:
            return False
        if not V_OFFSET <= self.v <= V_OFFSET + 3:
            return False
        z = _digest_to_int(digest)
        w = mod_inverse(self.s, N)
        u1 = z * w % N
        u2 = self.r * w % N
        R = G.multiply(u1).add(public_key.multiply(u2))
        if R.x == 0:
            return False
        return R.x % N == self.r

    def recover_public_key(self, digest: bytes) -> Point:
        """
        Rebuild the signer's public key from the signature and digest.

        The recovery id selects R.x (r or r + N) and the parity of R.y. If no
        square root candidate has the wanted parity the other root is used and
        a warning is logged.

        Raises:
            RecoveryError: v is out of range, r is zero mod N, or r does not
                lead to a point on the curve.
        """
        z = _digest_to_int(digest)
        recovery_id = self.recovery_id
        if not 0 <= recovery_id <= 3:
            raise RecoveryError(f"v must be in [27, 30], got {self.v}")
        if self.r % N == 0:
            raise RecoveryError("r must be nonzero mod N")

        x = self.r + N if recovery_id >= 2 else self.r
        root = mod_sqrt(x * x * x + B, P)
        if root is None:
            raise RecoveryError("r is not the x coordinate of a curve point")
        y, matched = select_root(root, P, bool(recovery_id & 1))
        if not matched:
            logger.warning("no square root with the requested parity, using %x", y)
        R = Point(x, y)

        r_inv = mod_inverse(self.r, N)
        u1 = -z * r_inv % N
        u2 = self.s * r_inv % N
        return G.multiply(u1).add(R.multiply(u2))

    def ecrecover(self, digest: bytes) -> Address:
        """Address of the key recovered from this signature."""
        from ..address import Address

        return Address.from_public_key(self.recover_public_key(digest))

    def to_bytes(self) -> bytes:
        """65 bytes: r(32) || s(32) || v(1), big-endian."""
        return self.r.to_bytes(32, "big") + self.s.to_bytes(32, "big") + bytes([self.v])

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[Signature]:
        """Parse r(32) || s(32) || v(1); None unless exactly 65 bytes."""
        if len(data) != SIGNATURE_SIZE:
            return None
        r = int.from_bytes(data[:32], "big")
        s = int.from_bytes(data[32:64], "big")
        return cls(r, s, data[64])

    def __str__(self) -> str:
        return "0x" + self.to_bytes().hex()


def sign(private_key: int, digest: bytes) -> Signature:
    return Signature.create(private_key, digest)


def verify(signature: Signature, digest: bytes, public_key: Point) -> bool:
    return signature.verify(digest, public_key)


def recover_public_key(signature: Signature, digest: bytes) -> Point:
    return signature.recover_public_key(digest)


__all__: tuple[str, ...] = (
    "DIGEST_SIZE",
    "SIGNATURE_SIZE",
    "Signature",
    "recover_public_key",
    "sign",
    "verify",
)
