"""
Modular arithmetic over a prime field: reduction, inverse, Legendre symbol and
Tonelli-Shanks square roots. Nothing here knows about secp256k1.
"""

from __future__ import annotations


def reduce(n: int, modulus: int) -> int:
    """Canonical representative of n in [0, modulus), negative n included."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return n % modulus


def mod_inverse(n: int, modulus: int) -> int:
    """
    Multiplicative inverse of n modulo `modulus` via the extended Euclidean algorithm.

    Args:
        n: Value to invert (any integer; reduced first).
        modulus: Positive modulus. A modulus of 1 yields 1 by convention.

    Returns:
        x in [0, modulus) with n * x == 1 (mod modulus).

    Raises:
        ValueError: if gcd(n, modulus) != 1.
    """
    if modulus == 1:
        return 1
    a = reduce(n, modulus)
    t, r = 0, modulus
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError(f"{n} has no inverse modulo {modulus}")
    return reduce(t, modulus)


def legendre_symbol(a: int, p: int) -> int:
    """a^((p-1)/2) mod p: 1 for a residue, p - 1 for a non-residue, 0 when p | a."""
    return pow(a, (p - 1) // 2, p)


def mod_sqrt(n: int, p: int) -> int | None:
    """
    Square root of n modulo an odd prime p (Tonelli-Shanks).

    Returns None when n is not a quadratic residue. Either of the two roots may
    be returned; callers needing a given parity pick between r and p - r
    themselves (see `select_root`).
    """
    n = reduce(n, p)
    if legendre_symbol(n, p) != 1:
        return None

    # p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while legendre_symbol(z, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    r = pow(n, (q + 1) // 2, p)
    while t != 1:
        # least i in (0, m) with t^(2^i) == 1
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r


def select_root(root: int, modulus: int, odd: bool) -> tuple[int, bool]:
    """
    Choose between `root` and `modulus - root` by parity.

    Returns (chosen, matched). When neither candidate has the requested parity
    the complement `modulus - root` is returned with matched=False.
    """
    other = modulus - root
    if (root & 1) == odd:
        return root, True
    if (other & 1) == odd:
        return other, True
    return other, False


__all__: tuple[str, ...] = (
    "legendre_symbol",
    "mod_inverse",
    "mod_sqrt",
    "reduce",
    "select_root",
)
