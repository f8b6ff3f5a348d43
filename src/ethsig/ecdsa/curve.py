"""
secp256k1 group arithmetic: y^2 = x^3 + 7 over the prime field Z_P.

Points are immutable affine pairs with coordinates reduced mod P. The point at
infinity is written (0, 0), which is never on this curve.
"""

from __future__ import annotations

from collections import namedtuple

from .field import mod_inverse, reduce

# field prime
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
# number of points generated by G
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
B = 7
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


class Point:
    """Affine secp256k1 point; `Point(0, 0)` is the identity."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "_x", reduce(x, P))
        object.__setattr__(self, "_y", reduce(y, P))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def infinity(cls) -> Point:
        return cls(0, 0)

    @classmethod
    def from_hex(cls, x: str, y: str) -> Point:
        return cls(int(x, 16), int(y, 16))

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def is_infinity(self) -> bool:
        return self._x == 0 and self._y == 0

    def is_on_curve(self) -> bool:
        """True iff y^2 == x^3 + 7 (mod P). The identity is not on the curve."""
        if self.is_infinity:
            return False
        return (self._y * self._y - self._x * self._x * self._x - B) % P == 0

    def negate(self) -> Point:
        if self.is_infinity:
            return self
        return self.__class__(self._x, P - self._y)

    def add(self, other: Point) -> Point:
        """
        Group law. Special cases are checked in order: identity operand, mutual
        negation, doubling, then the general chord.
        """
        if not isinstance(other, Point):
            raise TypeError("can only add a Point to a Point")
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self
        x1, y1 = self._x, self._y
        x2, y2 = other._x, other._y
        if x1 == x2 and (y1 + y2) % P == 0:
            return self.infinity()
        if x1 == x2 and y1 == y2:
            lam = 3 * x1 * x1 * mod_inverse(2 * y1, P) % P
        else:
            lam = (y2 - y1) * mod_inverse(x2 - x1, P) % P
        x3 = lam * lam - x1 - x2
        y3 = lam * (x1 - x3) - y1
        return self.__class__(x3, y3)

    def double(self) -> Point:
        return self.add(self)

    def multiply(self, k: int) -> Point:
        """
        k * self by double-and-add over the bits of |k|; negative k multiplies the
        negated point. The scalar is not reduced by the group order.
        """
        if k < 0:
            return self.negate().multiply(-k)
        acc = self.infinity()
        addend = self
        while k:
            if k & 1:
                acc = acc.add(addend)
            k >>= 1
            if k:
                addend = addend.add(addend)
        return acc

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other.negate())

    def __neg__(self) -> Point:
        return self.negate()

    def __mul__(self, k: int) -> Point:
        if not isinstance(k, int):
            return NotImplemented
        return self.multiply(k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __str__(self) -> str:
        if self.is_infinity:
            return "0"
        return f"X: 0x{self._x:064x}\nY: 0x{self._y:064x}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x=0x{self._x:x}, y=0x{self._y:x})"


# domain parameters of y^2 = x^3 + b over Z_p, generator g of order n
CurveParams = namedtuple("CurveParams", ("p", "n", "b", "g"))

G = Point(_Gx, _Gy)

SECP256K1 = CurveParams(p=P, n=N, b=B, g=G)


__all__: tuple[str, ...] = (
    "B",
    "G",
    "N",
    "P",
    "SECP256K1",
    "CurveParams",
    "Point",
)
