"""Points on edwards25519 in extended homogeneous coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import D, G_T, G_X, G_Y, G_Z, P
from .utils import DecodingError, int_to_32bytes, modp_inv, recover_x

__all__ = ["Point", "G"]


@dataclass(frozen=True, eq=False)
class Point:
    """A curve point (X, Y, Z, T) with x = X/Z, y = Y/Z, x*y = T/Z."""

    x: int
    y: int
    z: int
    t: int

    @staticmethod
    def zero() -> Point:
        """Return the neutral element."""
        return Point(0, 1, 1, 0)

    def _affine(self) -> tuple[int, int]:
        z_inv = modp_inv(self.z)
        return (self.x * z_inv) % P, (self.y * z_inv) % P

    def compress(self) -> bytes:
        """Encode as 32 bytes: y with the low bit of x in the top bit."""
        x, y = self._affine()
        return int_to_32bytes(y | ((x & 1) << 255))

    @staticmethod
    def decompress(data: bytes) -> Point:
        """Decode a 32-byte encoding, raising DecodingError if invalid."""
        if len(data) != 32:
            raise DecodingError(f"point encoding must be 32 bytes, got {len(data)}")
        y = int.from_bytes(data, "little")
        sign = (y >> 255) & 1 == 1
        y &= (1 << 255) - 1
        x = recover_x(y, sign)
        return Point(x, y, 1, (x * y) % P)

    @staticmethod
    def straus_multiexp(a: int, p: Point, b: int, q: Point) -> Point:
        """Compute a*p + b*q over 256 bits of the scalars."""
        table = ((Point.zero(), q), (p, p + q))
        result = Point.zero()
        for i in reversed(range(256)):
            result = result + result + table[(a >> i) & 1][(b >> i) & 1]
        return result

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        a = ((self.y - self.x) * (other.y - other.x)) % P
        b = ((self.y + self.x) * (other.y + other.x)) % P
        c = (2 * self.t * other.t * D) % P
        d = (2 * self.z * other.z) % P
        e = (b - a) % P
        f = (d - c) % P
        g = (d + c) % P
        h = (b + a) % P
        return Point((e * f) % P, (g * h) % P, (f * g) % P, (e * h) % P)

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, int):
            return NotImplemented
        addend = self
        result = Point.zero()
        while scalar > 0:
            if scalar & 1:
                result = result + addend
            addend = addend + addend
            scalar >>= 1
        return result

    def __rmul__(self, scalar: object) -> Point:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x * other.z - self.z * other.x) % P == 0 and (
            self.y * other.z - self.z * other.y
        ) % P == 0

    def __hash__(self) -> int:
        return hash(self._affine())


G = Point(G_X, G_Y, G_Z, G_T)