"""Field arithmetic helpers modulo the edwards25519 prime."""

from .constants import D, MODP_SQRT_M1, P

__all__ = ["DecodingError", "modp_inv", "int_to_32bytes", "recover_x"]


class DecodingError(ValueError):
    """Raised when bytes do not encode a valid curve point."""


def modp_inv(x: int) -> int:
    """Return the inverse of x modulo P (0 maps to 0)."""
    return pow(x, P - 2, P)


def int_to_32bytes(x: int) -> bytes:
    """Encode a positive integer as 32 little-endian bytes, zero padded."""
    if x <= 0:
        raise ValueError("cannot transform non-positive number to 32 bytes")
    length = (x.bit_length() + 7) // 8
    if length > 32:
        raise ValueError(f"this integer is too large to fit in 32 bytes ({length} bytes)")
    return x.to_bytes(32, "little")


def recover_x(y: int, sign: bool) -> int:
    """Recover the x coordinate for y, choosing the root whose low bit is sign."""
    if y >= P:
        raise DecodingError("y is greater than p")

    x2 = (y * y - 1) * modp_inv(D * y * y + 1)

    if x2 == 0:
        if sign:
            raise DecodingError("x2 is zero and sign is true")
        return 0

    x = pow(x2, (P + 3) // 8, P)
    if (x * x - x2) % P != 0:
        x = (x * MODP_SQRT_M1) % P
    if (x * x - x2) % P != 0:
        raise DecodingError("x is not a square root of x2")

    if bool(x & 1) != sign:
        x = P - x
    return x