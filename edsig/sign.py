"""Ed25519 signature generation."""

from __future__ import annotations

import hashlib

from .constants import Q
from .keygen import secret_expand
from .points import G
from .utils import int_to_32bytes

__all__ = ["sign"]


def sign(private_key: bytes, msg: bytes) -> bytes:
    """Return the 64-byte signature of msg under private_key."""
    scalar, prefix = secret_expand(private_key)
    public_key = (G * scalar).compress()

    r = int.from_bytes(hashlib.sha512(prefix + bytes(msg)).digest(), "little") % Q
    r_compressed = (G * r).compress()

    h_digest = hashlib.sha512(r_compressed + public_key + bytes(msg)).digest()
    h = int.from_bytes(h_digest, "little") % Q

    s = (r + h * scalar) % Q
    return r_compressed + int_to_32bytes(s)