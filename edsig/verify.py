"""Ed25519 signature verification."""

from __future__ import annotations

import hashlib

from .constants import Q
from .points import G, Point
from .utils import DecodingError

__all__ = ["verify"]


def verify(public_key: bytes, msg: bytes, signature: bytes) -> bool:
    """Return True if signature is a valid signature of msg under public_key."""
    public_key = bytes(public_key)
    signature = bytes(signature)
    if len(public_key) != 32:
        raise ValueError(f"the length of the public key should be 32 bytes, got {len(public_key)}")
    if len(signature) != 64:
        raise ValueError(f"the length of the signature should be 64 bytes, got {len(signature)}")

    try:
        public_point = Point.decompress(public_key)
        r_compressed = signature[:32]
        r_point = Point.decompress(r_compressed)
    except DecodingError:
        return False

    s = int.from_bytes(signature[32:], "little")
    if s >= Q:
        return False

    h = int.from_bytes(hashlib.sha512(r_compressed + public_key + bytes(msg)).digest(), "little")

    expected_r = Point.straus_multiexp(s, G, (-h) % Q, public_point)
    return expected_r == r_point