"""Key generation and secret-key expansion for Ed25519."""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

from .points import G

__all__ = ["Keypair", "secret_expand", "private_to_public_key", "gen_keypair"]

KEY_LENGTH = 32


@dataclass(frozen=True)
class Keypair:
    """A 32-byte public key together with its 32-byte private key."""

    public_key: bytes
    private_key: bytes


def _check_private_key(private_key: bytes) -> bytes:
    data = bytes(private_key)
    if len(data) != KEY_LENGTH:
        raise ValueError(
            f"the length of the private key should be {KEY_LENGTH} bytes, got {len(data)}"
        )
    return data


def secret_expand(private_key: bytes) -> tuple[int, bytes]:
    """Hash the private key into the clamped secret scalar and the 32-byte nonce prefix."""
    digest = hashlib.sha512(_check_private_key(private_key)).digest()
    scalar = int.from_bytes(digest[:32], "little")
    scalar &= (1 << 254) - 8
    scalar |= 1 << 254
    return scalar, digest[32:]


def private_to_public_key(private_key: bytes) -> bytes:
    """Derive the compressed public key for a private key."""
    scalar, _ = secret_expand(private_key)
    return (G * scalar).compress()


def gen_keypair() -> Keypair:
    """Generate a keypair from the operating system's random source."""
    private_key = secrets.token_bytes(KEY_LENGTH)
    return Keypair(public_key=private_to_public_key(private_key), private_key=private_key)