"""Ed25519 key generation, signing and verification, with command-line tools."""

__version__ = "0.1.0"
__all__ = ["constants", "utils", "points", "keygen", "sign", "verify", "cli"]