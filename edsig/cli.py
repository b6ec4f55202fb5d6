"""Command-line entry points for key generation, signing and verification."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .keygen import gen_keypair
from .sign import sign
from .verify import verify

__all__ = ["keygen_main", "sign_main", "verify_main"]

_SK_LABEL = "private key"
_PK_LABEL = "public key"
_SIG_LABEL = "signature"
_DATA_LABEL = "data"


def _read(path: str, what: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SystemExit(f"The {what} file could not be read: {exc}") from exc


def _read_sized(path: str, what: str, size: int) -> bytes:
    data = _read(path, what)
    if len(data) != size:
        raise SystemExit(f"The length of the {what} should be {size} bytes")
    return data


def _write(path: str, data: bytes, what: str) -> None:
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise SystemExit(f"Unable to write {what}: {exc}") from exc


def keygen_main(argv: Sequence[str] | None = None) -> int:
    """Generate a random keypair into <name>.pk and <name>.sk."""
    parser = argparse.ArgumentParser(
        prog="ed25519-keygen", description="Will generate a random ed25519 keypair"
    )
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument(
        "keypair_output_filename",
        help="Will output the keypair in the <keypair_output_filename>.pk and "
        "<keypair_output_filename>.sk files",
    )
    args = parser.parse_args(argv)

    keypair = gen_keypair()
    base = args.keypair_output_filename
    _write(f"{base}.pk", keypair.public_key, _PK_LABEL)
    _write(f"{base}.sk", keypair.private_key, _SK_LABEL)
    return 0


def sign_main(argv: Sequence[str] | None = None) -> int:
    """Sign a data file with a private key file and write the signature."""
    parser = argparse.ArgumentParser(
        prog="ed25519-sign",
        description="Will generate a signature using the ed25519 algorithm",
    )
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument(
        "private_key_filename",
        help="Will use the <private_key_filename> file to generate the signature. "
        "If the file name contains a file extension, it is necessary to specify it.",
    )
    parser.add_argument(
        "data_filename",
        help="Will generate the signature for the data in the <data_filename> file",
    )
    parser.add_argument(
        "signature_output_filename",
        help="Will output the signature in the <signature_output_filename> file",
    )
    args = parser.parse_args(argv)

    private_key = _read_sized(args.private_key_filename, _SK_LABEL, 32)
    data = _read(args.data_filename, _DATA_LABEL)
    _write(args.signature_output_filename, sign(private_key, data), _SIG_LABEL)
    return 0


def verify_main(argv: Sequence[str] | None = None) -> int:
    """Verify a signature file and print ACCEPT or REJECT."""
    parser = argparse.ArgumentParser(
        prog="ed25519-verify",
        description="Will verify a signature using the ed25519 algorithm",
    )
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument(
        "public_key_filename",
        help="Will use the <public_key_filename> to verify the signature. "
        "You must include the .pk extension",
    )
    parser.add_argument(
        "data_filename",
        help="Will verify the signature for the data in the <data_filename> file",
    )
    parser.add_argument(
        "signature_filename",
        help="Will verify the signature in the <signature_filename> file",
    )
    args = parser.parse_args(argv)

    public_key = _read_sized(args.public_key_filename, _PK_LABEL, 32)
    data = _read(args.data_filename, _DATA_LABEL)
    signature = _read_sized(args.signature_filename, _SIG_LABEL, 64)

    print("ACCEPT" if verify(public_key, data, signature) else "REJECT")
    return 0