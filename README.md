# edsig

Ed25519 signatures in pure Python: key pair generation, signing and
verification, with no dependencies beyond the standard library.

This implementation favours clarity over speed and makes no attempt at
constant-time arithmetic. Use it to learn, test and experiment, not to
protect secrets.

## Installation

```
pip install .
```

## Command line

Generate a key pair. The public key is written to `mykey.pk` and the
private key to `mykey.sk`, 32 raw bytes each:

```
edsig-keygen mykey
```

Sign a file. The 64-byte signature is written to the output file:

```
edsig-sign mykey.sk message.txt message.sig
```

Verify a signature. The command prints `ACCEPT` or `REJECT`:

```
edsig-verify mykey.pk message.txt message.sig
```

Give the full file names, extensions included. Each command accepts
`--version`. A key file that is not exactly 32 bytes, a signature file
that is not exactly 64 bytes, or a file that cannot be read or written
stops the command with an error message.

Keys and signatures are raw bytes; there is no hex, PEM or other text
encoding, and private key files are written without any encryption.

## Library

```python
from edsig.keygen import gen_keypair, private_to_public_key
from edsig.sign import sign
from edsig.verify import verify

keypair = gen_keypair()
signature = sign(keypair.private_key, b"hello")
assert verify(keypair.public_key, b"hello", signature)
assert not verify(keypair.public_key, b"tampered", signature)

assert private_to_public_key(keypair.private_key) == keypair.public_key
```

`gen_keypair()` returns a `Keypair` with `public_key` and `private_key`
fields, drawing the private key from the operating system's random source.
`secret_expand()` in `edsig.keygen` gives the clamped secret scalar and the
32-byte nonce prefix derived from a private key.

`sign()` and `secret_expand()` raise `ValueError` for a private key that is
not 32 bytes. `verify()` raises `ValueError` for a public key that is not
32 bytes or a signature that is not 64 bytes, and returns `False` for
encodings that do not decode to curve points or a signature scalar out of
range.

The curve arithmetic is available in `edsig.points`. `Point` supports
addition, multiplication by an integer, equality, `compress()`,
`Point.decompress()`, `Point.zero()` and `Point.straus_multiexp(a, p, b, q)`
for computing `a*p + b*q`; `G` is the base point. `Point.decompress()`
raises `edsig.utils.DecodingError` when the bytes do not encode a point on
the curve. The curve parameters live in `edsig.constants`.

## Tests

```
pip install .[test]
pytest
```