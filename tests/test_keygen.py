import hashlib

import pytest

from edsig.keygen import Keypair, gen_keypair, private_to_public_key, secret_expand
from edsig.points import G, Point

SK1 = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
SK2 = bytes.fromhex("4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb")


def test_secret_expand_clamps_scalar():
    scalar, prefix = secret_expand(SK1)
    assert scalar & 7 == 0
    assert scalar >> 254 == 1
    assert len(prefix) == 32


def test_secret_expand_prefix_is_upper_half_of_hash():
    _, prefix = secret_expand(SK2)
    assert prefix == hashlib.sha512(SK2).digest()[32:]


def test_secret_expand_rejects_wrong_length():
    with pytest.raises(ValueError):
        secret_expand(b"\x00" * 31)


def test_public_key_vector_one():
    assert private_to_public_key(SK1) == bytes.fromhex(
        "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
    )


def test_public_key_vector_two():
    assert private_to_public_key(SK2) == bytes.fromhex(
        "3d4017c3e843895a92b70aa74d1b7ebc9c982ccf2ec4968cc0cd55f12af4660c"
    )


def test_public_key_decompresses_to_scalar_multiple():
    scalar, _ = secret_expand(SK2)
    assert Point.decompress(private_to_public_key(SK2)) == G * scalar


def test_gen_keypair_is_consistent():
    keypair = gen_keypair()
    assert isinstance(keypair, Keypair)
    assert len(keypair.private_key) == 32
    assert len(keypair.public_key) == 32
    assert keypair.public_key == private_to_public_key(keypair.private_key)


def test_gen_keypair_is_random():
    private_keys = {gen_keypair().private_key for _ in range(4)}
    assert len(private_keys) == 4