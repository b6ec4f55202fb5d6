import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from edsig.constants import P, Q
from edsig.keygen import private_to_public_key
from edsig.sign import sign
from edsig.verify import verify

SK1 = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
SK2 = bytes.fromhex("4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb")
PK1 = private_to_public_key(SK1)
PK2 = private_to_public_key(SK2)


def test_known_vector_accepted():
    public_key = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
    signature = bytes.fromhex(
        "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
        "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
    )
    assert verify(public_key, b"", signature) is True


def test_round_trip():
    assert verify(PK2, b"payload", sign(SK2, b"payload")) is True


def test_modified_message_rejected():
    signature = sign(SK1, b"payload")
    assert verify(PK1, b"paylxad", signature) is False
    assert verify(PK1, b"payloae", signature) is False


def test_modified_signature_rejected():
    signature = bytearray(sign(SK1, b"payload"))
    signature[40] ^= 1
    assert verify(PK1, b"payload", bytes(signature)) is False


def test_wrong_public_key_rejected():
    assert verify(PK2, b"payload", sign(SK1, b"payload")) is False


def test_s_not_reduced_rejected():
    signature = sign(SK1, b"payload")
    forged = signature[:32] + Q.to_bytes(32, "little")
    assert verify(PK1, b"payload", forged) is False


def test_invalid_public_key_encoding_rejected():
    signature = sign(SK1, b"payload")
    assert verify(P.to_bytes(32, "little"), b"payload", signature) is False


def test_invalid_r_encoding_rejected():
    signature = sign(SK1, b"payload")
    forged = P.to_bytes(32, "little") + signature[32:]
    assert verify(PK1, b"payload", forged) is False


def test_wrong_lengths_raise():
    signature = sign(SK1, b"payload")
    with pytest.raises(ValueError):
        verify(PK1[:31], b"payload", signature)
    with pytest.raises(ValueError):
        verify(PK1, b"payload", signature[:63])


@settings(max_examples=8, deadline=None)
@given(private_key=st.binary(min_size=32, max_size=32), msg=st.binary(max_size=64))
def test_round_trip_property(private_key, msg):
    public_key = private_to_public_key(private_key)
    assert verify(public_key, msg, sign(private_key, msg)) is True