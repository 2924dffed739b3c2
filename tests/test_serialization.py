import pytest
from hypothesis import given
from hypothesis import strategies as st

from verkle_crypto.element import Element
from verkle_crypto.fields import FR_MODULUS
from verkle_crypto.serialization import (
    ZERO_POINT,
    CommitmentError,
    deserialize_commitment,
    deserialize_update_commitment_sparse,
    fr_from_le_bytes,
    fr_to_le_bytes,
    serialize_commitment,
)


def _scalar(first_byte):
    return bytes([first_byte]) + bytes(31)


def test_identity_constant():
    assert Element.zero().to_bytes_uncompressed() == ZERO_POINT


def test_fr_le_bytes_roundtrip_fixed():
    value = 123456
    encoded = fr_to_le_bytes(value)
    assert len(encoded) == 32
    assert fr_from_le_bytes(encoded) == value


@given(st.integers(min_value=0, max_value=FR_MODULUS - 1))
def test_fr_le_bytes_roundtrip(value):
    assert fr_from_le_bytes(fr_to_le_bytes(value)) == value


def test_fr_from_le_bytes_rejects_unreduced():
    with pytest.raises(CommitmentError):
        fr_from_le_bytes(FR_MODULUS.to_bytes(32, "little"))


def test_fr_from_le_bytes_rejects_short_input():
    with pytest.raises(CommitmentError):
        fr_from_le_bytes(bytes(31))


def test_byte_array_input_update_commitment_sparse():
    data = (
        ZERO_POINT
        + _scalar(2) + _scalar(19) + bytes([7])
        + _scalar(2) + _scalar(17) + bytes([8])
    )
    commitment, indexes, old_scalars, new_scalars = (
        deserialize_update_commitment_sparse(data)
    )
    assert commitment == ZERO_POINT
    assert indexes == [7, 8]
    assert old_scalars == [_scalar(2), _scalar(2)]
    assert new_scalars == [_scalar(19), _scalar(17)]
    deltas = [
        fr_from_le_bytes(new) - fr_from_le_bytes(old)
        for old, new in zip(old_scalars, new_scalars)
    ]
    assert deltas == [17, 15]


def test_update_commitment_sparse_with_no_updates():
    assert deserialize_update_commitment_sparse(ZERO_POINT) == (ZERO_POINT, [], [], [])


def test_update_commitment_sparse_bad_length():
    with pytest.raises(CommitmentError) as info:
        deserialize_update_commitment_sparse(ZERO_POINT + bytes(64))
    assert info.value.details["actual_size"] == 64
    assert info.value.details["expected_multiple"] == 65


def test_update_commitment_sparse_too_short():
    with pytest.raises(CommitmentError):
        deserialize_update_commitment_sparse(bytes(10))


def test_serialize_commitment_roundtrip_identity():
    zero = Element.zero()
    serialized = serialize_commitment(zero.to_bytes_uncompressed())
    got = Element.from_bytes_unchecked_uncompressed(deserialize_commitment(serialized))
    assert got == zero


def test_serialize_commitment_generator_fixed():
    generator = Element.prime_subgroup_generator()
    serialized = serialize_commitment(generator.to_bytes_uncompressed())
    assert serialized.hex() == (
        "4a2c7486fd924882bf02c6908de395122843e3e05264d7991e18e7985dad51e9"
    )
    restored = Element.from_bytes_unchecked_uncompressed(
        deserialize_commitment(serialized)
    )
    assert restored == generator


def test_deserialize_commitment_invalid():
    with pytest.raises(CommitmentError) as info:
        deserialize_commitment(b"\xff" * 32)
    assert info.value.details["bytes"] == b"\xff" * 32