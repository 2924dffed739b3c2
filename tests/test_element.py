import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from verkle_crypto.element import (
    COEFF_A,
    COEFF_D,
    Element,
    multi_scalar_mul,
    try_reduce_to_element,
)
from verkle_crypto.fields import FQ_MODULUS, FR_MODULUS, fq_sqrt

G = Element.prime_subgroup_generator()


def two_torsion():
    return Element(0, FQ_MODULUS - 1, 0, 1)


def points_at_infinity():
    sqrt_da = fq_sqrt(COEFF_D * pow(COEFF_A, -1, FQ_MODULUS) % FQ_MODULUS)
    assert sqrt_da is not None
    return (
        Element(sqrt_da, 0, 1, 0),
        Element((-sqrt_da) % FQ_MODULUS, 0, 1, 0),
    )


def test_consistent_group_to_field():
    expected = "d1e7de2aaea9603d5bc6c208d319596376556ecd8336671ba7670c2139772d14"
    got = G.map_to_scalar_field().to_bytes(32, "little").hex()
    assert got == expected


def test_from_bytes_unchecked_uncompressed_roundtrip():
    data = G.to_bytes_uncompressed()
    assert Element.from_bytes_unchecked_uncompressed(data) == G


def test_from_batch_map_to_scalar_field():
    points = [G * i for i in range(10)]
    got = Element.batch_map_to_scalar_field(points)
    assert got == [p.map_to_scalar_field() for p in points]


def test_fixed_test_vectors():
    expected = [
        "4a2c7486fd924882bf02c6908de395122843e3e05264d7991e18e7985dad51e9",
        "43aa74ef706605705989e8fd38df46873b7eae5921fbed115ac9d937399ce4d5",
        "5e5f550494159f38aa54d2ed7f11a7e93e4968617990445cc93ac8e59808c126",
        "0e7e3748db7c5c999a7bcd93d71d671f1f40090423792266f94cb27ca43fce5c",
        "14ddaa48820cb6523b9ae5fe9fe257cbbd1f3d598a28e670a40da5d1159d864a",
        "6989d1c82b2d05c74b62fb0fbdf8843adae62ff720d370e209a7b84e14548a7d",
        "26b8df6fa414bf348a3dc780ea53b70303ce49f3369212dec6fbe4b349b832bf",
        "37e46072db18f038f2cc7d3d5b5d1374c0eb86ca46f869d6a95fc2fb092c0d35",
        "2c1ce64f26e1c772282a6633fac7ca73067ae820637ce348bb2c8477d228dc7d",
        "297ab0f5a8336a7a4e2657ad7a33a66e360fb6e50812d4be3326fab73d6cee07",
        "5b285811efa7a965bd6ef5632151ebf399115fcc8f5b9b8083415ce533cc39ce",
        "1f939fa2fd457b3effb82b25d3fe8ab965f54015f108f8c09d67e696294ab626",
        "3088dcb4d3f4bacd706487648b239e0be3072ed2059d981fe04ce6525af6f1b8",
        "35fbc386a16d0227ff8673bc3760ad6b11009f749bb82d4facaea67f58fc60ed",
        "00f29b4f3255e318438f0a31e058e4c081085426adb0479f14c64985d0b956e0",
        "3fa4384b2fa0ecc3c0582223602921daaa893a97b64bdf94dcaa504e8b7b9e5f",
    ]
    point = G
    for index, hex_bytes in enumerate(expected):
        assert point.to_bytes().hex() == hex_bytes, f"index {index} does not match"
        point = point.double()


def test_ser_der_roundtrip():
    element1 = G
    element2 = G + two_torsion()
    bytes1 = element1.to_bytes()
    assert bytes1 == element2.to_bytes()

    got = Element.from_bytes(bytes1)
    assert got == element1
    assert got == element2


def test_check_infinity_does_not_pass_legendre():
    point = points_at_infinity()[0]
    gen2 = G + G + G + G
    res = point + G + gen2
    assert Element.from_bytes(res.to_bytes()) is None


def test_two_torsion_correct():
    tt = two_torsion()
    doubled = tt.double()
    assert doubled.x == 0 and doubled.t == 0 and doubled.y == doubled.z
    # The 2-torsion point is identified with the identity in the quotient group.
    assert tt.is_zero()

    inf1, inf2 = points_at_infinity()
    assert not inf1.is_zero()
    assert not inf2.is_zero()
    assert inf1.double().is_zero()
    assert inf2.double().is_zero()


def test_identity_uncompressed_bytes():
    assert Element.zero().to_bytes_uncompressed() == bytes(32) + b"\x01" + bytes(31)


def test_degenerate_point_never_equal():
    bad = Element(0, 0, 0, 1)
    assert (bad == bad) is False
    assert (bad == Element.zero()) is False


def test_from_bytes_rejects_invalid_input():
    assert Element.from_bytes(b"\xff" * 32) is None
    assert Element.from_bytes(G.to_bytes()[:31]) is None


def test_from_bytes_unchecked_uncompressed_rejects_bad_length():
    with pytest.raises(ValueError):
        Element.from_bytes_unchecked_uncompressed(bytes(63))


def test_compressed_serialized_size():
    assert Element.compressed_serialized_size() == len(G.to_bytes()) == 32


def test_negation_and_subtraction():
    assert G * -1 == -G
    assert (G - G).is_zero()
    assert G + G - G == G


@settings(max_examples=10, deadline=None)
@given(
    st.integers(min_value=1, max_value=FR_MODULUS - 1),
    st.integers(min_value=1, max_value=FR_MODULUS - 1),
)
def test_scalar_mul_is_linear_and_roundtrips(k, m):
    p = G * k
    assert p + G * m == G * (k + m)
    assert Element.from_bytes(p.to_bytes()) == p
    assert k * G == p


def test_mul_by_group_order_is_identity():
    assert (G * FR_MODULUS).is_zero()


def test_hash_respects_equality():
    assert hash(G) == hash(G + two_torsion())
    assert len({G, G + two_torsion(), G.double()}) == 2


def test_multi_scalar_mul_matches_sum():
    bases = [G * (i + 1) for i in range(5)]
    scalars = [-(i + 1) for i in range(5)]
    expected = Element.zero()
    for base, scalar in zip(bases, scalars):
        expected = expected + base * scalar
    assert multi_scalar_mul(bases, scalars) == expected


def test_multi_scalar_mul_length_mismatch():
    with pytest.raises(ValueError):
        multi_scalar_mul([G, G], [1])


def test_try_reduce_to_element():
    assert try_reduce_to_element(G.to_bytes()) == G
    unreduced = (int.from_bytes(G.to_bytes(), "big") + FQ_MODULUS).to_bytes(33, "big")
    assert try_reduce_to_element(unreduced) == G


def test_subgroup_check_on_generator():
    assert G.subgroup_check() is True