"""Arithmetic helpers for the Bandersnatch base field Fq and scalar field Fr."""

from __future__ import annotations

from itertools import count
from typing import Iterable, Optional, Sequence

FQ_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
FR_MODULUS = 0x1CFB69D4CA675F520CCE760202687600FF8F87007419047174FD06B52876E7E1
FR_MODULUS_BIT_SIZE = FR_MODULUS.bit_length()

_U64_LIMIT = 1 << 64


def _split_two_adic(modulus: int) -> tuple[int, int]:
    odd = modulus - 1
    adicity = 0
    while odd % 2 == 0:
        odd //= 2
        adicity += 1
    return odd, adicity


_FQ_ODD_PART, _FQ_TWO_ADICITY = _split_two_adic(FQ_MODULUS)
_FQ_NONRESIDUE = next(
    z for z in count(2) if pow(z, (FQ_MODULUS - 1) // 2, FQ_MODULUS) == FQ_MODULUS - 1
)


def is_quadratic_residue(value: int) -> bool:
    """Return True if ``value`` is a non-zero square in Fq."""
    value %= FQ_MODULUS
    if value == 0:
        return False
    return pow(value, (FQ_MODULUS - 1) // 2, FQ_MODULUS) == 1


def fq_sqrt(value: int) -> Optional[int]:
    """Return a square root of ``value`` in Fq, or None if there is none."""
    value %= FQ_MODULUS
    if value == 0:
        return 0
    if not is_quadratic_residue(value):
        return None

    p = FQ_MODULUS
    m = _FQ_TWO_ADICITY
    c = pow(_FQ_NONRESIDUE, _FQ_ODD_PART, p)
    t = pow(value, _FQ_ODD_PART, p)
    root = pow(value, (_FQ_ODD_PART + 1) // 2, p)

    while t != 1:
        i = 0
        probe = t
        while probe != 1:
            probe = probe * probe % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        root = root * b % p
    return root


def batch_inversion(values: Iterable[int], modulus: int) -> list[int]:
    """Invert every value modulo ``modulus`` at once; zeros are left as zero."""
    items = [v % modulus for v in values]
    prefix: list[int] = []
    acc = 1
    for v in items:
        prefix.append(acc)
        if v:
            acc = acc * v % modulus

    inv = pow(acc, -1, modulus)
    result = [0] * len(items)
    for position in reversed(range(len(items))):
        v = items[position]
        if not v:
            continue
        result[position] = inv * prefix[position] % modulus
        inv = inv * v % modulus
    return result


def fr_from_u64_limbs(limbs: Sequence[int]) -> int:
    """Build a scalar from four little-endian 64-bit limbs."""
    limbs = list(limbs)
    if len(limbs) != 4:
        raise ValueError(f"expected 4 limbs, got {len(limbs)}")
    if any(not 0 <= limb < _U64_LIMIT for limb in limbs):
        raise ValueError("every limb must fit in 64 bits")
    value = sum(limb << (64 * shift) for shift, limb in enumerate(limbs))
    return value % FR_MODULUS


def fr_from_le_bytes_mod_order(data: bytes) -> int:
    """Interpret little-endian bytes as an integer and reduce it into Fr."""
    return int.from_bytes(bytes(data), "little") % FR_MODULUS


def fq_from_be_bytes_mod_order(data: bytes) -> int:
    """Interpret big-endian bytes as an integer and reduce it into Fq."""
    return int.from_bytes(bytes(data), "big") % FQ_MODULUS