"""Banderwagon group elements: the Bandersnatch curve quotiented by its 2-torsion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .fields import (
    FQ_MODULUS,
    FR_MODULUS,
    batch_inversion,
    fq_from_be_bytes_mod_order,
    fq_sqrt,
    is_quadratic_residue,
)

P = FQ_MODULUS
COEFF_A = P - 5
COEFF_D = 0x6389C12633C267CBC66E3BF86BE3B6D8CB66677177E54F92B369F2F5188D58E7
GENERATOR_X = 0x29C132CC2C0B34C5743711777BBE42F32B79C022AD998465E1E71866A252AE18
GENERATOR_Y = 0x2A6C669EDA123E0F157D8B50BADCD586358CAD81EEE464605E3167B6CC974166

COMPRESSED_SIZE = 32
UNCOMPRESSED_SIZE = 64


def _is_positive(coordinate: int) -> bool:
    """The lexicographically largest of ``c`` and ``-c`` is the positive one."""
    return coordinate > (-coordinate) % P


def _legendre_check_point(x: int) -> bool:
    return is_quadratic_residue((1 - COEFF_A * x * x) % P)


def _y_from_x(x: int, choose_largest: bool) -> Optional[int]:
    x_squared = x * x % P
    numerator = (COEFF_A * x_squared - 1) % P
    denominator = (COEFF_D * x_squared - 1) % P
    y = fq_sqrt(numerator * pow(denominator, -1, P) % P)
    if y is None:
        return None
    if _is_positive(y) and choose_largest:
        return y
    return (-y) % P


@dataclass(frozen=True, eq=False, slots=True)
class Element:
    """A point in extended projective coordinates (X, Y, T, Z) with x = X/Z, y = Y/Z."""

    x: int
    y: int
    t: int
    z: int

    @classmethod
    def _from_affine(cls, x: int, y: int) -> "Element":
        return cls(x, y, x * y % P, 1)

    @classmethod
    def zero(cls) -> "Element":
        return cls(0, 1, 0, 1)

    @classmethod
    def prime_subgroup_generator(cls) -> "Element":
        return cls._from_affine(GENERATOR_X, GENERATOR_Y)

    @classmethod
    def compressed_serialized_size(cls) -> int:
        return COMPRESSED_SIZE

    def _affine(self) -> tuple[int, int]:
        z_inv = pow(self.z, -1, P)
        return self.x * z_inv % P, self.y * z_inv % P

    def to_bytes(self) -> bytes:
        """Serialise as 32 big-endian bytes of x * sign(y)."""
        x, y = self._affine()
        if not _is_positive(y):
            x = (-x) % P
        return x.to_bytes(COMPRESSED_SIZE, "big")

    def to_bytes_uncompressed(self) -> bytes:
        """Serialise the affine x and y, each as 32 little-endian bytes.

        The two representatives of one element give different bytes, so
        these bytes must not be compared for equality.
        """
        x, y = self._affine()
        return x.to_bytes(32, "little") + y.to_bytes(32, "little")

    @classmethod
    def from_bytes_unchecked_uncompressed(cls, data: bytes) -> "Element":
        """Read 64 bytes written by ``to_bytes_uncompressed`` without a curve check."""
        data = bytes(data)
        if len(data) != UNCOMPRESSED_SIZE:
            raise ValueError(
                f"expected {UNCOMPRESSED_SIZE} bytes, got {len(data)}"
            )
        x = int.from_bytes(data[:32], "little")
        y = int.from_bytes(data[32:], "little")
        if x >= P or y >= P:
            raise ValueError("could not deserialize byte array into a point")
        return cls._from_affine(x, y)

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["Element"]:
        """Decode a compressed element; None if it is not a valid subgroup point."""
        data = bytes(data)
        if len(data) != COMPRESSED_SIZE:
            return None
        x = int.from_bytes(data, "big")
        if x >= P:
            return None
        y = _y_from_x(x, choose_largest=True)
        if y is None:
            return None
        element = cls._from_affine(x, y)
        if not element.subgroup_check():
            return None
        return element

    def subgroup_check(self) -> bool:
        return _legendre_check_point(self.x)

    def is_zero(self) -> bool:
        return self == Element.zero()

    def _map_to_field(self) -> int:
        return self.x * pow(self.y, -1, P) % P

    def map_to_scalar_field(self) -> int:
        """Map x/y into the scalar field; P and its 2-torsion partner agree."""
        return self._map_to_field() % FR_MODULUS

    @classmethod
    def batch_map_to_scalar_field(cls, elements: Iterable["Element"]) -> list[int]:
        elements = list(elements)
        inverses = batch_inversion((e.y for e in elements), P)
        return [inv * e.x % P % FR_MODULUS for inv, e in zip(inverses, elements)]

    def double(self) -> "Element":
        a = self.x * self.x % P
        b = self.y * self.y % P
        c = 2 * self.z * self.z % P
        d = COEFF_A * a % P
        e = ((self.x + self.y) ** 2 - a - b) % P
        g = (d + b) % P
        f = (g - c) % P
        h = (d - b) % P
        return Element(e * f % P, g * h % P, e * h % P, f * g % P)

    def __add__(self, other: object) -> "Element":
        if not isinstance(other, Element):
            return NotImplemented
        a = self.x * other.x % P
        b = self.y * other.y % P
        c = self.t * COEFF_D % P * other.t % P
        d = self.z * other.z % P
        e = ((self.x + self.y) * (other.x + other.y) - a - b) % P
        f = (d - c) % P
        g = (d + c) % P
        h = (b - COEFF_A * a) % P
        return Element(e * f % P, g * h % P, e * h % P, f * g % P)

    def __neg__(self) -> "Element":
        return Element((-self.x) % P, self.y, (-self.t) % P, self.z)

    def __sub__(self, other: object) -> "Element":
        if not isinstance(other, Element):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> "Element":
        if not isinstance(scalar, int):
            return NotImplemented
        result = Element.zero()
        for bit in bin(scalar % FR_MODULUS)[2:]:
            result = result.double()
            if bit == "1":
                result = result + self
        return result

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        # An element with X = Y = 0 cannot arise through the API; never equal.
        if self.x == 0 and self.y == 0:
            return False
        if other.x == 0 and other.y == 0:
            return False
        return self.x * other.y % P == other.x * self.y % P

    def __hash__(self) -> int:
        return hash(self.to_bytes())


def multi_scalar_mul(bases: Sequence[Element], scalars: Sequence[int]) -> Element:
    """Return the sum of ``scalar * base`` over both sequences."""
    bases = list(bases)
    scalars = list(scalars)
    if len(bases) != len(scalars):
        raise ValueError("number of bases should equal number of scalars")
    result = Element.zero()
    for base, scalar in zip(bases, scalars):
        if scalar % FR_MODULUS:
            result = result + base * scalar
    return result


def try_reduce_to_element(data: bytes) -> Optional[Element]:
    """Reduce arbitrary big-endian bytes into Fq and try to decode them as an element."""
    x = fq_from_be_bytes_mod_order(data)
    return Element.from_bytes(x.to_bytes(COMPRESSED_SIZE, "big"))