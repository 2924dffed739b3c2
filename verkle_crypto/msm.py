"""Multi-scalar multiplication with per-base wNAF precomputed tables."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from operator import add
from typing import Sequence

from .element import Element
from .fields import FR_MODULUS

_MAX_WINDOW_SIZE = 64


def _wnaf_digits(scalar: int, window_size: int) -> list[int]:
    """Return the width-``window_size`` NAF of ``scalar``, least significant first."""
    modulus = 1 << window_size
    half = 1 << (window_size - 1)
    digits: list[int] = []
    k = scalar
    while k > 0:
        if k & 1:
            digit = k % modulus
            if digit >= half:
                digit -= modulus
            k -= digit
        else:
            digit = 0
        digits.append(digit)
        k >>= 1
    return digits


class MSMPrecompWnaf:
    """Precomputed odd multiples of fixed bases, used to multiply by wNAF digits."""

    def __init__(self, bases: Sequence[Element], window_size: int) -> None:
        if not 2 <= window_size < _MAX_WINDOW_SIZE:
            raise ValueError(
                f"window size must be at least 2 and below {_MAX_WINDOW_SIZE}, "
                f"got {window_size}"
            )
        self.window_size = window_size
        self.tables: list[list[Element]] = [self._table(base) for base in bases]

    def _table(self, base: Element) -> list[Element]:
        # Odd multiples: base, 3*base, 5*base, ... up to (2^(w-1) - 1) * base.
        double_base = base.double()
        table = [base]
        for _ in range((1 << (self.window_size - 2)) - 1):
            table.append(table[-1] + double_base)
        return table

    def _mul_with_table(self, table: Sequence[Element], scalar: int) -> Element:
        result = Element.zero()
        for digit in reversed(_wnaf_digits(scalar % FR_MODULUS, self.window_size)):
            result = result.double()
            if digit > 0:
                result = result + table[digit // 2]
            elif digit < 0:
                result = result - table[(-digit) // 2]
        return result

    def mul_index(self, scalar: int, index: int) -> Element:
        """Multiply the base at ``index`` by ``scalar``."""
        return self._mul_with_table(self.tables[index], scalar)

    def _terms(self, scalars: Sequence[int]) -> list[tuple[list[Element], int]]:
        return [
            (table, scalar)
            for scalar, table in zip(scalars, self.tables)
            if scalar % FR_MODULUS
        ]

    def mul(self, scalars: Sequence[int]) -> Element:
        """Return the sum of each scalar times its matching base."""
        return reduce(
            add,
            (self._mul_with_table(table, scalar) for table, scalar in self._terms(scalars)),
            Element.zero(),
        )

    def mul_par(self, scalars: Sequence[int]) -> Element:
        """Same result as ``mul``, with the per-base products computed in a thread pool."""
        terms = self._terms(scalars)
        with ThreadPoolExecutor() as pool:
            products = list(
                pool.map(lambda term: self._mul_with_table(*term), terms)
            )
        return reduce(add, products, Element.zero())