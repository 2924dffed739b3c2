"""Multi-scalar multiplication with signed (Booth-encoded) fixed windows."""

from __future__ import annotations

from typing import Sequence

from .element import Element
from .fields import FR_MODULUS, FR_MODULUS_BIT_SIZE

_U32_MASK = 0xFFFFFFFF


def get_booth_index(window_index: int, window_size: int, el: bytes) -> int:
    """Return the signed Booth digit of window ``window_index`` of little-endian ``el``.

    Windows overlap by one bit and a zero bit is appended below the least
    significant end, so every digit lies in [-2^(w-1), 2^(w-1)].
    """
    el = bytes(el)
    skip_bits = max(window_index * window_size - 1, 0)
    skip_bytes = skip_bits // 8

    chunk = el[skip_bytes:skip_bytes + 4].ljust(4, b"\x00")
    tmp = int.from_bytes(chunk, "little")

    if window_index == 0:
        tmp = (tmp << 1) & _U32_MASK

    tmp >>= skip_bits - skip_bytes * 8
    tmp &= (1 << (window_size + 1)) - 1

    positive = tmp & (1 << window_size) == 0

    tmp = (tmp + 1) >> 1

    if positive:
        return tmp
    return -((~(tmp - 1)) & ((1 << window_size) - 1))


class MSMPrecompWindowSigned:
    """Per-base tables of 1..2^(w-1) multiples of every shifted window of the base."""

    def __init__(self, bases: Sequence[Element], window_size: int) -> None:
        if window_size < 1:
            raise ValueError(f"window size must be positive, got {window_size}")
        self.window_size = window_size
        self.num_windows = FR_MODULUS_BIT_SIZE // window_size + 1
        self.tables: list[list[Element]] = [
            self._precompute_points(base) for base in bases
        ]

    def _precompute_points(self, base: Element) -> list[Element]:
        entries_per_window = 1 << (self.window_size - 1)
        table: list[Element] = []
        window_point = base
        for _ in range(self.num_windows):
            current = window_point
            for _ in range(entries_per_window):
                table.append(current)
                current = current + window_point
            for _ in range(self.window_size):
                window_point = window_point.double()
        return table

    def mul(self, scalars: Sequence[int]) -> Element:
        """Return the sum of each scalar times its matching base."""
        scalar_bytes = [(s % FR_MODULUS).to_bytes(32, "little") for s in scalars]
        entries_per_window = 1 << (self.window_size - 1)

        result = Element.zero()
        for window_idx in range(self.num_windows):
            for scalar_idx, encoded in enumerate(scalar_bytes):
                sub_table = self.tables[scalar_idx]
                digit = get_booth_index(window_idx, self.window_size, encoded)
                if digit == 0:
                    continue
                point = sub_table[window_idx * entries_per_window + abs(digit) - 1]
                result = result + (point if digit > 0 else -point)
        return result