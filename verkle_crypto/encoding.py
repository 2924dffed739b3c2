"""Decoding of the fixed-size byte items that make up a serialised verkle proof."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from .element import COMPRESSED_SIZE, Element
from .fields import FR_MODULUS

STEM_SIZE = 31

_EXT_STATUS_MASK = 3
_DEPTH_SHIFT = 3


class ExtPresent(Enum):
    """What a proof says about the extension node found at a key's stem."""

    NONE = 0
    DIFFERENT_STEM = 1
    PRESENT = 2


def bytes32_to_element(data: bytes) -> Optional[Element]:
    """Decode a compressed 32-byte element; None if it is not a valid element."""
    return Element.from_bytes(data)


def bytes32_to_scalar(data: bytes) -> Optional[int]:
    """Decode 32 big-endian bytes as a canonical scalar; None if not canonical."""
    data = bytes(data)
    if len(data) != COMPRESSED_SIZE:
        return None
    value = int.from_bytes(data, "big")
    if value >= FR_MODULUS:
        return None
    return value


def byte_to_depth_extension_present(value: int) -> tuple[ExtPresent, int]:
    """Split a byte into its extension status (low two bits) and depth (bits 3 and up).

    An unknown extension status gives ``(ExtPresent.NONE, 0)``.
    """
    if not 0 <= value <= 0xFF:
        raise ValueError(f"expected a byte, got {value}")
    status = value & _EXT_STATUS_MASK
    try:
        ext = ExtPresent(status)
    except ValueError:
        return ExtPresent.NONE, 0
    return ext, value >> _DEPTH_SHIFT


def fixed_bytes32(data: bytes) -> Optional[bytes]:
    """Return ``data`` as bytes if it is exactly 32 bytes long, else None."""
    data = bytes(data)
    if len(data) != COMPRESSED_SIZE:
        return None
    return data


def elements_from_bytes32(items: Iterable[bytes]) -> Optional[list[Element]]:
    """Decode every 32-byte item as an element; None if any item fails."""
    elements: list[Element] = []
    for item in items:
        fixed = fixed_bytes32(item)
        if fixed is None:
            return None
        element = bytes32_to_element(fixed)
        if element is None:
            return None
        elements.append(element)
    return elements


def stems_to_set(items: Iterable[bytes]) -> Optional[frozenset[bytes]]:
    """Collect 31-byte stems into a set; None if any item has another length."""
    stems: set[bytes] = set()
    for item in items:
        stem = bytes(item)
        if len(stem) != STEM_SIZE:
            return None
        stems.add(stem)
    return frozenset(stems)