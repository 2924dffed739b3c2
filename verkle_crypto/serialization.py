"""Byte encodings of scalars and commitments, and parsing of sparse update input."""

from __future__ import annotations

from typing import Any

from .element import COMPRESSED_SIZE, UNCOMPRESSED_SIZE, Element
from .fields import FR_MODULUS

SCALAR_SIZE = 32
UPDATE_CHUNK_SIZE = 2 * SCALAR_SIZE + 1

# The identity element, serialised uncompressed: x = 0, y = 1.
ZERO_POINT = bytes(32) + (1).to_bytes(32, "little")


class CommitmentError(ValueError):
    """Raised when scalars, commitments or their byte encodings are invalid.

    Extra keyword arguments describe the failure and are kept in ``details``.
    """

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details = details


def fr_to_le_bytes(fr: int) -> bytes:
    """Encode a scalar as 32 little-endian bytes."""
    return (fr % FR_MODULUS).to_bytes(SCALAR_SIZE, "little")


def fr_from_le_bytes(data: bytes) -> int:
    """Decode a canonical scalar from the first 32 little-endian bytes of ``data``."""
    data = bytes(data)
    if len(data) < SCALAR_SIZE:
        raise CommitmentError(
            "failed to deserialize scalar: not enough bytes", bytes=data
        )
    value = int.from_bytes(data[:SCALAR_SIZE], "little")
    if value >= FR_MODULUS:
        raise CommitmentError(
            "failed to deserialize scalar: value is not reduced", bytes=data
        )
    return value


def serialize_commitment(commitment: bytes) -> bytes:
    """Compress a 64-byte uncompressed commitment into 32 bytes."""
    return Element.from_bytes_unchecked_uncompressed(commitment).to_bytes()


def deserialize_commitment(serialized_commitment: bytes) -> bytes:
    """Expand a 32-byte compressed commitment into its 64-byte uncompressed form."""
    data = bytes(serialized_commitment)
    element = Element.from_bytes(data)
    if element is None:
        raise CommitmentError("could not deserialize commitment", bytes=data)
    return element.to_bytes_uncompressed()


def deserialize_update_commitment_sparse(
    data: bytes,
) -> tuple[bytes, list[int], list[bytes], list[bytes]]:
    """Split sparse-update input into its parts.

    The input is a 64-byte commitment followed by 65-byte chunks, each an old
    scalar (32 bytes), a new scalar (32 bytes) and an index (1 byte).
    Returns ``(commitment, indexes, old_scalars, new_scalars)``.
    """
    data = bytes(data)
    if len(data) < UNCOMPRESSED_SIZE:
        raise CommitmentError(
            "input for update commitment is shorter than a commitment",
            actual_size=len(data),
        )
    commitment = data[:UNCOMPRESSED_SIZE]
    rest = data[UNCOMPRESSED_SIZE:]

    if len(rest) % UPDATE_CHUNK_SIZE:
        raise CommitmentError(
            "input for update commitment is not a multiple of "
            f"{UPDATE_CHUNK_SIZE} bytes",
            item_descriptor="input for update commitment",
            expected_multiple=UPDATE_CHUNK_SIZE,
            actual_size=len(rest),
        )

    chunks = [
        rest[start:start + UPDATE_CHUNK_SIZE]
        for start in range(0, len(rest), UPDATE_CHUNK_SIZE)
    ]
    old_scalars = [chunk[:SCALAR_SIZE] for chunk in chunks]
    new_scalars = [chunk[SCALAR_SIZE:2 * SCALAR_SIZE] for chunk in chunks]
    indexes = [chunk[2 * SCALAR_SIZE] for chunk in chunks]
    return commitment, indexes, old_scalars, new_scalars


__all__ = [
    "COMPRESSED_SIZE",
    "CommitmentError",
    "SCALAR_SIZE",
    "ZERO_POINT",
    "deserialize_commitment",
    "deserialize_update_commitment_sparse",
    "fr_from_le_bytes",
    "fr_to_le_bytes",
    "serialize_commitment",
]