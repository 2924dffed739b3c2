"""Operations on serialised commitments, and validation of raw byte inputs."""

from __future__ import annotations

from typing import Iterable

from .element import UNCOMPRESSED_SIZE, Element
from .serialization import (
    SCALAR_SIZE,
    CommitmentError,
    fr_to_le_bytes,
    serialize_commitment,
)


def _chunks(data: bytes, size: int) -> list[bytes]:
    return [data[start:start + size] for start in range(0, len(data), size)]


def add_commitment(lhs: bytes, rhs: bytes) -> bytes:
    """Add two uncompressed commitments and return the uncompressed sum."""
    left = Element.from_bytes_unchecked_uncompressed(lhs)
    right = Element.from_bytes_unchecked_uncompressed(rhs)
    return (left + right).to_bytes_uncompressed()


def hash_commitment(commitment: bytes) -> bytes:
    """Map an uncompressed commitment to a scalar, encoded as 32 little-endian bytes."""
    element = Element.from_bytes_unchecked_uncompressed(commitment)
    return fr_to_le_bytes(element.map_to_scalar_field())


def hash_commitments(commitments: Iterable[bytes]) -> list[bytes]:
    """Hash many uncompressed commitments at once, sharing one field inversion."""
    elements = [
        Element.from_bytes_unchecked_uncompressed(commitment)
        for commitment in commitments
    ]
    return [
        fr_to_le_bytes(scalar)
        for scalar in Element.batch_map_to_scalar_field(elements)
    ]


def compress_many(commitments: bytes) -> bytes:
    """Compress a concatenation of 64-byte commitments into 32-byte ones."""
    data = parse_commitments(commitments)
    return b"".join(
        serialize_commitment(chunk) for chunk in _chunks(data, UNCOMPRESSED_SIZE)
    )


def parse_scalars(values: bytes) -> bytes:
    """Check that ``values`` is a whole number of 32-byte scalars."""
    data = bytes(values)
    if len(data) % SCALAR_SIZE:
        raise CommitmentError(
            f"Wrong input size: should be a multiple of {SCALAR_SIZE} bytes",
            expected_multiple=SCALAR_SIZE,
            actual_size=len(data),
        )
    return data


def parse_indices(values: bytes) -> list[int]:
    """Read each byte of ``values`` as a commitment index."""
    return list(bytes(values))


def parse_commitment(commitment: bytes) -> bytes:
    """Check that ``commitment`` is exactly one 64-byte uncompressed commitment."""
    data = bytes(commitment)
    if len(data) != UNCOMPRESSED_SIZE:
        raise CommitmentError(
            f"Wrong commitment size: should be {UNCOMPRESSED_SIZE} bytes",
            actual_size=len(data),
        )
    return data


def parse_commitments(commitments: bytes) -> bytes:
    """Check that ``commitments`` is a whole number of 64-byte commitments."""
    data = bytes(commitments)
    if len(data) % UNCOMPRESSED_SIZE:
        raise CommitmentError(
            f"Wrong input size: should be a multiple of {UNCOMPRESSED_SIZE} bytes",
            expected_multiple=UNCOMPRESSED_SIZE,
            actual_size=len(data),
        )
    return data