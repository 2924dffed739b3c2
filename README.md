# verkle_crypto

Pure-Python group arithmetic and byte-level commitment helpers for Verkle
tries. It works in the Banderwagon group (the Bandersnatch curve taken modulo
its 2-torsion), offers two multi-scalar multipliers with precomputed tables,
and encodes, decodes, adds and hashes serialised commitments.

It has no third-party runtime dependencies. Scalars and field elements are
plain Python `int`s.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `verkle_crypto.fields`: helpers for the base field Fq (`FQ_MODULUS`) and the
  scalar field Fr (`FR_MODULUS`): `fq_sqrt` (returns `None` for a non-square),
  `is_quadratic_residue`, `batch_inversion(values, modulus)` (zeros stay zero),
  `fr_from_u64_limbs` (four little-endian 64-bit limbs; `ValueError` otherwise),
  `fr_from_le_bytes_mod_order` and `fq_from_be_bytes_mod_order`.
- `verkle_crypto.element`: the frozen `Element` type in extended projective
  coordinates (`x`, `y`, `t`, `z`).
  - `Element.zero()`, `Element.prime_subgroup_generator()`, `is_zero()`,
    `double()`, and the operators `+`, `-`, unary `-`, `*` / `rmul` by an
    integer scalar. Equality and hashing respect the quotient group, so a
    point and its 2-torsion partner compare equal.
  - `to_bytes()` / `Element.from_bytes(data)`: the 32-byte big-endian
    compressed form. `from_bytes` returns `None` for anything that is not a
    valid subgroup element.
  - `to_bytes_uncompressed()` / `Element.from_bytes_unchecked_uncompressed(data)`:
    64 bytes, affine x then y, each little-endian. No curve check is made on
    reading; `ValueError` is raised for a wrong length or an unreduced
    coordinate. Two representatives of one element give different bytes, so
    compare elements, not these bytes.
  - `map_to_scalar_field()` and `Element.batch_map_to_scalar_field(elements)`
    (one shared inversion), `subgroup_check()`,
    `Element.compressed_serialized_size()`.
  - `multi_scalar_mul(bases, scalars)` (`ValueError` if the lengths differ) and
    `try_reduce_to_element(data)`, which reduces big-endian bytes into Fq and
    tries to decode them.
- `verkle_crypto.msm`: `MSMPrecompWnaf(bases, window_size)` with
  `mul(scalars)`, `mul_index(scalar, index)` and `mul_par(scalars)`, which
  computes the per-base products in a thread pool. The window size must be at
  least 2 and below 64.
- `verkle_crypto.msm_windowed_sign`: `MSMPrecompWindowSigned(bases, window_size)`
  with `mul(scalars)`, and `get_booth_index(window_index, window_size, el)`,
  which returns the signed Booth digit of one window of little-endian bytes.
- `verkle_crypto.serialization`: `fr_to_le_bytes`, `fr_from_le_bytes`
  (rejects short input and unreduced values), `serialize_commitment` (64 → 32
  bytes), `deserialize_commitment` (32 → 64 bytes),
  `deserialize_update_commitment_sparse` (a 64-byte commitment followed by
  65-byte chunks of old scalar, new scalar and index), and the identity
  constant `ZERO_POINT`. Bad input raises `CommitmentError`, a `ValueError`
  whose `details` dict describes the failure.
- `verkle_crypto.commitments`: `add_commitment`, `hash_commitment`,
  `hash_commitments`, `compress_many`, and checks for raw byte buffers:
  `parse_scalars` (multiple of 32 bytes), `parse_indices`, `parse_commitment`
  (exactly 64 bytes) and `parse_commitments` (multiple of 64 bytes). Failed
  checks raise `CommitmentError`.
- `verkle_crypto.encoding`: decoding of fixed-size proof items:
  `bytes32_to_element`, `bytes32_to_scalar` (big-endian, canonical only),
  `byte_to_depth_extension_present` with the `ExtPresent` enum,
  `elements_from_bytes32`, `fixed_bytes32` and `stems_to_set` (31-byte stems).
  These return `None` when an item does not decode.

## Example

```python
from verkle_crypto.element import Element
from verkle_crypto.commitments import add_commitment, hash_commitment

g = Element.prime_subgroup_generator()
point = g * 5 + g

compressed = point.to_bytes()                 # 32 bytes
assert Element.from_bytes(compressed) == point

commitment = point.to_bytes_uncompressed()    # 64 bytes
total = add_commitment(commitment, g.to_bytes_uncompressed())
scalar_bytes = hash_commitment(total)         # 32 little-endian bytes
```

## What this package does not do

It has no reference string of committing bases, so it cannot commit to a
vector of scalars or update a commitment in place, and it has no tree-key
hashing. It creates and verifies no proofs: there is no transcript, no
inner-product argument and no multipoint opening. It holds no Verkle trie and
no storage; the `encoding` helpers only decode the individual fields that a
serialised proof is made of. It offers no command-line tool.