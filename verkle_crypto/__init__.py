"""Banderwagon group arithmetic, multi-scalar multiplication and commitment byte helpers."""

__version__ = "0.1.0"

__all__ = [
    "fields",
    "element",
    "msm",
    "msm_windowed_sign",
    "serialization",
    "commitments",
    "encoding",
]