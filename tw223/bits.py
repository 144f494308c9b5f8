"""Exact reinterpretation between IEEE-754 doubles and their 64-bit patterns.

Seeding reads the raw bits of a double and the step function builds a double
directly from bits, so these conversions must be lossless in both
directions (NaN payloads and signed zeros included).
"""

from __future__ import annotations

import struct

import numpy as np

_DOUBLE = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def double_to_bits(d: float) -> int:
    return _U64.unpack(_DOUBLE.pack(d))[0]


def bits_to_double(u: int) -> float:
    return _DOUBLE.unpack(_U64.pack(u))[0]


def doubles_to_bits(values: np.ndarray) -> np.ndarray:
    """Array version of ``double_to_bits``; returns a new uint64 array."""
    return np.ascontiguousarray(values, dtype=np.float64).view(np.uint64).copy()


def bits_to_doubles(words: np.ndarray) -> np.ndarray:
    """Array version of ``bits_to_double``; returns a new float64 array."""
    return np.ascontiguousarray(words, dtype=np.uint64).view(np.float64).copy()
