"""Cheap statistical sanity checks for generator output.

None of these prove anything about quality; they catch gross mistakes such
as a stuck component, a biased mantissa bit, or a broken range mapping.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .types import MANTISSA_MASK


@dataclass
class ChiSquareResult:
    statistic: float
    dof: int
    counts: np.ndarray


def chi_square_uniform(samples, bins: int = 16) -> ChiSquareResult:
    """Pearson chi-square of ``samples`` against uniform on [0, 1).

    For a correct generator the statistic is close to ``dof`` (its standard
    deviation is ``sqrt(2 * dof)``).
    """
    x = np.asarray(samples, dtype=np.float64).reshape(-1)
    idx = np.minimum((x * bins).astype(np.int64), bins - 1)
    counts = np.bincount(idx, minlength=bins)
    expected = x.shape[0] / bins
    statistic = float(np.sum((counts - expected) ** 2) / expected)
    return ChiSquareResult(statistic=statistic, dof=bins - 1, counts=counts)


def serial_correlation(samples) -> float:
    """Lag-1 correlation coefficient of a sample sequence."""
    x = np.asarray(samples, dtype=np.float64).reshape(-1)
    if x.shape[0] < 2:
        return 0.0
    return float(np.corrcoef(x[:-1], x[1:])[0, 1])


def bit_balance(words) -> np.ndarray:
    """Fraction of ones at each of the 52 mantissa bit positions.

    Index 0 is the least significant bit.
    """
    w = np.asarray(words, dtype=np.uint64).reshape(-1)
    w = w & np.uint64(MANTISSA_MASK)
    shifts = np.arange(52, dtype=np.uint64)
    ones = (w[:, None] >> shifts[None, :]) & np.uint64(1)
    return ones.mean(axis=0)
