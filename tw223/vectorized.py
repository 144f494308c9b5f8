"""numpy engine running many independent TW223 streams side by side.

Each row of a ``(n, 4)`` uint64 array holds the registers of one stream.
Row by row the results are bit-identical to ``step.py`` / ``seed.py`` /
``extract.py``; ``tw223_cmp/`` checks that. The scalar modules remain the
reference; this one exists for bulk work such as statistics over many seeds
or long sequences.
"""

from __future__ import annotations

import numpy as np

from .bits import bits_to_doubles, doubles_to_bits
from .types import (
    COMPONENTS,
    EXPONENT_ONE,
    MANTISSA_MASK,
    SEED_E,
    SEED_PI,
    SEED_SHIFTS,
    WARMUP_STEPS,
)

_U = np.uint64
_PARAMS = [
    (_U(c.q), _U(c.k - c.s), _U(c.s), _U(c.mask)) for c in COMPONENTS
]


def step_many(gen: np.ndarray) -> np.ndarray:
    """Advance every stream in ``gen`` in place; return one word per stream."""
    r = np.zeros(gen.shape[0], dtype=np.uint64)
    for i, (q, shr, s, mask) in enumerate(_PARAMS):
        z = gen[:, i]
        b = ((z << q) ^ z) >> shr
        z = b ^ ((z & mask) << s)
        gen[:, i] = z
        r ^= z
    return (r & _U(MANTISSA_MASK)) | _U(EXPONENT_ONE)


def seed_many(seeds) -> np.ndarray:
    """Seeded and warmed-up registers, one row per entry of ``seeds``."""
    d = np.array(seeds, dtype=np.float64).reshape(-1)
    gen = np.empty((d.shape[0], len(COMPONENTS)), dtype=np.uint64)
    r = SEED_SHIFTS
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(len(COMPONENTS)):
            m = _U(1 << (r & 0xFF))
            r >>= 8
            d = d * SEED_PI + SEED_E
            bits = doubles_to_bits(d)
            gen[:, i] = np.where(bits < m, bits + m, bits)
    for _ in range(WARMUP_STEPS):
        step_many(gen)
    return gen


def extract_many(gen: np.ndarray, count: int, *args: float) -> np.ndarray:
    """Draw ``count`` values from every stream; result has shape (n, count).

    Column j holds the j-th draw of each stream, mapped like ``extract``.
    """
    if len(args) > 2:
        raise TypeError(f"Expected at most 2 range arguments, got {len(args)}")
    out = np.empty((gen.shape[0], count), dtype=np.float64)
    for j in range(count):
        out[:, j] = bits_to_doubles(step_many(gen)) - 1.0
    with np.errstate(over="ignore", invalid="ignore"):
        if len(args) == 1:
            out = np.floor(out * float(args[0])) + 1.0
        elif len(args) == 2:
            r1, r2 = float(args[0]), float(args[1])
            out = np.floor(out * (r2 - r1 + 1.0)) + r1
    return out
