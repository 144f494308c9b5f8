"""Seeding: derive four non-degenerate registers from a single double.

The seed is pushed through the recurrence ``d = d * pi + e`` once per
component and the raw bits of each intermediate value become that
component's register. Whenever those bits fall entirely below the tracked
region of the component, the lowest tracked bit is added, so no component
can start stuck at zero. Ten warm-up steps then move the stream away from
the correlated starting point.
"""

from __future__ import annotations

from .bits import double_to_bits
from .step import step
from .types import (
    COMPONENTS,
    SEED_E,
    SEED_PI,
    SEED_SHIFTS,
    WARMUP_STEPS,
    GeneratorState,
)


def fold_seed_bits(bits: int, shift: int) -> int:
    """Force a bit at position ``shift`` or above into ``bits``."""
    m = 1 << shift
    if bits < m:
        bits += m
    return bits


def seed_registers(d: float) -> list[int]:
    """Registers produced by the seed recurrence, before warm-up."""
    r = SEED_SHIFTS
    gen = []
    for _ in COMPONENTS:
        shift = r & 0xFF
        r >>= 8
        d = d * SEED_PI + SEED_E
        gen.append(fold_seed_bits(double_to_bits(d), shift))
    return gen


def seed(state: GeneratorState, d: float) -> None:
    """Overwrite ``state`` from seed ``d`` and run the warm-up steps.

    Accepts any double, NaN and infinities included.
    """
    state.gen = seed_registers(float(d))
    state.valid = True
    for _ in range(WARMUP_STEPS):
        step(state)
