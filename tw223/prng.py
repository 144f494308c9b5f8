"""TW223 combined Tausworthe pseudorandom number generator.

Four-component LFSR generator with period 2^223 - 1.
Reference: P. L'Ecuyer, "Tables of maximally-equidistributed combined LFSR
generators" (1991), table 3, entry 1.
"""

from __future__ import annotations

from .bits import bits_to_double
from .extract import extract
from .seed import seed as seed_state
from .step import step
from .types import GeneratorState


class Tausworthe223:
    def __init__(self, seed: float | None = None) -> None:
        self._state = GeneratorState()
        if seed is not None:
            self.seed(seed)

    @property
    def state(self) -> GeneratorState:
        return self._state

    def seed(self, d: float) -> None:
        seed_state(self._state, d)

    def _ensure_seeded(self) -> None:
        if not self._state.valid:
            seed_state(self._state, 0.0)

    def next_u64(self) -> int:
        """Raw step word: a double in [1.0, 2.0) as its bit pattern."""
        self._ensure_seeded()
        return step(self._state)

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return bits_to_double(self.next_u64()) - 1.0

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        return int(extract(self._state, lo, hi))

    def random(self, *args: float) -> float:
        return extract(self._state, *args)

    def getstate(self) -> dict:
        return self._state.to_dict()

    def setstate(self, d: dict) -> None:
        self._state = GeneratorState.from_dict(d)
