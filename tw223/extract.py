"""Turn generator output into the values handed back to callers.

``extract`` is the single entry point for draws: it seeds a fresh state with
0.0 on first use, takes one step, and maps the result onto the requested
range. The range forms do no validation; an inverted or fractional range
simply yields whatever the formula produces.
"""

from __future__ import annotations

import math

from .bits import bits_to_double
from .seed import seed
from .step import step
from .types import GeneratorState


def _floor(x: float) -> float:
    # math.floor raises on inf/nan, the range formulas must not.
    if math.isfinite(x):
        return float(math.floor(x))
    return x


def map_to_range(d: float, args: tuple[float, ...]) -> float:
    """Map a unit-interval value ``d`` onto the range selected by ``args``.

    ``()`` -> ``d`` in [0, 1); ``(r1,)`` -> integer in [1, r1];
    ``(r1, r2)`` -> integer in [r1, r2].
    """
    if not args:
        return d
    if len(args) == 1:
        return _floor(d * args[0]) + 1.0
    if len(args) == 2:
        r1, r2 = args
        return _floor(d * (r2 - r1 + 1.0)) + r1
    raise TypeError(f"Expected at most 2 range arguments, got {len(args)}")


def extract(state: GeneratorState, *args: float) -> float:
    """Draw one value, lazily seeding ``state`` with 0.0 if needed."""
    if len(args) > 2:
        raise TypeError(f"Expected at most 2 range arguments, got {len(args)}")
    if not state.valid:
        seed(state, 0.0)
    d = bits_to_double(step(state)) - 1.0
    return map_to_range(d, tuple(float(a) for a in args))


def reseed(state: GeneratorState, d: float) -> None:
    """Explicitly seed ``state``, replacing any previous or lazy state."""
    seed(state, d)
