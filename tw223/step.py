"""One tick of the combined generator.

Every component is advanced with its LFSR recurrence and the four new
register values are xor-ed together. The low 52 bits of that combination
become the mantissa of a double whose exponent field is forced to the one of
1.0, so the returned word, read as a double, is uniform on [1.0, 2.0).
"""

from __future__ import annotations

from .types import (
    COMPONENTS,
    EXPONENT_ONE,
    MANTISSA_MASK,
    MASK64,
    Component,
    GeneratorState,
)


def advance_component(z: int, c: Component) -> int:
    """Apply one LFSR update to a single 64-bit register."""
    b = (((z << c.q) & MASK64) ^ z) >> (c.k - c.s)
    return b ^ (((z & c.mask) << c.s) & MASK64)


def step(state: GeneratorState) -> int:
    """Advance all components and return the combined word.

    The state must already be seeded.
    """
    gen = state.gen
    r = 0
    for i, c in enumerate(COMPONENTS):
        z = advance_component(gen[i], c)
        gen[i] = z
        r ^= z
    return (r & MANTISSA_MASK) | EXPONENT_ONE
