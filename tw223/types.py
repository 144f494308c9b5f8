"""Generator state and the fixed parameter tables of the TW223 generator.

The generator is the combined Tausworthe construction from L'Ecuyer,
"Tables of maximally-equidistributed combined LFSR generators" (1991),
table 3, first entry: four 64-bit LFSR components (L=64, J=4, k=223,
N1=49) whose outputs are xor-ed together. Its period is 2^223 - 1.

Each component i is described by ``(k, q, s)``. Only the top ``k`` bits of a
component register take part in its recurrence; if they are all zero the
component is stuck at zero forever. ``seed.py`` makes sure that never
happens and ``step.py`` cannot undo it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

MASK64 = 0xFFFFFFFFFFFFFFFF

# Bits 52-62 of a double holding the biased exponent of 1.0.
EXPONENT_ONE = 0x3FF0000000000000
MANTISSA_MASK = 0x000FFFFFFFFFFFFF

# 64 - k for each component, one byte each, lowest byte first.
SEED_SHIFTS = 0x11090601
SEED_PI = 3.14159265358979323846
SEED_E = 2.7182818284590452354
WARMUP_STEPS = 10


@dataclass(frozen=True)
class Component:
    k: int
    q: int
    s: int

    @property
    def mask(self) -> int:
        """Mask selecting the top ``k`` bits of a 64-bit register."""
        return (MASK64 << (64 - self.k)) & MASK64

    @property
    def low_bit(self) -> int:
        """Lowest register bit that belongs to the tracked region."""
        return 1 << (64 - self.k)


COMPONENTS: tuple[Component, ...] = (
    Component(k=63, q=31, s=18),
    Component(k=58, q=19, s=28),
    Component(k=55, q=24, s=7),
    Component(k=47, q=21, s=8),
)


def is_nondegenerate(gen: list[int]) -> bool:
    """True when every component has a nonzero tracked region."""
    if len(gen) != len(COMPONENTS):
        return False
    return all(z & c.mask != 0 for z, c in zip(gen, COMPONENTS))


@dataclass
class GeneratorState:
    """Registers of the four components plus the seeded flag.

    ``gen`` is meaningless while ``valid`` is False.
    """

    gen: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    valid: bool = False

    def copy(self) -> GeneratorState:
        return GeneratorState(gen=list(self.gen), valid=self.valid)

    @staticmethod
    def from_dict(d: dict) -> GeneratorState:
        """Rebuild a state exported by ``to_dict``.

        Raises ValueError if a state marked valid could not have come out of
        seeding (registers out of range or a stuck component).
        """
        gen = [int(z) for z in d.get("gen", [0, 0, 0, 0])]
        valid = bool(d.get("valid", False))
        if len(gen) != len(COMPONENTS):
            raise ValueError(
                f"Expected {len(COMPONENTS)} registers, got {len(gen)}"
            )
        if valid:
            for i, z in enumerate(gen):
                if z < 0 or z > MASK64:
                    raise ValueError(
                        f"Register {i} is not a 64-bit unsigned value: {z}"
                    )
            if not is_nondegenerate(gen):
                raise ValueError(
                    "State has a component whose tracked bits are all zero"
                )
        return GeneratorState(gen=gen, valid=valid)

    def to_dict(self) -> dict:
        return {"gen": list(self.gen), "valid": self.valid}
