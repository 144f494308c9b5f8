"""Engine comparison tool for scalar and vectorized parity validation.

Validates that the pure-Python engine (``tw223/step.py`` and friends) and the
numpy engine (``tw223/vectorized.py``) produce bit-identical draws for the
same seeds. Run as a module for a report over every scenario:

    python -m tw223_cmp.compare [-v] [-s SCENARIO]
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass, field

import numpy as np

from tw223.bits import double_to_bits, doubles_to_bits
from tw223.extract import extract, reseed
from tw223.types import GeneratorState, is_nondegenerate
from tw223.vectorized import extract_many, seed_many


@dataclass
class TestScenario:
    name: str
    seeds: list[float]
    count: int = 20
    args: tuple[float, ...] = ()
    description: str = ""


@dataclass
class ComparisonTiming:
    scalar_secs: float
    vector_secs: float

    @property
    def total_secs(self) -> float:
        return self.scalar_secs + self.vector_secs


@dataclass
class ComparisonResult:
    success: bool
    diffs: list[str] = field(default_factory=list)
    timing: ComparisonTiming | None = None


def run_scalar(
    scenario: TestScenario,
) -> tuple[list[list[float]], list[list[int]]]:
    """Draws and post-seed registers for every seed, via the scalar engine."""
    draws = []
    registers = []
    for s in scenario.seeds:
        state = GeneratorState()
        reseed(state, s)
        registers.append(list(state.gen))
        draws.append(
            [extract(state, *scenario.args) for _ in range(scenario.count)]
        )
    return draws, registers


def run_vectorized(scenario: TestScenario) -> tuple[np.ndarray, np.ndarray]:
    gen = seed_many(scenario.seeds)
    registers = gen.copy()
    draws = extract_many(gen, scenario.count, *scenario.args)
    return draws, registers


def compare_results(
    scenario: TestScenario,
    scalar: tuple[list[list[float]], list[list[int]]],
    vector: tuple[np.ndarray, np.ndarray],
) -> list[str]:
    """Return human-readable differences between the two engines."""
    diffs = []
    s_draws, s_regs = scalar
    v_draws, v_regs = vector
    v_bits = doubles_to_bits(v_draws)
    for row, seed_value in enumerate(scenario.seeds):
        v_row = [int(z) for z in v_regs[row]]
        if s_regs[row] != v_row:
            diffs.append(
                f"seed {seed_value!r}: registers {s_regs[row]} vs {v_row}"
            )
        if not is_nondegenerate(s_regs[row]):
            diffs.append(f"seed {seed_value!r}: degenerate registers")
        for j, a in enumerate(s_draws[row]):
            if double_to_bits(a) != int(v_bits[row, j]):
                diffs.append(
                    f"seed {seed_value!r}, draw {j}: {a!r} vs {float(v_draws[row, j])!r}"
                )
                break
    return diffs


def run_comparison(
    scenario: TestScenario, verbose: bool = False
) -> ComparisonResult:
    t0 = time.perf_counter()
    scalar = run_scalar(scenario)
    t1 = time.perf_counter()
    vector = run_vectorized(scenario)
    t2 = time.perf_counter()

    diffs = compare_results(scenario, scalar, vector)
    timing = ComparisonTiming(scalar_secs=t1 - t0, vector_secs=t2 - t1)
    if verbose:
        print(
            f"  {scenario.name}: {len(scenario.seeds)} seeds x {scenario.count} draws"
            f", scalar {timing.scalar_secs:.3f}s, vectorized {timing.vector_secs:.3f}s"
        )
        for d in diffs[:10]:
            print(f"    - {d}")
    return ComparisonResult(success=not diffs, diffs=diffs, timing=timing)


TEST_SCENARIOS = [
    TestScenario(
        name="zero_seed",
        seeds=[0.0],
        count=100,
        description="Default lazy seed",
    ),
    TestScenario(
        name="small_integers",
        seeds=[float(i) for i in range(-8, 9)],
        count=50,
    ),
    TestScenario(
        name="signed_zero",
        seeds=[0.0, -0.0],
        description="-0.0 * pi + e equals e, so both seeds match",
    ),
    TestScenario(
        name="large_magnitudes",
        seeds=[1e300, -1e300, 1.7976931348623157e308, 5e-324, -5e-324],
        count=30,
    ),
    TestScenario(
        name="non_finite",
        seeds=[math.inf, -math.inf, math.nan],
        count=30,
    ),
    TestScenario(
        name="fractional",
        seeds=[0.5, 0.1, 1.0 / 3.0, math.pi, -math.e],
        count=30,
    ),
    TestScenario(
        name="dice_range",
        seeds=[1.0, 2.0, 3.0],
        count=200,
        args=(6.0,),
    ),
    TestScenario(
        name="two_arg_range",
        seeds=[42.0, 1234.5],
        count=200,
        args=(-10.0, 10.0),
    ),
    TestScenario(
        name="inverted_range",
        seeds=[7.0],
        count=100,
        args=(10.0, 1.0),
        description="No validation: whatever the formula yields",
    ),
    TestScenario(
        name="fractional_range",
        seeds=[9.0],
        count=100,
        args=(0.5, 2.25),
    ),
]


def main():
    parser = argparse.ArgumentParser(
        description="Compare scalar and vectorized TW223 engines"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "-s",
        "--scenario",
        action="append",
        help="Only run the named scenario (repeatable)",
    )
    args = parser.parse_args()

    scenarios = TEST_SCENARIOS
    if args.scenario:
        scenarios = [s for s in TEST_SCENARIOS if s.name in args.scenario]
        if not scenarios:
            print(f"No scenarios named {args.scenario}")
            return 2

    failed = 0
    for scenario in scenarios:
        result = run_comparison(scenario, verbose=args.verbose)
        status = "ok" if result.success else "FAIL"
        print(f"{scenario.name}: {status}")
        if not result.success:
            failed += 1
            for d in result.diffs[:10]:
                print(f"  - {d}")

    print()
    print(f"{len(scenarios) - failed}/{len(scenarios)} scenarios match")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
