#!/usr/bin/env python3
"""Benchmark the scalar and vectorized TW223 engines.

Usage (from the repository root):
    python scripts/bench_step.py                  # default: 3 iterations, 100000 draws
    python scripts/bench_step.py -n 5             # 5 iterations
    python scripts/bench_step.py -d 1000000       # 1M draws
    python scripts/bench_step.py --streams 1000   # vectorized stream count
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from tw223.extract import extract  # noqa: E402
from tw223.types import GeneratorState  # noqa: E402
from tw223.vectorized import extract_many, seed_many  # noqa: E402


def run_scalar(draws):
    state = GeneratorState()
    for _ in range(draws):
        extract(state)


def run_vectorized(draws, streams):
    gen = seed_many([float(i) for i in range(streams)])
    extract_many(gen, max(1, draws // streams))


def _report(label, times_ms, draws):
    median = statistics.median(times_ms)
    print(f"{label}:")
    print(f"  Median: {median:.1f} ms ({draws / median * 1000:,.0f} draws/s)")
    print(f"  Mean:   {statistics.mean(times_ms):.1f} ms")
    if len(times_ms) > 1:
        print(f"  Stdev:  {statistics.stdev(times_ms):.1f} ms")


def _time(fn, iterations):
    times_ms = []
    for i in range(iterations):
        start = time.perf_counter()
        fn()
        elapsed_ms = (time.perf_counter() - start) * 1000
        times_ms.append(elapsed_ms)
        print(f"  Run {i + 1}: {elapsed_ms:.1f} ms")
    return times_ms


def main():
    parser = argparse.ArgumentParser(description="Benchmark TW223 engines")
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=100000,
        help="Draws per iteration (default: 100000)",
    )
    parser.add_argument(
        "--streams",
        type=int,
        default=100,
        help="Parallel streams for the vectorized engine (default: 100)",
    )
    args = parser.parse_args()

    print(f"Benchmark: {args.draws} draws, {args.iterations} iterations")
    print()

    print("Scalar")
    scalar_ms = _time(lambda: run_scalar(args.draws), args.iterations)
    print(f"Vectorized ({args.streams} streams)")
    vector_ms = _time(
        lambda: run_vectorized(args.draws, args.streams), args.iterations
    )

    print()
    _report("Scalar", scalar_ms, args.draws)
    _report("Vectorized", vector_ms, args.draws)


if __name__ == "__main__":
    main()
