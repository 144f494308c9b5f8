#!/usr/bin/env python3
"""Print draws from the TW223 generator.

Usage (from the repository root):
    python scripts/sample.py                      # 10 draws from the default (lazy, 0.0) seed
    python scripts/sample.py --seed 42 -n 5       # 5 draws in [0, 1)
    python scripts/sample.py --seed 42 --range 6  # dice rolls in [1, 6]
    python scripts/sample.py --range 10 20 --json # JSON output including final state
"""

import argparse
import json
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from tw223.sample import SamplingParams, sample  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Draw values from TW223")
    parser.add_argument(
        "--seed",
        type=float,
        default=None,
        help="Seed value (default: lazy seeding with 0.0)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=10,
        help="Number of draws (default: 10)",
    )
    parser.add_argument(
        "--range",
        dest="bounds",
        type=float,
        nargs="+",
        default=[],
        metavar="BOUND",
        help="One bound (1..m) or two bounds (m..n)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print a JSON document"
    )
    args = parser.parse_args()

    if len(args.bounds) > 2:
        parser.error("--range takes one or two bounds")

    if args.count < 0:
        parser.error("--count must be non-negative")

    params = SamplingParams(
        seed=args.seed, count=args.count, args=tuple(args.bounds)
    )
    result = sample(params)

    if args.json:
        out = {"params": params.to_dict(), **result.to_dict()}
        print(json.dumps(out, indent=2))
        return

    for v in result.values:
        print(repr(v))


if __name__ == "__main__":
    main()
