#!/usr/bin/env python3
"""Render successive-pair scatter of TW223 draws to a PNG.

Usage (from the repository root):
    python scripts/render_pairs.py out.png                    # seed 0.0, 100000 draws
    python scripts/render_pairs.py out.png --seed 7 -n 500000 --size 512
    python scripts/render_pairs.py --show-params out.png      # print embedded parameters
"""

import argparse
import json
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from tw223.render import (  # noqa: E402
    load_render_params,
    render_pairs,
    save_render_png,
)
from tw223.sample import SamplingParams  # noqa: E402
from tw223.vectorized import extract_many, seed_many  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Render a pair-scatter image of TW223 output"
    )
    parser.add_argument("path", help="PNG file to write (or read)")
    parser.add_argument("--seed", type=float, default=0.0)
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=100000,
        help="Number of draws (default: 100000)",
    )
    parser.add_argument(
        "--size", type=int, default=256, help="Image size in pixels"
    )
    parser.add_argument(
        "--show-params",
        action="store_true",
        help="Print the parameters embedded in an existing PNG",
    )
    args = parser.parse_args()

    if args.show_params:
        try:
            print(json.dumps(load_render_params(args.path), indent=2))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    params = SamplingParams(seed=args.seed, count=args.count)
    values = extract_many(seed_many([args.seed]), args.count)[0]
    img = render_pairs(values, size=args.size)
    save_render_png(img, params.to_dict(), args.path)
    print(f"Wrote {args.path} ({args.count} draws, seed={args.seed})")


if __name__ == "__main__":
    main()
