#!/usr/bin/env python3
"""
Generate deterministic polygon datasets for benchmarking.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from polypart import config
from polypart.polyio import write_poly
from polypart.shapes import GENERATORS, ROT_ANGLE, rotate_points


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default=config.POLYGONS_DIR, type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 200, 500, 1000],
    )
    parser.add_argument("--kinds", nargs="+", default=sorted(GENERATORS), choices=sorted(GENERATORS))
    args = parser.parse_args(argv)

    for n in args.sizes:
        for kind in args.kinds:
            points = rotate_points(GENERATORS[kind](n), ROT_ANGLE)
            path = args.output / f"{kind}_{n}.poly"
            write_poly(points, path)

    print(f"Generated polygons in {args.output}")


if __name__ == "__main__":
    main()
