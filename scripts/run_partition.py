#!/usr/bin/env python3
"""
Partition a .poly polygon into convex pieces and write a .part file.

Usage:
    python3 scripts/run_partition.py --input P.poly --output P.part [--eps E]
"""

import argparse
import logging
import sys
import time

from polypart import config
from polypart.errors import PartitionError
from polypart.logging_config import setup_logging
from polypart.pipeline import Partitioner
from polypart.polyio import read_poly, write_partition

logger = logging.getLogger("polypart.scripts.run_partition")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Hertel-Mehlhorn convex partition')
    parser.add_argument('--input', '-i', required=True, help='Input polygon file')
    parser.add_argument('--output', '-o', required=True, help='Output partition file')
    parser.add_argument('--eps', type=float, default=config.EPS, help='Orientation tolerance')
    parser.add_argument('--log-level', default=config.DEFAULT_LOG_LEVEL)
    parser.add_argument('--log-file', default=None)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    vertices = read_poly(args.input)
    n = len(vertices)

    partitioner = Partitioner(vertices, eps=args.eps)
    start = time.perf_counter()
    try:
        partitioner.run()
    except PartitionError as e:
        logger.error("Partition of %s failed: %s", args.input, e)
        print(f"partition,vertices={n},error={e.kind}")
        return 1
    elapsed_ms = (time.perf_counter() - start) * 1000

    write_partition(partitioner.polygon.vertices, partitioner.pieces, args.output)

    print(f"partition,vertices={n},pieces={len(partitioner.pieces)},"
          f"triangles={len(partitioner.triangles)},time_ms={elapsed_ms}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
