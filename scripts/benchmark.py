#!/usr/bin/env python3
"""
Benchmark convex partitioning over generated polygon families.

Each (family, size, run) job partitions one polygon in a worker process and
reports timing plus piece counts. Results are written as CSV for
scripts/visualize.py.

Usage:
    python3 scripts/benchmark.py [--sizes N1 N2 ...] [--runs R] [--workers W]

--workers 1 runs every job in this process.
"""

from __future__ import annotations
import argparse
import logging
import statistics
import time
from concurrent.futures import ProcessPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

from polypart import config
from polypart.errors import PartitionError
from polypart.logging_config import setup_logging
from polypart.pipeline import Partitioner
from polypart.shapes import GENERATORS, ROT_ANGLE, rotate_points

logger = logging.getLogger("polypart.scripts.benchmark")


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def run_job(job: Tuple[str, int, int]) -> Dict:
    kind, n, run = job
    points = rotate_points(GENERATORS[kind](n), ROT_ANGLE)
    partitioner = Partitioner(points)
    start = time.perf_counter()
    try:
        partitioner.run()
        error = ""
    except PartitionError as e:
        error = e.kind
    elapsed_ms = (time.perf_counter() - start) * 1000
    diagonals = sum(len(tri.diagonals()) for tri in partitioner.triangles) // 2
    return {
        "polygon": f"{kind}_{n}",
        "kind": kind,
        "num_vertices": len(points),
        "run": run,
        "time_ms": elapsed_ms,
        "triangles": len(partitioner.triangles),
        "diagonals": diagonals,
        "pieces": len(partitioner.pieces),
        "error": error,
    }


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    ok = df[df["error"] == ""]
    return (
        ok.groupby(["kind", "num_vertices"])
        .agg(time_ms=("time_ms", "median"), pieces=("pieces", "first"), triangles=("triangles", "first"))
        .reset_index()
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convex partition benchmark")
    parser.add_argument("--sizes", nargs="+", type=int, default=[10, 50, 100, 200, 500])
    parser.add_argument("--kinds", nargs="+", default=sorted(GENERATORS), choices=sorted(GENERATORS))
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--output", type=Path, default=config.RESULTS_DIR / "benchmark_results.csv")
    parser.add_argument("--log-level", default=config.DEFAULT_LOG_LEVEL)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    jobs: List[Tuple[str, int, int]] = [
        (kind, n, run) for kind in args.kinds for n in args.sizes for run in range(args.runs)
    ]
    log(f"Running {len(jobs)} jobs")
    if args.workers == 1:
        rows = [run_job(job) for job in jobs]
    else:
        with ProcessPoolExecutor(max_workers=args.workers) as pool:
            rows = list(pool.map(run_job, jobs))

    df = pd.DataFrame(rows)
    failures = df[df["error"] != ""]
    for _, row in failures.iterrows():
        logger.warning("%s failed: %s", row["polygon"], row["error"])

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

    summary = summarize(df)
    for _, row in summary.iterrows():
        log(f"{row['kind']:<8} n={row['num_vertices']:<6} pieces={row['pieces']:<5} "
            f"median={row['time_ms']:.3f} ms")
    if len(summary):
        log(f"Median over all runs: {statistics.median(df['time_ms']):.3f} ms")
    log(f"Results saved to {args.output}")
    return 0 if failures.empty else 1


if __name__ == "__main__":
    raise SystemExit(main())
