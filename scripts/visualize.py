#!/usr/bin/env python3
"""
Visualization for convex partitions and partition benchmarks.

Usage:
    python3 scripts/visualize.py partition P.part [--output P.png]
    python3 scripts/visualize.py benchmark [--csv results/benchmark_results.csv]
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Polygon as MplPolygon
from matplotlib.collections import PatchCollection

from polypart import config
from polypart.polyio import read_partition

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['figure.figsize'] = (10, 6)

COLORS = {
    'convex': '#4daf4a',
    'random': '#e41a1c',
    'star': '#377eb8',
    'comb': '#ff7f00',
}


def plot_partition(vertices, pieces, title, ax):
    """Plot the polygon outline with each convex piece filled."""
    cmap = plt.get_cmap('tab20')
    patches = [MplPolygon(vertices[list(piece)], closed=True) for piece in pieces]
    p = PatchCollection(patches, alpha=0.5, edgecolor='#333333', linewidth=0.8)
    p.set_facecolor([cmap(i % 20) for i in range(len(patches))])
    ax.add_collection(p)

    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=12, zorder=5)

    ax.set_aspect('equal')
    ax.set_title(title)


def plot_benchmark_times(df, output_dir):
    fig, ax = plt.subplots(figsize=(10, 6))

    for kind in sorted(df['kind'].unique()):
        data = df[df['kind'] == kind].groupby('num_vertices')['time_ms'].median().reset_index()
        ax.plot(data['num_vertices'], data['time_ms'],
                'o-', label=kind, color=COLORS.get(kind, 'gray'), linewidth=2, markersize=6)

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('Convex Partition Time')
    ax.legend(loc='upper left')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(Path(output_dir) / 'benchmark_times.png', dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_piece_counts(df, output_dir):
    """Pieces against triangles: Hertel-Mehlhorn removes most diagonals."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for kind in sorted(df['kind'].unique()):
        data = df[df['kind'] == kind].groupby('num_vertices')[['pieces', 'triangles']].first().reset_index()
        ax.plot(data['num_vertices'], data['pieces'], 'o-', label=f'{kind} pieces',
                color=COLORS.get(kind, 'gray'), linewidth=2)
        ax.plot(data['num_vertices'], data['triangles'], 'x--', label=f'{kind} triangles',
                color=COLORS.get(kind, 'gray'), linewidth=1, alpha=0.6)

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Count')
    ax.set_title('Convex Pieces vs Triangles')
    ax.legend(loc='upper left', fontsize=8)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(Path(output_dir) / 'benchmark_pieces.png', dpi=150, bbox_inches='tight')
    plt.close(fig)


def fit_scaling_law(n_values, time_values):
    """Least-squares line through (log n, log T). Returns (a, b, r_squared) for T = a * n^b."""
    x = np.log(np.asarray(n_values, dtype=float))
    y = np.log(np.asarray(time_values, dtype=float))
    slope, intercept = np.polyfit(x, y, 1)

    residual = y - np.polyval((slope, intercept), x)
    spread = y - y.mean()
    total = float(spread @ spread)
    r_squared = 1.0 - float(residual @ residual) / total if total > 0 else 0.0
    return float(np.exp(intercept)), float(slope), r_squared


def print_scaling(df):
    for kind in sorted(df['kind'].unique()):
        data = df[df['kind'] == kind].groupby('num_vertices')['time_ms'].median().reset_index()
        mask = (data['num_vertices'] > 0) & (data['time_ms'] > 0)
        data = data[mask]
        if len(data) < 3:
            continue
        a, b, r2 = fit_scaling_law(data['num_vertices'].values, data['time_ms'].values)
        print(f"  {kind:<8} T = {a:.2e} * n^{b:.3f}  (R^2 = {r2:.4f})")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot partitions and benchmarks')
    sub = parser.add_subparsers(dest='command', required=True)

    p_part = sub.add_parser('partition', help='Render a .part file')
    p_part.add_argument('path', type=Path)
    p_part.add_argument('--output', type=Path, default=None)

    p_bench = sub.add_parser('benchmark', help='Plot benchmark CSV')
    p_bench.add_argument('--csv', type=Path, default=config.RESULTS_DIR / 'benchmark_results.csv')
    p_bench.add_argument('--output-dir', type=Path, default=config.RESULTS_DIR / 'figures')

    args = parser.parse_args(argv)

    if args.command == 'partition':
        vertices, pieces = read_partition(args.path)
        fig, ax = plt.subplots(figsize=(6, 6))
        plot_partition(np.array(vertices), pieces,
                       f'{args.path.stem} ({len(pieces)} convex pieces)', ax)
        output = args.output or args.path.with_suffix('.png')
        plt.savefig(output, dpi=150, bbox_inches='tight')
        plt.close(fig)
        print(f"Saved {output}")
        return 0

    if not args.csv.exists():
        print(f"Error: Benchmark results not found at {args.csv}")
        return 1

    df = pd.read_csv(args.csv, keep_default_na=False)
    df = df[df['error'] == '']
    args.output_dir.mkdir(parents=True, exist_ok=True)
    print(f"Loaded {len(df)} benchmark results")

    plot_benchmark_times(df, args.output_dir)
    plot_piece_counts(df, args.output_dir)
    print("Scaling law fits:")
    print_scaling(df)
    print(f"\nDone! Figures saved to {args.output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
