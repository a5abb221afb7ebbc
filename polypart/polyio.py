"""
Text formats used by the scripts.

.poly:
    N
    x0 y0
    ...

.part (pieces index the normalized, counter-clockwise vertex list):
    # vertices
    N
    x0 y0
    ...
    # pieces
    M
    k i0 i1 ... ik-1
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple, Union

from polypart.geometry import Point, PointLike

PathLike = Union[str, Path]


def _data_lines(path: PathLike) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [l.strip() for l in f if l.strip() and not l.lstrip().startswith("#")]


def read_poly(path: PathLike) -> List[Point]:
    """Read polygon from .poly file format."""
    lines = _data_lines(path)
    if not lines:
        raise ValueError(f"{path}: empty polygon file")
    n = int(lines[0])
    if len(lines) < n + 1:
        raise ValueError(f"{path}: expected {n} vertices, found {len(lines) - 1}")
    points = []
    for line in lines[1:n + 1]:
        x, y = map(float, line.split()[:2])
        points.append(Point(x, y))
    return points


def write_poly(points: Sequence[PointLike], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x:.17g} {y:.17g}\n")


def write_partition(vertices: Sequence[PointLike], pieces: Sequence[Sequence[int]], path: PathLike) -> None:
    """Write vertices and convex pieces (index cycles) to .part file format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# vertices\n")
        f.write(f"{len(vertices)}\n")
        for x, y in vertices:
            f.write(f"{x:.17g} {y:.17g}\n")
        f.write("# pieces\n")
        f.write(f"{len(pieces)}\n")
        for piece in pieces:
            f.write(" ".join(str(i) for i in [len(piece), *piece]) + "\n")


def read_partition(path: PathLike) -> Tuple[List[Point], List[Tuple[int, ...]]]:
    """Read a .part file back into (vertices, pieces)."""
    lines = _data_lines(path)
    i = 0
    n = int(lines[i])
    i += 1
    vertices = []
    for _ in range(n):
        x, y = map(float, lines[i].split())
        vertices.append(Point(x, y))
        i += 1

    pieces = []
    if i < len(lines):
        m = int(lines[i])
        i += 1
        for _ in range(m):
            fields = [int(v) for v in lines[i].split()]
            k, idx = fields[0], tuple(fields[1:])
            if len(idx) != k:
                raise ValueError(f"{path}: piece {len(pieces)} declares {k} vertices, has {len(idx)}")
            pieces.append(idx)
            i += 1
    return vertices, pieces
