"""
Deterministic polygon generators shared by the scripts and the tests.

Every generator returns a simple polygon as a list of (x, y) tuples in
counter-clockwise order.
"""
from __future__ import annotations

import math
import random
from typing import List, Tuple

Coords = List[Tuple[float, float]]

# Fixed rotation (radians) to keep generated datasets away from axis-aligned ties.
ROT_ANGLE = 0.123456789


def rotate_points(points: Coords, angle_rad: float) -> Coords:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


def convex_polygon(n: int, radius: float = 1.0) -> Coords:
    return [(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n)) for i in range(n)]


def star_polygon(points: int, outer: float = 2.0, inner: float = 0.8) -> Coords:
    """Star with `points` tips; every inner vertex is reflex."""
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def l_shape(size: float = 4.0, arm: float = 2.0) -> Coords:
    return [(0, 0), (size, 0), (size, arm), (arm, arm), (arm, size), (0, size)]


def arrow_shape() -> Coords:
    return [(0, 1), (2, 1), (2, 0), (4, 1.5), (2, 3), (2, 2), (0, 2)]


def comb_polygon(teeth: int) -> Coords:
    """Rectangle with `teeth` triangular teeth on top (2 reflex vertices per tooth)."""
    pts = [(0, 0), (teeth * 2, 0), (teeth * 2, 1)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1), (x, 2), (x - 0.5, 1)])
    pts.append((0, 1))
    return pts


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> Coords:
    """Random star-shaped polygon via angular sweep around the origin."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


GENERATORS = {
    "convex": lambda n: convex_polygon(n, radius=100.0),
    "random": lambda n: random_polygon(n),
    "star": lambda n: star_polygon(max(3, n // 2), outer=100.0, inner=30.0),
    "comb": lambda n: comb_polygon(max(1, (n - 4) // 3)),
}
