"""Checks shared by the partition tests."""
from __future__ import annotations

import math
import random
from typing import List, Sequence, Tuple

import numpy as np

from polypart import shapes
from polypart.geometry import Location, Orientation, Polygon, cross, orientation, point_in_polygon, signed_area
from polypart.validation import is_convex


def polygon_area(pts: Sequence[Tuple[float, float]]) -> float:
    return abs(signed_area(pts))


def fan_area(pts: Sequence[Tuple[float, float]]) -> float:
    """Signed area summed around the first vertex; exact enough for slivers."""
    o = pts[0]
    return sum(cross(o, pts[i], pts[i + 1]) for i in range(1, len(pts) - 1)) / 2


def reflex_count(polygon: Polygon) -> int:
    pts = polygon.vertices
    n = len(pts)
    return sum(1 for i in range(n)
               if orientation(pts[i - 1], pts[i], pts[(i + 1) % n]) is Orientation.RIGHT)


def sample_points(pts: Sequence[Tuple[float, float]], per_axis: int = 25) -> np.ndarray:
    """Grid over the bounding box, offset so samples avoid most edges."""
    arr = np.asarray(pts, dtype=np.float64)
    lo, hi = arr.min(axis=0), arr.max(axis=0)
    span = hi - lo
    xs = lo[0] + span[0] * (np.arange(per_axis) + 0.5137) / per_axis
    ys = lo[1] + span[1] * (np.arange(per_axis) + 0.4721) / per_axis
    gx, gy = np.meshgrid(xs, ys)
    return np.column_stack([gx.ravel(), gy.ravel()])


def verify_partition(pts: Sequence[Tuple[float, float]], pieces: List[Polygon]) -> None:
    """Assert area conservation, convexity, CCW winding and exact coverage."""
    assert len(pieces) >= 1

    for piece in pieces:
        assert len(piece) >= 3
        assert fan_area(piece.vertices) > 0
        assert is_convex(piece)

    poly_a = polygon_area(pts)
    parts_a = sum(piece.area for piece in pieces)
    assert math.isclose(poly_a, parts_a, rel_tol=1e-9, abs_tol=1e-12)

    for x, y in sample_points(pts):
        where = point_in_polygon((x, y), pts)
        if where is not Location.INSIDE:
            continue
        locations = [point_in_polygon((x, y), piece) for piece in pieces]
        inside = locations.count(Location.INSIDE)
        boundary = locations.count(Location.BOUNDARY)
        assert inside == 1 or (inside == 0 and boundary >= 2), (x, y, inside, boundary)


def castle_polygon(towers: int, parts: int = 3) -> List[Tuple[float, float]]:
    """
    Orthogonal rectangle with square towers on top, every edge split into
    ``parts`` collinear pieces. Long runs of collinear vertices.
    """
    corners = [(0.0, 0.0), (2.0 * towers, 0.0), (2.0 * towers, 1.0)]
    for i in range(towers - 1, -1, -1):
        left, right = 2.0 * i + 0.5, 2.0 * i + 1.5
        corners.extend([(right, 1.0), (right, 2.0), (left, 2.0), (left, 1.0)])
    corners.append((0.0, 1.0))

    pts = []
    for k, (x0, y0) in enumerate(corners):
        x1, y1 = corners[(k + 1) % len(corners)]
        for s in range(parts):
            t = s / parts
            pts.append((x0 + t * (x1 - x0), y0 + t * (y1 - y0)))
    return pts


def jittered(points, amount: float, seed: int, angle: float = shapes.ROT_ANGLE):
    """Rotate, then move every coordinate by up to ``amount``."""
    rng = random.Random(seed)
    return [(x + rng.uniform(-amount, amount), y + rng.uniform(-amount, amount))
            for x, y in shapes.rotate_points(points, angle)]


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
L_SHAPE = [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
BOWTIE = [(0, 0), (1, 1), (1, 0), (0, 1)]
U_SHAPE = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]

CONCAVE_CASES = [
    ("L-shape", L_SHAPE),
    ("U-shape", U_SHAPE),
    ("Arrow", shapes.arrow_shape()),
    ("5-star", shapes.star_polygon(5)),
    ("7-star", shapes.star_polygon(7)),
    ("Comb-3", shapes.comb_polygon(3)),
    ("Comb-6", shapes.comb_polygon(6)),
    ("Random 40", shapes.random_polygon(40)),
    ("Random 120", shapes.random_polygon(120, seed=7)),
    ("Clockwise L", list(reversed(L_SHAPE))),
]

CONVEX_CASES = [
    ("Triangle", [(0, 0), (1, 0), (0.5, 1)]),
    ("Square", SQUARE),
    ("Hexagon", shapes.convex_polygon(6)),
    ("50-gon", shapes.convex_polygon(50)),
]
