"""
Geometry primitives: points, polygons and the orientation predicate.

All predicates share one tolerance policy. Twice the area of the triangle abc
is compared against ``eps * L**2`` where L is its longest side, so a triple
flatter than ``eps`` is COLLINEAR regardless of the coordinate scale.

The test only depends on the set {a, b, c}: the cross product is evaluated
on the points in sorted order and its sign fixed up afterwards, so every
rotation of a triple gets the same answer, bit for bit.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple, Union

from polypart.config import EPS


class Point(NamedTuple):
    x: float
    y: float


PointLike = Union[Point, Tuple[float, float], Sequence[float]]


class Orientation(Enum):
    LEFT = auto()       # counter-clockwise turn
    RIGHT = auto()      # clockwise turn
    COLLINEAR = auto()


class Location(Enum):
    INSIDE = auto()
    OUTSIDE = auto()
    BOUNDARY = auto()


@dataclass(frozen=True)
class Polygon:
    """
    Closed polygon given by its vertices; the last vertex connects back to the
    first. ``is_solid`` is carried through to every partition piece.
    """
    vertices: Tuple[Point, ...]
    is_solid: bool = field(default=True, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(Point(float(x), float(y)) for x, y in self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Point:
        return self.vertices[i]

    @property
    def signed_area(self) -> float:
        return signed_area(self.vertices)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    def reversed(self) -> Polygon:
        return Polygon(tuple(reversed(self.vertices)), is_solid=self.is_solid)


def cross(o: PointLike, a: PointLike, b: PointLike) -> float:
    """Signed cross product of vectors (o->a) and (o->b)."""
    ox, oy = o
    ax, ay = a
    bx, by = b
    return (ax - ox) * (by - oy) - (ay - oy) * (bx - ox)


def orientation(a: PointLike, b: PointLike, c: PointLike, eps: float = EPS) -> Orientation:
    """Turn direction of c relative to the directed line a->b."""
    pts = (tuple(a), tuple(b), tuple(c))
    i, j, k = sorted(range(3), key=pts.__getitem__)
    p, q, r = pts[i], pts[j], pts[k]
    cr = cross(p, q, r)
    # odd permutation of (a, b, c) flips the sign
    if ((i > j) + (i > k) + (j > k)) % 2:
        cr = -cr

    longest = max(math.dist(p, q), math.dist(q, r), math.dist(p, r))
    if abs(cr) <= eps * longest * longest:
        return Orientation.COLLINEAR
    return Orientation.LEFT if cr > 0 else Orientation.RIGHT


def signed_area(points: Sequence[PointLike]) -> float:
    """Shoelace area; positive for counter-clockwise winding."""
    n = len(points)
    area = 0.0
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2


def point_on_segment(p: PointLike, a: PointLike, b: PointLike, eps: float = EPS) -> bool:
    """True if p lies on the closed segment a-b."""
    if orientation(a, b, p, eps) is not Orientation.COLLINEAR:
        return False
    px, py = p
    ax, ay = a
    bx, by = b
    return (px - ax) * (bx - ax) + (py - ay) * (by - ay) >= 0 and \
        (px - bx) * (ax - bx) + (py - by) * (ay - by) >= 0


def segments_intersect(p1: PointLike, p2: PointLike, q1: PointLike, q2: PointLike, eps: float = EPS) -> bool:
    """
    Proper intersection: the segments cross at a single point interior to
    both. Shared endpoints, touching and collinear overlap return False.
    """
    o1 = orientation(p1, p2, q1, eps)
    o2 = orientation(p1, p2, q2, eps)
    o3 = orientation(q1, q2, p1, eps)
    o4 = orientation(q1, q2, p2, eps)
    if Orientation.COLLINEAR in (o1, o2, o3, o4):
        return False
    return o1 is not o2 and o3 is not o4


def segments_touch(p1: PointLike, p2: PointLike, q1: PointLike, q2: PointLike, eps: float = EPS) -> bool:
    """Improper contact: an endpoint of one segment lies on the other."""
    return (point_on_segment(q1, p1, p2, eps) or point_on_segment(q2, p1, p2, eps)
            or point_on_segment(p1, q1, q2, eps) or point_on_segment(p2, q1, q2, eps))


def point_in_triangle(p: PointLike, a: PointLike, b: PointLike, c: PointLike, eps: float = EPS) -> bool:
    """Inside or on the boundary of the counter-clockwise triangle abc."""
    return (orientation(a, b, p, eps) is not Orientation.RIGHT
            and orientation(b, c, p, eps) is not Orientation.RIGHT
            and orientation(c, a, p, eps) is not Orientation.RIGHT)


def point_in_polygon(p: PointLike, polygon: Iterable[PointLike], eps: float = EPS) -> Location:
    """Classify p against a simple polygon of either winding (crossing number)."""
    pts = list(polygon)
    n = len(pts)
    px, py = p
    inside = False
    for i in range(n):
        a, b = pts[i], pts[(i + 1) % n]
        if point_on_segment(p, a, b, eps):
            return Location.BOUNDARY
        ax, ay = a
        bx, by = b
        if (ay > py) != (by > py):
            x_cross = ax + (py - ay) * (bx - ax) / (by - ay)
            if px < x_cross:
                inside = not inside
    return Location.INSIDE if inside else Location.OUTSIDE
