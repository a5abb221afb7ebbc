"""
Ear Clipping Triangulation

A vertex v is an ear iff:
1. v is strictly convex (left turn prev -> v -> next)
2. No other remaining vertex lies inside or on triangle(v.prev, v, v.next)

Clipping an ear leaves a simple polygon with one vertex fewer, and every
simple polygon with more than three vertices has at least two ears, so the
loop always finishes with n - 2 triangles on validated input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from polypart.config import EPS
from polypart.errors import TriangulationFailure
from polypart.geometry import Orientation, Point, Polygon, orientation, point_in_triangle

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Triangle:
    """
    Counter-clockwise triangle over polygon vertex indices. ``boundary[k]``
    tells whether edge k (ab, bc, ca) is a polygon edge; the others are
    diagonals shared with a neighbouring triangle.
    """
    a: int
    b: int
    c: int
    boundary: Tuple[bool, bool, bool]

    @property
    def vertices(self) -> Tuple[int, int, int]:
        return (self.a, self.b, self.c)

    def edges(self) -> List[Edge]:
        return [(self.a, self.b), (self.b, self.c), (self.c, self.a)]

    def diagonals(self) -> List[Edge]:
        return [e for e, on_boundary in zip(self.edges(), self.boundary) if not on_boundary]


@dataclass(eq=False)
class Vertex:
    idx: int
    point: Point
    prev: Optional['Vertex'] = None
    next: Optional['Vertex'] = None
    is_ear: bool = False


def make_triangle(a: int, b: int, c: int, n: int) -> Triangle:
    def on_boundary(i: int, j: int) -> bool:
        return j == (i + 1) % n
    return Triangle(a, b, c, (on_boundary(a, b), on_boundary(b, c), on_boundary(c, a)))


class EarClipper:
    """
    Ear clipping over a circular doubly linked list of vertices.

    Ear flags are cached and refreshed for the two neighbours of every clipped
    ear. If a whole lap finds no ear the flags are recomputed once before
    giving up, so the loop is bounded even on malformed input.
    """

    def __init__(self, polygon: Polygon, eps: float = EPS):
        self.polygon = polygon
        self.eps = eps
        self.n = len(polygon)
        self.vertices = [Vertex(i, p) for i, p in enumerate(polygon)]
        for i in range(self.n):
            self.vertices[i].prev = self.vertices[(i - 1) % self.n]
            self.vertices[i].next = self.vertices[(i + 1) % self.n]
        self.triangles: List[Triangle] = []
        self.stats = {
            'n': self.n,
            'ear_checks': 0,
            'refreshes': 0,
        }

    def is_convex(self, v: Vertex) -> bool:
        return orientation(v.prev.point, v.point, v.next.point, self.eps) is Orientation.LEFT

    def is_ear(self, v: Vertex) -> bool:
        self.stats['ear_checks'] += 1
        if not self.is_convex(v):
            return False
        a, b, c = v.prev.point, v.point, v.next.point
        w = v.next.next
        while w is not v.prev:
            p = w.point
            if p != a and p != b and p != c and point_in_triangle(p, a, b, c, self.eps):
                return False
            w = w.next
        return True

    def _refresh(self, start: Vertex) -> None:
        self.stats['refreshes'] += 1
        v = start
        while True:
            v.is_ear = self.is_ear(v)
            v = v.next
            if v is start:
                break

    def clip_ear(self, v: Vertex) -> None:
        self.triangles.append(make_triangle(v.prev.idx, v.idx, v.next.idx, self.n))
        v.prev.next = v.next
        v.next.prev = v.prev
        v.prev.is_ear = self.is_ear(v.prev)
        v.next.is_ear = self.is_ear(v.next)

    def triangulate(self) -> List[Triangle]:
        if self.n == 3:
            self.triangles = [make_triangle(0, 1, 2, self.n)]
            return self.triangles

        current = self.vertices[0]
        self._refresh(current)

        remaining = self.n
        misses = 0
        refreshed = False
        while remaining > 3:
            if current.is_ear:
                nxt = current.next
                self.clip_ear(current)
                remaining -= 1
                current = nxt
                misses = 0
                refreshed = False
                continue

            current = current.next
            misses += 1
            if misses >= remaining:
                if refreshed:
                    raise TriangulationFailure("No ear found", remaining=remaining)
                self._refresh(current)
                refreshed = True
                misses = 0

        self.triangles.append(make_triangle(current.prev.idx, current.idx, current.next.idx, self.n))
        logger.debug("Triangulated %d vertices into %d triangles (%d ear checks)",
                     self.n, len(self.triangles), self.stats['ear_checks'])
        return self.triangles


def triangulate(polygon: Polygon, eps: float = EPS) -> List[Triangle]:
    """Triangulate a validated counter-clockwise polygon into n - 2 triangles."""
    return EarClipper(polygon, eps).triangulate()
