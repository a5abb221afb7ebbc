"""
Polygon validation: simplicity, area and winding checks.

``validate`` is the gate every polygon passes before triangulation. It never
repairs input; anything it cannot accept is reported as ``InvalidInput`` or
``SelfIntersecting``.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence

from polypart.config import EPS
from polypart.errors import InvalidInput, SelfIntersecting
from polypart.geometry import (
    Orientation,
    Point,
    PointLike,
    Polygon,
    orientation,
    segments_intersect,
    segments_touch,
    signed_area,
)

logger = logging.getLogger(__name__)


def _to_points(points: Iterable[PointLike]) -> List[Point]:
    if points is None:
        raise InvalidInput("No points given", count=0)
    try:
        pts = [Point(float(x), float(y)) for x, y in points]
    except (TypeError, ValueError) as exc:
        raise InvalidInput("Points must be (x, y) pairs of numbers") from exc
    for i, (x, y) in enumerate(pts):
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidInput("Coordinates must be finite", vertex=i)
    return pts


def _bbox_diagonal(pts: Sequence[Point]) -> float:
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    return math.hypot(max(xs) - min(xs), max(ys) - min(ys))


def _all_collinear(pts: Sequence[Point], eps: float) -> bool:
    a = pts[0]
    b = max(pts, key=lambda p: math.hypot(p.x - a.x, p.y - a.y))
    return all(orientation(a, b, p, eps) is Orientation.COLLINEAR for p in pts)


def is_ccw(points: Sequence[PointLike]) -> bool:
    return signed_area(points) > 0


def ensure_ccw(points: Sequence[PointLike]) -> List[PointLike]:
    """Return the points in counter-clockwise order, reversing any other ring."""
    pts = list(points)
    return pts if is_ccw(pts) else pts[::-1]


def check_simple(pts: Sequence[Point], eps: float = EPS) -> None:
    """
    Raise SelfIntersecting if two non-adjacent edges cross or touch, or two
    adjacent edges fold back onto each other. O(n^2).
    """
    n = len(pts)

    # Adjacent edges only meet at their shared vertex unless they double back.
    for k in range(n):
        prev, cur, nxt = pts[k - 1], pts[k], pts[(k + 1) % n]
        if orientation(cur, prev, nxt, eps) is Orientation.COLLINEAR:
            dot = (prev.x - cur.x) * (nxt.x - cur.x) + (prev.y - cur.y) * (nxt.y - cur.y)
            if dot > 0:
                raise SelfIntersecting("Adjacent edges overlap", vertex=k)

    for i in range(n):
        p1, p2 = pts[i], pts[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            q1, q2 = pts[j], pts[(j + 1) % n]
            if segments_intersect(p1, p2, q1, q2, eps):
                raise SelfIntersecting("Edges cross", edges=(i, j))
            if segments_touch(p1, p2, q1, q2, eps):
                raise SelfIntersecting("Edges touch", edges=(i, j))


def validate(points: Iterable[PointLike], eps: float = EPS, is_solid: bool = True) -> Polygon:
    """
    Check that points describe a simple polygon with non-zero area and
    return it wound counter-clockwise.

    Raises:
        InvalidInput: fewer than 3 points, non-finite coordinates, coincident
            consecutive vertices or zero area.
        SelfIntersecting: edges cross or touch.
    """
    pts = _to_points(points)
    n = len(pts)
    if n < 3:
        raise InvalidInput("A polygon needs at least 3 points", count=n)

    diag = _bbox_diagonal(pts)
    for i in range(n):
        a, b = pts[i], pts[(i + 1) % n]
        if math.hypot(b.x - a.x, b.y - a.y) <= eps * diag:
            raise InvalidInput("Consecutive vertices coincide", vertex=i)

    # A crossing polygon can also sum to zero area, so only a polygon lying
    # on one line is reported as zero-area before the simplicity check.
    area = signed_area(pts)
    degenerate = abs(area) <= eps * diag * diag
    if degenerate and _all_collinear(pts, eps):
        raise InvalidInput("Polygon has zero area", area=area)

    check_simple(pts, eps)
    if degenerate:
        raise InvalidInput("Polygon has zero area", area=area)

    if not is_ccw(pts):
        logger.debug("Reversing clockwise polygon with %d vertices", n)
        pts = ensure_ccw(pts)
    return Polygon(tuple(pts), is_solid=is_solid)


def is_convex(polygon: Iterable[PointLike], eps: float = EPS) -> bool:
    """True if a counter-clockwise polygon never turns right."""
    pts = list(polygon)
    n = len(pts)
    for i in range(n):
        if orientation(pts[i - 1], pts[i], pts[(i + 1) % n], eps) is Orientation.RIGHT:
            return False
    return True
