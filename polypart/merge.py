"""
Hertel-Mehlhorn convex merging.

Starting from a triangulation, every diagonal is visited once and removed when
the two cells it separates form a convex region. Removing a diagonal only
widens the angles of the surviving cells, so a diagonal that must stay once
stays for good and a single pass leaves no removable diagonal. The result has
at most four times the minimum number of convex pieces.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Set, Tuple

from polypart.config import EPS
from polypart.errors import TriangulationFailure
from polypart.geometry import Orientation, Polygon, orientation
from polypart.triangulation import Edge, Triangle

logger = logging.getLogger(__name__)


class ConvexMerger:
    """
    Cells are counter-clockwise cycles of polygon vertex indices, keyed by the
    lowest triangle index merged into them. ``owner`` maps every directed edge
    to the cell on its left; a diagonal (u, v) is shared by ``owner[(u, v)]``
    and ``owner[(v, u)]``.
    """

    def __init__(self, polygon: Polygon, triangles: Sequence[Triangle], eps: float = EPS):
        self.pts = polygon.vertices
        self.eps = eps
        self.cells: Dict[int, List[int]] = {}
        self.owner: Dict[Edge, int] = {}
        self.neighbours: Dict[int, Set[int]] = defaultdict(set)
        self.diagonals: List[Edge] = []
        self.removed: List[Edge] = []
        self.kept: List[Edge] = []

        seen: Set[Edge] = set()
        for cell_id, tri in enumerate(triangles):
            self.cells[cell_id] = list(tri.vertices)
            for edge in tri.edges():
                self.owner[edge] = cell_id
            for u, v in tri.diagonals():
                key = (min(u, v), max(u, v))
                if key not in seen:
                    seen.add(key)
                    self.diagonals.append((u, v))

        for u, v in self.diagonals:
            if (u, v) not in self.owner or (v, u) not in self.owner:
                raise TriangulationFailure("Diagonal is missing its twin triangle", diagonal=(u, v))
            a, b = self.owner[(u, v)], self.owner[(v, u)]
            self.neighbours[a].add(b)
            self.neighbours[b].add(a)

    def _turn_ok(self, p: int, q: int, r: int) -> bool:
        """Interior angle at q (walking p -> q -> r) is at most 180 degrees."""
        a, b, c = self.pts[p], self.pts[q], self.pts[r]
        turn = orientation(a, b, c, self.eps)
        if turn is Orientation.COLLINEAR:
            # straight through, not doubling back
            return (a.x - b.x) * (c.x - b.x) + (a.y - b.y) * (c.y - b.y) < 0
        return turn is Orientation.LEFT

    @staticmethod
    def _around(cycle: List[int], v: int) -> Tuple[int, int]:
        i = cycle.index(v)
        return cycle[i - 1], cycle[(i + 1) % len(cycle)]

    def can_remove(self, diagonal: Edge) -> bool:
        u, v = diagonal
        cell_a = self.cells[self.owner[(u, v)]]
        cell_b = self.cells[self.owner[(v, u)]]
        a_prev, _ = self._around(cell_a, u)
        _, a_next = self._around(cell_a, v)
        b_prev, _ = self._around(cell_b, v)
        _, b_next = self._around(cell_b, u)
        return self._turn_ok(a_prev, u, b_next) and self._turn_ok(b_prev, v, a_next)

    def merge(self, diagonal: Edge) -> int:
        """Union the two cells across the diagonal; return the surviving id."""
        u, v = diagonal
        id_a, id_b = self.owner.pop((u, v)), self.owner.pop((v, u))
        cell_a, cell_b = self.cells[id_a], self.cells[id_b]

        i = cell_a.index(v)
        path_a = cell_a[i:] + cell_a[:i]     # v ... u
        j = cell_b.index(u)
        path_b = cell_b[j:] + cell_b[:j]     # u ... v
        merged = path_a + path_b[1:-1]

        keep, gone = min(id_a, id_b), max(id_a, id_b)
        self.cells[keep] = merged
        del self.cells[gone]
        for k in range(len(merged)):
            edge = (merged[k], merged[(k + 1) % len(merged)])
            if edge in self.owner:
                self.owner[edge] = keep

        for other in self.neighbours.pop(gone, set()):
            self.neighbours[other].discard(gone)
            if other != keep:
                self.neighbours[other].add(keep)
                self.neighbours[keep].add(other)
        self.neighbours[keep].discard(gone)
        self.neighbours[keep].discard(keep)
        return keep

    def run(self) -> List[Tuple[int, ...]]:
        for diagonal in self.diagonals:
            if self.can_remove(diagonal):
                self.merge(diagonal)
                self.removed.append(diagonal)
            else:
                self.kept.append(diagonal)
        logger.debug("Removed %d of %d diagonals, %d convex pieces",
                     len(self.removed), len(self.diagonals), len(self.cells))
        return [tuple(self.cells[k]) for k in sorted(self.cells)]


def merge_convex(polygon: Polygon, triangles: Sequence[Triangle], eps: float = EPS) -> List[Tuple[int, ...]]:
    """Merge a triangulation of polygon into convex pieces (vertex index cycles)."""
    return ConvexMerger(polygon, triangles, eps).run()
