"""
Convex partition pipeline.

    START -> VALIDATED -> CONVEX_SHORTCUT -> DONE
                       -> TRIANGULATED -> MERGED -> DONE

A validation failure goes straight to DONE carrying the error. DONE is
terminal: the pipeline is deterministic, so nothing is retried and every
error reaches the caller unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from polypart.config import EPS
from polypart.errors import PartitionError
from polypart.geometry import PointLike, Polygon
from polypart.merge import merge_convex
from polypart.triangulation import Triangle, triangulate
from polypart.validation import is_convex, validate

logger = logging.getLogger(__name__)


class Stage(Enum):
    START = auto()
    VALIDATED = auto()
    CONVEX_SHORTCUT = auto()
    TRIANGULATED = auto()
    MERGED = auto()
    DONE = auto()


@dataclass
class PartitionResult:
    """Tagged result: either convex polygons or an error, never both."""
    polygons: List[Polygon] = field(default_factory=list)
    error: Optional[PartitionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def count(self) -> int:
        return len(self.polygons)


class Partitioner:
    """
    Runs one polygon through the pipeline and keeps the intermediate
    products (normalized polygon, triangles, index pieces) for inspection.
    """

    def __init__(self, points: Iterable[PointLike], eps: float = EPS, is_solid: bool = True):
        self.points = points
        self.eps = eps
        self.is_solid = is_solid
        self.stage = Stage.START
        self.history: List[Stage] = [Stage.START]
        self.polygon: Optional[Polygon] = None
        self.triangles: List[Triangle] = []
        self.pieces: List[Tuple[int, ...]] = []
        self.error: Optional[PartitionError] = None

    def _advance(self, stage: Stage) -> None:
        if self.stage is Stage.DONE:
            raise RuntimeError("Partitioner has already finished")
        logger.debug("%s -> %s", self.stage.name, stage.name)
        self.stage = stage
        self.history.append(stage)

    def run(self) -> List[Polygon]:
        if self.stage is not Stage.START:
            raise RuntimeError("Partitioner has already run")
        try:
            self.polygon = validate(self.points, self.eps, self.is_solid)
            self._advance(Stage.VALIDATED)

            n = len(self.polygon)
            if is_convex(self.polygon, self.eps):
                self._advance(Stage.CONVEX_SHORTCUT)
                self.pieces = [tuple(range(n))]
            else:
                self.triangles = triangulate(self.polygon, self.eps)
                self._advance(Stage.TRIANGULATED)
                self.pieces = merge_convex(self.polygon, self.triangles, self.eps)
                self._advance(Stage.MERGED)
        except PartitionError as exc:
            self.error = exc
            self.pieces = []
            self._advance(Stage.DONE)
            logger.debug("Partition failed: %s", exc)
            raise

        self._advance(Stage.DONE)
        logger.debug("Partitioned %d vertices into %d convex pieces", n, len(self.pieces))
        return self.polygons()

    def polygons(self) -> List[Polygon]:
        verts = self.polygon.vertices if self.polygon is not None else ()
        return [Polygon(tuple(verts[i] for i in piece), is_solid=self.is_solid) for piece in self.pieces]


def partition(points: Iterable[PointLike], eps: float = EPS, is_solid: bool = True) -> List[Polygon]:
    """
    Split a simple polygon into convex counter-clockwise pieces.

    A convex input comes back as a single piece, wound counter-clockwise.

    Raises:
        InvalidInput, SelfIntersecting: the points are not a valid polygon.
        TriangulationFailure: internal invariant violated.
    """
    return Partitioner(points, eps, is_solid).run()


def partition_polygon(polygon: Polygon, eps: float = EPS) -> List[Polygon]:
    """Partition a Polygon, keeping its ``is_solid`` flag on every piece."""
    return partition(polygon.vertices, eps, polygon.is_solid)


def try_partition(points: Iterable[PointLike], eps: float = EPS, is_solid: bool = True) -> PartitionResult:
    """Like ``partition`` but reports failures in the result instead of raising."""
    try:
        return PartitionResult(polygons=partition(points, eps, is_solid))
    except PartitionError as exc:
        return PartitionResult(error=exc)
