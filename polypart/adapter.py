"""
Array boundary for callers that hold polygons as numpy coordinate arrays.

Translates an (n, 2) array into the core types and the pieces back into
float64 arrays. Errors come back in the result, never as exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from polypart.config import EPS
from polypart.errors import InvalidInput, PartitionError
from polypart.pipeline import try_partition


@dataclass
class ArrayPartitionResult:
    polygons: List[np.ndarray] = field(default_factory=list)
    error: Optional[str] = None
    kind: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.polygons)

    @property
    def ok(self) -> bool:
        return self.error is None


def _failure(exc: PartitionError) -> ArrayPartitionResult:
    return ArrayPartitionResult(error=str(exc), kind=exc.kind)


def partition_array(coords, eps: float = EPS) -> ArrayPartitionResult:
    """
    Partition a polygon given as an array-like of shape (n, 2).

    Args:
        coords: vertex coordinates, one row per vertex.
        eps: orientation tolerance.

    Returns:
        ArrayPartitionResult with one (k, 2) float64 array per convex piece,
        or an error message and kind with no pieces.
    """
    try:
        arr = np.asarray(coords, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        return _failure(InvalidInput(f"Coordinates are not numeric: {exc}"))
    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        return _failure(InvalidInput("Coordinates must have shape (n, 2)", shape=arr.shape))

    result = try_partition(arr.tolist(), eps)
    if not result.ok:
        return _failure(result.error)
    return ArrayPartitionResult(
        polygons=[np.array(poly.vertices, dtype=np.float64) for poly in result.polygons]
    )
