"""
Convex partitioning of simple polygons.

Validate, triangulate by ear clipping, then merge triangles greedily while the
merged cells stay convex (Hertel-Mehlhorn).
"""
from polypart.errors import InvalidInput, PartitionError, SelfIntersecting, TriangulationFailure
from polypart.geometry import (
    Location,
    Orientation,
    Point,
    Polygon,
    orientation,
    point_in_polygon,
    segments_intersect,
    signed_area,
)
from polypart.pipeline import PartitionResult, Partitioner, Stage, partition, partition_polygon, try_partition
from polypart.triangulation import Triangle, triangulate
from polypart.merge import merge_convex
from polypart.validation import is_convex, validate

__version__ = "0.1.0"

__all__ = [
    "InvalidInput",
    "Location",
    "Orientation",
    "PartitionError",
    "PartitionResult",
    "Partitioner",
    "Point",
    "Polygon",
    "SelfIntersecting",
    "Stage",
    "Triangle",
    "TriangulationFailure",
    "is_convex",
    "merge_convex",
    "orientation",
    "partition",
    "partition_polygon",
    "point_in_polygon",
    "segments_intersect",
    "signed_area",
    "triangulate",
    "try_partition",
    "validate",
]
