"""
Segment Geometry - 3D point/vector primitives and segment distance queries.

Main Entry Points:
    - Point / Vector: 3D value type (arithmetic, dot, cross, normalize)
    - Segment.closest_distance(): shortest distance between two segments
    - find_close_segments(): pairwise clearance checks over many segments

Example:
    >>> from geometry import Point, Segment
    >>> seg1 = Segment(Point(0, 0, 0), Point(5, 0, 0))
    >>> seg2 = Segment(Point(2, -2, 0), Point(2, 2, 0))
    >>> Segment.closest_distance(seg1, seg2)
    0.0
"""

from .core import (
    Point,
    Vector,
    PointParseError,
    format_point,
    Segment,
    ClosestApproach,
)
from .utils import (
    PRECISION,
    nearly_equal,
    closest_points_between_segments,
    segment_segment_distance,
    point_to_segment_distance,
    capsule_capsule_distance,
    pairwise_segment_distances,
)
from .ops import ProximityHit, find_close_segments

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Point",
    "Vector",
    "PointParseError",
    "format_point",
    "Segment",
    "ClosestApproach",
    # Tolerances
    "PRECISION",
    "nearly_equal",
    # Array utilities
    "closest_points_between_segments",
    "segment_segment_distance",
    "point_to_segment_distance",
    "capsule_capsule_distance",
    "pairwise_segment_distances",
    # Operations
    "ProximityHit",
    "find_close_segments",
]
