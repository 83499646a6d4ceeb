"""Core geometric value types."""

from .point import Point, Vector, PointParseError, format_point
from .segment import Segment, ClosestApproach, CLOSEST_METHODS, METHOD_REFINED, METHOD_CLAMPED

__all__ = [
    "Point",
    "Vector",
    "PointParseError",
    "format_point",
    "Segment",
    "ClosestApproach",
    "CLOSEST_METHODS",
    "METHOD_REFINED",
    "METHOD_CLAMPED",
]
