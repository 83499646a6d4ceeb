"""Utility functions for the geometry library."""

from .scale import (
    PRECISION,
    PARAMETRIC_LOW,
    PARAMETRIC_HIGH,
    nearly_equal,
    is_near_zero,
    clamp_parameter,
    resolve_tolerance,
)

from .geometry import (
    closest_segment_parameters,
    closest_points_between_segments,
    segment_segment_distance,
    capsule_capsule_distance,
    point_to_segment_distance,
    pairwise_segment_distances,
)

__all__ = [
    'PRECISION',
    'PARAMETRIC_LOW',
    'PARAMETRIC_HIGH',
    'nearly_equal',
    'is_near_zero',
    'clamp_parameter',
    'resolve_tolerance',
    'closest_segment_parameters',
    'closest_points_between_segments',
    'segment_segment_distance',
    'capsule_capsule_distance',
    'point_to_segment_distance',
    'pairwise_segment_distances',
]
