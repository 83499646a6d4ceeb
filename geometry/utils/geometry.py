"""
Array-based distance functions.

Callers that already hold raw coordinates (numpy arrays or plain lists of
length 3) can use these instead of building Point/Segment objects.
closest_segment_parameters() is the one closest-approach solver; it also
backs Segment.closest_approach(), so both APIs agree on every configuration.
"""

import numpy as np
from typing import Tuple

from sg_policies.precision import METHOD_CLAMPED, METHOD_REFINED

from .scale import PRECISION, clamp_parameter, is_near_zero


def closest_segment_parameters(
    a: float,
    b: float,
    c: float,
    e: float,
    f: float,
    epsilon: float = PRECISION,
    method: str = METHOD_REFINED,
) -> Tuple[float, float, bool]:
    """
    Clamped parameters (s, t) of the closest points P1(s), P2(t).

    With segment directions d1, d2 and r = start1 - start2 the inputs are
    a = d1.d1, b = d1.d2, c = d1.r, e = d2.d2, f = d2.r.

    "clamped" compares the denominator a*e - b^2 against epsilon directly and
    clamps s and t once. "refined" tests a*e - b^2 <= epsilon * a * e, which
    does not depend on segment size, then re-projects after clamping.

    Returns
    -------
    s, t : float
        Parameters in [0, 1].
    parallel : bool
        True when the parallel/degenerate branch was taken.
    """
    denom = a * e - b * b

    if method == METHOD_CLAMPED:
        parallel = is_near_zero(denom, epsilon)
        if not parallel:
            s = (b * f - c * e) / denom
            t = (a * f - b * c) / denom
        elif e > epsilon:
            s, t = 0.0, f / e
        elif a > epsilon:
            s, t = -c / a, 0.0
        else:
            s, t = 0.0, 0.0
        return clamp_parameter(s), clamp_parameter(t), parallel

    # Zero-length segments collapse to points
    if is_near_zero(a, epsilon) and is_near_zero(e, epsilon):
        return 0.0, 0.0, True
    if is_near_zero(a, epsilon):
        return 0.0, clamp_parameter(f / e), True
    if is_near_zero(e, epsilon):
        return clamp_parameter(-c / a), 0.0, True

    parallel = abs(denom) <= epsilon * a * e
    s = 0.0 if parallel else clamp_parameter((b * f - c * e) / denom)

    t = (b * s + f) / e
    if t < 0.0 or t > 1.0:
        t = clamp_parameter(t)
        s = clamp_parameter((b * t - c) / a)
    return s, t, parallel


def closest_points_between_segments(
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    p4: np.ndarray,
    epsilon: float = PRECISION,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Closest pair of points between segment p1-p2 and segment p3-p4.

    Parameters
    ----------
    p1, p2 : array-like
        Endpoints of the first segment (length 3).
    p3, p4 : array-like
        Endpoints of the second segment (length 3).
    epsilon : float
        Near-zero threshold for parallel and zero-length detection.

    Returns
    -------
    closest1, closest2 : np.ndarray
        Points on the first and second segment, shape (3,).
    """
    p1, p2, p3, p4 = (np.asarray(p, dtype=np.float64) for p in (p1, p2, p3, p4))

    d1 = p2 - p1
    d2 = p4 - p3
    r = p1 - p3

    s, t, _ = closest_segment_parameters(
        a=float(np.dot(d1, d1)),
        b=float(np.dot(d1, d2)),
        c=float(np.dot(d1, r)),
        e=float(np.dot(d2, d2)),
        f=float(np.dot(d2, r)),
        epsilon=epsilon,
    )
    return p1 + s * d1, p3 + t * d2


def segment_segment_distance(
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    p4: np.ndarray,
    epsilon: float = PRECISION,
) -> float:
    """
    Minimum distance between segment p1-p2 and segment p3-p4.

    Zero-length segments are treated as points, and touching or
    crossing segments give 0.0.

    Examples
    --------
    >>> segment_segment_distance([0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0])
    1.0
    >>> segment_segment_distance([0, 0, 0], [1, 0, 0], [0.5, -0.5, 0], [0.5, 0.5, 0])
    0.0
    """
    closest1, closest2 = closest_points_between_segments(p1, p2, p3, p4, epsilon)
    return float(np.linalg.norm(closest1 - closest2))


def capsule_capsule_distance(
    seg1_start: np.ndarray,
    seg1_end: np.ndarray,
    seg1_radius: float,
    seg2_start: np.ndarray,
    seg2_end: np.ndarray,
    seg2_radius: float,
) -> Tuple[float, float]:
    """
    Distance between two capsules (segments swept by a sphere of given radius).

    Returns
    -------
    centerline_distance : float
        Distance between the two segments.
    surface_clearance : float
        centerline_distance minus both radii; negative when the capsules overlap.
    """
    centerline_distance = segment_segment_distance(seg1_start, seg1_end, seg2_start, seg2_end)
    return centerline_distance, centerline_distance - seg1_radius - seg2_radius


def point_to_segment_distance(
    point: np.ndarray,
    seg_start: np.ndarray,
    seg_end: np.ndarray,
    epsilon: float = PRECISION,
) -> float:
    """Distance from a point to the nearest point of a segment."""
    point = np.asarray(point, dtype=np.float64)
    seg_start = np.asarray(seg_start, dtype=np.float64)
    direction = np.asarray(seg_end, dtype=np.float64) - seg_start

    length_sq = float(np.dot(direction, direction))
    if is_near_zero(length_sq, epsilon):
        return float(np.linalg.norm(point - seg_start))

    u = np.clip(np.dot(point - seg_start, direction) / length_sq, 0.0, 1.0)
    return float(np.linalg.norm(point - (seg_start + u * direction)))


def pairwise_segment_distances(
    starts: np.ndarray,
    ends: np.ndarray,
    epsilon: float = PRECISION,
) -> np.ndarray:
    """
    Closest distance between every pair of N segments.

    Parameters
    ----------
    starts, ends : array-like
        Segment endpoints, shape (N, 3) each.

    Returns
    -------
    np.ndarray
        Symmetric (N, N) matrix with a zero diagonal.

    Raises
    ------
    ValueError
        If starts and ends are not matching (N, 3) arrays.
    """
    starts = np.asarray(starts, dtype=np.float64)
    ends = np.asarray(ends, dtype=np.float64)

    if starts.ndim != 2 or starts.shape[1] != 3 or starts.shape != ends.shape:
        raise ValueError(
            f"starts and ends must both have shape (N, 3), got {starts.shape} and {ends.shape}"
        )

    n = starts.shape[0]
    distances = np.zeros((n, n), dtype=np.float64)
    for i, j in zip(*np.triu_indices(n, k=1)):
        d = segment_segment_distance(starts[i], ends[i], starts[j], ends[j], epsilon)
        distances[i, j] = distances[j, i] = d

    return distances


__all__ = [
    "closest_segment_parameters",
    "closest_points_between_segments",
    "segment_segment_distance",
    "capsule_capsule_distance",
    "point_to_segment_distance",
    "pairwise_segment_distances",
]
