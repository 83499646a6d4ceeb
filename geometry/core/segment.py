"""
Line segments in 3D space and closest distance between two segments.

The closest-distance computation is the classical parametric method:

    P1(s) = start1 + s * d1,  s in [0, 1]
    P2(t) = start2 + t * d2,  t in [0, 1]

With r = start1 - start2 and
    a = d1.d1, e = d2.d2, f = d2.r, b = d1.d2, c = d1.r
the unconstrained optimum of |P1(s) - P2(t)|^2 is

    s = (b*f - c*e) / (a*e - b^2)
    t = (a*f - b*c) / (a*e - b^2)

The denominator a*e - b^2 vanishes when the segments are parallel or either
segment is degenerate (zero length). In that case s is anchored at 0 and t is
the projection of start1 onto segment 2.

Two clamping methods are available:
- "clamped": treat the segments as parallel when |a*e - b^2| <= tolerance,
  then clamp s and t independently to [0, 1] (one shot). The fixed
  threshold misjudges very short segments as parallel.
- "refined": treat them as parallel when |a*e - b^2| <= tolerance * a * e,
  which does not depend on segment size, then re-project the clamped
  parameter onto the other segment and clamp again. This yields the true minimum distance and
  is symmetric in the argument order.

Both are computed by geometry.utils.geometry.closest_segment_parameters().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

from sg_policies.precision import (
    METHOD_CLAMPED,
    METHOD_REFINED,
    SEGMENT_METHODS as CLOSEST_METHODS,
    PrecisionPolicy,
)

from .point import Point
from ..utils.geometry import closest_segment_parameters
from ..utils.scale import clamp_parameter, is_near_zero, resolve_tolerance

logger = logging.getLogger(__name__)


@dataclass
class ClosestApproach:
    """
    Result of a closest-approach query between two segments.

    s and t are the clamped parameters along segment 1 and segment 2;
    parallel is True when the parallel/degenerate branch was used.
    """

    s: float
    t: float
    point1: Point
    point2: Point
    distance: float
    parallel: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "s": self.s,
            "t": self.t,
            "point1": [self.point1.x, self.point1.y, self.point1.z],
            "point2": [self.point2.x, self.point2.y, self.point2.z],
            "distance": self.distance,
            "parallel": self.parallel,
        }


@dataclass
class Segment:
    """
    Segment between two points.

    The constructor copies both points; start and end can be reassigned or
    mutated afterwards. A zero-length segment (start == end) is allowed.
    """

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def __post_init__(self):
        self.start = self.start.copy()
        self.end = self.end.copy()

    @classmethod
    def from_coords(
        cls,
        x1: float, y1: float, z1: float,
        x2: float, y2: float, z2: float,
    ) -> "Segment":
        return cls(Point(x1, y1, z1), Point(x2, y2, z2))

    def direction(self) -> Point:
        """Unnormalized direction vector end - start."""
        return self.end - self.start

    def length(self) -> float:
        return self.start.distance(self.end)

    def midpoint(self) -> Point:
        return self.start + self.direction() * 0.5

    def point_at(self, u: float) -> Point:
        """Point at parametric position u (not clamped)."""
        return self.start + self.direction() * u

    def reversed(self) -> "Segment":
        """New segment with start and end swapped."""
        return Segment(self.end, self.start)

    def is_degenerate(self, tolerance: Optional[float] = None) -> bool:
        """True if the squared length is at or below the tolerance."""
        tol = resolve_tolerance(tolerance)
        d = self.direction()
        return is_near_zero(d.dot(d), tol)

    def distance_to_point(self, point: Point, tolerance: Optional[float] = None) -> float:
        """Distance from a point to the closest point on this segment."""
        tol = resolve_tolerance(tolerance)
        d = self.direction()
        length_sq = d.dot(d)

        if is_near_zero(length_sq, tol):
            return point.distance(self.start)

        u = clamp_parameter((point - self.start).dot(d) / length_sq)
        return point.distance(self.start + d * u)

    @staticmethod
    def closest_approach(
        segment1: "Segment",
        segment2: "Segment",
        tolerance: Optional[float] = None,
        method: Optional[str] = None,
        policy: Optional[PrecisionPolicy] = None,
    ) -> ClosestApproach:
        """
        Compute the closest points between two segments.

        Parameters
        ----------
        segment1, segment2 : Segment
            Segments to compare. Either may be degenerate.
        tolerance : float, optional
            Near-zero threshold for parallel and degenerate detection. The
            refined method scales it by a*e for the parallel test.
            Defaults to the policy's parallel epsilon, then PRECISION.
        method : str, optional
            "refined" (default) or "clamped". See module docstring.
        policy : PrecisionPolicy, optional
            Supplies defaults for tolerance and method.

        Returns
        -------
        ClosestApproach
            Clamped parameters, closest points and their distance.

        Raises
        ------
        ValueError
            If method is not one of CLOSEST_METHODS.
        """
        if policy is not None:
            if tolerance is None:
                tolerance = policy.effective_parallel_epsilon()
            if method is None:
                method = policy.segment_method
        if method is None:
            method = METHOD_REFINED
        if method not in CLOSEST_METHODS:
            raise ValueError(f"Unknown closest distance method '{method}'. Supported: {list(CLOSEST_METHODS)}")

        tol = resolve_tolerance(tolerance)

        d1 = segment1.end - segment1.start
        d2 = segment2.end - segment2.start
        r = segment1.start - segment2.start

        a = d1.dot(d1)
        e = d2.dot(d2)
        f = d2.dot(r)
        b = d1.dot(d2)
        c = d1.dot(r)

        s, t, parallel = closest_segment_parameters(a, b, c, e, f, epsilon=tol, method=method)
        if parallel:
            logger.debug(
                f"Parallel/degenerate segments (denominator={a * e - b * b:.3g}, "
                f"a={a:.3g}, e={e:.3g}, method={method}); using s={s:.6g}, t={t:.6g}"
            )

        point1 = segment1.start + d1 * s
        point2 = segment2.start + d2 * t

        return ClosestApproach(
            s=s,
            t=t,
            point1=point1,
            point2=point2,
            distance=point1.distance(point2),
            parallel=parallel,
        )

    @staticmethod
    def closest_distance(
        segment1: "Segment",
        segment2: "Segment",
        tolerance: Optional[float] = None,
        method: Optional[str] = None,
        policy: Optional[PrecisionPolicy] = None,
    ) -> float:
        """
        Shortest distance between two segments.

        Never raises for geometric input: parallel, intersecting, coincident
        and zero-length segments all produce a finite non-negative result
        for finite coordinates.
        """
        return Segment.closest_approach(
            segment1, segment2, tolerance=tolerance, method=method, policy=policy
        ).distance


__all__ = [
    "Segment",
    "ClosestApproach",
    "CLOSEST_METHODS",
    "METHOD_REFINED",
    "METHOD_CLAMPED",
]
