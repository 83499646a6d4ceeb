"""
Pairwise proximity checks between segments.

Every unordered pair of segments is compared with Segment.closest_distance()
(brute force; there is no spatial index). When radii are given the segments
are treated as capsules and clearance is measured between their surfaces.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging
import math

from ..core.segment import Segment
from sg_policies.base import OperationReport
from sg_policies.proximity import ProximityPolicy

logger = logging.getLogger(__name__)


@dataclass
class ProximityHit:
    """A pair of segments closer than the required clearance."""
    i: int
    j: int
    distance: float
    clearance: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "i": self.i,
            "j": self.j,
            "distance": self.distance,
            "clearance": self.clearance,
        }


def find_close_segments(
    segments: Sequence[Segment],
    min_clearance: Optional[float] = None,
    radii: Optional[Sequence[float]] = None,
    policy: Optional[ProximityPolicy] = None,
) -> Tuple[List[ProximityHit], OperationReport]:
    """
    Find all pairs of segments closer than a minimum clearance.

    Parameters
    ----------
    segments : sequence of Segment
        Segments to check.
    min_clearance : float, optional
        Required clearance. Overrides policy.min_clearance when given.
    radii : sequence of float, optional
        Per-segment capsule radius. Used when policy.inflate_by_radius is set.
    policy : ProximityPolicy, optional
        Proximity policy. Defaults to ProximityPolicy().

    Returns
    -------
    hits : list of ProximityHit
        Offending pairs with i < j, in scan order.
    report : OperationReport
        Requested/effective policy, warnings and metrics
        (pairs_checked, hits, min_distance). Pairs whose distance is not
        finite (NaN coordinates) are recorded as errors and the report is
        marked unsuccessful.

    Raises
    ------
    ValueError
        If radii does not match the number of segments, or the effective
        policy is invalid.
    """
    if policy is None:
        policy = ProximityPolicy()

    requested = policy.to_dict()
    if min_clearance is not None:
        requested["min_clearance"] = min_clearance

    effective_policy = ProximityPolicy.from_dict(requested)
    errors = effective_policy.validate()
    if errors:
        raise ValueError(f"Invalid proximity policy: {'; '.join(errors)}")

    if radii is not None and len(radii) != len(segments):
        raise ValueError(
            f"Expected {len(segments)} radii, got {len(radii)}"
        )

    use_radii = radii is not None and effective_policy.inflate_by_radius
    precision = effective_policy.precision
    tol = precision.effective_parallel_epsilon()

    report = OperationReport(
        operation="find_close_segments",
        requested_policy=requested,
        effective_policy=effective_policy.to_dict(),
    )

    for idx, seg in enumerate(segments):
        if seg.is_degenerate(tol):
            report.add_warning(f"Segment {idx} is degenerate (zero length)")
            logger.warning(f"Segment {idx} is degenerate (zero length)")

    hits = []
    pairs_checked = 0
    min_distance = None

    for i, seg_a in enumerate(segments):
        for j in range(i + 1, len(segments)):
            seg_b = segments[j]

            if effective_policy.ignore_shared_endpoints and _shares_endpoint(seg_a, seg_b):
                continue

            dist = Segment.closest_distance(seg_a, seg_b, policy=precision)
            pairs_checked += 1
            if not math.isfinite(dist):
                report.add_error(f"Non-finite distance between segments {i} and {j}")
                logger.error(f"Non-finite distance between segments {i} and {j}")
                continue
            if min_distance is None or dist < min_distance:
                min_distance = dist

            clearance = dist
            if use_radii:
                clearance = dist - radii[i] - radii[j]

            if clearance < effective_policy.min_clearance or clearance <= 0.0:
                hits.append(ProximityHit(i=i, j=j, distance=dist, clearance=clearance))

    report.metrics = {
        "pairs_checked": pairs_checked,
        "hits": len(hits),
        "min_distance": min_distance,
    }

    logger.info(
        f"Checked {pairs_checked} segment pairs, "
        f"{len(hits)} below clearance {effective_policy.min_clearance}"
    )

    return hits, report


def _shares_endpoint(seg_a: Segment, seg_b: Segment) -> bool:
    return (
        seg_a.start == seg_b.start or seg_a.start == seg_b.end
        or seg_a.end == seg_b.start or seg_a.end == seg_b.end
    )


__all__ = [
    "ProximityHit",
    "find_close_segments",
]
