"""
Proximity (clearance) policy for pairwise segment checks.

All policies are JSON-serializable and support the "requested vs effective"
pattern.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .base import coerce_float
from .precision import PrecisionPolicy


@dataclass
class ProximityPolicy:
    """
    Policy for pairwise proximity checks between segments.

    JSON Schema:
    {
        "min_clearance": float,
        "inflate_by_radius": bool,
        "ignore_shared_endpoints": bool,
        "precision": PrecisionPolicy
    }

    When inflate_by_radius is True and radii are supplied, clearance is
    measured between capsule surfaces (centerline distance minus both radii).
    """
    min_clearance: float = 0.0
    inflate_by_radius: bool = True
    ignore_shared_endpoints: bool = False
    precision: PrecisionPolicy = field(default_factory=PrecisionPolicy)

    def validate(self) -> List[str]:
        errors = []
        if not self.min_clearance >= 0.0:
            errors.append(f"min_clearance must be non-negative, got {self.min_clearance}")
        errors.extend(self.precision.validate())
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_clearance": self.min_clearance,
            "inflate_by_radius": self.inflate_by_radius,
            "ignore_shared_endpoints": self.ignore_shared_endpoints,
            "precision": self.precision.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ProximityPolicy":
        d = dict(d)
        # "precision": null means the default precision policy
        if "precision" in d and d["precision"] is None:
            d["precision"] = PrecisionPolicy()
        elif "precision" in d and isinstance(d["precision"], dict):
            d["precision"] = PrecisionPolicy.from_dict(d["precision"])
        if "min_clearance" in d:
            d["min_clearance"] = coerce_float(d["min_clearance"])
        return ProximityPolicy(**{k: v for k, v in d.items() if k in ProximityPolicy.__dataclass_fields__})


__all__ = [
    "ProximityPolicy",
]
