"""
Precision policy for geometry operations.

One epsilon drives equality, parallel-segment detection and normalization by
default. The policy lets each of those be overridden separately and selects
the closest-distance method and the text parsing mode.

All policies are JSON-serializable.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json

import numpy as np

from .base import alias_fields, coerce_float

# Machine epsilon for float64; geometry.utils.scale.PRECISION is this value
DEFAULT_EPSILON = float(np.finfo(np.float64).eps)

# Closest-distance clamping methods
METHOD_REFINED = "refined"
METHOD_CLAMPED = "clamped"
SEGMENT_METHODS = (METHOD_REFINED, METHOD_CLAMPED)

_ALIASES = {
    "precision": "epsilon",
    "tolerance": "epsilon",
    "method": "segment_method",
}


@dataclass
class PrecisionPolicy:
    """
    Policy for numerical tolerances.

    JSON Schema:
    {
        "epsilon": float,
        "parallel_epsilon": float | null,
        "normalize_epsilon": float | null,
        "segment_method": "refined" | "clamped",
        "strict_parse": bool
    }

    parallel_epsilon and normalize_epsilon fall back to epsilon when null.
    """
    epsilon: float = DEFAULT_EPSILON
    parallel_epsilon: Optional[float] = None
    normalize_epsilon: Optional[float] = None
    segment_method: str = METHOD_REFINED
    strict_parse: bool = True

    def effective_parallel_epsilon(self) -> float:
        if self.parallel_epsilon is None:
            return self.epsilon
        return self.parallel_epsilon

    def effective_normalize_epsilon(self) -> float:
        if self.normalize_epsilon is None:
            return self.epsilon
        return self.normalize_epsilon

    def validate(self) -> List[str]:
        """Return a list of validation errors (empty if valid)."""
        errors = []
        for name in ("epsilon", "parallel_epsilon", "normalize_epsilon"):
            value = getattr(self, name)
            if value is not None and not value >= 0.0:
                errors.append(f"{name} must be non-negative, got {value}")
        if self.segment_method not in SEGMENT_METHODS:
            errors.append(
                f"segment_method must be one of {list(SEGMENT_METHODS)}, got '{self.segment_method}'"
            )
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PrecisionPolicy":
        """
        Create from dictionary.

        Unknown keys are ignored; "precision"/"tolerance" are accepted for
        "epsilon" and "method" for "segment_method".

        Raises
        ------
        ValueError
            If the resulting policy fails validation.
        """
        d = alias_fields(dict(d), _ALIASES)
        d = {k: v for k, v in d.items() if k in PrecisionPolicy.__dataclass_fields__}

        if "epsilon" in d:
            d["epsilon"] = coerce_float(d["epsilon"], DEFAULT_EPSILON)
        for key in ("parallel_epsilon", "normalize_epsilon"):
            if d.get(key) is not None:
                d[key] = coerce_float(d[key])

        policy = PrecisionPolicy(**d)
        errors = policy.validate()
        if errors:
            raise ValueError(f"Invalid PrecisionPolicy: {'; '.join(errors)}")
        return policy

    @staticmethod
    def from_json(text: str) -> "PrecisionPolicy":
        return PrecisionPolicy.from_dict(json.loads(text))

    @staticmethod
    def load(path: Union[str, Path]) -> "PrecisionPolicy":
        """Load a policy from a JSON file."""
        with open(path, "r", encoding="utf-8") as fh:
            return PrecisionPolicy.from_dict(json.load(fh))


__all__ = [
    "DEFAULT_EPSILON",
    "METHOD_REFINED",
    "METHOD_CLAMPED",
    "SEGMENT_METHODS",
    "PrecisionPolicy",
]
