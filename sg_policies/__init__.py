"""
Segment Geometry Policies - policy definitions for the geometry library.

This package provides the policy dataclasses that configure tolerances and
proximity checks. All policies are JSON-serializable.

Usage:
    from sg_policies import PrecisionPolicy, ProximityPolicy, OperationReport
"""

from .base import (
    OperationReport,
    coerce_float,
    alias_fields,
)

from .precision import (
    DEFAULT_EPSILON,
    METHOD_REFINED,
    METHOD_CLAMPED,
    SEGMENT_METHODS,
    PrecisionPolicy,
)

from .proximity import (
    ProximityPolicy,
)

__all__ = [
    "OperationReport",
    "coerce_float",
    "alias_fields",
    "DEFAULT_EPSILON",
    "METHOD_REFINED",
    "METHOD_CLAMPED",
    "SEGMENT_METHODS",
    "PrecisionPolicy",
    "ProximityPolicy",
]
