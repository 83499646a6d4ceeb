"""
Precision and tolerance utilities for the geometry library.

A single precision constant (float64 machine epsilon) is the default for
every numerical near-zero test: point equality, parallel-segment detection
and normalization of near-zero vectors. Callers that need a different
tolerance pass one explicitly or through a PrecisionPolicy.

NOTE: the equality rule is RELATIVE. Two values a and b compare equal when
    |a - b| <= epsilon * max(|a|, |b|)
so the tolerance shrinks toward zero as both operands approach zero, and a
comparison against exact zero is exact.
"""

from typing import Optional
import numpy as np

from sg_policies.precision import DEFAULT_EPSILON


# Machine epsilon for the scalar type used throughout (double precision)
PRECISION: float = DEFAULT_EPSILON

# Bounds of the parametric position along a segment
PARAMETRIC_LOW: float = 0.0
PARAMETRIC_HIGH: float = 1.0


def nearly_equal(a: float, b: float, epsilon: float = PRECISION) -> bool:
    """
    Compare two scalars with a relative tolerance.

    Parameters
    ----------
    a, b : float
        Values to compare.
    epsilon : float
        Relative tolerance. Default: PRECISION.

    Returns
    -------
    bool
        True if |a - b| <= epsilon * max(|a|, |b|).

    Examples
    --------
    >>> nearly_equal(1.0, 1.0 + 1e-17)
    True
    >>> nearly_equal(0.0, 1e-300)
    False
    """
    return abs(a - b) <= epsilon * max(abs(a), abs(b))


def is_near_zero(value: float, epsilon: float = PRECISION) -> bool:
    """Return True if |value| <= epsilon (absolute test)."""
    return abs(value) <= epsilon


def clamp_parameter(value: float) -> float:
    """Clamp a parametric position to [PARAMETRIC_LOW, PARAMETRIC_HIGH]."""
    return float(np.clip(value, PARAMETRIC_LOW, PARAMETRIC_HIGH))


def resolve_tolerance(tolerance: Optional[float] = None) -> float:
    """
    Validate the tolerance for a call, defaulting to PRECISION.

    Callers holding a PrecisionPolicy pass the policy value they need
    (e.g. policy.effective_parallel_epsilon()) as `tolerance`.

    Parameters
    ----------
    tolerance : float, optional
        Explicit tolerance passed by the caller.

    Returns
    -------
    float
        Non-negative tolerance.

    Raises
    ------
    ValueError
        If the resolved tolerance is negative or NaN.
    """
    if tolerance is None:
        tolerance = PRECISION

    tolerance = float(tolerance)
    if not tolerance >= 0.0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
    return tolerance


__all__ = [
    "PRECISION",
    "PARAMETRIC_LOW",
    "PARAMETRIC_HIGH",
    "nearly_equal",
    "is_near_zero",
    "clamp_parameter",
    "resolve_tolerance",
]
