"""
Shared pieces for geometry policies.

Policies are plain dataclasses that round-trip through dicts/JSON. Operations
that accept a policy return an OperationReport describing what was asked
for, what was actually applied, and what they measured.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List
import json


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Convert a JSON value to float.

    None and values that float() rejects yield `default`.
    """
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Rename alternative keys to their canonical name.

    Parameters
    ----------
    d : dict
        Raw policy dictionary (not modified).
    aliases : dict
        Mapping of alternative_name -> canonical_name. An alternative key is
        dropped in favour of the canonical one only when the canonical key is
        absent.

    Returns
    -------
    dict
        New dictionary with canonical keys.
    """
    renamed = dict(d)
    for alt, canonical in aliases.items():
        if alt in renamed and canonical not in renamed:
            renamed[canonical] = renamed.pop(alt)
    return renamed


@dataclass
class OperationReport:
    """
    Outcome of a policy-driven operation.

    requested_policy is the policy as passed in (after call-site overrides);
    effective_policy is what the operation actually ran with. Warnings do not
    affect success; any error marks the report as failed.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Record an error and mark the operation as failed."""
        self.errors.append(message)
        self.success = False


__all__ = [
    "OperationReport",
    "coerce_float",
    "alias_fields",
]
