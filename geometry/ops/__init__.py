"""Operations built on the core geometry types."""

from .proximity import ProximityHit, find_close_segments

__all__ = [
    "ProximityHit",
    "find_close_segments",
]
