"""
Hit records produced by entity hit-scans.

A ``DistancedHit`` ranks by distance, then by creation order, so reducing
a batch of hits to the nearest one is reproducible. ``MISS`` is the single
no-intersection value; its distance is +inf so every real hit sorts first.
"""
import itertools
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .point import StaticPoint

_sequence = itertools.count()


@dataclass(frozen=True)
class Hit:
    """Point of intersection plus the entity that was hit."""

    point: StaticPoint
    entity: Any


@dataclass(frozen=True)
class DistancedHit(Hit):
    """A hit together with its Euclidean distance from the scan origin."""

    distance: float
    seq: int = field(default_factory=lambda: next(_sequence),
                     compare=False, repr=False)

    def __post_init__(self) -> None:
        if math.isnan(self.distance) or self.distance < 0.0:
            raise ValueError(f"hit distance must be >= 0, got {self.distance!r}")

    @staticmethod
    def miss() -> "DistancedHit":
        return MISS

    @property
    def is_miss(self) -> bool:
        return math.isinf(self.distance)

    def __lt__(self, other: "DistancedHit") -> bool:
        if not isinstance(other, DistancedHit):
            return NotImplemented
        return (self.distance, self.seq) < (other.distance, other.seq)


MISS = DistancedHit(StaticPoint(math.nan, math.nan), None, math.inf)


def nearest(hits: Iterable[DistancedHit]) -> DistancedHit:
    """Nearest of ``hits``, or ``MISS`` when there is none."""
    best: Optional[DistancedHit] = None
    for hit in hits:
        if best is None or hit < best:
            best = hit
    return MISS if best is None else best
