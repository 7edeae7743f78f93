"""
Abstract base of a 2D world entity taking part in segment hit-scans.

Coordinates are screen-oriented: x grows to the right and y grows
*downward*, so the top edge of a bounding box has the smaller y.
"""
import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Iterable, Tuple

import numpy as np

from ._core import _segment_aabb_entry
from .hit import MISS, DistancedHit, nearest
from .point import Point, StaticPoint

logger = logging.getLogger(__name__)


class AbstractEntity(ABC):
    """
    Entity anchored at a mutable position.

    Subclasses supply the extents, drawing and geometry-specific
    intersection (``_intersect``). ``hit_scan`` wraps ``_intersect`` and
    checks every result against the hit contract.
    """

    def __init__(self, x: float, y: float) -> None:
        self._anchor = Point(x, y)

    # ---------------------------------------------------------------------
    # Position
    # ---------------------------------------------------------------------
    @property
    def x(self) -> float:
        return self._anchor.x

    @x.setter
    def x(self, value: float) -> None:
        self._anchor.x = value

    @property
    def y(self) -> float:
        return self._anchor.y

    @y.setter
    def y(self, value: float) -> None:
        self._anchor.y = value

    @property
    def position(self) -> StaticPoint:
        """Snapshot of the anchor; mutating the entity does not change it."""
        return self._anchor.frozen()

    def move_to(self, x: float, y: float) -> None:
        self._anchor.set(x, y)

    def move_by(self, dx: float, dy: float) -> None:
        self._anchor.move_by(dx, dy)

    # ---------------------------------------------------------------------
    # Geometry
    # ---------------------------------------------------------------------
    @property
    @abstractmethod
    def width(self) -> float:
        """Bounding box extent along x (>= 0)."""

    @property
    @abstractmethod
    def height(self) -> float:
        """Bounding box extent along y (>= 0)."""

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """
        ``(left, top, right, bottom)`` in world coordinates.

        The anchor is the top-left corner unless a subclass overrides this.
        """
        return self.x, self.y, self.x + self.width, self.y + self.height

    def top_left_corner(self) -> StaticPoint:
        left, top, _, _ = self.bounding_box()
        return StaticPoint(left, top)

    def top_right_corner(self) -> StaticPoint:
        _, top, right, _ = self.bounding_box()
        return StaticPoint(right, top)

    def bottom_left_corner(self) -> StaticPoint:
        left, _, _, bottom = self.bounding_box()
        return StaticPoint(left, bottom)

    def bottom_right_corner(self) -> StaticPoint:
        _, _, right, bottom = self.bounding_box()
        return StaticPoint(right, bottom)

    # ---------------------------------------------------------------------
    # Hit-scan
    # ---------------------------------------------------------------------
    @abstractmethod
    def _intersect(self, x1: float, y1: float,
                   x2: float, y2: float) -> DistancedHit:
        """Nearest intersection of the segment with this entity, or ``MISS``."""

    def hit_scan(self, x1: float, y1: float,
                 x2: float, y2: float) -> DistancedHit:
        """
        Nearest hit along the bounded segment (x1, y1) -> (x2, y2).

        Returns ``MISS`` when the segment does not touch the entity. A scan
        starting inside the entity hits at its origin with distance 0.
        """
        hit = self._intersect(float(x1), float(y1), float(x2), float(y2))
        if not isinstance(hit, DistancedHit):
            raise TypeError(f"{type(self).__name__}._intersect returned "
                            f"{type(hit).__name__}, expected DistancedHit")
        if hit.is_miss:
            return MISS
        if hit.entity is not self:
            raise ValueError(f"{type(self).__name__}._intersect returned a hit "
                             f"for another entity: {hit.entity!r}")
        return hit

    def hit_scan_points(self, start: StaticPoint, end: StaticPoint) -> DistancedHit:
        return self.hit_scan(start.x, start.y, end.x, end.y)

    def bounding_box_hit(self, x1: float, y1: float,
                         x2: float, y2: float) -> DistancedHit:
        """
        Segment scan against this entity's bounding box.

        Box-shaped subclasses can return this directly from ``_intersect``;
        other shapes can use it as an early-out.

        An infinite origin is a miss. An infinite end point turns the
        segment into a ray along the axes whose end coordinate is infinite.
        """
        if any(math.isnan(c) for c in (x1, y1, x2, y2)):
            return MISS
        if math.isinf(x1) or math.isinf(y1):
            return MISS
        left, top, right, bottom = self.bounding_box()
        o = np.array((x1, y1), dtype=np.float64)
        if math.isinf(x2) or math.isinf(y2):
            d = np.array([math.copysign(1.0, e) if math.isinf(e) else 0.0
                          for e in (x2, y2)], dtype=np.float64)
            t_limit = math.inf
        else:
            # Halved difference stays finite for any finite end points.
            d = np.array((x2 * 0.5 - x1 * 0.5, y2 * 0.5 - y1 * 0.5),
                         dtype=np.float64)
            t_limit = 2.0
        t = _segment_aabb_entry(
            o, d, t_limit,
            np.array((left, top), dtype=np.float64),
            np.array((right, bottom), dtype=np.float64),
        )
        if math.isinf(t):
            return MISS
        if t == 0.0:
            return DistancedHit(StaticPoint(x1, y1), self, 0.0)
        point = StaticPoint(x1 + d[0] * t, y1 + d[1] * t)
        return DistancedHit(point, self, math.hypot(point.x - x1, point.y - y1))

    # ---------------------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------------------
    @abstractmethod
    def draw(self, surface: Any) -> None:
        """Render onto an opaque host surface without mutating the entity."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


def scan_entities(entities: Iterable[AbstractEntity],
                  start: StaticPoint, end: StaticPoint) -> DistancedHit:
    """Nearest hit of the segment ``start -> end`` over ``entities``."""
    hits = [e.hit_scan_points(start, end) for e in entities]
    best = nearest(h for h in hits if not h.is_miss)
    logger.debug("scan %s -> %s: %d entities, nearest %s",
                 start, end, len(hits),
                 "miss" if best.is_miss else f"{best.distance:g}")
    return best
