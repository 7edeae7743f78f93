"""
2D coordinates. ``StaticPoint`` is a read-only value, ``Point`` adds setters.
"""
import math
from typing import Tuple


class StaticPoint:
    """A read-only point in 2D space."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def as_tuple(self) -> Tuple[float, float]:
        return self._x, self._y

    def distance_to(self, other: "StaticPoint") -> float:
        return math.hypot(other.x - self._x, other.y - self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticPoint):
            return NotImplemented
        # Plain float comparison, so NaN coordinates never compare equal.
        return self._x == other.x and self._y == other.y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self._x!r}, y={self._y!r})"


class Point(StaticPoint):
    """Mutable point; entities use one as their anchor."""

    __slots__ = ()

    @StaticPoint.x.setter
    def x(self, value: float) -> None:
        self._x = float(value)

    @StaticPoint.y.setter
    def y(self, value: float) -> None:
        self._y = float(value)

    def set(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    def move_by(self, dx: float, dy: float) -> None:
        self._x += dx
        self._y += dy

    def frozen(self) -> StaticPoint:
        """Read-only snapshot of the current coordinates."""
        return StaticPoint(self._x, self._y)

    __hash__ = None  # mutable
