"""
Fixed-length numeric vector used for matrix row/column projection.
"""
import operator
from typing import Iterable, Iterator

import numpy as np

from ._core import _dot
from .errors import DimensionMismatch, OutOfRange, ShapeError


class NVector:
    """Ordered float64 sequence of immutable length n >= 1."""

    __slots__ = ("_elements",)

    def __init__(self, values: Iterable[float]) -> None:
        arr = np.array(values, dtype=np.float64)  # always a copy
        if arr.ndim != 1 or arr.shape[0] == 0:
            raise ShapeError("NVector", f"expected a non-empty 1-D sequence, got shape {arr.shape}")
        self._elements = arr

    @classmethod
    def zeros(cls, length: int) -> "NVector":
        n = operator.index(length)
        if n < 1:
            raise ShapeError("NVector.zeros", f"length must be >= 1, got {n}")
        return cls(np.zeros(n, dtype=np.float64))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def length(self) -> int:
        return self._elements.shape[0]

    def __len__(self) -> int:
        return self._elements.shape[0]

    def _check(self, operation: str, i) -> int:
        idx = operator.index(i)
        if not 0 <= idx < self._elements.shape[0]:
            raise OutOfRange(operation, (idx,), (self._elements.shape[0],))
        return idx

    def get(self, i: int) -> float:
        return float(self._elements[self._check("NVector.get", i)])

    def set(self, i: int, value: float) -> None:
        self._elements[self._check("NVector.set", i)] = value

    __getitem__ = get
    __setitem__ = set

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._elements)

    def to_array(self) -> np.ndarray:
        """Return a fresh copy of the elements."""
        return self._elements.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def dot(self, other: "NVector") -> float:
        """Dot product, accumulated in index order."""
        if len(other) != len(self):
            raise DimensionMismatch("NVector.dot", (len(self),), (len(other),),
                                    "lengths must agree")
        return float(_dot(self._elements, other._elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NVector):
            return NotImplemented
        return (len(self) == len(other)
                and bool(np.all(self._elements == other._elements)))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"NVector({self._elements.tolist()!r})"
