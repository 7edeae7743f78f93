"""
Dense rectangular float64 matrix addressed by (column x, row y).

Storage is row-major and owned by the matrix: construction and
``overwrite_from`` copy their input, and every accessor that hands out
elements in bulk returns fresh storage.

Public API
----------
NMatrix(values) / NMatrix.zeros(width, height)
    - construction from a rectangular 2-D source, or zero-filled

add, subtract, multiply, scale, zero, equals, is_same_size
    - free-function forms delegating to the instance methods
"""
import logging
import numbers
import operator
from typing import List, Sequence, Tuple, Union

import numpy as np

from ._core import _matmul
from .errors import DimensionMismatch, OutOfRange, ShapeError
from .vector import NVector

logger = logging.getLogger(__name__)

ArrayLike2D = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_rect_array(values: ArrayLike2D, operation: str) -> np.ndarray:
    """Validate a 2-D source and return a float64 copy of it."""
    if values is None:
        raise ShapeError(operation, "source is None")
    if isinstance(values, np.ndarray):
        if values.ndim != 2 or values.shape[0] == 0 or values.shape[1] == 0:
            raise ShapeError(operation,
                             f"expected a non-empty 2-D array, got shape {values.shape}")
        try:
            return np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ShapeError(operation,
                             f"elements must be real scalars ({exc})") from exc

    rows = list(values)
    if not rows:
        raise ShapeError(operation, "source has no rows")
    try:
        row_lengths = [len(r) for r in rows]
    except TypeError:
        raise ShapeError(operation, "every row must be a sequence") from None
    if row_lengths[0] == 0:
        raise ShapeError(operation, "source has zero-length rows", row_lengths)
    if any(n != row_lengths[0] for n in row_lengths):
        logger.debug("%s rejected non-rectangular source with row lengths %s",
                     operation, row_lengths)
        raise ShapeError(operation,
                         f"source is not rectangular (row lengths {row_lengths})",
                         row_lengths)
    try:
        arr = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ShapeError(operation, f"rows must hold real scalars ({exc})",
                         row_lengths) from exc
    if arr.ndim != 2:
        raise ShapeError(operation,
                         f"rows must hold scalars, got shape {arr.shape}",
                         row_lengths)
    return arr


class NMatrix:
    """Rectangular grid of float64 values with width w >= 1 and height h >= 1."""

    __slots__ = ("_elements",)

    def __init__(self, values: ArrayLike2D) -> None:
        self._elements = _as_rect_array(values, "NMatrix")

    @classmethod
    def zeros(cls, width: int, height: int) -> "NMatrix":
        w, h = operator.index(width), operator.index(height)
        if w < 1 or h < 1:
            raise ShapeError("NMatrix.zeros",
                             f"width and height must be >= 1, got ({w}, {h})")
        return cls._wrap(np.zeros((h, w), dtype=np.float64))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "NMatrix":
        # Takes ownership of a freshly allocated array, no copy.
        m = cls.__new__(cls)
        m._elements = arr
        return m

    # ---------------------------------------------------------------------
    # Shape
    # ---------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._elements.shape[1]

    @property
    def height(self) -> int:
        return self._elements.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """``(width, height)``."""
        return self._elements.shape[1], self._elements.shape[0]

    def is_same_size(self, other: "NMatrix") -> bool:
        return self.shape == other.shape

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def _check(self, operation: str, x, y) -> Tuple[int, int]:
        ix, iy = operator.index(x), operator.index(y)
        if not (0 <= ix < self.width and 0 <= iy < self.height):
            raise OutOfRange(operation, (ix, iy), self.shape)
        return ix, iy

    def get(self, x: int, y: int) -> float:
        ix, iy = self._check("NMatrix.get", x, y)
        return float(self._elements[iy, ix])

    def set(self, x: int, y: int, value: float) -> None:
        ix, iy = self._check("NMatrix.set", x, y)
        self._elements[iy, ix] = value

    def __getitem__(self, key: Tuple[int, int]) -> float:
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        x, y = key
        self.set(x, y, value)

    def row(self, y: int) -> NVector:
        """Row ``y`` as a vector of length ``width``, decoupled from storage."""
        iy = operator.index(y)
        if not 0 <= iy < self.height:
            raise OutOfRange("NMatrix.row", (iy,), (self.height,))
        return NVector(self._elements[iy, :])

    def column(self, x: int) -> NVector:
        """Column ``x`` as a vector of length ``height``, decoupled from storage."""
        ix = operator.index(x)
        if not 0 <= ix < self.width:
            raise OutOfRange("NMatrix.column", (ix,), (self.width,))
        return NVector(self._elements[:, ix])

    def overwrite_from(self, values: ArrayLike2D) -> None:
        """
        Copy the overlapping region of ``values`` into this matrix.

        The overlap is ``min(width, src_width)`` columns by
        ``min(height, src_height)`` rows; everything outside it is left
        unchanged. A larger source is truncated, a smaller one never pads.

        >>> a = NMatrix([[8, 3], [2, 6]])
        >>> a.overwrite_from([[7, 9]])
        >>> a.to_list()
        [[7.0, 9.0], [2.0, 6.0]]
        """
        src = _as_rect_array(values, "NMatrix.overwrite_from")
        h = min(self.height, src.shape[0])
        w = min(self.width, src.shape[1])
        self._elements[:h, :w] = src[:h, :w]

    def to_array(self) -> np.ndarray:
        """Deep copy of the elements as an (height, width) array."""
        return self._elements.copy()

    def to_list(self) -> List[List[float]]:
        return self._elements.tolist()

    # ---------------------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------------------
    def zero(self) -> None:
        self._elements[:, :] = 0.0

    def zeroed(self) -> "NMatrix":
        """Fresh zero matrix with this matrix's shape."""
        return NMatrix.zeros(self.width, self.height)

    def scale(self, s: float) -> "NMatrix":
        with np.errstate(invalid="ignore", over="ignore"):
            out = self._elements * float(s)
        return NMatrix._wrap(out)

    def _require_same_size(self, other: "NMatrix", operation: str) -> None:
        if not self.is_same_size(other):
            raise DimensionMismatch(operation, self.shape, other.shape,
                                    "shapes must be identical")

    def add(self, other: "NMatrix") -> "NMatrix":
        self._require_same_size(other, "NMatrix.add")
        with np.errstate(invalid="ignore", over="ignore"):
            out = self._elements + other._elements
        return NMatrix._wrap(out)

    def subtract(self, other: "NMatrix") -> "NMatrix":
        self._require_same_size(other, "NMatrix.subtract")
        with np.errstate(invalid="ignore", over="ignore"):
            out = self._elements - other._elements
        return NMatrix._wrap(out)

    def multiply(self, other: "NMatrix") -> "NMatrix":
        """
        Conventional matrix product ``self · other``.

        Requires ``self.width == other.height``. The result has
        ``width == other.width`` and ``height == self.height``; element
        (x, y) is ``self.row(y).dot(other.column(x))``.
        """
        if self.width != other.height:
            raise DimensionMismatch("NMatrix.multiply", self.shape, other.shape,
                                    "left width must equal right height")
        out = np.empty((self.height, other.width), dtype=np.float64)
        _matmul(self._elements, other._elements, out)
        return NMatrix._wrap(out)

    def equals(self, other: "NMatrix") -> bool:
        """Same shape and every element ``==`` (NaN never equal)."""
        return (self.is_same_size(other)
                and bool(np.all(self._elements == other._elements)))

    def copy(self) -> "NMatrix":
        return NMatrix._wrap(self._elements.copy())

    # ---------------------------------------------------------------------
    # Operators
    # ---------------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, NMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, NMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, NMatrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NMatrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"NMatrix({self._elements.tolist()!r})"


# -------------------------------------------------------------------------
# Free-function forms
# -------------------------------------------------------------------------
def zero(m: NMatrix) -> None:
    m.zero()


def is_same_size(a: NMatrix, b: NMatrix) -> bool:
    return a.is_same_size(b)


def equals(a: NMatrix, b: NMatrix) -> bool:
    return a.equals(b)


def scale(m: NMatrix, s: float) -> NMatrix:
    return m.scale(s)


def add(a: NMatrix, b: NMatrix) -> NMatrix:
    return a.add(b)


def subtract(a: NMatrix, b: NMatrix) -> NMatrix:
    return a.subtract(b)


def multiply(a: NMatrix, b: NMatrix) -> NMatrix:
    return a.multiply(b)
