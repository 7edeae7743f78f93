"""
Error taxonomy shared by the matrix kernel and the entity layer.

Every error names the operation that raised it. Shape and dimension errors
are also ``ValueError``s, range errors are also ``IndexError``s.
"""
from typing import Optional, Sequence, Tuple


class PlanarHitscanError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class ShapeError(PlanarHitscanError, ValueError):
    """A 2-D source is None, empty, has empty rows or is not rectangular."""

    def __init__(self, operation: str, message: str,
                 row_lengths: Optional[Sequence[int]] = None) -> None:
        self.row_lengths = None if row_lengths is None else tuple(row_lengths)
        super().__init__(operation, message)


class DimensionMismatch(PlanarHitscanError, ValueError):
    """Operands whose shapes violate an arithmetic precondition."""

    def __init__(self, operation: str, left: Tuple[int, ...],
                 right: Tuple[int, ...], requirement: str) -> None:
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(operation,
                         f"{self.left} vs {self.right} ({requirement})")


class OutOfRange(PlanarHitscanError, IndexError):
    """Element access outside a vector or matrix."""

    def __init__(self, operation: str, index: Tuple[int, ...],
                 bounds: Tuple[int, ...]) -> None:
        self.index = tuple(index)
        self.bounds = tuple(bounds)
        super().__init__(operation,
                         f"index {self.index} outside bounds {self.bounds}")
